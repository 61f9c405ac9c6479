"""
Bridge from parsed OpenSSH key material to the cryptography package

Turns a ``ParsedKey`` into cryptography key objects and offers signing
helpers on top of them.
"""

import logging
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from ..exceptions import KeyConversionError, SigningError
from ..openssh.types import KeyType, ParsedKey

logger = logging.getLogger(__name__)

PrivateKey = Union[Ed25519PrivateKey, ec.EllipticCurvePrivateKey]
PublicKey = Union[Ed25519PublicKey, ec.EllipticCurvePublicKey]

_CURVES = {
    KeyType.ECDSA_P256: ec.SECP256R1,
    KeyType.ECDSA_P384: ec.SECP384R1,
}

_HASHES = {
    KeyType.ECDSA_P256: hashes.SHA256,
    KeyType.ECDSA_P384: hashes.SHA384,
}


def _curve_for(parsed: ParsedKey) -> ec.EllipticCurve:
    try:
        return _CURVES[parsed.key_type]()
    except KeyError:
        raise KeyConversionError(
            f"No elliptic curve for key type {parsed.key_type.value}",
            "UNSUPPORTED_KEY_TYPE"
        )


def load_private_key(parsed: ParsedKey) -> PrivateKey:
    """
    Build a cryptography private key object from parsed key material.

    Args:
        parsed: Result of ``import_key``

    Returns:
        Ed25519PrivateKey or EllipticCurvePrivateKey

    Raises:
        KeyConversionError: If cryptography rejects the key material
    """
    try:
        if parsed.key_type is KeyType.ED25519:
            return Ed25519PrivateKey.from_private_bytes(bytes(parsed.private_key_data))

        curve = _curve_for(parsed)
        scalar = int.from_bytes(parsed.private_key_data, byteorder='big')
        return ec.derive_private_key(scalar, curve)

    except KeyConversionError:
        raise
    except (ValueError, TypeError) as e:
        raise KeyConversionError(
            f"Failed to load {parsed.key_type.value} private key: {e}",
            "KEY_CONVERSION_FAILED"
        ) from e


def load_public_key(parsed: ParsedKey) -> PublicKey:
    """
    Build a cryptography public key object from parsed key material.

    Raises:
        KeyConversionError: If the public key bytes are not a valid point
    """
    try:
        if parsed.key_type is KeyType.ED25519:
            return Ed25519PublicKey.from_public_bytes(parsed.public_key_data)

        curve = _curve_for(parsed)
        return ec.EllipticCurvePublicKey.from_encoded_point(curve, parsed.public_key_data)

    except KeyConversionError:
        raise
    except (ValueError, TypeError) as e:
        raise KeyConversionError(
            f"Failed to load {parsed.key_type.value} public key: {e}",
            "KEY_CONVERSION_FAILED"
        ) from e


def _public_bytes(public_key: PublicKey) -> bytes:
    if isinstance(public_key, Ed25519PublicKey):
        return public_key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )
    return public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.UncompressedPoint
    )


def verify_key_consistency(parsed: ParsedKey) -> bool:
    """
    Check that the stored public key belongs to the stored private key.

    Returns:
        bool: True if deriving the public key from the private key reproduces it

    Raises:
        KeyConversionError: If the private key cannot be loaded at all
    """
    private_key_obj = load_private_key(parsed)
    derived = _public_bytes(private_key_obj.public_key())
    consistent = derived == parsed.public_key_data

    if not consistent:
        logger.warning("Public key stored with %s key does not match its private key", parsed.key_type.value)
    return consistent


def sign_message(parsed: ParsedKey, message: Union[str, bytes]) -> bytes:
    """
    Sign a message with an imported key.

    Ed25519 keys produce a 64-byte raw signature. ECDSA keys sign with
    SHA-256 (P-256) or SHA-384 (P-384) and return a DER-encoded signature.

    Args:
        parsed: Result of ``import_key``
        message: Message to sign (string or bytes)

    Returns:
        bytes: The signature

    Raises:
        SigningError: If signing fails
        KeyConversionError: If the key cannot be loaded
    """
    if isinstance(message, str):
        message_bytes = message.encode('utf-8')
    else:
        message_bytes = message

    private_key_obj = load_private_key(parsed)

    try:
        if parsed.key_type is KeyType.ED25519:
            signature = private_key_obj.sign(message_bytes)
        else:
            signature = private_key_obj.sign(message_bytes, ec.ECDSA(_HASHES[parsed.key_type]()))
    except (ValueError, TypeError) as e:
        raise SigningError(f"Message signing failed: {e}", "SIGNING_FAILED") from e

    logger.debug("Signed %d byte message with %s key", len(message_bytes), parsed.key_type.value)
    return signature


def verify_signature(parsed: ParsedKey, message: Union[str, bytes], signature: bytes) -> bool:
    """
    Verify a signature against the public half of an imported key.

    Returns:
        bool: True if the signature is valid, False otherwise

    Raises:
        KeyConversionError: If the public key cannot be loaded
    """
    if isinstance(message, str):
        message_bytes = message.encode('utf-8')
    else:
        message_bytes = message

    public_key_obj = load_public_key(parsed)

    try:
        if parsed.key_type is KeyType.ED25519:
            public_key_obj.verify(signature, message_bytes)
        else:
            public_key_obj.verify(signature, message_bytes, ec.ECDSA(_HASHES[parsed.key_type]()))
        return True
    except InvalidSignature:
        return False


def clear_key_material(parsed: ParsedKey) -> None:
    """
    Zero the private key bytes of a parsed key in place.

    Copies handed to cryptography objects are outside this function's reach;
    drop those objects as well once they are no longer needed.
    """
    parsed.clear()
