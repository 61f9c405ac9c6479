"""
OpenSSH private key import

Entry points that take an OpenSSH private key file through the whole
pipeline: PEM envelope, container, private section and key assembly.
Only unencrypted Ed25519 and ECDSA (P-256/P-384) keys are supported.
"""

from typing import Union

from ..exceptions import InvalidKeyFormatError
from .container import parse_container
from .pem import decode_pem
from .private_section import PrivateSection, parse_private_section
from .public import parse_public_key_blob
from .types import KEY_TYPE_SPECS, ParsedKey


def _check_public_blob(public_key_blob: bytes, section: PrivateSection) -> None:
    """The container's public key blob must describe the key in the private section."""
    public = parse_public_key_blob(public_key_blob)
    tag = KEY_TYPE_SPECS[section.key_type].tag

    if public.tag != tag:
        raise InvalidKeyFormatError(
            "Public key blob type does not match private section",
            details={'public_type': public.tag, 'private_type': tag}
        )
    if public.curve_name != section.curve_name:
        raise InvalidKeyFormatError(
            "Public key blob curve does not match private section",
            details={'public_curve': public.curve_name, 'private_curve': section.curve_name}
        )
    if public.public_key != section.public_key:
        raise InvalidKeyFormatError("Public key blob does not match private section public key")


def import_key_from_bytes(data: Union[bytes, bytearray]) -> ParsedKey:
    """
    Import a key from an already base64-decoded openssh-key-v1 container.

    Args:
        data: Binary container (the bytes between the PEM markers, decoded)

    Returns:
        ParsedKey: Key type and fixed-size key material

    Raises:
        SSHKeyImportError: One of its subclasses describing why the import failed
    """
    container = parse_container(bytes(data))
    section = parse_private_section(container.private_section)

    try:
        _check_public_blob(container.public_key_blob, section)
    except InvalidKeyFormatError:
        section.private_key[:] = bytes(len(section.private_key))
        raise

    return ParsedKey(
        key_type=section.key_type,
        public_key_data=section.public_key,
        private_key_data=section.private_key,
        comment=section.comment,
    )


def import_key(pem_text: Union[str, bytes]) -> ParsedKey:
    """
    Parse an OpenSSH private key from its PEM text.

    Args:
        pem_text: Full contents of the key file including the BEGIN/END markers

    Returns:
        ParsedKey: Key type and fixed-size key material

    Raises:
        InvalidPEMFormatError: Missing BEGIN/END markers
        Base64DecodingError: Body is not valid base64
        InvalidKeyFormatError: Structurally malformed container or key fields
        CorruptedKeyDataError: Check integers or padding are inconsistent
        EncryptedKeysNotSupportedError: Key is protected by a passphrase
        RSANotSupportedError: Key is an RSA key
    """
    return import_key_from_bytes(decode_pem(pem_text))
