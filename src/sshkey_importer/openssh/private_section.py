"""
Parsing of the (unencrypted) private section of an OpenSSH key container

Layout::

    uint32  checkint
    uint32  checkint        (must equal the first)
    string  key type name
    ...     key-type specific fields
    string  comment
    byte[]  padding         (1, 2, 3, ...)
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..exceptions import (
    SSHKeyImportError,
    InvalidKeyFormatError,
    CorruptedKeyDataError,
    RSANotSupportedError,
)
from .mpint import normalize_mpint
from .types import (
    KeyType,
    KEY_TYPE_SPECS,
    ED25519_COMBINED_PRIVATE_LENGTH,
    key_type_for_tag,
)
from .wire import SSHBlobReader

# Cipher block size of "none"
PADDING_BLOCK_SIZE = 8


@dataclass
class PrivateSection:
    """Key fields extracted from the private section"""
    key_type: KeyType
    public_key: bytes
    private_key: bytearray
    comment: str = ""
    curve_name: Optional[str] = None


def _parse_ed25519_fields(reader: SSHBlobReader) -> Tuple[bytes, bytearray, Optional[str]]:
    spec = KEY_TYPE_SPECS[KeyType.ED25519]

    public_key = reader.read_bytes()
    if len(public_key) != spec.public_key_length:
        raise InvalidKeyFormatError(
            f"Ed25519 public key must be {spec.public_key_length} bytes",
            details={'length': len(public_key)}
        )

    combined = reader.read_bytes()
    if len(combined) != ED25519_COMBINED_PRIVATE_LENGTH:
        raise InvalidKeyFormatError(
            f"Ed25519 private key must be {ED25519_COMBINED_PRIVATE_LENGTH} bytes",
            details={'length': len(combined)}
        )
    if combined[spec.private_key_length:] != public_key:
        raise CorruptedKeyDataError("Ed25519 private key does not embed its public key")

    return public_key, bytearray(combined[:spec.private_key_length]), None


def _ecdsa_field_parser(key_type: KeyType) -> Callable[[SSHBlobReader], Tuple[bytes, bytearray, Optional[str]]]:
    spec = KEY_TYPE_SPECS[key_type]

    def parse(reader: SSHBlobReader) -> Tuple[bytes, bytearray, Optional[str]]:
        # Informational only; the type tag already fixes the curve
        curve_name = reader.read_string()

        public_point = reader.read_bytes()
        if len(public_point) != spec.public_key_length:
            raise InvalidKeyFormatError(
                f"{spec.tag} public point must be {spec.public_key_length} bytes",
                details={'length': len(public_point)}
            )

        scalar = reader.read_bytes()
        return public_point, bytearray(normalize_mpint(scalar, spec.private_key_length)), curve_name

    return parse


_FIELD_PARSERS: Dict[KeyType, Callable[[SSHBlobReader], Tuple[bytes, bytearray, Optional[str]]]] = {
    KeyType.ED25519: _parse_ed25519_fields,
    KeyType.ECDSA_P256: _ecdsa_field_parser(KeyType.ECDSA_P256),
    KeyType.ECDSA_P384: _ecdsa_field_parser(KeyType.ECDSA_P384),
}


def _read_comment(reader: SSHBlobReader) -> str:
    # Some encoders end the section right after the key fields
    if reader.at_end:
        return ""
    return reader.read_string()


def check_padding(padding: bytes) -> None:
    """
    Validate the trailing padding of a private section.

    OpenSSH pads with the byte sequence 1, 2, 3, ... up to the next
    PADDING_BLOCK_SIZE boundary. An empty padding region is accepted.

    Raises:
        CorruptedKeyDataError: If the padding is a full block or longer, or
            deviates from the sequence
    """
    if len(padding) >= PADDING_BLOCK_SIZE:
        raise CorruptedKeyDataError(
            f"Private section padding of {len(padding)} bytes exceeds the {PADDING_BLOCK_SIZE}-byte block size",
            details={'padding_length': len(padding)}
        )
    expected = bytes(range(1, len(padding) + 1))
    if padding != expected:
        raise CorruptedKeyDataError("Invalid private section padding", details={'padding_length': len(padding)})


def parse_private_section(blob: bytes) -> PrivateSection:
    """
    Parse an unencrypted private section.

    Args:
        blob: The private section bytes from the container

    Returns:
        PrivateSection: The key type and raw key fields

    Raises:
        CorruptedKeyDataError: Check integers differ, padding is wrong or the
            Ed25519 private key does not embed its public key
        RSANotSupportedError: The key is an RSA key
        InvalidKeyFormatError: Unknown key type or malformed fields
    """
    reader = SSHBlobReader(blob)

    check1 = reader.read_uint32()
    check2 = reader.read_uint32()
    if check1 != check2:
        raise CorruptedKeyDataError("Private section check integers do not match")

    tag = reader.read_string()
    key_type = key_type_for_tag(tag)
    if key_type is KeyType.RSA:
        raise RSANotSupportedError("RSA keys are not supported", details={'key_type': tag})
    if key_type is None:
        raise InvalidKeyFormatError(f"Unsupported key type: {tag}", details={'key_type': tag})

    public_key, private_key, curve_name = _FIELD_PARSERS[key_type](reader)
    try:
        comment = _read_comment(reader)
        check_padding(reader.rest())
    except SSHKeyImportError:
        private_key[:] = bytes(len(private_key))
        raise

    return PrivateSection(
        key_type=key_type,
        public_key=public_key,
        private_key=private_key,
        comment=comment,
        curve_name=curve_name,
    )
