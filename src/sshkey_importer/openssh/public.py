"""
Public key blobs and fingerprints

The public key blob is the SSH wire encoding of a public key, the same
bytes an OpenSSH container carries next to its private section and that
``ssh-keygen -l`` hashes for fingerprints.
"""

import base64
import hashlib
from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidKeyFormatError
from .types import KeyType, ParsedKey, key_type_for_tag
from .wire import SSHBlobReader, encode_bytes, encode_string


@dataclass
class PublicKeyBlob:
    """Decoded fields of an SSH public key blob"""
    tag: str
    public_key: bytes
    curve_name: Optional[str] = None


def parse_public_key_blob(blob: bytes) -> PublicKeyBlob:
    """
    Decode the fields of an Ed25519 or ECDSA public key blob.

    Raises:
        InvalidKeyFormatError: If the blob is truncated, has trailing data or an unknown type
    """
    reader = SSHBlobReader(blob)
    tag = reader.read_string()
    key_type = key_type_for_tag(tag)

    if key_type is KeyType.ED25519:
        result = PublicKeyBlob(tag=tag, public_key=reader.read_bytes())
    elif key_type in (KeyType.ECDSA_P256, KeyType.ECDSA_P384):
        curve_name = reader.read_string()
        result = PublicKeyBlob(tag=tag, public_key=reader.read_bytes(), curve_name=curve_name)
    else:
        raise InvalidKeyFormatError(f"Unsupported public key type: {tag}", details={'key_type': tag})

    if not reader.at_end:
        raise InvalidKeyFormatError("Trailing data after public key blob", details={'trailing': reader.remaining})
    return result


def public_key_blob(parsed: ParsedKey) -> bytes:
    """Encode the public half of ``parsed`` as an SSH public key blob."""
    spec = parsed.spec
    if parsed.key_type is KeyType.ED25519:
        return encode_string(spec.tag) + encode_bytes(parsed.public_key_data)
    return encode_string(spec.tag) + encode_string(spec.curve_name) + encode_bytes(parsed.public_key_data)


def fingerprint_sha256(parsed: ParsedKey) -> str:
    """SHA256 fingerprint in the form printed by ``ssh-keygen -l``."""
    digest = hashlib.sha256(public_key_blob(parsed)).digest()
    return "SHA256:" + base64.b64encode(digest).decode('ascii').rstrip("=")


def fingerprint_md5(parsed: ParsedKey) -> str:
    """Legacy colon-separated MD5 fingerprint (``ssh-keygen -E md5``)."""
    digest = hashlib.md5(public_key_blob(parsed)).hexdigest()
    return "MD5:" + ":".join(digest[i:i + 2] for i in range(0, len(digest), 2))
