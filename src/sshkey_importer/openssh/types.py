"""
Key types and the parsed key result for OpenSSH private key import
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from ..exceptions import InvalidKeyFormatError


class KeyType(Enum):
    """Algorithm family of an OpenSSH key"""
    ED25519 = "ed25519"
    ECDSA_P256 = "ecdsa-p256"
    ECDSA_P384 = "ecdsa-p384"
    RSA = "rsa"


@dataclass(frozen=True)
class KeyTypeSpec:
    """
    Fixed layout facts for one supported key type.

    Attributes:
        key_type: The key type this entry describes
        tag: Key type name as written in the OpenSSH container
        public_key_length: Exact length of the public key bytes
        private_key_length: Exact length of the private key bytes
        curve_name: SSH curve identifier for ECDSA keys
    """
    key_type: KeyType
    tag: str
    public_key_length: int
    private_key_length: int
    curve_name: Optional[str] = None


ED25519_PUBLIC_KEY_LENGTH = 32
ED25519_PRIVATE_KEY_LENGTH = 32
# seed (32) || public key (32)
ED25519_COMBINED_PRIVATE_LENGTH = 64

KEY_TYPE_SPECS: Dict[KeyType, KeyTypeSpec] = {
    KeyType.ED25519: KeyTypeSpec(KeyType.ED25519, "ssh-ed25519", 32, 32),
    KeyType.ECDSA_P256: KeyTypeSpec(KeyType.ECDSA_P256, "ecdsa-sha2-nistp256", 65, 32, "nistp256"),
    KeyType.ECDSA_P384: KeyTypeSpec(KeyType.ECDSA_P384, "ecdsa-sha2-nistp384", 97, 48, "nistp384"),
}

# Every tag the importer recognizes, including the rejected ones
KEY_TYPE_TAGS: Dict[str, KeyType] = {
    "ssh-ed25519": KeyType.ED25519,
    "ecdsa-sha2-nistp256": KeyType.ECDSA_P256,
    "ecdsa-sha2-nistp384": KeyType.ECDSA_P384,
    "ssh-rsa": KeyType.RSA,
}


@dataclass
class ParsedKey:
    """
    Raw key material extracted from an OpenSSH private key file.

    The private key is held in a ``bytearray`` so it can be zeroed once the
    caller is finished with it, either through ``clear()`` or by using the
    key as a context manager.

    Attributes:
        key_type: Algorithm family
        public_key_data: Public key bytes (raw Edwards point or uncompressed EC point)
        private_key_data: Private key bytes (Ed25519 seed or fixed-width EC scalar)
        comment: Comment stored alongside the key, empty if none
    """
    key_type: KeyType
    public_key_data: bytes
    private_key_data: bytearray
    comment: str = field(default="", compare=False)

    def __post_init__(self):
        spec = KEY_TYPE_SPECS.get(self.key_type)
        if spec is None:
            raise InvalidKeyFormatError(
                f"Key type {self.key_type.value} cannot hold key material",
                details={'key_type': self.key_type.value}
            )

        self.public_key_data = bytes(self.public_key_data)
        if not isinstance(self.private_key_data, bytearray):
            self.private_key_data = bytearray(self.private_key_data)

        if len(self.public_key_data) != spec.public_key_length:
            raise InvalidKeyFormatError(
                f"Public key must be exactly {spec.public_key_length} bytes for {spec.tag}",
                details={'length': len(self.public_key_data)}
            )
        if len(self.private_key_data) != spec.private_key_length:
            raise InvalidKeyFormatError(
                f"Private key must be exactly {spec.private_key_length} bytes for {spec.tag}",
                details={'length': len(self.private_key_data)}
            )

    @property
    def spec(self) -> KeyTypeSpec:
        return KEY_TYPE_SPECS[self.key_type]

    def clear(self) -> None:
        """Overwrite the private key bytes with zeros in place."""
        self.private_key_data[:] = bytes(len(self.private_key_data))

    def __enter__(self) -> 'ParsedKey':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def __repr__(self) -> str:
        return (
            f"ParsedKey(key_type={self.key_type}, "
            f"public_key_data={self.public_key_data.hex()}, "
            f"private_key_data=<{len(self.private_key_data)} bytes>, "
            f"comment={self.comment!r})"
        )


def key_type_for_tag(tag: str) -> Optional[KeyType]:
    """Look up the key type for an OpenSSH key type name, or None if unknown."""
    return KEY_TYPE_TAGS.get(tag)
