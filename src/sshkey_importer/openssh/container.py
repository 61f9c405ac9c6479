"""
Parsing of the outer openssh-key-v1 container

Layout (see OpenSSH PROTOCOL.key)::

    "openssh-key-v1\\0"     magic
    string  ciphername
    string  kdfname
    string  kdfoptions
    uint32  number of keys
    string  public key blob
    string  private section (possibly encrypted)
"""

from dataclasses import dataclass

from ..exceptions import InvalidKeyFormatError, EncryptedKeysNotSupportedError
from .wire import SSHBlobReader

OPENSSH_MAGIC = b"openssh-key-v1\x00"
UNENCRYPTED = "none"


@dataclass
class OpenSSHContainer:
    """The decoded outer container of an OpenSSH private key file"""
    magic: bytes
    cipher_name: str
    kdf_name: str
    kdf_options: bytes
    key_count: int
    public_key_blob: bytes
    private_section: bytes


def parse_container(data: bytes) -> OpenSSHContainer:
    """
    Parse the openssh-key-v1 container out of decoded key file bytes.

    Raises:
        InvalidKeyFormatError: Bad magic, truncated fields or a key count other than 1
        EncryptedKeysNotSupportedError: Cipher or KDF is anything but "none"
    """
    reader = SSHBlobReader(data)

    if reader.remaining < len(OPENSSH_MAGIC):
        raise InvalidKeyFormatError("Data too short for an OpenSSH private key")
    magic = reader.read_raw(len(OPENSSH_MAGIC))
    if magic != OPENSSH_MAGIC:
        raise InvalidKeyFormatError("Missing openssh-key-v1 magic")

    cipher_name = reader.read_string()
    kdf_name = reader.read_string()
    if cipher_name != UNENCRYPTED or kdf_name != UNENCRYPTED:
        raise EncryptedKeysNotSupportedError(
            "Encrypted OpenSSH private keys are not supported",
            details={'cipher': cipher_name, 'kdf': kdf_name}
        )

    # KDF options only carry data when a KDF is in use
    kdf_options = reader.read_bytes()

    key_count = reader.read_uint32()
    if key_count != 1:
        raise InvalidKeyFormatError(
            f"Expected exactly one key in container, found {key_count}",
            details={'key_count': key_count}
        )

    public_key_blob = reader.read_bytes()
    private_section = reader.read_bytes()

    return OpenSSHContainer(
        magic=magic,
        cipher_name=cipher_name,
        kdf_name=kdf_name,
        kdf_options=kdf_options,
        key_count=key_count,
        public_key_blob=public_key_blob,
        private_section=private_section,
    )
