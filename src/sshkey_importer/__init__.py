"""
sshkey-importer
Import unencrypted OpenSSH private keys (Ed25519, ECDSA P-256/P-384) as raw key material
"""

from .version import __version__
from .openssh import (
    KeyType,
    ParsedKey,
    import_key,
    import_key_from_bytes,
    normalize_mpint,
    fingerprint_sha256,
    fingerprint_md5,
)
from .crypto import (
    load_private_key,
    load_public_key,
    verify_key_consistency,
    sign_message,
    verify_signature,
    clear_key_material,
)
from .exceptions import (
    SSHKeyImporterError,
    SSHKeyImportError,
    InvalidPEMFormatError,
    Base64DecodingError,
    InvalidKeyFormatError,
    CorruptedKeyDataError,
    EncryptedKeysNotSupportedError,
    RSANotSupportedError,
    KeyConversionError,
    SigningError,
    ConfigError,
)

# Public API exports
__all__ = [
    '__version__',
    # Import
    'KeyType',
    'ParsedKey',
    'import_key',
    'import_key_from_bytes',
    'normalize_mpint',
    'fingerprint_sha256',
    'fingerprint_md5',
    # cryptography bridge
    'load_private_key',
    'load_public_key',
    'verify_key_consistency',
    'sign_message',
    'verify_signature',
    'clear_key_material',
    # Exceptions
    'SSHKeyImporterError',
    'SSHKeyImportError',
    'InvalidPEMFormatError',
    'Base64DecodingError',
    'InvalidKeyFormatError',
    'CorruptedKeyDataError',
    'EncryptedKeysNotSupportedError',
    'RSANotSupportedError',
    'KeyConversionError',
    'SigningError',
    'ConfigError',
]
