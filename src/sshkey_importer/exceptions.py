"""
Exception classes for sshkey-importer
"""

from typing import Optional, Dict, Any


class SSHKeyImporterError(Exception):
    """Base exception for all sshkey-importer errors"""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class SSHKeyImportError(SSHKeyImporterError):
    """
    Base class for errors raised while importing an OpenSSH private key.

    Every import failure is terminal: the same input always fails the same
    way, and no partially parsed key is ever returned alongside the error.
    """

    kind = "unknown"
    default_code = "IMPORT_FAILED"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code or self.default_code, details)


class InvalidPEMFormatError(SSHKeyImportError):
    """Raised when the BEGIN/END OPENSSH PRIVATE KEY markers are missing"""
    kind = "invalidPEMFormat"
    default_code = "INVALID_PEM_FORMAT"


class Base64DecodingError(SSHKeyImportError):
    """Raised when the PEM body is not valid base64"""
    kind = "base64DecodingFailed"
    default_code = "BASE64_DECODING_FAILED"


class InvalidKeyFormatError(SSHKeyImportError):
    """Raised for structurally malformed binary key content"""
    kind = "invalidKeyFormat"
    default_code = "INVALID_KEY_FORMAT"


class CorruptedKeyDataError(SSHKeyImportError):
    """Raised when the key is well formed but internally inconsistent"""
    kind = "corruptedKeyData"
    default_code = "CORRUPTED_KEY_DATA"


class EncryptedKeysNotSupportedError(SSHKeyImportError):
    """Raised when the private section is protected by a cipher or KDF"""
    kind = "encryptedKeysNotSupported"
    default_code = "ENCRYPTED_KEYS_NOT_SUPPORTED"


class RSANotSupportedError(SSHKeyImportError):
    """Raised when the key type tag is ssh-rsa"""
    kind = "rsaNotSupported"
    default_code = "RSA_NOT_SUPPORTED"


class KeyConversionError(SSHKeyImporterError):
    """Exception raised when parsed key material cannot be loaded into cryptography objects"""
    pass


class SigningError(SSHKeyImporterError):
    """Exception raised for signing or signature verification errors"""
    pass


class ConfigError(SSHKeyImporterError):
    """Exception raised for configuration loading and validation errors"""
    pass
