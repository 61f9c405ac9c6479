"""
OpenSSH private key file parsing
"""

from .types import (
    KeyType,
    KeyTypeSpec,
    ParsedKey,
    KEY_TYPE_SPECS,
    KEY_TYPE_TAGS,
    key_type_for_tag,
)

from .wire import (
    SSHBlobReader,
    encode_uint32,
    encode_bytes,
    encode_string,
)

from .pem import (
    BEGIN_MARKER,
    END_MARKER,
    decode_pem,
)

from .container import (
    OPENSSH_MAGIC,
    OpenSSHContainer,
    parse_container,
)

from .private_section import (
    PrivateSection,
    parse_private_section,
    check_padding,
)

from .mpint import normalize_mpint

from .public import (
    PublicKeyBlob,
    parse_public_key_blob,
    public_key_blob,
    fingerprint_sha256,
    fingerprint_md5,
)

from .importer import (
    import_key,
    import_key_from_bytes,
)

__all__ = [
    # Types
    'KeyType',
    'KeyTypeSpec',
    'ParsedKey',
    'KEY_TYPE_SPECS',
    'KEY_TYPE_TAGS',
    'key_type_for_tag',

    # Wire format
    'SSHBlobReader',
    'encode_uint32',
    'encode_bytes',
    'encode_string',

    # PEM envelope
    'BEGIN_MARKER',
    'END_MARKER',
    'decode_pem',

    # Container and private section
    'OPENSSH_MAGIC',
    'OpenSSHContainer',
    'parse_container',
    'PrivateSection',
    'parse_private_section',
    'check_padding',
    'normalize_mpint',

    # Public keys
    'PublicKeyBlob',
    'parse_public_key_blob',
    'public_key_blob',
    'fingerprint_sha256',
    'fingerprint_md5',

    # Import
    'import_key',
    'import_key_from_bytes',
]
