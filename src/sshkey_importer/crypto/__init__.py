"""
Cryptographic operations on imported keys
"""

from .keys import (
    load_private_key,
    load_public_key,
    verify_key_consistency,
    sign_message,
    verify_signature,
    clear_key_material,
)

__all__ = [
    'load_private_key',
    'load_public_key',
    'verify_key_consistency',
    'sign_message',
    'verify_signature',
    'clear_key_material',
]
