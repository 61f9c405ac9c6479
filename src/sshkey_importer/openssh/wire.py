"""
SSH wire format framing

All knowledge of how OpenSSH frames integers and byte strings lives here:
``SSHBlobReader`` walks a buffer with an explicit cursor, and the
``encode_*`` helpers produce the same framing for public key blobs.
"""

import struct
from typing import Union

from ..exceptions import InvalidKeyFormatError

UINT32 = struct.Struct(">I")


class SSHBlobReader:
    """
    Cursor over an in-memory byte buffer.

    Each read either advances the cursor by exactly the bytes it consumed or
    raises ``InvalidKeyFormatError`` leaving the cursor where it was.

    Attributes:
        data: The buffer being read
        offset: Position of the next unread byte
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview], offset: int = 0):
        self.data = bytes(data)
        if offset < 0 or offset > len(self.data):
            raise InvalidKeyFormatError("Reader offset outside of buffer", details={'offset': offset})
        self.offset = offset

    @property
    def remaining(self) -> int:
        """Number of unread bytes"""
        return len(self.data) - self.offset

    @property
    def at_end(self) -> bool:
        return self.remaining == 0

    def _take(self, start: int, length: int) -> bytes:
        if length < 0 or start + length > len(self.data):
            raise InvalidKeyFormatError(
                "Unexpected end of key data",
                details={'offset': start, 'wanted': length, 'available': len(self.data) - start}
            )
        return self.data[start:start + length]

    def read_raw(self, length: int) -> bytes:
        """Read a fixed-width field of ``length`` bytes."""
        value = self._take(self.offset, length)
        self.offset += length
        return value

    def read_uint32(self) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        value, = UINT32.unpack(self._take(self.offset, UINT32.size))
        self.offset += UINT32.size
        return value

    def read_bytes(self) -> bytes:
        """Read a uint32 length-prefixed byte string."""
        length, = UINT32.unpack(self._take(self.offset, UINT32.size))
        value = self._take(self.offset + UINT32.size, length)
        self.offset += UINT32.size + length
        return value

    def read_string(self) -> str:
        """Read a length-prefixed byte string and decode it as UTF-8 text."""
        start = self.offset
        raw = self.read_bytes()
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            self.offset = start
            raise InvalidKeyFormatError(f"String field is not valid UTF-8: {e}", details={'offset': start}) from e

    def rest(self) -> bytes:
        """Consume and return every unread byte."""
        value = self.data[self.offset:]
        self.offset = len(self.data)
        return value


def encode_uint32(value: int) -> bytes:
    return UINT32.pack(value)


def encode_bytes(value: bytes) -> bytes:
    return UINT32.pack(len(value)) + bytes(value)


def encode_string(value: str) -> bytes:
    return encode_bytes(value.encode('utf-8'))
