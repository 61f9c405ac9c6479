"""
Normalization of mpint-encoded elliptic-curve scalars

OpenSSH stores ECDSA private scalars as mpints: a 0x00 byte is prepended
when the high bit of the value is set, and leading zero bytes of the value
itself are dropped. Elliptic-curve APIs want the scalar at the curve's exact
width instead.
"""

from ..exceptions import InvalidKeyFormatError


def normalize_mpint(data: bytes, width: int) -> bytes:
    """
    Convert an mpint-encoded scalar to exactly ``width`` bytes.

    Args:
        data: The scalar as stored in the key file
        width: Target width in bytes (32 for P-256, 48 for P-384)

    Returns:
        bytes: The scalar as a ``width``-byte big-endian value

    Raises:
        InvalidKeyFormatError: If the encoding cannot represent a ``width``-byte scalar
    """
    length = len(data)

    if length == width:
        return bytes(data)

    if length == width + 1 and data[0] == 0x00:
        return bytes(data[1:])

    if length < width:
        return bytes(width - length) + bytes(data)

    raise InvalidKeyFormatError(
        f"Private scalar of {length} bytes does not fit a {width}-byte curve scalar",
        details={'length': length, 'width': width}
    )
