'''
CRC-32 of the chunks, the variant used by PNG (ISO 3309, ITU-T V.42).
'''
from zlib import crc32 as _crc32


def crc32(*parts: bytes) -> int:
    """Return the CRC of the concatenation of all the parts, the same value
    stored big-endian after the data of a chunk.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.
    """
    value = 0
    for part in parts:
        value = _crc32(part, value)

    return value
