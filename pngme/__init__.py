"""
# PNG chunk manipulation for humans.

A PNG file is a fixed 8 bytes signature followed by a sequence of chunks,
each one laid out as

    +--------+------+------------+-------+
    | length | type |    data    |  crc  |
    +--------+------+------------+-------+
        4       4      length        4

with length and crc big-endian and the crc computed over type and data.

Two basic operations are defined for the file and its chunks:

 1. unpack(): read the binary data and build a high-level representation
    of it, checking the signature, the chunk types and every CRC.

 2. pack(): encode the high-level representation back into binary data.

Unpacking and packing an untouched file gives back exactly the same bytes.
"""
from .chunk import PNGChunk
from .chunk_type import ChunkType
from .png import PNGFile


__all__ = [
    'ChunkType',
    'PNGChunk',
    'PNGFile',
]
