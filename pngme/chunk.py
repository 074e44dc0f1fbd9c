import logging
import struct
from typing import Union

from .chunk_type import ChunkType
from .crc import crc32
from .exceptions import (
    ChunkTooSmall,
    DataNotUTF8,
    InvalidChunkSize,
    InvalidCRC,
)


logger = logging.getLogger(__name__)


class PNGChunk(object):
    '''
    This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each integer field is intended big-endian.

     1. length: number of bytes of the data field
     2. type: a ChunkType
     3. data: the payload, arbitrary bytes
     4. crc: network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.

    A chunk built from its fields computes the crc, a chunk unpacked from raw
    bytes must carry the right one.
    '''
    LENGTH_FORMAT = '>I'
    LENGTH_SIZE   = 4
    CRC_SIZE      = 4
    MIN_SIZE      = LENGTH_SIZE + ChunkType.SIZE + CRC_SIZE
    MAX_LENGTH    = 0xffffffff

    def __init__(self, chunk_type: Union[ChunkType, str, bytes], data: bytes):
        if not isinstance(chunk_type, ChunkType):
            chunk_type = ChunkType(chunk_type)

        data = bytes(data)
        if len(data) > self.MAX_LENGTH:
            raise ValueError(f'data is too big for a chunk ({len(data)} bytes)')

        self._type = chunk_type
        self._data = data
        self._crc = crc32(chunk_type.to_bytes(), data)

    @classmethod
    def unpack(cls, raw: bytes) -> 'PNGChunk':
        '''Build a chunk from the start of raw, the bytes following the crc
        field are not touched so the caller can continue from there.'''
        raw = memoryview(raw)

        if len(raw) < cls.MIN_SIZE:
            raise ChunkTooSmall(f'a chunk needs at least {cls.MIN_SIZE} bytes, got {len(raw)}')

        length = struct.unpack(cls.LENGTH_FORMAT, raw[:cls.LENGTH_SIZE])[0]

        type_end = cls.LENGTH_SIZE + ChunkType.SIZE
        chunk_type = ChunkType.from_bytes(raw[cls.LENGTH_SIZE:type_end])

        if len(raw) < length + cls.MIN_SIZE:
            raise InvalidChunkSize(bytes_received=len(raw), length_field=length)

        data_end = type_end + length
        data = raw[type_end:data_end].tobytes()

        crc = struct.unpack(cls.LENGTH_FORMAT, raw[data_end:data_end + cls.CRC_SIZE])[0]

        expected = crc32(raw[cls.LENGTH_SIZE:data_end])
        if crc != expected:
            raise InvalidCRC(expected=expected, found=crc)

        logger.debug('unpacked chunk %s with %d bytes of data', chunk_type, length)

        return cls(chunk_type, data)

    def pack(self) -> bytes:
        return b''.join([
            struct.pack(self.LENGTH_FORMAT, self.length),
            self._type.to_bytes(),
            self._data,
            struct.pack(self.LENGTH_FORMAT, self._crc),
        ])

    @property
    def raw(self) -> bytes:
        return self.pack()

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def type(self) -> ChunkType:
        return self._type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        '''the number of bytes the chunk takes into the file'''
        return self.MIN_SIZE + self.length

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DataNotUTF8(f'data of chunk {self._type} is not valid UTF-8') from e

    def summary(self) -> str:
        return (
            'Chunk {\n'
            f'\tLength: {self.length}\n'
            f'\tType: {self._type}\n'
            f'\tData: {len(self._data)} bytes\n'
            f'\tCRC: {self._crc}\n'
            '}'
        )

    def __str__(self):
        return self.summary()

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._type,
            self.length,
            self._crc,
        )

    def __eq__(self, other):
        if not isinstance(other, PNGChunk):
            return NotImplemented

        return (self._type, self._data, self._crc) == (other._type, other._data, other._crc)
