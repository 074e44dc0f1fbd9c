'''
# Portable Network Graphics files

A file is seen only as its 8 bytes signature followed by the list of its
chunks: the content of the chunks is never interpreted, so whatever is
unpacked packs back to the very same bytes.

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html>.
'''
import logging
from typing import Iterable, Iterator, Optional, Tuple, Union

from .chunk import PNGChunk
from .chunk_type import ChunkType
from .exceptions import (
    InvalidHeader,
    NoChunkOfGivenTypeFound,
    PNGTooSmall,
    UnpackException,
)


logger = logging.getLogger(__name__)


class PNGFile(object):
    MAGIC = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    def __init__(self, chunks: Optional[Iterable[PNGChunk]] = None):
        self._chunks = list(chunks) if chunks is not None else []

    @classmethod
    def unpack(cls, raw: bytes) -> 'PNGFile':
        '''Parse the whole file: the first chunk failing to unpack aborts everything.'''
        raw = memoryview(raw)

        if len(raw) < len(cls.MAGIC):
            raise PNGTooSmall(f'a PNG file needs at least {len(cls.MAGIC)} bytes, got {len(raw)}')

        if raw[:len(cls.MAGIC)] != cls.MAGIC:
            raise InvalidHeader(f'the magic doesn\'t correspond: {raw[:len(cls.MAGIC)].hex()}')

        chunks = []
        offset = len(cls.MAGIC)
        while offset < len(raw):
            logger.debug('unpacking chunk #%d at offset %08x', len(chunks), offset)
            try:
                chunk = PNGChunk.unpack(raw[offset:])
            except UnpackException as e:
                e.chain.append(f'chunks[{len(chunks)}]')
                raise

            chunks.append(chunk)
            offset += chunk.size

        return cls(chunks)

    def pack(self) -> bytes:
        value = [self.MAGIC]
        for chunk in self._chunks:
            logger.debug('packing chunk %s', chunk.type)
            value.append(chunk.pack())

        return b''.join(value)

    @property
    def raw(self) -> bytes:
        return self.pack()

    @property
    def header(self) -> bytes:
        return self.MAGIC

    @property
    def chunks(self) -> Tuple[PNGChunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: PNGChunk) -> None:
        self._chunks.append(chunk)

    @staticmethod
    def _type_name(chunk_type: Union[ChunkType, str, bytes]) -> str:
        if isinstance(chunk_type, (bytes, bytearray)):
            return bytes(chunk_type).decode('latin1')

        return str(chunk_type)

    def _index_by_type(self, chunk_type: Union[ChunkType, str, bytes]) -> Optional[int]:
        name = self._type_name(chunk_type)
        for idx, chunk in enumerate(self._chunks):
            if str(chunk.type) == name:
                return idx

        return None

    def chunk_by_type(self, chunk_type: Union[ChunkType, str, bytes]) -> Optional[PNGChunk]:
        idx = self._index_by_type(chunk_type)

        return self._chunks[idx] if idx is not None else None

    def remove_chunk(self, chunk_type: Union[ChunkType, str, bytes]) -> PNGChunk:
        '''Remove the first chunk with the given type, the following ones are left untouched.'''
        idx = self._index_by_type(chunk_type)

        if idx is None:
            raise NoChunkOfGivenTypeFound(self._type_name(chunk_type))

        return self._chunks.pop(idx)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self) -> Iterator[PNGChunk]:
        return iter(self.chunks)

    def __eq__(self, other):
        if not isinstance(other, PNGFile):
            return NotImplemented

        return self._chunks == other._chunks

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        return '\n'.join(chunk.summary() for chunk in self._chunks)
