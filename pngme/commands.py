'''
The operations exposed to a frontend: each one takes the content of a file
and gives back the new content or something to show to the user.
'''
import logging
from typing import List, Union

from .chunk import PNGChunk
from .chunk_type import ChunkType
from .exceptions import NoChunkOfGivenTypeFound
from .png import PNGFile


logger = logging.getLogger(__name__)


def encode(raw: bytes, chunk_type: str, message: Union[str, bytes]) -> bytes:
    '''Hide message into a new chunk appended at the end of the file.'''
    if isinstance(message, str):
        message = message.encode('utf-8')

    png = PNGFile.unpack(raw)
    png.append_chunk(PNGChunk(ChunkType.from_string(chunk_type), message))

    logger.debug('appended chunk %s with %d bytes', chunk_type, len(message))

    return png.pack()


def decode(raw: bytes, chunk_type: str) -> str:
    png = PNGFile.unpack(raw)
    chunk = png.chunk_by_type(chunk_type)

    if chunk is None:
        raise NoChunkOfGivenTypeFound(chunk_type)

    return chunk.data_as_string()


def remove(raw: bytes, chunk_type: str) -> bytes:
    png = PNGFile.unpack(raw)
    chunk = png.remove_chunk(chunk_type)

    logger.debug('removed chunk %r', chunk)

    return png.pack()


def print_chunks(raw: bytes) -> List[str]:
    png = PNGFile.unpack(raw)

    return [chunk.summary() for chunk in png]
