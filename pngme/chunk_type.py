'''
# Chunk types

A chunk type is made of 4 bytes, each one restricted to the ASCII letters
A-Z and a-z. Bit 5 of each byte (the case of the letter) carries a property
of the chunk:

 1. ancillary bit (first byte): uppercase means critical
 2. private bit (second byte): uppercase means public
 3. reserved bit (third byte): must be uppercase
 4. safe-to-copy bit (fourth byte): lowercase means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structures.html#Chunk-naming-conventions>.
'''
from typing import Union

from bitstring import Bits

from .enum import ChunkTypeFlag
from .exceptions import InvalidChunkType


class ChunkType(object):
    '''Immutable 4 bytes identifier of a chunk.'''
    SIZE = 4
    # bit 5 (0x20) counted from the most significant bit of a byte
    PROPERTY_BIT = 2

    _FLAGS = (
        ChunkTypeFlag.ANCILLARY,
        ChunkTypeFlag.PRIVATE,
        ChunkTypeFlag.RESERVED,
        ChunkTypeFlag.SAFE_TO_COPY,
    )

    __slots__ = ('_raw',)

    def __init__(self, value: Union[bytes, str]):
        if isinstance(value, str):
            raw = self._check_string(value)
        else:
            raw = self._check_bytes(value)

        object.__setattr__(self, '_raw', raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> 'ChunkType':
        return cls(bytes(raw))

    @classmethod
    def from_string(cls, value: str) -> 'ChunkType':
        if not isinstance(value, str):
            raise InvalidChunkType(f'expected a string, got {value.__class__.__name__}')

        return cls(value)

    @staticmethod
    def is_valid_byte(byte: int) -> bool:
        '''Only letters are allowed, so we must skip the characters between "Z" and "a".'''
        return 65 <= byte <= 122 and not 91 <= byte <= 96

    @classmethod
    def _check_bytes(cls, raw) -> bytes:
        raw = bytes(raw)

        if len(raw) != cls.SIZE:
            raise InvalidChunkType(f'chunk type must be {cls.SIZE} bytes long, not {len(raw)}')

        for byte in raw:
            if not cls.is_valid_byte(byte):
                raise InvalidChunkType(f'invalid byte 0x{byte:02x} in chunk type {raw!r}')

        return raw

    @classmethod
    def _check_string(cls, value: str) -> bytes:
        try:
            raw = value.encode('utf-8')
        except UnicodeEncodeError as e:
            raise InvalidChunkType(f'chunk type {value!r} is not encodable') from e

        return cls._check_bytes(raw)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        # rebuild through __init__ so copy and pickle never set attributes
        return (self.__class__, (self._raw,))

    def to_bytes(self) -> bytes:
        return self._raw

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return f'<{self.__class__.__name__}({self})>'

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    @property
    def flags(self) -> ChunkTypeFlag:
        bits = Bits(self._raw)
        flags = ChunkTypeFlag.NONE

        for idx, flag in enumerate(self._FLAGS):
            if bits[idx * 8 + self.PROPERTY_BIT]:
                flags |= flag

        return flags

    def is_critical(self) -> bool:
        return ChunkTypeFlag.ANCILLARY not in self.flags

    def is_public(self) -> bool:
        return ChunkTypeFlag.PRIVATE not in self.flags

    def is_reserved_bit_valid(self) -> bool:
        return ChunkTypeFlag.RESERVED not in self.flags

    def is_safe_to_copy(self) -> bool:
        return ChunkTypeFlag.SAFE_TO_COPY in self.flags

    def is_valid(self) -> bool:
        '''A chunk type made of letters is well-formed only with the reserved bit unset.'''
        return self.is_reserved_bit_valid()
