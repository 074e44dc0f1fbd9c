import copy
import pickle

import pytest

from pngme.chunk_type import ChunkType
from pngme.enum import ChunkTypeFlag
from pngme.exceptions import InvalidChunkType, UnpackException


def test_chunk_type_from_bytes():
    chunk_type = ChunkType.from_bytes(bytes([82, 117, 83, 116]))

    assert chunk_type.to_bytes() == bytes([82, 117, 83, 116])
    assert bytes(chunk_type) == b'RuSt'
    assert str(chunk_type) == 'RuSt'


def test_chunk_type_from_string():
    assert ChunkType.from_string('RuSt') == ChunkType.from_bytes(bytes([82, 117, 83, 116]))
    assert ChunkType('RuSt') == ChunkType(b'RuSt')
    assert hash(ChunkType('RuSt')) == hash(ChunkType(b'RuSt'))
    assert ChunkType('RuSt') != ChunkType('RUST')


def test_chunk_type_properties():
    """Check the meaning of the case of each letter."""
    chunk_type = ChunkType('RuSt')

    assert chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert chunk_type.is_safe_to_copy()
    assert chunk_type.is_valid()
    assert chunk_type.flags == ChunkTypeFlag.PRIVATE | ChunkTypeFlag.SAFE_TO_COPY

    assert not ChunkType('ruSt').is_critical()
    assert ChunkType('RUSt').is_public()
    assert not ChunkType('RuST').is_safe_to_copy()
    assert ChunkType('IEND').flags == ChunkTypeFlag.NONE


def test_chunk_type_reserved_bit_invalid():
    chunk_type = ChunkType('Rust')

    assert not chunk_type.is_reserved_bit_valid()
    assert not chunk_type.is_valid()
    assert ChunkTypeFlag.RESERVED in chunk_type.flags


@pytest.mark.parametrize('value', [
    'AAAA', 'zzzz', 'AzaZ', 'IHDR', 'tEXt', 'Rust',
])
def test_chunk_type_letters_accepted(value):
    assert str(ChunkType.from_bytes(value.encode())) == value


@pytest.mark.parametrize('value', [
    b'Ru1t',
    b'RuS[',
    b'`uSt',
    b'Ru@t',
    b'Ru{t',
    b'Ru t',
    b'\x00uSt',
    b'\xc3uSt',
])
def test_chunk_type_invalid_bytes(value):
    with pytest.raises(InvalidChunkType):
        ChunkType.from_bytes(value)


@pytest.mark.parametrize('value', [
    '', 'RuS', 'RuStR', 'Rùst',
])
def test_chunk_type_invalid_string(value):
    with pytest.raises(InvalidChunkType):
        ChunkType.from_string(value)


def test_chunk_type_boundaries():
    """The bytes between 'Z' and 'a' are not letters."""
    for byte in range(256):
        expected = ord('A') <= byte <= ord('Z') or ord('a') <= byte <= ord('z')
        assert ChunkType.is_valid_byte(byte) == expected


def test_chunk_type_is_immutable():
    chunk_type = ChunkType('RuSt')

    with pytest.raises(AttributeError):
        chunk_type._raw = b'IEND'


def test_invalid_chunk_type_is_an_unpack_exception():
    assert issubclass(InvalidChunkType, UnpackException)


def test_chunk_type_cannot_delete_attribute():
    chunk_type = ChunkType('RuSt')

    with pytest.raises(AttributeError):
        del chunk_type._raw

    assert str(chunk_type) == 'RuSt'


def test_chunk_type_copy_and_pickle():
    chunk_type = ChunkType('RuSt')

    for other in (copy.copy(chunk_type), copy.deepcopy(chunk_type), pickle.loads(pickle.dumps(chunk_type))):
        assert other == chunk_type
        assert other.flags == chunk_type.flags
