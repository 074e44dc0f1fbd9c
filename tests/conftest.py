import io
import struct
from pathlib import Path

import pytest
from PIL import Image

from pngme import PNGFile


@pytest.fixture
def test_root_dir():
    return Path(__file__).parent


@pytest.fixture
def empty_png():
    """The smallest valid file: only the signature."""
    return PNGFile.MAGIC


@pytest.fixture
def red_png():
    """A real 5x5 red image encoded by Pillow."""
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), 'red').save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def rust_chunk_raw():
    """Chunk with type 'RuSt' built by hand, crc included."""
    message = b'This is where your secret message will be!'

    return struct.pack('>I', len(message)) + b'RuSt' + message + struct.pack('>I', 2882656334)
