import io

import pytest
from PIL import Image

from ripples.engine.errors import TextureLoadError
from ripples.engine.textures import decode_texture


def encode_png(image):
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def two_row_image():
    image = Image.new("RGB", (1, 2))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((0, 1), (0, 0, 255))
    return image


def test_decode_png():
    texture = decode_texture(encode_png(Image.new("RGB", (4, 2), (10, 20, 30))), "mem.png")
    assert (texture.width, texture.height) == (4, 2)
    assert texture.source == "mem.png"
    assert texture.gl_id is None
    assert len(texture.rgba_bytes()) == 4 * 2 * 4
    assert texture.rgba_bytes()[:4] == bytes([10, 20, 30, 255])


def test_gl_bytes_are_flipped():
    texture = decode_texture(encode_png(two_row_image()))
    assert texture.rgba_bytes() == bytes([255, 0, 0, 255, 0, 0, 255, 255])
    assert texture.gl_bytes() == bytes([0, 0, 255, 255, 255, 0, 0, 255])


def test_garbage_raises():
    with pytest.raises(TextureLoadError):
        decode_texture(b"definitely not an image", "bad.png")


def test_empty_data_raises():
    with pytest.raises(TextureLoadError):
        decode_texture(b"", "empty.png")
