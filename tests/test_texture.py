import struct
import zlib

import pytest

from egor.texture import Texture, to_rgba8
from egor.vertex import Color


def _png(width, height, rgba):
    def chunk(tag, body):
        crc = zlib.crc32(tag + body) & 0xFFFFFFFF
        return struct.pack(">I", len(body)) + tag + body + struct.pack(">I", crc)

    stride = width * 4
    raw = b"".join(
        b"\x00" + rgba[row * stride : (row + 1) * stride] for row in range(height)
    )
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", header)
        + chunk(b"IDAT", zlib.compress(raw))
        + chunk(b"IEND", b"")
    )


PIXELS = bytes([255, 0, 0, 255, 0, 255, 0, 255, 0, 0, 255, 255, 10, 20, 30, 40])


def test_from_rgba_keeps_pixels():
    tex = Texture.from_rgba(PIXELS, 2, 2)
    assert (tex.width, tex.height) == (2, 2)
    assert tex.pixels == PIXELS


def test_from_rgba_truncates_extra_bytes():
    tex = Texture.from_rgba(PIXELS + b"\x01\x02", 2, 2)
    assert tex.pixels == PIXELS


def test_from_rgba_rejects_short_data():
    with pytest.raises(ValueError):
        Texture.from_rgba(PIXELS[:-1], 2, 2)


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        Texture.from_rgba(b"", 0, 1)


def test_default_is_one_white_pixel():
    tex = Texture.default()
    assert (tex.width, tex.height) == (1, 1)
    assert tex.pixels == bytes([255, 255, 255, 255])


def test_to_surface_matches_pixels():
    surface = Texture.from_rgba(PIXELS, 2, 2).to_surface()
    assert surface.get_size() == (2, 2)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((1, 1))) == (10, 20, 30, 40)


def test_decode_png_round_trip():
    tex = Texture.decode(_png(2, 2, PIXELS))
    assert (tex.width, tex.height) == (2, 2)
    assert tex.pixels == PIXELS


def test_decode_garbage_raises():
    with pytest.raises(ValueError):
        Texture.decode(b"definitely not an image")


def test_sample_clamps_to_edges():
    tex = Texture.from_rgba(PIXELS, 2, 2)
    assert tex.sample(-1.0, -1.0) == (255, 0, 0, 255)
    assert tex.sample(2.0, 2.0) == (10, 20, 30, 40)
    assert tex.sample(0.75, 0.25) == (0, 255, 0, 255)


def test_to_rgba8():
    assert to_rgba8(Color.WHITE) == (255, 255, 255, 255)
    assert to_rgba8(Color.BLACK) == (0, 0, 0, 255)
    assert to_rgba8(Color(0.5, 2.0, -1.0, 1.0)) == (128, 255, 0, 255)