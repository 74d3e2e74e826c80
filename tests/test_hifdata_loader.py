from __future__ import annotations
import struct
import zlib

import numpy as np
import pytest
from PIL import Image

from hifdata import load_bitmap, scan_images
from hifcore.errors import DecodeFormatError, InputNotFoundError


def test_load_png_rgb(tmp_path):
    arr = np.array([[[255, 0, 0], [0, 255, 0]], [[0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
    p = tmp_path / "a.png"
    Image.fromarray(arr).save(p)
    bm = load_bitmap(p)
    assert (bm.width, bm.height) == (2, 2)
    assert np.array_equal(bm.pixels, arr)


def test_load_rgba_drops_alpha(tmp_path):
    p = tmp_path / "rgba.png"
    Image.new("RGBA", (3, 2), color=(10, 20, 30, 0)).save(p)
    bm = load_bitmap(p)
    assert bm.pixels.shape == (2, 3, 3)
    assert bm.pixel(2, 1) == (10, 20, 30)


def test_load_grayscale(tmp_path):
    p = tmp_path / "g.png"
    Image.new("L", (4, 4), color=77).save(p)
    assert load_bitmap(p).pixel(0, 0) == (77, 77, 77)


def test_missing_path(tmp_path):
    with pytest.raises(InputNotFoundError):
        load_bitmap(tmp_path / "nope.png")
    with pytest.raises(InputNotFoundError):
        load_bitmap(tmp_path)  # un dossier n'est pas une image


def test_not_an_image(tmp_path):
    p = tmp_path / "fake.png"
    p.write_bytes(b"this is not a png")
    with pytest.raises(DecodeFormatError):
        load_bitmap(p)


def test_scan_images(tmp_path):
    (tmp_path / "sub").mkdir()
    Image.new("RGB", (1, 1)).save(tmp_path / "b.png")
    Image.new("RGB", (1, 1)).save(tmp_path / "sub" / "c.JPG", format="JPEG")
    (tmp_path / "notes.txt").write_text("x")
    names = [p.name for p in scan_images(tmp_path)]
    assert sorted(names) == ["b.png", "c.JPG"]


def _chunk(tag: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)


def test_oversized_header_is_decode_error(tmp_path):
    # fichier minuscule, header 20000x20000 : refusé par Pillow avant décodage
    ihdr = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    p = tmp_path / "huge.png"
    p.write_bytes(b"\x89PNG\r\n\x1a\n" + _chunk(b"IHDR", ihdr)
                  + _chunk(b"IDAT", zlib.compress(b"\x00" * 10)) + _chunk(b"IEND", b""))
    with pytest.raises(DecodeFormatError):
        load_bitmap(p)


def test_truncated_pixel_data_is_decode_error(tmp_path):
    p = tmp_path / "cut.png"
    noise = np.random.default_rng(3).integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
    Image.fromarray(noise).save(p)
    p.write_bytes(p.read_bytes()[:200])
    with pytest.raises(DecodeFormatError):
        load_bitmap(p)
