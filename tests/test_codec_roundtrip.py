from __future__ import annotations
import struct

import numpy as np
import pytest

from hifcodec import Bitmap, CodecConfig, encode_bitmap, decode_bitmap, encode_image, decode_image
from hifcore.errors import DecodeFormatError

RED, GREEN, BLUE, WHITE = (255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255)


def _bitmap_2x2() -> Bitmap:
    arr = np.array([[RED, GREEN], [BLUE, WHITE]], dtype=np.uint8)
    return Bitmap.from_array(arr)


def _random_bitmap(w: int, h: int, seed: int = 0) -> Bitmap:
    rng = np.random.default_rng(seed)
    return Bitmap.from_array(rng.integers(0, 256, size=(h, w, 3), dtype=np.uint8))


@pytest.mark.parametrize("w,h", [(1, 1), (2, 2), (5, 3), (3, 5), (64, 17)])
def test_roundtrip_identity_and_exact_length(w, h):
    bm = _random_bitmap(w, h, seed=w * 100 + h)
    blob = encode_bitmap(bm)
    assert len(blob) == 8 + w * h * 3
    w2, h2, pixels = decode_bitmap(blob)
    assert (w2, h2) == (w, h)
    assert pixels == bm.to_bytes()
    assert decode_image(blob) == bm


def test_row_major_addressing_2x2():
    blob = encode_bitmap(_bitmap_2x2())
    assert blob[:8] == struct.pack("<II", 2, 2)
    assert list(blob[8:]) == [255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255]


def test_1x1_encodes_to_11_bytes():
    bm = Bitmap.from_array(np.array([[[12, 34, 56]]], dtype=np.uint8))
    blob = encode_bitmap(bm)
    assert len(blob) == 11
    assert decode_bitmap(blob) == (1, 1, bytes([12, 34, 56]))


def test_alpha_is_dropped_before_encode():
    rgba = np.zeros((2, 3, 4), dtype=np.uint8)
    rgba[..., :3] = 200
    rgba[..., 3] = 7
    blob = encode_bitmap(Bitmap.from_array(rgba))
    assert len(blob) == 8 + 2 * 3 * 3
    assert set(blob[8:]) == {200}


def test_truncated_stream_rejected():
    blob = encode_bitmap(_bitmap_2x2())
    with pytest.raises(DecodeFormatError):
        decode_bitmap(blob[:-1])
    # header qui promet bien plus que ce qui suit : pas de lecture hors bornes
    with pytest.raises(DecodeFormatError):
        decode_bitmap(struct.pack("<II", 100_000, 100_000) + b"\x00" * 12)


def test_trailing_bytes_rejected():
    blob = encode_bitmap(_bitmap_2x2())
    with pytest.raises(DecodeFormatError):
        decode_bitmap(blob + b"\x00")


@pytest.mark.parametrize("buf", [b"", b"\x02\x00\x00\x00", b"\x00" * 8])
def test_short_or_degenerate_header_rejected(buf):
    with pytest.raises(DecodeFormatError):
        decode_bitmap(buf)


def test_hex_mode_is_explicit():
    cfg = CodecConfig(pixel_format="HEX")
    blob = encode_bitmap(_bitmap_2x2(), cfg)
    assert blob[8:] == b"ff000000ff00\n0000ffffffff"
    assert decode_bitmap(blob, cfg)[2] == _bitmap_2x2().to_bytes()
    # lu en RGB8 (défaut) le même buffer est incohérent → erreur, pas d'auto-détection
    with pytest.raises(DecodeFormatError):
        decode_bitmap(blob)


def test_encode_image_stats():
    bm = _random_bitmap(4, 4)
    out = encode_image(bm)
    assert out["bitstream"] == encode_bitmap(bm)
    assert out["stats"]["payload_bytes"] == 48
    assert out["stats"]["header_bytes"] == 8
    assert out["bpp"] == pytest.approx((56 * 8) / 16)
