from __future__ import annotations
import io

import numpy as np
from PIL import Image

from hifcodec import Bitmap, encode_bitmap, decode_bitmap, paint
from hifviz import encode_png, to_pil, show


def _surface(arr):
    w, h, pixels = decode_bitmap(encode_bitmap(Bitmap.from_array(arr)))
    return paint(w, h, pixels, device="cpu")


def test_encode_png_in_memory_matches_pixels():
    rng = np.random.default_rng(5)
    arr = rng.integers(0, 256, size=(6, 9, 3), dtype=np.uint8)
    png = encode_png(_surface(arr))
    assert png[:8] == b"\x89PNG\r\n\x1a\n"
    img = Image.open(io.BytesIO(png))
    assert img.size == (9, 6) and img.mode == "RGB"
    assert np.array_equal(np.asarray(img), arr)


def test_to_pil_size():
    arr = np.zeros((3, 4, 3), dtype=np.uint8)
    assert to_pil(_surface(arr)).size == (4, 3)


def test_show_non_blocking_with_agg(monkeypatch):
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    calls = []
    monkeypatch.setattr(plt, "show", lambda block=True: calls.append(block))
    show(_surface(np.full((2, 2, 3), 128, dtype=np.uint8)), title="t", block=False)
    assert calls == [False]
    plt.close("all")
