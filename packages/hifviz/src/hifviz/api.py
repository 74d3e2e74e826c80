from __future__ import annotations
import io

from PIL import Image

from hifcodec.raster import surface_to_u8


def to_pil(surface) -> Image.Image:
    return Image.fromarray(surface_to_u8(surface))


def encode_png(surface) -> bytes:
    """Surface [1,3,H,W] → octets PNG, en mémoire (pas de fichier temporaire)."""
    buf = io.BytesIO()
    to_pil(surface).save(buf, format="PNG")
    return buf.getvalue()


def show(surface, title: str = ".hif opener", block: bool = True) -> None:
    import matplotlib.pyplot as plt
    arr = surface_to_u8(surface)
    H, W = arr.shape[:2]
    dpi = 100.0
    fig = plt.figure(figsize=(max(W, 1) / dpi, max(H, 1) / dpi), dpi=dpi)
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(title)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.imshow(arr, interpolation="nearest")
    ax.set_axis_off()
    plt.show(block=block)
