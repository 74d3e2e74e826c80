# packages/hifcodec/src/hifcodec/raster.py
from __future__ import annotations

import numpy as np
import torch

from hifcore.device import get_device
from hifcore.errors import DecodeFormatError
from .bitmap import Bitmap

__all__ = ["paint", "unpaint", "surface_to_u8"]


# ---------------------------------------------------------------------------
# Paint : flux RGB8 → surface [1,3,H,W] float32 dans [0,1]
# ---------------------------------------------------------------------------

def paint(width: int, height: int, pixels: bytes, device: str | torch.device | None = None) -> torch.Tensor:
    """
    Rastérise un flux RGB8 row-major en surface **[1,3,H,W]** float32 dans [0,1].

    Pour chaque pixel i ∈ [0, W*H) :
      - x = i mod W, y = i div W,
      - canaux lus à l'offset i*3,
      - normalisation linéaire v/255 (pas de gamma, pas de conversion d'espace),
      - écrit en (x, y), opacité pleine (la surface n'a pas de canal alpha).

    Les pixels sont indépendants : l'écriture est un seul scatter indexé sur
    le device, l'adressage (x, y) fixe la position de chacun.

    Exceptions
    ----------
    DecodeFormatError si `len(pixels) != W*H*3`.
    """
    W, H = int(width), int(height)
    n = W * H
    if W <= 0 or H <= 0:
        raise DecodeFormatError(f"paint: zero-area surface {W}x{H}")
    if len(pixels) != n * 3:
        raise DecodeFormatError(f"paint: stream has {len(pixels)} bytes, expected {n * 3}")
    dev = device if isinstance(device, torch.device) else get_device(device)

    colors = torch.from_numpy(np.frombuffer(bytes(pixels), dtype=np.uint8).copy())
    colors = colors.to(device=dev).view(n, 3).to(torch.float32) / 255.0   # [N,3]

    idx = torch.arange(n, device=dev)
    xs = idx % W
    ys = idx // W

    surface = torch.zeros((1, 3, H, W), dtype=torch.float32, device=dev)
    plane = surface[0]                      # vue [3,H,W]
    plane[:, ys, xs] = colors.t()           # [3,N]
    return surface


def surface_to_u8(surface: torch.Tensor) -> np.ndarray:
    """[1,3,H,W] ou [3,H,W] float dans [0,1] → (H,W,3) uint8 (arrondi, clamp)."""
    s = surface
    if s.ndim == 4:
        assert s.shape[0] == 1, "expected a single surface [1,3,H,W]"
        s = s[0]
    if s.ndim != 3 or s.shape[0] != 3:
        raise ValueError(f"surface_to_u8: expected [3,H,W], got {tuple(s.shape)}")
    arr = (s.detach().clamp(0.0, 1.0) * 255.0).round().to(torch.uint8)
    return arr.permute(1, 2, 0).contiguous().cpu().numpy()


# ---------------------------------------------------------------------------
# Unpaint : Bitmap source → flux RGB8 (producteur de l'encodeur)
# ---------------------------------------------------------------------------

def unpaint(bitmap: Bitmap) -> bytes:
    """Itère le Bitmap en row-major et émet R,G,B par pixel (alpha déjà supprimé)."""
    return bitmap.to_bytes()
