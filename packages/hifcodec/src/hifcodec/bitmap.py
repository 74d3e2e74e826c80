# packages/hifcodec/src/hifcodec/bitmap.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

__all__ = ["Bitmap", "U32_MAX"]

U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True, eq=False)
class Bitmap:
    """
    Image décodée en mémoire : `width`, `height`, `pixels` uint8 de forme (H, W, 3).

    Invariants
    ----------
    - 1 <= width, height <= 2^32-1
    - pixels.shape == (height, width, 3), dtype uint8
    - ordre d'itération row-major (gauche→droite, haut→bas) = ordre de sérialisation

    L'alpha n'est **jamais** conservé : `from_array` le supprime (perte irréversible).
    """
    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self) -> None:
        if not (1 <= int(self.width) <= U32_MAX) or not (1 <= int(self.height) <= U32_MAX):
            raise ValueError(f"Bitmap: invalid size {self.width}x{self.height} (need 1..2^32-1)")
        if self.pixels.dtype != np.uint8:
            raise TypeError(f"Bitmap: expected uint8 pixels, got {self.pixels.dtype}")
        if self.pixels.shape != (self.height, self.width, 3):
            raise ValueError(
                f"Bitmap: pixels shape {self.pixels.shape} != {(self.height, self.width, 3)}"
            )

    @staticmethod
    def from_array(arr: np.ndarray) -> "Bitmap":
        """Construit un Bitmap depuis (H,W), (H,W,3) ou (H,W,4) uint8. Gris répliqué, alpha supprimé."""
        a = np.asarray(arr)
        if a.dtype != np.uint8:
            raise TypeError(f"Bitmap.from_array: expected uint8, got {a.dtype}")
        if a.ndim == 2:
            a = np.repeat(a[:, :, None], 3, axis=2)
        elif a.ndim == 3 and a.shape[2] in (3, 4):
            a = a[:, :, :3]
        else:
            raise ValueError(f"Bitmap.from_array: unsupported shape {a.shape}")
        a = np.ascontiguousarray(a)
        return Bitmap(width=int(a.shape[1]), height=int(a.shape[0]), pixels=a)

    @staticmethod
    def from_stream(width: int, height: int, pixels: bytes) -> "Bitmap":
        """Enveloppe un flux RGB8 row-major déjà décodé."""
        n = int(width) * int(height) * 3
        if len(pixels) != n:
            raise ValueError(f"Bitmap.from_stream: stream has {len(pixels)} bytes, expected {n}")
        arr = np.frombuffer(bytes(pixels), dtype=np.uint8).reshape((int(height), int(width), 3))
        return Bitmap(width=int(width), height=int(height), pixels=arr.copy())

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def iter_pixels(self) -> Iterator[Tuple[int, int, Tuple[int, int, int]]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.pixel(x, y)

    def to_bytes(self) -> bytes:
        # C-order de (H,W,3) == row-major R,G,B
        return self.pixels.tobytes(order="C")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            bool(np.array_equal(self.pixels, other.pixels))
