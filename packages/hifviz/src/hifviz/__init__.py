from __future__ import annotations

from .api import to_pil, encode_png, show

__all__ = ["to_pil", "encode_png", "show"]
