from __future__ import annotations

from .api import load_bitmap, scan_images, IMG_EXTS

__all__ = ["load_bitmap", "scan_images", "IMG_EXTS"]
