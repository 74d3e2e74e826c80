# packages/hifwf/src/hifwf/__init__.py
from __future__ import annotations

from .api import atomic_write, hif_name, gz_name, png_name

__all__ = [
    "atomic_write",
    "hif_name",
    "gz_name",
    "png_name",
    # on n'importe PAS le sous-module cli ici pour éviter les imports lourds au top-level
]

__version__ = "0.3.0"
