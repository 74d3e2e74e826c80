from __future__ import annotations
import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from hifcodec.bitmap import Bitmap
from hifcore.errors import DecodeFormatError, InputNotFoundError

log = logging.getLogger(__name__)

IMG_EXTS = {".jpg", ".jpeg", ".png", ".bmp", ".tif", ".tiff"}


def scan_images(root: str | Path) -> list[Path]:
    root = Path(root)
    return sorted(p for p in root.rglob("*") if p.suffix.lower() in IMG_EXTS)


def load_bitmap(path: str | Path) -> Bitmap:
    """Décode une image source (PNG, JPEG, ...) en Bitmap RGB.

    L'alpha éventuel est supprimé : le conteneur HIF ne le stocke pas.

    Raises:
        InputNotFoundError: chemin absent ou pas un fichier.
        DecodeFormatError: contenu non reconnu comme image raster, flux corrompu,
            ou dimensions au-delà de `Image.MAX_IMAGE_PIXELS` (bombe de décompression).
    """
    p = Path(path)
    if not p.exists() or not p.is_file():
        raise InputNotFoundError(f"Fichier non trouvé: {p}")
    try:
        with Image.open(p) as img:
            if "A" in img.getbands() or img.info.get("transparency") is not None:
                log.debug("%s: canal alpha ignoré (non stocké dans .hif)", p)
            rgb = img.convert("RGB")
    except UnidentifiedImageError as exc:
        raise DecodeFormatError(f"Pas une image: {p}") from exc
    except Image.DecompressionBombError as exc:
        raise DecodeFormatError(f"Image trop grande {p}: {exc}") from exc
    except (OSError, ValueError) as exc:
        raise DecodeFormatError(f"Image illisible {p}: {exc}") from exc
    arr = np.asarray(rgb, dtype=np.uint8)
    return Bitmap.from_array(arr)
