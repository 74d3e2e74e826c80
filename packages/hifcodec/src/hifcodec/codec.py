# packages/hifcodec/src/hifcodec/codec.py
from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from .bitmap import Bitmap
from .bitstream import HEADER_SIZE, HifHeader, read_stream, write_stream
from .config import CodecConfig
from .payload import encode_pixels, fmt_from_name
from .raster import unpaint

__all__ = ["CodecConfig", "encode_bitmap", "decode_bitmap", "encode_image", "decode_image"]

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ENCODE
# ---------------------------------------------------------------------------

def encode_bitmap(bitmap: Bitmap, cfg: CodecConfig | None = None) -> bytes:
    """
    Encode un Bitmap en conteneur HIF.

    Layout : width u32 LE | height u32 LE | flux pixels row-major.
    En RGB8 (défaut), la longueur est exactement `8 + W*H*3`.
    Ne peut pas échouer pour un Bitmap valide (invariants vérifiés à sa construction).
    """
    cfg = cfg or CodecConfig()
    fmt = fmt_from_name(cfg.pixel_format)
    _, payload = encode_pixels(fmt, unpaint(bitmap), bitmap.width, bitmap.height)
    blob = write_stream(HifHeader(bitmap.width, bitmap.height), payload)
    log.debug("encode %dx%d fmt=%s → %d bytes", bitmap.width, bitmap.height, cfg.pixel_format, len(blob))
    return blob


def encode_image(bitmap: Bitmap, cfg: CodecConfig | None = None) -> Dict[str, Any]:
    """
    Variante "workflow" de `encode_bitmap`.

    Retour
    ------
    dict: {"bitstream": bytes, "bpp": float, "stats": dict}
    """
    cfg = cfg or CodecConfig()
    blob = encode_bitmap(bitmap, cfg)
    n = bitmap.pixel_count
    bpp = (len(blob) * 8.0) / float(max(1, n))
    stats = {
        "width": bitmap.width,
        "height": bitmap.height,
        "pixel_format": cfg.pixel_format,
        "header_bytes": HEADER_SIZE,
        "payload_bytes": len(blob) - HEADER_SIZE,
        "bpp": bpp,
    }
    return {"bitstream": blob, "bpp": bpp, "stats": stats}


# ---------------------------------------------------------------------------
# DECODE
# ---------------------------------------------------------------------------

def decode_bitmap(buf: bytes, cfg: CodecConfig | None = None) -> Tuple[int, int, bytes]:
    """
    Décode un conteneur HIF → `(width, height, pixels)` (flux RGB8 row-major).

    Les dimensions du header font foi. Lève `DecodeFormatError` si :
      - le buffer fait moins de 8 octets,
      - width ou height vaut 0,
      - le flux est plus court que W*H*3 (tronqué) ou plus long (octets en trop, rejetés),
      - (HEX) lignes mal formées ou jeton couleur invalide (`MalformedColorError`).
    """
    cfg = cfg or CodecConfig()
    header, pixels = read_stream(buf, fmt_from_name(cfg.pixel_format))
    log.debug("decode %dx%d fmt=%s", header.width, header.height, cfg.pixel_format)
    return header.width, header.height, pixels


def decode_image(buf: bytes, cfg: CodecConfig | None = None) -> Bitmap:
    """Comme `decode_bitmap`, mais retourne un `Bitmap`."""
    w, h, pixels = decode_bitmap(buf, cfg)
    return Bitmap.from_stream(w, h, pixels)
