# packages/hifcodec/src/hifcodec/payload.py
# -----------------------------------------------------------------------------
# Flux pixels HIF - bi-mode RGB8 (binaire, canonique) / HEX (textuel, historique)
# Le header ne distingue pas les deux : le format est toujours passé explicitement.

from __future__ import annotations
import re
from typing import Tuple

from hifcore.errors import DecodeFormatError, MalformedColorError

__all__ = [
    # formats
    "RGB8_FMT", "HEX_FMT", "FMT_BY_NAME", "fmt_from_name",
    # RGB8
    "encode_pixels_rgb8", "decode_pixels_rgb8",
    # HEX
    "encode_pixels_hex", "decode_pixels_hex",
    # dispatch
    "encode_pixels", "decode_pixels", "payload_size",
]

# -----------------------------------------------------------------------------
# Formats de flux
# -----------------------------------------------------------------------------
#: Triplets R,G,B bruts, row-major, sans séparateur
RGB8_FMT: int = 0
#: `rrggbb` ASCII par pixel, `\n` entre les lignes (pas de `\n` final)
HEX_FMT: int = 1

FMT_BY_NAME = {"RGB8": RGB8_FMT, "HEX": HEX_FMT}

_HEX_ROW = re.compile(rb"[0-9A-Fa-f]*")


def fmt_from_name(name: str) -> int:
    try:
        return FMT_BY_NAME[name.strip().upper()]
    except KeyError:
        raise ValueError(f"unknown pixel format {name!r} (expected one of {sorted(FMT_BY_NAME)})") from None


def _check_stream(pixels: bytes, width: int, height: int) -> None:
    if not isinstance(pixels, (bytes, bytearray, memoryview)):
        raise TypeError("pixels must be bytes")
    n = int(width) * int(height) * 3
    if len(pixels) != n:
        raise ValueError(f"pixel stream has {len(pixels)} bytes, expected {n} ({width}x{height}x3)")


def payload_size(fmt: int, width: int, height: int) -> int:
    """Taille exacte du flux encodé pour (fmt, width, height)."""
    w, h = int(width), int(height)
    if fmt == RGB8_FMT:
        return w * h * 3
    if fmt == HEX_FMT:
        return w * h * 6 + max(0, h - 1)
    raise ValueError(f"unknown pixel format id {fmt}")


# -----------------------------------------------------------------------------
# RGB8 (canonique)
# -----------------------------------------------------------------------------
def encode_pixels_rgb8(pixels: bytes, width: int, height: int) -> Tuple[int, bytes]:
    """
    Encode un flux RGB8 → `(RGB8_FMT, payload)`.

    Le flux canonique est déjà la représentation du conteneur : on valide la
    longueur et on copie tel quel.
    """
    _check_stream(pixels, width, height)
    return RGB8_FMT, bytes(pixels)


def decode_pixels_rgb8(payload: bytes, width: int, height: int) -> bytes:
    """
    Valide et retourne le flux RGB8.

    Exceptions
    ----------
    DecodeFormatError si `len(payload) != width*height*3` :
      - plus court → flux tronqué,
      - plus long  → octets en trop (politique : **rejet**).
    """
    need = int(width) * int(height) * 3
    got = len(payload)
    if got < need:
        raise DecodeFormatError(f"pixels: truncated stream ({got} bytes, header declares {need})")
    if got > need:
        raise DecodeFormatError(f"pixels: trailing bytes ({got - need} after {need})")
    return bytes(payload)


# -----------------------------------------------------------------------------
# HEX (sous-mode textuel historique)
# -----------------------------------------------------------------------------
def encode_pixels_hex(pixels: bytes, width: int, height: int) -> Tuple[int, bytes]:
    """
    Encode un flux RGB8 → `(HEX_FMT, payload)`.

    Chaque pixel devient 6 chiffres hexa minuscules `rrggbb` ; les lignes sont
    séparées par un unique `\\n`.
    """
    _check_stream(pixels, width, height)
    stride = int(width) * 3
    rows = [bytes(pixels[y * stride:(y + 1) * stride]).hex().encode("ascii") for y in range(int(height))]
    return HEX_FMT, b"\n".join(rows)


def decode_pixels_hex(payload: bytes, width: int, height: int) -> bytes:
    """
    Décode un flux HEX → flux RGB8.

    Contrat strict : exactement `height` lignes de `width*6` chiffres hexa.
    Un jeton non hexadécimal fait échouer **tout** le décodage
    (`MalformedColorError`) : aucune couleur par défaut n'est substituée.
    """
    w, h = int(width), int(height)
    rows = bytes(payload).split(b"\n")
    if len(rows) != h:
        raise DecodeFormatError(f"pixels(hex): {len(rows)} rows, header declares {h}")
    out = bytearray()
    for y, row in enumerate(rows):
        if len(row) != w * 6:
            raise DecodeFormatError(f"pixels(hex): row {y} has {len(row)} chars, expected {w * 6}")
        if not _HEX_ROW.fullmatch(row):
            for x in range(w):
                tok = row[x * 6:(x + 1) * 6]
                if not _HEX_ROW.fullmatch(tok):
                    raise MalformedColorError(
                        f"pixels(hex): malformed color literal {tok!r} at ({x}, {y})"
                    )
        out += bytes.fromhex(row.decode("ascii"))
    return bytes(out)


# -----------------------------------------------------------------------------
# Dispatch
# -----------------------------------------------------------------------------
def encode_pixels(fmt: int, pixels: bytes, width: int, height: int) -> Tuple[int, bytes]:
    if fmt == RGB8_FMT:
        return encode_pixels_rgb8(pixels, width, height)
    if fmt == HEX_FMT:
        return encode_pixels_hex(pixels, width, height)
    raise ValueError(f"unknown pixel format id {fmt}")


def decode_pixels(fmt: int, payload: bytes, width: int, height: int) -> bytes:
    if fmt == RGB8_FMT:
        return decode_pixels_rgb8(payload, width, height)
    if fmt == HEX_FMT:
        return decode_pixels_hex(payload, width, height)
    raise ValueError(f"unknown pixel format id {fmt}")
