from __future__ import annotations
import struct

from hifcore.errors import DecodeFormatError
from .records import HifHeader

# Header HIF : width u32 | height u32, little-endian FIXE.
# Le format historique utilisait l'endianness native de l'hôte ; on fige LE.
HEADER_FMT = "<II"
HEADER_SIZE = struct.calcsize(HEADER_FMT)  # 8
U32_MAX = 0xFFFFFFFF


def pack_header(width: int, height: int) -> bytes:
    """Pack (width, height) → 8 octets."""
    w, h = int(width), int(height)
    if not (0 <= w <= U32_MAX and 0 <= h <= U32_MAX):
        raise ValueError(f"pack_header: {w}x{h} out of u32 range")
    return struct.pack(HEADER_FMT, w, h)


def unpack_header(b: bytes) -> HifHeader:
    """Lit les 8 premiers octets. Lève DecodeFormatError si buffer trop court ou aire nulle."""
    if len(b) < HEADER_SIZE:
        raise DecodeFormatError(
            f"header: truncated buffer ({len(b)} bytes, need >= {HEADER_SIZE})"
        )
    w, h = struct.unpack_from(HEADER_FMT, b, 0)
    if w == 0 or h == 0:
        raise DecodeFormatError(f"header: zero-area image ({w}x{h})")
    return HifHeader(width=w, height=h)
