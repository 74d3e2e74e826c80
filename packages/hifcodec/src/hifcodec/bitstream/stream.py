# packages/hifcodec/src/hifcodec/bitstream/stream.py
from __future__ import annotations
from typing import Tuple

from .records import HifHeader
from .header import HEADER_SIZE, pack_header, unpack_header
from ..payload import RGB8_FMT, decode_pixels


def write_stream(header: HifHeader, payload: bytes) -> bytes:
    """
    Concatène header (pack_header) + flux pixels déjà encodé.
    """
    return pack_header(header.width, header.height) + bytes(payload)


def read_stream(buf: bytes, fmt: int = RGB8_FMT) -> Tuple[HifHeader, bytes]:
    """
    Sépare header + flux pixels et retourne le flux **RGB8** validé.

    `fmt` indique comment lire le flux (RGB8 ou HEX) ; il n'est pas lu dans
    le buffer. Les dimensions du header font foi : toute longueur incohérente
    lève DecodeFormatError.
    """
    header = unpack_header(buf)                   # lève si < 8 octets
    payload = memoryview(buf)[HEADER_SIZE:]
    pixels = decode_pixels(fmt, payload, header.width, header.height)
    return header, pixels
