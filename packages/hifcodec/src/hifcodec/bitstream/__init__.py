# packages/hifcodec/src/hifcodec/bitstream/__init__.py
from __future__ import annotations

# I/O bruts (fichiers .hif / .hif.gz)
from .io import read_bitstream, write_bitstream

# Header 8 octets
from .header import HEADER_FMT, HEADER_SIZE, pack_header, unpack_header
from .records import HifHeader

# Framing complet header+pixels
from .stream import write_stream, read_stream

__all__ = [
    "read_bitstream", "write_bitstream",
    "HEADER_FMT", "HEADER_SIZE", "pack_header", "unpack_header",
    "HifHeader",
    "write_stream", "read_stream",
]
