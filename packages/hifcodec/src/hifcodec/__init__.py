# packages/hifcodec/src/hifcodec/__init__.py
from __future__ import annotations

"""HIF - codec conteneur (public surface).

Conteneur : width u32 LE | height u32 LE | W*H*3 octets R,G,B row-major.
"""

__version__ = "0.3.0"

# API publique (stable)
from .config import CodecConfig
from .bitmap import Bitmap
from .payload import RGB8_FMT, HEX_FMT
from .bitstream import read_bitstream, write_bitstream, HEADER_SIZE
from .codec import encode_bitmap, decode_bitmap, encode_image, decode_image
from .raster import paint, unpaint, surface_to_u8
from .compress import compress_file, decompress_file

__all__ = [
    "__version__",
    "CodecConfig", "Bitmap",
    "RGB8_FMT", "HEX_FMT",
    "read_bitstream", "write_bitstream", "HEADER_SIZE",
    "encode_bitmap", "decode_bitmap", "encode_image", "decode_image",
    "paint", "unpaint", "surface_to_u8",
    "compress_file", "decompress_file",
]
