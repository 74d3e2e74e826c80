"""HIF: unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import hif
    blob = hif.encode_bitmap(hif.load_bitmap("photo.png"))
    width, height, pixels = hif.decode_bitmap(blob)
    surface = hif.paint(width, height, pixels)
    png = hif.encode_png(surface)

Or detailed modules:

    from hif import codec, data, viz, wf, core
"""

__version__ = "0.3.0"

# Bring subpackages into a single namespace (monorepo layout packages/*/src).
# If a subpackage is missing locally, we keep the namespace attribute None.
try:
    import hifcore as core
except ImportError:
    core = None
try:
    import hifcodec as codec
except ImportError:
    codec = None
try:
    import hifdata as data
except ImportError:
    data = None
try:
    import hifviz as viz
except ImportError:
    viz = None
try:
    import hifwf as wf
except ImportError:
    wf = None

if codec is not None:
    from hifcodec import (
        Bitmap, CodecConfig,
        encode_bitmap, decode_bitmap, encode_image, decode_image,
        paint, unpaint,
        read_bitstream, write_bitstream,
        compress_file, decompress_file,
    )
else:
    Bitmap = CodecConfig = None  # type: ignore
    encode_bitmap = decode_bitmap = encode_image = decode_image = None  # type: ignore
    paint = unpaint = read_bitstream = write_bitstream = None  # type: ignore
    compress_file = decompress_file = None  # type: ignore

if data is not None:
    from hifdata import load_bitmap, scan_images
else:
    load_bitmap = scan_images = None  # type: ignore

if viz is not None:
    from hifviz import to_pil, encode_png, show
else:
    to_pil = encode_png = show = None  # type: ignore

if wf is not None:
    from hifwf import hif_name, gz_name, atomic_write
else:
    hif_name = gz_name = atomic_write = None  # type: ignore

__all__ = [
    # sub-namespaces
    "codec", "data", "viz", "wf", "core",
    # convenience
    "Bitmap", "CodecConfig",
    "encode_bitmap", "decode_bitmap", "encode_image", "decode_image",
    "paint", "unpaint", "read_bitstream", "write_bitstream",
    "compress_file", "decompress_file",
    "load_bitmap", "scan_images",
    "to_pil", "encode_png", "show",
    "hif_name", "gz_name", "atomic_write",
    "__version__",
]
