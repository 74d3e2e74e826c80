from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, ensure_dir, merge_cfg, exit_code
from ..api import atomic_write, png_name
from hifcore.device import get_device
from hifcodec import decode_bitmap, paint, read_bitstream
from hifviz import encode_png


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="HIF: Decode .hif -> PNG")
    p.add_argument("bitstreams", nargs="+", help="Fichiers .hif ou .hif.gz")
    p.add_argument("--out", required=True, help="Dossier de sortie")
    p.add_argument("--pixel-format", choices=["rgb8", "hex"], default=None)
    p.add_argument("--device", choices=["cpu", "cuda", "auto"], default=None,
                   help="Device de rastérisation (défaut : ENV HIF_DEVICE ou cpu)")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)
    try:
        cfg = merge_cfg(args.pixel_format)
    except ValueError as e:
        logging.error("Configuration invalide: %s", e)
        return 2

    out_dir = Path(args.out); ensure_dir(out_dir)
    ok = 0
    for i, p in enumerate(args.bitstreams, 1):
        p = Path(p)
        try:
            logging.info("[%d/%d] decode: %s", i, len(args.bitstreams), p)
            w, h, pixels = decode_bitmap(read_bitstream(p), cfg)
            surface = paint(w, h, pixels, device=get_device(args.device))
            out = atomic_write(png_name(p, out_dir), encode_png(surface))
            logging.info("→ OK %dx%d %s", w, h, out)
            ok += 1
        except Exception as e:
            logging.exception("Échec decode %s: %s", p, e)
    return exit_code(ok, len(args.bitstreams))


if __name__ == "__main__":
    sys.exit(main())
