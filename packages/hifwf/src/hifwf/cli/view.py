from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, merge_cfg, exit_code
from hifcore.device import get_device
from hifcodec import decode_bitmap, paint, read_bitstream
from hifviz import show


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="HIF: Affiche un .hif dans une fenêtre")
    p.add_argument("path", help="Fichier .hif ou .hif.gz")
    p.add_argument("--pixel-format", choices=["rgb8", "hex"], default=None)
    p.add_argument("--device", choices=["cpu", "cuda", "auto"], default=None)
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)
    p = Path(args.path)
    try:
        cfg = merge_cfg(args.pixel_format)
        w, h, pixels = decode_bitmap(read_bitstream(p), cfg)
        surface = paint(w, h, pixels, device=get_device(args.device))
    except Exception as e:
        logging.exception("Échec lecture %s: %s", p, e)
        return exit_code(0, 1)
    logging.info("%s: %dx%d", p, w, h)
    show(surface, title=f"{p.name} ({w}x{h})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
