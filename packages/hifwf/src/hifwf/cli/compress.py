from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, exit_code
from ..api import gz_name
from hifcodec import compress_file


def _chunk_size(s: str) -> int:
    v = int(s)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"chunk size must be > 0, got {v}")
    return v


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="HIF: Compresse .hif -> .hif.gz (gzip)")
    p.add_argument("containers", nargs="+", help="Fichiers .hif")
    p.add_argument("--level", type=int, choices=range(10), metavar="0..9", default=None, help="Niveau gzip 0..9 (défaut 9, ou ENV HIF_GZIP_LEVEL)")
    p.add_argument("--chunk-size", type=_chunk_size, default=None, help="Taille des blocs en octets")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    ok = 0
    n = len(args.containers)
    for i, p in enumerate(args.containers, 1):
        p = Path(p)
        try:
            logging.info("[%d/%d] compress: %s", i, n, p)
            out = compress_file(p, gz_name(p), chunk_size=args.chunk_size, level=args.level)
            logging.info("→ OK %d → %d octets %s", p.stat().st_size, out.stat().st_size, out)
            ok += 1
        except Exception as e:
            # la sortie peut rester partielle (compression streamée)
            logging.exception("Échec compression %s: %s", p, e)
    return exit_code(ok, n)


if __name__ == "__main__":
    sys.exit(main())
