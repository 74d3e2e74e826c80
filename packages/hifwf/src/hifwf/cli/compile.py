from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, ensure_dir, looks_like_hif, merge_cfg, exit_code
from ..api import hif_name
from hifcodec.payload import fmt_from_name
from hifcodec import encode_image, write_bitstream
from hifdata import load_bitmap


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="HIF: Convertit des images (PNG, ...) en .hif")
    p.add_argument("images", nargs="+", help="Images source")
    p.add_argument("--out", default=None, help="(Optionnel) dossier de sortie ; défaut : à côté de la source")
    p.add_argument("--pixel-format", choices=["rgb8", "hex"], default=None,
                   help="Encodage du flux pixels (défaut : rgb8, ou ENV HIF_PIXEL_FMT)")
    p.add_argument("--resume", action="store_true", help="Skip si sortie existe et valide")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)
    try:
        cfg = merge_cfg(args.pixel_format)
        fmt = fmt_from_name(cfg.pixel_format)
    except ValueError as e:
        logging.error("Configuration invalide: %s", e)
        return 2

    out_dir = Path(args.out) if args.out else None
    if out_dir is not None:
        ensure_dir(out_dir)

    ok = 0
    n = len(args.images)
    for i, src in enumerate(args.images, 1):
        src = Path(src)
        out = hif_name(src, out_dir)
        if args.resume and looks_like_hif(out, fmt):
            logging.info("[%d/%d] skip: %s", i, n, out)
            ok += 1
            continue
        try:
            logging.info("[%d/%d] compile: %s", i, n, src)
            bitmap = load_bitmap(src)
            enc = encode_image(bitmap, cfg)
            write_bitstream(enc["bitstream"], out)
            logging.info("→ OK %dx%d bpp=%.3f → %s", bitmap.width, bitmap.height, enc["bpp"], out)
            ok += 1
        except Exception as e:
            logging.exception("Échec conversion %s: %s", src, e)

    logging.info("Terminé: %d/%d converties", ok, n)
    return exit_code(ok, n)


if __name__ == "__main__":
    sys.exit(main())
