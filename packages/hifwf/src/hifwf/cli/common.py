from __future__ import annotations
import logging, struct, sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from hifcodec.config import CodecConfig
from hifcodec.bitstream import HEADER_FMT, HEADER_SIZE
from hifcodec.payload import RGB8_FMT, payload_size


def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers)


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def looks_like_hif(p: Path, fmt: int = RGB8_FMT) -> bool:
    """Header lisible et taille fichier cohérente avec W*H pour `fmt`. Sert à `--resume`."""
    try:
        size = p.stat().st_size
        with open(p, "rb") as f:
            head = f.read(HEADER_SIZE)
    except OSError:
        return False
    if len(head) != HEADER_SIZE:
        return False
    w, h = struct.unpack(HEADER_FMT, head)
    return w > 0 and h > 0 and size == HEADER_SIZE + payload_size(fmt, w, h)


def merge_cfg(pixel_format: Optional[str] = None) -> CodecConfig:
    """ENV (`HIF_*`) puis surcharge CLI `--pixel-format`."""
    cfg = CodecConfig.from_env()
    if pixel_format:
        cfg = replace(cfg, pixel_format=pixel_format.strip().upper())
    return cfg


def exit_code(ok: int, n: int) -> int:
    """0 si tout a réussi, 2 si aucune entrée n'était exploitable, 1 sinon."""
    if ok == n:
        return 0
    return 2 if ok == 0 else 1
