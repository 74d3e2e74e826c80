from __future__ import annotations
import os
from pathlib import Path

from hifcore.errors import WriteFailureError

HIF_SUFFIX = ".hif"
GZ_SUFFIX = ".gz"


def atomic_write(path: Path | str, data: bytes) -> Path:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise WriteFailureError(f"cannot write {path}: {e}") from e
    return path


def hif_name(src: Path | str, out_dir: Path | str | None = None) -> Path:
    """`photo.png` → `photo.hif` (à côté de la source, ou dans `out_dir`)."""
    src = Path(src)
    name = src.with_suffix(HIF_SUFFIX).name
    return (Path(out_dir) if out_dir else src.parent) / name


def gz_name(container: Path | str) -> Path:
    """`photo.hif` → `photo.hif.gz`."""
    p = Path(container)
    return p.with_name(p.name + GZ_SUFFIX)


def png_name(container: Path | str, out_dir: Path | str) -> Path:
    """`photo.hif` / `photo.hif.gz` → `<out_dir>/photo.png`."""
    p = Path(container)
    if p.suffix == GZ_SUFFIX:
        p = p.with_suffix("")
    return Path(out_dir) / f"{p.stem}.png"
