# packages/hifcodec/src/hifcodec/compress.py
from __future__ import annotations
import gzip
import logging
import shutil
import zlib
from pathlib import Path
from typing import BinaryIO, Iterator

from hifcore.errors import DecodeFormatError, InputNotFoundError, ReadFailureError, WriteFailureError
from .config import env_value

__all__ = ["compress_file", "decompress_file", "GZ_SUFFIX"]

log = logging.getLogger(__name__)

GZ_SUFFIX = ".gz"
DEFAULT_LEVEL = 9
DEFAULT_CHUNK = 64 * 1024


def _resolve_chunk(chunk_size: int | None) -> int:
    # seul HIF_CHUNK_SIZE est lu : HIF_PIXEL_FMT ne concerne pas le wrapper
    chunk = env_value("HIF_CHUNK_SIZE", int, DEFAULT_CHUNK) if chunk_size is None else int(chunk_size)
    if chunk <= 0:
        raise ValueError(f"chunk_size must be > 0, got {chunk}")
    return chunk


def _resolve_level(level: int | None) -> int:
    lvl = env_value("HIF_GZIP_LEVEL", int, DEFAULT_LEVEL) if level is None else int(level)
    if not (0 <= lvl <= 9):
        raise ValueError(f"compress_file: level must be in [0..9], got {lvl}")
    return lvl


def _read_blocks(fin: BinaryIO, src: Path, chunk: int) -> Iterator[bytes]:
    while True:
        try:
            block = fin.read(chunk)
        except OSError as e:
            raise ReadFailureError(f"cannot read {src}: {e}") from e
        if not block:
            return
        yield block


def compress_file(
    in_path: str | Path,
    out_path: str | Path | None = None,
    *,
    chunk_size: int | None = None,
    level: int | None = None,
) -> Path:
    """
    Compresse un conteneur en gzip, bloc par bloc, vers `<in_path>.gz`.

    Pass-through pur : aucune connaissance du layout HIF. Une erreur interrompt
    l'opération ; un fichier de sortie **partiel** peut alors subsister (pas
    d'écriture atomique ici, le flux est streamé).

    Raises:
        InputNotFoundError: source absente ou impossible à ouvrir.
        ReadFailureError: lecture de la source interrompue en cours de flux.
        WriteFailureError: destination impossible à créer ou à écrire.
        ValueError: `chunk_size <= 0` ou `level` hors de [0..9].
    """
    chunk = _resolve_chunk(chunk_size)
    lvl = _resolve_level(level)
    src = Path(in_path)
    dst = Path(out_path) if out_path else src.with_name(src.name + GZ_SUFFIX)

    try:
        fin = open(src, "rb")
    except (FileNotFoundError, IsADirectoryError) as e:
        raise InputNotFoundError(f"no such container: {src}") from e
    except OSError as e:
        raise InputNotFoundError(f"cannot open {src}: {e}") from e
    with fin:
        try:
            with gzip.open(dst, "wb", compresslevel=lvl) as fout:
                for block in _read_blocks(fin, src, chunk):
                    fout.write(block)
        except ReadFailureError:
            raise
        except OSError as e:
            raise WriteFailureError(f"cannot compress {src} → {dst}: {e}") from e
    log.debug("compress %s → %s (level=%d chunk=%d)", src, dst, lvl, chunk)
    return dst


def decompress_file(in_path: str | Path, out_path: str | Path | None = None, *, chunk_size: int | None = None) -> Path:
    """Inverse de `compress_file` : `<x>.gz` → `<x>`."""
    chunk = _resolve_chunk(chunk_size)
    src = Path(in_path)
    if out_path is not None:
        dst = Path(out_path)
    elif src.suffix == GZ_SUFFIX:
        dst = src.with_suffix("")
    else:
        raise ValueError(f"decompress_file: cannot derive output name from {src}")
    if not src.exists():
        raise InputNotFoundError(f"no such file: {src}")
    try:
        with gzip.open(src, "rb") as fin, open(dst, "wb") as fout:
            shutil.copyfileobj(fin, fout, chunk)
    except (EOFError, zlib.error, gzip.BadGzipFile) as e:
        raise DecodeFormatError(f"{src}: invalid gzip stream: {e}") from e
    except OSError as e:
        raise WriteFailureError(f"cannot decompress {src} → {dst}: {e}") from e
    return dst
