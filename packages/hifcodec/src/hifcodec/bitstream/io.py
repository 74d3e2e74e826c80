from __future__ import annotations
import gzip
import os
import zlib
from pathlib import Path

from hifcore.errors import DecodeFormatError, InputNotFoundError, WriteFailureError


def read_bitstream(path: str | Path) -> bytes:
    """Read a container from disk (raw bytes). `.gz` paths are gunzipped on the fly."""
    p = Path(path)
    try:
        data = p.read_bytes()
    except FileNotFoundError as e:
        raise InputNotFoundError(f"no such container: {p}") from e
    except OSError as e:
        raise InputNotFoundError(f"cannot read {p}: {e}") from e
    if p.suffix == ".gz":
        try:
            return gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as e:
            raise DecodeFormatError(f"{p}: invalid gzip stream: {e}") from e
    return data


def write_bitstream(payload: bytes, path: str | Path) -> Path:
    """Atomic write to target path (tmp + os.replace)."""
    p = Path(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    try:
        tmp.write_bytes(payload)
        os.replace(tmp, p)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise WriteFailureError(f"cannot write {p}: {e}") from e
    return p
