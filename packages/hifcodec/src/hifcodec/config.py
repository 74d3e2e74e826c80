# packages/hifcodec/src/hifcodec/config.py
from __future__ import annotations
import os
from dataclasses import dataclass

__all__ = ["CodecConfig", "PIXEL_FORMATS", "env_value"]

PIXEL_FORMATS = ("RGB8", "HEX")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """
    Configuration **publique** du codec HIF.

    Consommée par `hifcodec.codec.encode_bitmap/decode_bitmap`. Le wrapper
    `hifcodec.compress` ne lit que `HIF_GZIP_LEVEL` et `HIF_CHUNK_SIZE` (via `env_value`).

    Champs
    ------
    pixel_format : str, default="RGB8"
        Encodage du flux pixels.
          - "RGB8" → triplets binaires R,G,B (forme canonique).
          - "HEX"  → sous-mode textuel historique (`rrggbb` par pixel, `\\n` entre lignes).
        Le header ne porte aucun tag : le format doit être **choisi explicitement**
        des deux côtés (pas d'auto-détection).
    compress_level : int, default=9
        Niveau gzip du wrapper de compression (0..9).
    chunk_size : int, default=65536
        Taille des blocs lus/écrits par le wrapper de compression. Pas un contrat de format.

    Notes
    -----
    - Dataclass **immuable** ; les validations lèvent `ValueError`.
    - `from_env()` lit `HIF_PIXEL_FMT`, `HIF_GZIP_LEVEL`, `HIF_CHUNK_SIZE`.
    """

    pixel_format: str = "RGB8"
    compress_level: int = 9
    chunk_size: int = 64 * 1024

    def __post_init__(self) -> None:
        if self.pixel_format not in PIXEL_FORMATS:
            raise ValueError(f"CodecConfig.pixel_format must be one of {PIXEL_FORMATS}")
        if not (0 <= int(self.compress_level) <= 9):
            raise ValueError("CodecConfig.compress_level must be in [0..9]")
        if int(self.chunk_size) <= 0:
            raise ValueError("CodecConfig.chunk_size must be > 0")

    @staticmethod
    def from_env() -> "CodecConfig":
        return CodecConfig(
            pixel_format=env_value("HIF_PIXEL_FMT", lambda s: s.strip().upper(), "RGB8"),
            compress_level=env_value("HIF_GZIP_LEVEL", int, 9),
            chunk_size=env_value("HIF_CHUNK_SIZE", int, 64 * 1024),
        )


def env_value(name, cast, default):
    """Lit une variable `HIF_*` ; absente ou vide → `default`."""
    v = os.getenv(name)
    return cast(v) if v not in (None, "") else default
