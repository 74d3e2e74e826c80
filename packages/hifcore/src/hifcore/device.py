from __future__ import annotations
import os
from typing import Any

import torch

from .errors import DeviceUnavailableError


def get_device(name: str | None = None) -> torch.device:
    """Résout le device de rastérisation.

    Ordre : argument explicite → ENV `HIF_DEVICE` → "cpu".
    "auto" choisit cuda si disponible ; "cuda" sans GPU lève `DeviceUnavailableError`.
    """
    v = (name or os.getenv("HIF_DEVICE", "cpu")).strip().lower()
    if v == "auto":
        return torch.device("cuda" if torch.cuda.is_available() else "cpu")
    if v == "cuda":
        if not torch.cuda.is_available():
            raise DeviceUnavailableError("Manque: GPU CUDA")
        return torch.device("cuda")
    if v == "cpu":
        return torch.device("cpu")
    raise ValueError(f"unknown device {v!r} (expected cpu|cuda|auto)")


def cuda_info() -> dict[str, Any]:
    try:
        return {
            "cuda_available": torch.cuda.is_available(),
            "device_count": torch.cuda.device_count() if torch.cuda.is_available() else 0,
            "name": torch.cuda.get_device_name(0) if torch.cuda.is_available() else None,
        }
    except RuntimeError as e:
        return {"error": str(e)}
