from __future__ import annotations

from .errors import (
    HifError,
    InputNotFoundError,
    DecodeFormatError,
    MalformedColorError,
    ReadFailureError,
    WriteFailureError,
    DeviceUnavailableError,
)
from .device import get_device, cuda_info

__all__ = [
    "HifError", "InputNotFoundError", "DecodeFormatError", "MalformedColorError",
    "ReadFailureError", "WriteFailureError", "DeviceUnavailableError",
    "get_device", "cuda_info",
]
