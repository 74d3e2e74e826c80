from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True, eq=True)
class HifHeader:
    """En-tête HIF : dimensions seules (pas de magic, version, ni CRC)."""
    width: int
    height: int

    @property
    def pixel_count(self) -> int:
        return int(self.width) * int(self.height)

    def stream_size(self, fmt: int) -> int:
        from ..payload import payload_size
        return payload_size(fmt, self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {"width": int(self.width), "height": int(self.height)}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "HifHeader":
        return HifHeader(width=int(d["width"]), height=int(d["height"]))
