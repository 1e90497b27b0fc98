from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    location_id: str
    name: str
    address: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.location_id, "name": self.name, "address": self.address}
