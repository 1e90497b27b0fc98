from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Location


class LocationRepository(Protocol):
    def get_by_id(self, location_id: str) -> Optional[Location]:
        raise NotImplementedError

    def add(self, *, name: str, address: Optional[str]) -> Location:
        raise NotImplementedError

    def delete(self, *, location_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Location]:
        """All locations ordered by name."""

        raise NotImplementedError
