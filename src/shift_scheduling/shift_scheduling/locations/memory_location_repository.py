from __future__ import annotations

import threading
import uuid
from typing import Optional, Sequence

from .model import Location
from .repository import LocationRepository


class InMemoryLocationRepository(LocationRepository):
    def __init__(self, locations: Optional[Sequence[Location]] = None):
        self._lock = threading.Lock()
        self._by_id: dict[str, Location] = {loc.location_id: loc for loc in (locations or [])}

    def get_by_id(self, location_id: str) -> Optional[Location]:
        with self._lock:
            return self._by_id.get(location_id)

    def add(self, *, name: str, address: Optional[str]) -> Location:
        location = Location(location_id=uuid.uuid4().hex, name=name, address=address)
        with self._lock:
            self._by_id[location.location_id] = location
        return location

    def delete(self, *, location_id: str) -> bool:
        with self._lock:
            return self._by_id.pop(location_id, None) is not None

    def list_all(self) -> Sequence[Location]:
        with self._lock:
            items = list(self._by_id.values())
        items.sort(key=lambda loc: (loc.name.lower(), loc.location_id))
        return items
