from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..common.validators import require_min_length
from ..core.constants import LOCATION_NAME_MIN_LENGTH
from ..core.exceptions import NotFoundError, ValidationError
from ..shifts.repository import ShiftRepository
from .model import Location
from .repository import LocationRepository

logger = logging.getLogger(__name__)


class LocationService:
    def __init__(self, locations: LocationRepository, shifts: ShiftRepository):
        self._locations = locations
        self._shifts = shifts

    def create_location(self, *, name: Optional[str], address: Optional[str] = None) -> Location:
        clean_name = require_min_length(name, "Name", LOCATION_NAME_MIN_LENGTH)
        clean_address = str(address).strip() if address is not None else ""

        location = self._locations.add(name=clean_name, address=clean_address or None)
        logger.info("Created location %s (%s)", location.location_id, location.name)
        return location

    def get_location(self, location_id: str) -> Location:
        location = self._locations.get_by_id(location_id)
        if not location:
            raise NotFoundError(f"Location {location_id} not found")
        return location

    def list_locations(self) -> List[Tuple[Location, int]]:
        """Locations ordered by name, each with its number of shifts."""
        counts = self._shifts.count_by_location()
        return [(loc, counts.get(loc.location_id, 0)) for loc in self._locations.list_all()]

    def delete_location(self, location_id: str) -> None:
        self.get_location(location_id)
        shift_count = self._shifts.count_by_location().get(location_id, 0)
        if shift_count:
            raise ValidationError(f"Location still has {shift_count} shift(s); delete them first")

        if not self._locations.delete(location_id=location_id):
            raise NotFoundError(f"Location {location_id} not found")
        logger.info("Deleted location %s", location_id)
