from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional, Protocol, Sequence

from ..core.enums import ShiftStatus
from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        raise NotImplementedError

    def add(
        self,
        *,
        location_id: str,
        start: datetime,
        end: datetime,
        employee_id: Optional[str],
        status: ShiftStatus,
    ) -> Shift:
        raise NotImplementedError

    def save(self, shift: Shift) -> bool:
        """Replace a stored shift. Returns False when it no longer exists."""

        raise NotImplementedError

    def delete(self, *, shift_id: str) -> bool:
        raise NotImplementedError

    def list_range(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[Shift]:
        """Shifts lying entirely inside [start, end], ordered by start time."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, start: datetime, end: datetime) -> Sequence[Shift]:
        """Shifts of one employee that could clash with the given window."""

        raise NotImplementedError

    def unassign_employee(self, employee_id: str) -> int:
        """Clear the employee from all of their shifts. Returns how many changed."""

        raise NotImplementedError

    def count_by_location(self) -> Dict[str, int]:
        raise NotImplementedError
