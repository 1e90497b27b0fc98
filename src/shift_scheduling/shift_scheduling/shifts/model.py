from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ShiftStatus


@dataclass(frozen=True)
class ShiftTimeSlot:
    """A time interval optionally assigned to one employee.

    ``employee_id`` of None means the shift is unassigned.
    """

    start: datetime
    end: datetime
    employee_id: Optional[str] = None


@dataclass(frozen=True)
class Shift:
    """Domain entity: a scheduled shift at a location."""

    shift_id: str
    location_id: str
    start: datetime
    end: datetime
    employee_id: Optional[str] = None
    status: ShiftStatus = ShiftStatus.DRAFT

    def time_slot(self) -> ShiftTimeSlot:
        return ShiftTimeSlot(start=self.start, end=self.end, employee_id=self.employee_id)

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "location_id": self.location_id,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "employee_id": self.employee_id,
            "status": self.status.value,
        }
