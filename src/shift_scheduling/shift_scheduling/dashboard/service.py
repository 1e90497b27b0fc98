from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.enums import ShiftStatus
from ..employees.repository import EmployeeRepository
from ..locations.repository import LocationRepository
from ..shifts.repository import ShiftRepository


@dataclass(frozen=True)
class DashboardStats:
    employee_count: int
    location_count: int
    shift_count: int

    def to_dict(self) -> dict:
        return asdict(self)


class DashboardService:
    def __init__(self, employees: EmployeeRepository, locations: LocationRepository, shifts: ShiftRepository):
        self._employees = employees
        self._locations = locations
        self._shifts = shifts

    def stats(self) -> DashboardStats:
        """Headline counts; ``shift_count`` leaves out completed shifts."""
        return DashboardStats(
            employee_count=len(self._employees.list_all()),
            location_count=len(self._locations.list_all()),
            shift_count=sum(1 for s in self._shifts.list_range() if s.status != ShiftStatus.COMPLETED),
        )
