from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dashboard.service import DashboardService
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .locations.memory_location_repository import InMemoryLocationRepository
from .locations.repository import LocationRepository
from .locations.service import LocationService
from .shifts.memory_shift_repository import InMemoryShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    shifts_repo: ShiftRepository
    employees_repo: EmployeeRepository
    locations_repo: LocationRepository

    shift_service: ShiftService
    employee_service: EmployeeService
    location_service: LocationService
    dashboard_service: DashboardService


def build_container(
    *,
    shifts_repo: Optional[ShiftRepository] = None,
    employees_repo: Optional[EmployeeRepository] = None,
    locations_repo: Optional[LocationRepository] = None,
) -> Container:
    """Wire repositories and services.

    Storage defaults to in-memory repositories; pass other implementations of
    the repository protocols to plug in a real database.
    """
    shifts_repo = shifts_repo if shifts_repo is not None else InMemoryShiftRepository()
    employees_repo = employees_repo if employees_repo is not None else InMemoryEmployeeRepository()
    locations_repo = locations_repo if locations_repo is not None else InMemoryLocationRepository()

    shift_service = ShiftService(shifts_repo, employees_repo, locations_repo)
    employee_service = EmployeeService(employees_repo, shifts_repo)
    location_service = LocationService(locations_repo, shifts_repo)
    dashboard_service = DashboardService(employees_repo, locations_repo, shifts_repo)

    return Container(
        shifts_repo=shifts_repo,
        employees_repo=employees_repo,
        locations_repo=locations_repo,
        shift_service=shift_service,
        employee_service=employee_service,
        location_service=location_service,
        dashboard_service=dashboard_service,
    )
