from __future__ import annotations

import threading
import uuid
from typing import Optional, Sequence, Tuple

from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Optional[Sequence[Employee]] = None):
        self._lock = threading.Lock()
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in (employees or [])}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._by_id.get(employee_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        wanted = email.strip().lower()
        with self._lock:
            return next((e for e in self._by_id.values() if e.email.lower() == wanted), None)

    def add(self, *, name: str, email: str, max_hours_per_week: int, skills: Tuple[str, ...]) -> Employee:
        employee = Employee(
            employee_id=uuid.uuid4().hex,
            name=name,
            email=email,
            max_hours_per_week=max_hours_per_week,
            skills=tuple(skills),
        )
        with self._lock:
            self._by_id[employee.employee_id] = employee
        return employee

    def save(self, employee: Employee) -> bool:
        with self._lock:
            if employee.employee_id not in self._by_id:
                return False
            self._by_id[employee.employee_id] = employee
            return True

    def delete(self, *, employee_id: str) -> bool:
        with self._lock:
            return self._by_id.pop(employee_id, None) is not None

    def list_all(self) -> Sequence[Employee]:
        with self._lock:
            items = list(self._by_id.values())
        items.sort(key=lambda e: (e.name.lower(), e.employee_id))
        return items
