from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, *, name: str, email: str, max_hours_per_week: int, skills: Tuple[str, ...]) -> Employee:
        raise NotImplementedError

    def save(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete(self, *, employee_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by name."""

        raise NotImplementedError
