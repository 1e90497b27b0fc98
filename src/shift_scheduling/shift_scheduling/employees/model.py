from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str
    email: str
    max_hours_per_week: int
    skills: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "max_hours_per_week": self.max_hours_per_week,
            "skills": list(self.skills),
        }
