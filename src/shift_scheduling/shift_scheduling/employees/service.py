from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

from ..common.validators import require_email, require_int_range, require_min_length
from ..core.constants import EMPLOYEE_NAME_MIN_LENGTH, MAX_HOURS_PER_WEEK, MIN_HOURS_PER_WEEK
from ..core.exceptions import NotFoundError, ValidationError
from ..shifts.repository import ShiftRepository
from ..skills.validation import parse_skills_input, validate_skills
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

SkillsInput = Union[str, Sequence[str]]

T = TypeVar("T")


def _collect(errors: List[str], check: Callable[[], T]) -> Optional[T]:
    try:
        return check()
    except ValidationError as e:
        errors.extend(e.errors)
        return None


def _normalize_skills(errors: List[str], skills: SkillsInput) -> Tuple[str, ...]:
    if isinstance(skills, str):
        items = parse_skills_input(skills)
    elif isinstance(skills, (list, tuple)) and all(isinstance(s, str) for s in skills):
        items = list(skills)
    else:
        errors.append("Skills must be a comma separated string or a list of strings")
        return ()
    result = validate_skills(items)
    errors.extend(result.errors)
    return tuple(result.normalized)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, shifts: ShiftRepository):
        self._employees = employees
        self._shifts = shifts

    def _ensure_email_free(self, errors: List[str], email: Optional[str], employee_id: Optional[str] = None) -> None:
        if not email:
            return
        other = self._employees.get_by_email(email)
        if other and other.employee_id != employee_id:
            errors.append("An employee with this email already exists")

    def create_employee(
        self,
        *,
        name: str,
        email: str,
        max_hours_per_week: object,
        skills: SkillsInput = "",
    ) -> Employee:
        errors: List[str] = []
        clean_name = _collect(errors, lambda: require_min_length(name, "Name", EMPLOYEE_NAME_MIN_LENGTH))
        clean_email = _collect(errors, lambda: require_email(email))
        max_hours = _collect(
            errors,
            lambda: require_int_range(max_hours_per_week, "Max hours", MIN_HOURS_PER_WEEK, MAX_HOURS_PER_WEEK),
        )
        normalized_skills = _normalize_skills(errors, skills)
        self._ensure_email_free(errors, clean_email)

        if errors:
            logger.info("Rejected new employee: %s", "; ".join(errors))
            raise ValidationError("Invalid employee", errors)

        employee = self._employees.add(
            name=clean_name,
            email=clean_email,
            max_hours_per_week=max_hours,
            skills=normalized_skills,
        )
        logger.info("Created employee %s", employee.employee_id)
        return employee

    def update_employee(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        max_hours_per_week: Optional[object] = None,
        skills: Optional[SkillsInput] = None,
    ) -> Employee:
        """Update the given fields; ``None`` leaves a field unchanged.

        ``skills`` replaces the whole skill set with its normalized form.
        """
        current = self.get_employee(employee_id)
        errors: List[str] = []
        changes: dict = {}

        if name is not None:
            changes["name"] = _collect(errors, lambda: require_min_length(name, "Name", EMPLOYEE_NAME_MIN_LENGTH))
        if email is not None:
            changes["email"] = _collect(errors, lambda: require_email(email))
            self._ensure_email_free(errors, changes["email"], employee_id=current.employee_id)
        if max_hours_per_week is not None:
            changes["max_hours_per_week"] = _collect(
                errors,
                lambda: require_int_range(max_hours_per_week, "Max hours", MIN_HOURS_PER_WEEK, MAX_HOURS_PER_WEEK),
            )
        if skills is not None:
            changes["skills"] = _normalize_skills(errors, skills)

        if errors:
            logger.info("Rejected update of employee %s: %s", employee_id, "; ".join(errors))
            raise ValidationError("Invalid employee", errors)

        updated = replace(current, **changes)
        if not self._employees.save(updated):
            raise NotFoundError(f"Employee {employee_id} not found")

        logger.info("Updated employee %s (%s)", employee_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def list_employees(self, query: Optional[str] = None) -> Sequence[Employee]:
        """Employees ordered by name, optionally filtered by a name or email substring."""
        needle = (query or "").strip().lower()
        employees = self._employees.list_all()
        if not needle:
            return employees
        return [e for e in employees if needle in e.name.lower() or needle in e.email.lower()]

    def delete_employee(self, employee_id: str) -> None:
        """Delete an employee; their shifts stay on the schedule as unassigned."""
        if not self._employees.delete(employee_id=employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        released = self._shifts.unassign_employee(employee_id)
        logger.info("Deleted employee %s (%d shift(s) unassigned)", employee_id, released)
