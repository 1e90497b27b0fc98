from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional, Sequence, Tuple, Union

from ..common.datetime_utils import parse_iso_datetime
from ..core.enums import ShiftStatus
from ..core.exceptions import NotFoundError, ShiftConflictError, ValidationError
from ..employees.repository import EmployeeRepository
from ..locations.repository import LocationRepository
from .model import Shift, ShiftTimeSlot
from .repository import ShiftRepository
from .validation import detect_conflicts, validate_shift_times

logger = logging.getLogger(__name__)

TimeInput = Union[str, datetime]

_KEEP = object()


@dataclass(frozen=True)
class ShiftCheck:
    """Outcome of a dry-run check: input errors plus clashing shifts."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    conflicts: List[Shift] = field(default_factory=list)


def _normalize_id(value: Optional[str]) -> Optional[str]:
    v = str(value).strip() if value is not None else ""
    return v or None


def _parse_status(value: Union[str, ShiftStatus]) -> ShiftStatus:
    try:
        return ShiftStatus(str(getattr(value, "value", value)).strip().upper())
    except ValueError:
        allowed = ", ".join(s.value for s in ShiftStatus)
        raise ValidationError(f"Status must be one of: {allowed}")


class ShiftService:
    """Create/update shift actions.

    Order of checks: parse raw input and resolve the employee and location,
    validate the time policy, then look for conflicts with the employee's
    existing shifts. Nothing is stored unless every step passes.
    """

    def __init__(self, shifts: ShiftRepository, employees: EmployeeRepository, locations: LocationRepository):
        self._shifts = shifts
        self._employees = employees
        self._locations = locations
        # Reads, conflict checks and writes must not interleave between callers.
        self._write_lock = threading.Lock()

    @staticmethod
    def _parse_times(start: TimeInput, end: TimeInput) -> Tuple[Optional[datetime], Optional[datetime], List[str]]:
        errors: List[str] = []
        start_dt = end_dt = None
        try:
            start_dt = parse_iso_datetime(start, "Start time")
        except ValidationError as e:
            errors.extend(e.errors)
        try:
            end_dt = parse_iso_datetime(end, "End time")
        except ValidationError as e:
            errors.extend(e.errors)

        if start_dt is not None and end_dt is not None:
            errors.extend(validate_shift_times(start_dt, end_dt).errors)
        return start_dt, end_dt, errors

    def _check_employee(self, errors: List[str], employee_id: Optional[str]) -> None:
        if employee_id is not None and self._employees.get_by_id(employee_id) is None:
            errors.append("Employee not found")

    def _check_location(self, errors: List[str], location_id: Optional[str]) -> None:
        if location_id is None:
            errors.append("Location is required")
        elif self._locations.get_by_id(location_id) is None:
            errors.append("Location not found")

    def _find_conflicts(self, slot: ShiftTimeSlot, *, exclude_shift_id: Optional[str] = None) -> List[Shift]:
        if slot.employee_id is None:
            return []
        existing = [
            s
            for s in self._shifts.list_for_employee(slot.employee_id, start=slot.start, end=slot.end)
            if s.shift_id != exclude_shift_id
        ]
        return detect_conflicts(slot, existing)

    def check_shift(
        self,
        *,
        start: TimeInput,
        end: TimeInput,
        employee_id: Optional[str] = None,
        exclude_shift_id: Optional[str] = None,
    ) -> ShiftCheck:
        employee = _normalize_id(employee_id)
        start_dt, end_dt, errors = self._parse_times(start, end)
        self._check_employee(errors, employee)
        if errors:
            return ShiftCheck(valid=False, errors=errors)

        slot = ShiftTimeSlot(start=start_dt, end=end_dt, employee_id=employee)
        conflicts = self._find_conflicts(slot, exclude_shift_id=exclude_shift_id)
        return ShiftCheck(valid=not conflicts, conflicts=conflicts)

    def create_shift(
        self,
        *,
        location_id: Optional[str],
        start: TimeInput,
        end: TimeInput,
        employee_id: Optional[str] = None,
        status: Union[str, ShiftStatus] = ShiftStatus.DRAFT,
    ) -> Shift:
        location = _normalize_id(location_id)
        employee = _normalize_id(employee_id)

        with self._write_lock:
            errors: List[str] = []
            self._check_location(errors, location)
            start_dt, end_dt, time_errors = self._parse_times(start, end)
            errors.extend(time_errors)
            self._check_employee(errors, employee)
            try:
                status_value = _parse_status(status)
            except ValidationError as e:
                errors.extend(e.errors)

            if errors:
                logger.info("Rejected new shift: %s", "; ".join(errors))
                raise ValidationError("Invalid shift", errors)

            slot = ShiftTimeSlot(start=start_dt, end=end_dt, employee_id=employee)
            conflicts = self._find_conflicts(slot)
            if conflicts:
                logger.warning(
                    "Shift %s-%s for employee %s overlaps %d existing shift(s)",
                    slot.start.isoformat(),
                    slot.end.isoformat(),
                    slot.employee_id,
                    len(conflicts),
                )
                raise ShiftConflictError(conflicts)

            shift = self._shifts.add(
                location_id=location,
                start=slot.start,
                end=slot.end,
                employee_id=slot.employee_id,
                status=status_value,
            )

        logger.info("Created shift %s (employee=%s)", shift.shift_id, shift.employee_id)
        return shift

    def update_shift(
        self,
        shift_id: str,
        *,
        location_id: Optional[str] = None,
        start: Optional[TimeInput] = None,
        end: Optional[TimeInput] = None,
        employee_id: object = _KEEP,
        status: Optional[Union[str, ShiftStatus]] = None,
    ) -> Shift:
        """Apply a partial update. Pass ``employee_id=None`` to unassign."""
        with self._write_lock:
            current = self.get_shift(shift_id)

            errors: List[str] = []
            location = current.location_id
            if location_id is not None:
                location = _normalize_id(location_id)
                self._check_location(errors, location)

            start_dt, end_dt, time_errors = self._parse_times(
                current.start if start is None else start,
                current.end if end is None else end,
            )
            errors.extend(time_errors)

            new_employee = current.employee_id
            if employee_id is not _KEEP:
                new_employee = _normalize_id(employee_id)
                if new_employee != current.employee_id:
                    self._check_employee(errors, new_employee)

            status_value = current.status
            if status is not None:
                try:
                    status_value = _parse_status(status)
                except ValidationError as e:
                    errors.extend(e.errors)

            if errors:
                logger.info("Rejected update of shift %s: %s", shift_id, "; ".join(errors))
                raise ValidationError("Invalid shift", errors)

            updated = replace(
                current,
                location_id=location,
                start=start_dt,
                end=end_dt,
                employee_id=new_employee,
                status=status_value,
            )

            conflicts = self._find_conflicts(updated.time_slot(), exclude_shift_id=current.shift_id)
            if conflicts:
                logger.warning("Update of shift %s overlaps %d existing shift(s)", shift_id, len(conflicts))
                raise ShiftConflictError(conflicts)
            if not self._shifts.save(updated):
                raise NotFoundError(f"Shift {shift_id} not found")

        logger.info("Updated shift %s", shift_id)
        return updated

    def get_shift(self, shift_id: str) -> Shift:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise NotFoundError(f"Shift {shift_id} not found")
        return shift

    def list_shifts(
        self,
        *,
        start: Optional[TimeInput] = None,
        end: Optional[TimeInput] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[Shift]:
        """Shifts lying entirely inside the optional [start, end] window."""
        start_dt = parse_iso_datetime(start, "Start time") if start else None
        end_dt = parse_iso_datetime(end, "End time") if end else None
        return self._shifts.list_range(start=start_dt, end=end_dt, employee_id=_normalize_id(employee_id))

    def delete_shift(self, shift_id: str) -> None:
        with self._write_lock:
            if not self._shifts.delete(shift_id=shift_id):
                raise NotFoundError(f"Shift {shift_id} not found")
        logger.info("Deleted shift %s", shift_id)
