"""Shift time policy and conflict detection.

Both functions are pure: they read only their arguments and report problems
as values instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional, Protocol, Sequence, TypeVar

from ..core.constants import MAX_SHIFT_DURATION_HOURS, MIN_SHIFT_DURATION_MINUTES

MIN_SHIFT_DURATION = timedelta(minutes=MIN_SHIFT_DURATION_MINUTES)
MAX_SHIFT_DURATION = timedelta(hours=MAX_SHIFT_DURATION_HOURS)


class TimeSlot(Protocol):
    start: datetime
    end: datetime
    employee_id: Optional[str]


SlotT = TypeVar("SlotT", bound=TimeSlot)


@dataclass(frozen=True)
class ShiftTimesResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


def validate_shift_times(start: datetime, end: datetime) -> ShiftTimesResult:
    """Check a proposed shift against the duration policy.

    Both bounds are inclusive: 30 minutes and 24 hours are valid. Duration
    checks are skipped when the interval is empty or inverted.
    """
    errors: List[str] = []

    if start >= end:
        errors.append("Start time must be before end time")
    else:
        duration = end - start
        if duration < MIN_SHIFT_DURATION:
            errors.append(f"Shift must be at least {MIN_SHIFT_DURATION_MINUTES} minutes long")
        if duration > MAX_SHIFT_DURATION:
            errors.append(f"Shift must not exceed {MAX_SHIFT_DURATION_HOURS} hours")

    return ShiftTimesResult(valid=not errors, errors=errors)


def overlaps(a: TimeSlot, b: TimeSlot) -> bool:
    """Open-interval overlap: shifts that only touch at a boundary don't overlap."""
    return a.start < b.end and a.end > b.start


def detect_conflicts(candidate: TimeSlot, existing: Sequence[SlotT]) -> List[SlotT]:
    """Return the shifts in ``existing`` that clash with ``candidate``.

    Only shifts of the same employee can clash. Unassigned candidates never
    conflict. Input order is preserved and stored records are used as-is,
    even when their own start/end are inverted.
    """
    if candidate.employee_id is None:
        return []

    return [
        e
        for e in existing
        if e.employee_id == candidate.employee_id and overlaps(candidate, e)
    ]
