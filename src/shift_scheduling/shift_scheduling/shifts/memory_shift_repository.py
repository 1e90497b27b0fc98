from __future__ import annotations

import threading
import uuid
from collections import Counter
from dataclasses import replace
from datetime import datetime
from typing import Dict, Optional, Sequence

from ..core.enums import ShiftStatus
from .model import Shift
from .repository import ShiftRepository


class InMemoryShiftRepository(ShiftRepository):
    def __init__(self, shifts: Optional[Sequence[Shift]] = None):
        self._lock = threading.Lock()
        self._by_id: dict[str, Shift] = {s.shift_id: s for s in (shifts or [])}

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        with self._lock:
            return self._by_id.get(shift_id)

    def add(
        self,
        *,
        location_id: str,
        start: datetime,
        end: datetime,
        employee_id: Optional[str],
        status: ShiftStatus,
    ) -> Shift:
        shift = Shift(
            shift_id=uuid.uuid4().hex,
            location_id=location_id,
            start=start,
            end=end,
            employee_id=employee_id,
            status=status,
        )
        with self._lock:
            self._by_id[shift.shift_id] = shift
        return shift

    def save(self, shift: Shift) -> bool:
        with self._lock:
            if shift.shift_id not in self._by_id:
                return False
            self._by_id[shift.shift_id] = shift
            return True

    def delete(self, *, shift_id: str) -> bool:
        with self._lock:
            return self._by_id.pop(shift_id, None) is not None

    def list_range(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[Shift]:
        with self._lock:
            items = list(self._by_id.values())

        if start is not None:
            items = [s for s in items if s.start >= start]
        if end is not None:
            items = [s for s in items if s.end <= end]
        if employee_id is not None:
            items = [s for s in items if s.employee_id == employee_id]

        items.sort(key=lambda s: (s.start, s.shift_id))
        return items

    def list_for_employee(self, employee_id: str, *, start: datetime, end: datetime) -> Sequence[Shift]:
        with self._lock:
            items = [s for s in self._by_id.values() if s.employee_id == employee_id]
        items = [s for s in items if s.start < end and s.end > start]
        items.sort(key=lambda s: (s.start, s.shift_id))
        return items

    def unassign_employee(self, employee_id: str) -> int:
        with self._lock:
            owned = [s for s in self._by_id.values() if s.employee_id == employee_id]
            for s in owned:
                self._by_id[s.shift_id] = replace(s, employee_id=None)
        return len(owned)

    def count_by_location(self) -> Dict[str, int]:
        with self._lock:
            return dict(Counter(s.location_id for s in self._by_id.values()))
