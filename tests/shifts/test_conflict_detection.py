from datetime import datetime

from shift_scheduling.core.enums import ShiftStatus
from shift_scheduling.shifts.model import Shift, ShiftTimeSlot
from shift_scheduling.shifts.validation import detect_conflicts


def slot(start_h: int, end_h: int, employee_id="emp-1", day: int = 1) -> ShiftTimeSlot:
    return ShiftTimeSlot(
        start=datetime(2026, 3, day, start_h, 0),
        end=datetime(2026, 3, day, end_h, 0),
        employee_id=employee_id,
    )


BASE = slot(9, 17)


def test_no_existing_shifts():
    assert detect_conflicts(BASE, []) == []


def test_candidate_contains_existing():
    existing = [slot(10, 12)]
    assert detect_conflicts(BASE, existing) == existing


def test_existing_contains_candidate():
    assert len(detect_conflicts(slot(10, 12), [BASE])) == 1


def test_partial_overlap_at_start_and_end():
    assert len(detect_conflicts(slot(8, 10), [BASE])) == 1
    assert len(detect_conflicts(slot(16, 20), [BASE])) == 1


def test_exact_match_conflicts():
    assert detect_conflicts(BASE, [slot(9, 17)]) == [slot(9, 17)]


def test_touching_boundaries_do_not_conflict():
    assert detect_conflicts(slot(7, 9), [BASE]) == []
    assert detect_conflicts(slot(17, 20), [BASE]) == []


def test_unassigned_candidate_never_conflicts():
    candidate = slot(9, 17, employee_id=None)
    existing = [slot(9, 17, employee_id=None), slot(10, 11), slot(9, 17, employee_id="emp-2")]

    assert detect_conflicts(candidate, existing) == []


def test_different_employees_never_conflict():
    assert detect_conflicts(BASE, [slot(9, 17, employee_id="emp-2")]) == []


def test_unassigned_existing_shift_is_ignored():
    assert detect_conflicts(BASE, [slot(9, 17, employee_id=None)]) == []


def test_all_conflicts_reported_in_input_order():
    a = slot(15, 18)
    b = slot(5, 7)
    c = slot(8, 10)
    d = slot(12, 13, employee_id="emp-2")
    e = slot(11, 12)

    assert detect_conflicts(BASE, [a, b, c, d, e]) == [a, c, e]


def test_malformed_existing_record_uses_plain_predicate():
    # start after end in stored data: 16:00 -> 10:00
    bad = ShiftTimeSlot(
        start=datetime(2026, 3, 1, 16, 0),
        end=datetime(2026, 3, 1, 10, 0),
        employee_id="emp-1",
    )
    # 9 < 10 and 17 > 16
    assert detect_conflicts(BASE, [bad]) == [bad]
    # 12 < 10 is false
    assert detect_conflicts(slot(12, 13), [bad]) == []


def test_works_on_shift_entities():
    stored = Shift(
        shift_id="s1",
        location_id="loc-1",
        start=datetime(2026, 3, 1, 10, 0),
        end=datetime(2026, 3, 1, 12, 0),
        employee_id="emp-1",
        status=ShiftStatus.PUBLISHED,
    )

    assert detect_conflicts(BASE, [stored]) == [stored]


def test_end_to_end_scenario():
    existing = [slot(10, 12)]

    assert len(detect_conflicts(slot(9, 17), existing)) == 1
    assert len(detect_conflicts(slot(17, 20), existing)) == 0
