"""Example: using the service layer directly (without Flask).

Controllers are a thin layer; the scheduling rules live in the services and
the pure validation modules.
"""

from shift_scheduling.container import build_container
from shift_scheduling.core.exceptions import ShiftConflictError


def main():
    container = build_container()
    store = container.location_service.create_location(name="Store 1", address="1 Main St")
    ana = container.employee_service.create_employee(
        name="Ana", email="ana@example.com", max_hours_per_week=40, skills="barista, cashier"
    )
    shifts = container.shift_service

    shifts.create_shift(location_id=store.location_id, start="2026-03-01T10:00", end="2026-03-01T12:00", employee_id=ana.employee_id)

    try:
        shifts.create_shift(
            location_id=store.location_id, start="2026-03-01T09:00", end="2026-03-01T17:00", employee_id=ana.employee_id
        )
    except ShiftConflictError as e:
        print(f"Rejected: {e} -> {[c.to_dict() for c in e.conflicts]}")

    back_to_back = shifts.create_shift(
        location_id=store.location_id, start="2026-03-01T12:00", end="2026-03-01T20:00", employee_id=ana.employee_id
    )
    print(f"Created: {back_to_back.to_dict()}")
    print(f"Dashboard: {container.dashboard_service.stats().to_dict()}")


if __name__ == "__main__":
    main()
