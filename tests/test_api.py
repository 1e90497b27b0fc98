from __future__ import annotations

import pytest

from shift_scheduling.container import build_container
from shift_scheduling.main import create_app


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


@pytest.fixture
def location_id(client):
    return client.post("/api/locations", json={"name": "Main Street"}).get_json()["id"]


@pytest.fixture
def employee_id(client):
    resp = client.post("/api/employees", json={"name": "Ana", "email": "ana@example.com", "max_hours_per_week": 40})
    return resp.get_json()["id"]


@pytest.fixture
def create_shift(client, location_id, employee_id):
    def _create(start, end, employee=None):
        return client.post(
            "/api/shifts",
            json={"location_id": location_id, "start": start, "end": end, "employee_id": employee or employee_id},
        )

    return _create


def test_create_and_fetch_shift(client, create_shift):
    resp = create_shift("2026-03-01T09:00", "2026-03-01T17:00")

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["start"] == "2026-03-01T09:00:00"
    assert body["status"] == "DRAFT"

    fetched = client.get(f"/api/shifts/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json() == body


def test_create_invalid_shift_returns_400(create_shift):
    resp = create_shift("2026-03-01T09:00", "2026-03-01T09:10")

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Shift must be at least 30 minutes long"]


def test_timezone_offsets_are_rejected_and_never_stored(client, create_shift):
    resp = create_shift("2026-03-01T09:00+00:00", "2026-03-01T17:00")

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Start time must not include a timezone offset"]

    # Later naive requests keep working
    assert create_shift("2026-03-01T09:00", "2026-03-01T17:00").status_code == 201
    assert client.get("/api/shifts?start=2026-03-01T00:00").status_code == 200
    offset_filter = client.get("/api/shifts", query_string={"start": "2026-03-01T00:00+02:00"})
    assert offset_filter.status_code == 400
    assert offset_filter.get_json()["errors"] == ["Start time must not include a timezone offset"]


def test_overlapping_shift_returns_409_with_conflicts(create_shift):
    first = create_shift("2026-03-01T10:00", "2026-03-01T12:00").get_json()

    resp = create_shift("2026-03-01T09:00", "2026-03-01T17:00")

    assert resp.status_code == 409
    assert [c["id"] for c in resp.get_json()["conflicts"]] == [first["id"]]


def test_unknown_employee_or_location_returns_400(client, location_id):
    resp = client.post(
        "/api/shifts",
        json={"location_id": location_id, "start": "2026-03-01T09:00", "end": "2026-03-01T17:00", "employee_id": "ghost"},
    )
    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Employee not found"]

    resp = client.post(
        "/api/shifts",
        json={"location_id": "nowhere", "start": "2026-03-01T09:00", "end": "2026-03-01T17:00"},
    )
    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Location not found"]


def test_deleting_employee_unassigns_their_shifts(client, create_shift, employee_id):
    shift = create_shift("2026-03-01T09:00", "2026-03-01T17:00").get_json()

    assert client.delete(f"/api/employees/{employee_id}").status_code == 204

    assert client.get(f"/api/shifts/{shift['id']}").get_json()["employee_id"] is None


def test_validate_endpoint_does_not_persist(client, container, create_shift, employee_id):
    create_shift("2026-03-01T10:00", "2026-03-01T12:00")

    resp = client.post(
        "/api/shifts/validate",
        json={"start": "2026-03-01T12:00", "end": "2026-03-01T20:00", "employee_id": employee_id},
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"valid": True, "errors": [], "conflicts": []}
    assert len(container.shifts_repo.list_range()) == 1


def test_update_and_delete_shift(client, create_shift):
    created = create_shift("2026-03-01T10:00", "2026-03-01T12:00").get_json()

    updated = client.put(f"/api/shifts/{created['id']}", json={"end": "2026-03-01T14:00", "employee_id": None})
    assert updated.status_code == 200
    assert updated.get_json()["employee_id"] is None

    assert client.delete(f"/api/shifts/{created['id']}").status_code == 204
    assert client.get(f"/api/shifts/{created['id']}").status_code == 404


def test_list_shifts_rejects_bad_filter(client):
    resp = client.get("/api/shifts?start=yesterday")

    assert resp.status_code == 400


def test_skills_validate_accepts_string_or_list(client):
    from_string = client.post("/api/skills/validate", json={"skills": "React, Node,,"}).get_json()
    from_list = client.post("/api/skills/validate", json={"skills": ["React", "REACT"]}).get_json()

    assert from_string == {"valid": True, "errors": [], "normalized": ["REACT", "NODE"]}
    assert from_list["valid"] is False
    assert from_list["normalized"] == ["REACT"]


def test_skills_validate_rejects_other_types(client):
    resp = client.post("/api/skills/validate", json={"skills": 42})

    assert resp.status_code == 400


def test_employee_skills_update(client, employee_id):
    resp = client.put(f"/api/employees/{employee_id}", json={"skills": "barista, Barista"})
    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ['Duplicate skill: "BARISTA"']

    resp = client.put(f"/api/employees/{employee_id}", json={"skills": "barista, cashier"})
    assert resp.status_code == 200
    assert resp.get_json()["skills"] == ["BARISTA", "CASHIER"]

    listed = client.get("/api/employees").get_json()
    assert [e["id"] for e in listed] == [employee_id]


def test_employee_skills_with_non_string_items_return_400(client):
    resp = client.post(
        "/api/employees",
        json={"name": "Bob", "email": "bob@example.com", "max_hours_per_week": 20, "skills": [1, "x"]},
    )

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Skills must be a comma separated string or a list of strings"]


def test_employee_search(client, employee_id):
    client.post("/api/employees", json={"name": "Bob", "email": "bob@example.com", "max_hours_per_week": 20})

    found = client.get("/api/employees?query=ANA").get_json()

    assert [e["id"] for e in found] == [employee_id]


def test_unknown_employee_returns_404(client):
    assert client.get("/api/employees/missing").status_code == 404
    assert client.delete("/api/employees/missing").status_code == 404


def test_locations_and_dashboard(client, create_shift, location_id):
    create_shift("2026-03-01T09:00", "2026-03-01T17:00")

    assert client.post("/api/locations", json={"name": "X"}).status_code == 400

    listed = client.get("/api/locations").get_json()
    assert listed == [{"id": location_id, "name": "Main Street", "address": None, "shift_count": 1}]

    assert client.delete(f"/api/locations/{location_id}").status_code == 400

    stats = client.get("/api/dashboard/stats").get_json()
    assert stats == {"employee_count": 1, "location_count": 1, "shift_count": 1}
