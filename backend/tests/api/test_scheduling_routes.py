"""Tests for scheduling endpoints."""

from datetime import date, timedelta

import pytest

from shared.models import Plan, Role
from tests.conftest import auth_headers_for, make_user

BOOKING = {"pro_id": "pro-1", "date": "2025-03-10", "hour": "10:00"}


@pytest.fixture
def premium_headers():
    return auth_headers_for(make_user("client-1", plan=Plan.PREMIUM))


@pytest.fixture
def pro_headers(pro_user):
    return auth_headers_for(pro_user)


@pytest.fixture
def directory(gateway):
    gateway.seed(
        "users",
        {"id": "pro-1", "name": "Dr. Silva", "email": "s@example.com", "role": "professional", "specialty": "psychology"},
        {"id": "pro-2", "name": "Dr. Rojas", "email": "r@example.com", "role": "professional", "specialty": "nutrition"},
    )
    gateway.seed("pro_calendar_slots", {"id": "slot-1", **BOOKING, "status": "free"})


class TestClientScheduling:
    def test_types(self, client, directory, premium_headers):
        response = client.get("/schedule/types", headers=premium_headers)
        assert response.json() == {"ok": True, "types": ["nutrition", "psychology"]}

    def test_professionals(self, client, directory, premium_headers):
        response = client.get("/schedule/professionals?type=nutrition", headers=premium_headers)
        assert [p["id"] for p in response.json()["professionals"]] == ["pro-2"]

    def test_slots(self, client, directory, premium_headers):
        response = client.get("/schedule/slots?pro_id=pro-1&date=2025-03-10", headers=premium_headers)
        assert [s["id"] for s in response.json()["slots"]] == ["slot-1"]

    def test_slots_rejects_bad_date(self, client, premium_headers):
        response = client.get("/schedule/slots?pro_id=pro-1&date=10/03/2025", headers=premium_headers)
        assert response.status_code == 400

    def test_book_then_conflict(self, client, gateway, directory, premium_headers):
        first = client.post("/schedule/book", json=BOOKING, headers=premium_headers)
        second = client.post(
            "/schedule/book",
            json=BOOKING,
            headers=auth_headers_for(make_user("client-2", plan=Plan.SILVER)),
        )

        assert first.status_code == 200
        assert first.json()["appointment"]["client_id"] == "client-1"
        assert second.status_code == 409
        assert second.json() == {"ok": False, "error": "Slot already reserved"}
        assert len(gateway.rows("appointments")) == 1
        assert gateway.rows("pro_calendar_slots")[0]["status"] == "reserved"

    def test_book_missing_slot(self, client, directory, premium_headers):
        response = client.post("/schedule/book", json={**BOOKING, "hour": "23:00"}, headers=premium_headers)
        assert response.status_code == 409

    def test_book_validates_fields(self, client, premium_headers):
        response = client.post("/schedule/book", json={"pro_id": "pro-1"}, headers=premium_headers)
        assert response.status_code == 400
        assert response.json()["error"] == "Missing or invalid fields"

    def test_meeting(self, client, gateway, directory, premium_headers):
        day = (date.today() + timedelta(days=2)).isoformat()
        gateway.seed("appointments", {"client_id": "client-1", "pro_id": "pro-1", "date": day, "hour": "09:00"})

        response = client.get("/meeting", headers=premium_headers)

        body = response.json()
        assert body["ok"] is True
        assert body["meeting"]["appointment"]["date"] == day
        assert body["meeting"]["professional"]["name"] == "Dr. Silva"

    def test_no_meeting(self, client, premium_headers):
        response = client.get("/meeting", headers=premium_headers)
        assert response.status_code == 200
        assert response.json() == {"ok": False, "error": "You have no meetings"}


class TestProfessionalCalendar:
    def test_slot_crud(self, client, gateway, pro_user, pro_headers):
        created = client.post("/pro/calendar/slot", json={"date": "2025-03-12", "hour": "08:00"}, headers=pro_headers)
        assert created.status_code == 200
        slot_id = created.json()["slot"]["id"]

        duplicate = client.post("/pro/calendar/slot", json={"date": "2025-03-12", "hour": "08:00"}, headers=pro_headers)
        assert duplicate.status_code == 409

        moved = client.put(f"/pro/calendar/slot/{slot_id}", json={"hour": "09:00"}, headers=pro_headers)
        assert moved.json()["slot"]["hour"] == "09:00"

        view = client.get("/pro/calendar?month=3&year=2025", headers=pro_headers).json()
        assert [s["id"] for s in view["slots"]] == [slot_id]
        assert view["reservations"] == []

        deleted = client.delete(f"/pro/calendar/slot/{slot_id}", headers=pro_headers)
        assert deleted.json() == {"ok": True}
        assert gateway.rows("pro_calendar_slots") == []

    def test_invalid_month(self, client, pro_headers):
        response = client.get("/pro/calendar?month=13&year=2025", headers=pro_headers)
        assert response.status_code == 400

    def test_reserved_slot_cannot_be_deleted(self, client, gateway, pro_user, pro_headers):
        gateway.seed("pro_calendar_slots", {"id": "s-r", "pro_id": pro_user.id, "date": "2025-03-10", "hour": "10:00", "status": "reserved"})
        response = client.delete("/pro/calendar/slot/s-r", headers=pro_headers)
        assert response.status_code == 409
