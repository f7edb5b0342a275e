"""Tests for discovery, meetings and the professional calendar."""

from datetime import date, timedelta

import pytest

from shared.models import Plan, Role
from modules.auth.exceptions import PlanNotEligibleError
from modules.scheduling.interfaces import ISchedulingService
from modules.scheduling.service import SchedulingService, month_bounds
from modules.scheduling.exceptions import (
    InvalidMonthError,
    SlotAlreadyExistsError,
    SlotNotFoundError,
    SlotReservedError,
)

SLOTS = "pro_calendar_slots"
APPOINTMENTS = "appointments"


@pytest.fixture
def service(gateway) -> SchedulingService:
    return SchedulingService(gateway)


@pytest.fixture
def professionals(gateway):
    return gateway.seed(
        "users",
        {"id": "pro-1", "name": "Dr. Silva", "email": "s@example.com", "role": "professional", "specialty": "psychology"},
        {"id": "pro-2", "name": "Dr. Rojas", "email": "r@example.com", "role": "professional", "specialty": "nutrition"},
        {"id": "pro-3", "name": "Dr. Vega", "email": "v@example.com", "role": "professional", "specialty": "psychology"},
        {"id": "c-1", "name": "Ana", "email": "a@example.com", "role": "client", "specialty": "ignored"},
    )


class TestMonthBounds:
    @pytest.mark.parametrize("month,year,expected", [
        (1, 2025, ("2025-01-01", "2025-01-31")),
        (2, 2024, ("2024-02-01", "2024-02-29")),
        (2, 2025, ("2025-02-01", "2025-02-28")),
        (4, 2025, ("2025-04-01", "2025-04-30")),
    ])
    def test_bounds(self, month, year, expected):
        assert month_bounds(month, year) == expected

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(InvalidMonthError):
            month_bounds(month, 2025)


class TestDiscovery:
    def test_implements_interface(self, service):
        assert isinstance(service, ISchedulingService)

    @pytest.mark.asyncio
    async def test_specialties_are_distinct_and_sorted(self, service, professionals):
        assert await service.list_specialties() == ["nutrition", "psychology"]

    @pytest.mark.asyncio
    async def test_professionals_by_specialty(self, service, professionals):
        found = await service.list_professionals("psychology")
        assert [p.id for p in found] == ["pro-1", "pro-3"]

    @pytest.mark.asyncio
    async def test_free_slots_only(self, service, gateway):
        gateway.seed(
            SLOTS,
            {"pro_id": "pro-1", "date": "2025-03-10", "hour": "11:00", "status": "free"},
            {"pro_id": "pro-1", "date": "2025-03-10", "hour": "09:00", "status": "free"},
            {"pro_id": "pro-1", "date": "2025-03-10", "hour": "10:00", "status": "reserved"},
            {"pro_id": "pro-1", "date": "2025-03-11", "hour": "09:00", "status": "free"},
        )
        slots = await service.free_slots("pro-1", "2025-03-10")
        assert [slot.hour for slot in slots] == ["09:00", "11:00"]


class TestNextMeeting:
    @pytest.mark.asyncio
    async def test_returns_earliest_upcoming_with_professional(self, service, gateway, professionals, client_user):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        next_week = (date.today() + timedelta(days=7)).isoformat()
        last_week = (date.today() - timedelta(days=7)).isoformat()
        gateway.seed(
            APPOINTMENTS,
            {"client_id": client_user.id, "pro_id": "pro-2", "date": next_week, "hour": "09:00"},
            {"client_id": client_user.id, "pro_id": "pro-1", "date": tomorrow, "hour": "15:00"},
            {"client_id": client_user.id, "pro_id": "pro-3", "date": last_week, "hour": "08:00"},
            {"client_id": "someone-else", "pro_id": "pro-3", "date": tomorrow, "hour": "08:00"},
        )

        meeting = await service.next_meeting(client_user)

        assert meeting.appointment.date == tomorrow
        assert meeting.professional.name == "Dr. Silva"
        assert meeting.professional.specialty == "psychology"

    @pytest.mark.asyncio
    async def test_no_meetings(self, service, client_user):
        assert await service.next_meeting(client_user) is None

    @pytest.mark.asyncio
    async def test_free_plan_is_rejected(self, service, gateway, free_user):
        with pytest.raises(PlanNotEligibleError):
            await service.next_meeting(free_user)
        assert gateway.calls == []


class TestProfessionalCalendar:
    @pytest.mark.asyncio
    async def test_month_view(self, service, gateway, pro_user):
        gateway.seed(
            SLOTS,
            {"pro_id": pro_user.id, "date": "2025-03-01", "hour": "09:00", "status": "free"},
            {"pro_id": pro_user.id, "date": "2025-03-31", "hour": "18:00", "status": "reserved"},
            {"pro_id": pro_user.id, "date": "2025-04-01", "hour": "09:00", "status": "free"},
            {"pro_id": "pro-other", "date": "2025-03-05", "hour": "09:00", "status": "free"},
        )
        gateway.seed(
            APPOINTMENTS,
            {"client_id": "c-1", "pro_id": pro_user.id, "date": "2025-03-31", "hour": "18:00"},
            {"client_id": "c-1", "pro_id": pro_user.id, "date": "2025-02-28", "hour": "18:00"},
        )

        month = await service.month_calendar(pro_user.id, 3, 2025)

        assert [(s.date, s.hour) for s in month.slots] == [("2025-03-01", "09:00"), ("2025-03-31", "18:00")]
        assert [(a.date, a.hour) for a in month.reservations] == [("2025-03-31", "18:00")]

    @pytest.mark.asyncio
    async def test_add_slot(self, service, gateway, pro_user):
        slot = await service.add_slot(pro_user.id, "2025-03-10", "10:00")
        assert slot.status.value == "free"
        assert gateway.rows(SLOTS)[0]["pro_id"] == pro_user.id

    @pytest.mark.asyncio
    async def test_add_duplicate_slot(self, service, pro_user):
        await service.add_slot(pro_user.id, "2025-03-10", "10:00")
        with pytest.raises(SlotAlreadyExistsError) as exc_info:
            await service.add_slot(pro_user.id, "2025-03-10", "10:00")
        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_move_free_slot(self, service, pro_user):
        slot = await service.add_slot(pro_user.id, "2025-03-10", "10:00")
        moved = await service.move_slot(pro_user.id, slot.id, None, "11:30")
        assert (moved.date, moved.hour) == ("2025-03-10", "11:30")

    @pytest.mark.asyncio
    async def test_move_onto_existing_slot(self, service, pro_user):
        slot = await service.add_slot(pro_user.id, "2025-03-10", "10:00")
        await service.add_slot(pro_user.id, "2025-03-10", "11:00")
        with pytest.raises(SlotAlreadyExistsError):
            await service.move_slot(pro_user.id, slot.id, None, "11:00")

    @pytest.mark.asyncio
    async def test_reserved_slot_cannot_change(self, service, gateway, pro_user):
        [slot] = gateway.seed(SLOTS, {"pro_id": pro_user.id, "date": "2025-03-10", "hour": "10:00", "status": "reserved"})

        with pytest.raises(SlotReservedError):
            await service.move_slot(pro_user.id, slot["id"], "2025-03-11", None)
        with pytest.raises(SlotReservedError):
            await service.delete_slot(pro_user.id, slot["id"])
        assert len(gateway.rows(SLOTS)) == 1

    @pytest.mark.asyncio
    async def test_other_professionals_slot_is_not_found(self, service, gateway, pro_user):
        [slot] = gateway.seed(SLOTS, {"pro_id": "pro-other", "date": "2025-03-10", "hour": "10:00", "status": "free"})

        with pytest.raises(SlotNotFoundError):
            await service.delete_slot(pro_user.id, slot["id"])
        assert len(gateway.rows(SLOTS)) == 1

    @pytest.mark.asyncio
    async def test_delete_free_slot(self, service, gateway, pro_user):
        slot = await service.add_slot(pro_user.id, "2025-03-10", "10:00")
        await service.delete_slot(pro_user.id, slot.id)
        assert gateway.rows(SLOTS) == []
