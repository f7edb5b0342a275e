"""
Scheduling service implementation.

Implements the slot state machine (free -> reserved) and the calendar
operations around it. The only contended resource is a slot being booked by
several clients at once; the service never holds an in-process lock and
relies on the conditional update in SlotRepository.transition() instead.
"""

import calendar
import logging
from datetime import date as date_type
from typing import Optional

from shared.gateway import DuplicateKeyError, IPersistenceGateway
from shared.models import AuthenticatedUser
from modules.auth.exceptions import PlanNotEligibleError
from modules.auth.repository import UserRepository
from modules.policy import Action, is_permitted

from .interfaces import ISchedulingService
from .models import (
    Appointment,
    CalendarMonth,
    CalendarSlot,
    Meeting,
    ProfessionalSummary,
    SlotStatus,
)
from .exceptions import (
    InvalidMonthError,
    SlotAlreadyExistsError,
    SlotNotFoundError,
    SlotReservedError,
    SlotUnavailableError,
)
from .repository import AppointmentRepository, SlotRepository

logger = logging.getLogger(__name__)


def month_bounds(month: int, year: int) -> tuple[str, str]:
    """First and last ISO day of a month."""
    if not 1 <= month <= 12:
        raise InvalidMonthError(month, year)
    last = calendar.monthrange(year, month)[1]
    return f"{year:04d}-{month:02d}-01", f"{year:04d}-{month:02d}-{last:02d}"


class SchedulingService(ISchedulingService):
    """
    Scheduling service backed by the persistence gateway.

    Booking order:
    1. plan check (no reads or writes when it fails)
    2. slot lookup by (pro_id, date, hour)
    3. conditional claim free -> reserved; losing a race is a conflict
    4. appointment insert; on failure the claim is released again
    """

    def __init__(self, gateway: IPersistenceGateway):
        self._slots = SlotRepository(gateway)
        self._appointments = AppointmentRepository(gateway)
        self._users = UserRepository(gateway)

    # -------------------------------------------------------------------------
    # Client booking
    # -------------------------------------------------------------------------

    async def book_slot(
        self,
        client: AuthenticatedUser,
        pro_id: str,
        date: str,
        hour: str,
    ) -> Appointment:
        """Reserve a free slot for the client."""
        if not is_permitted(client.role, client.plan, Action.BOOK_APPOINTMENT):
            raise PlanNotEligibleError(
                Action.BOOK_APPOINTMENT.value,
                client.plan.value,
                "Your plan does not allow booking appointments",
            )

        slot = await self._slots.find_at(pro_id, date, hour)
        if slot is None or slot.status == SlotStatus.RESERVED:
            raise SlotUnavailableError(pro_id, date, hour)

        claimed = await self._slots.transition(slot.id, SlotStatus.FREE, SlotStatus.RESERVED)
        if claimed is None:
            logger.info("Client %s lost the race for slot %s", client.id, slot.id)
            raise SlotUnavailableError(pro_id, date, hour)

        try:
            appointment = await self._appointments.create({
                "client_id": client.id,
                "pro_id": slot.pro_id,
                "date": slot.date,
                "hour": slot.hour,
            })
        except Exception:
            await self._release(slot)
            raise

        logger.info("Client %s booked slot %s (appointment %s)", client.id, slot.id, appointment.id)
        return appointment

    async def _release(self, slot: CalendarSlot) -> None:
        """Undo a claim whose appointment could not be written."""
        logger.warning("Releasing slot %s after failed appointment insert", slot.id)
        released = await self._slots.transition(slot.id, SlotStatus.RESERVED, SlotStatus.FREE)
        if released is None:
            logger.error("Slot %s could not be released", slot.id)

    # -------------------------------------------------------------------------
    # Client discovery
    # -------------------------------------------------------------------------

    async def list_specialties(self) -> list[str]:
        professionals = await self._users.professionals()
        return sorted({p.specialty for p in professionals if p.specialty})

    async def list_professionals(self, specialty: str) -> list[ProfessionalSummary]:
        professionals = await self._users.professionals(specialty)
        return [
            ProfessionalSummary(id=p.id, name=p.name, specialty=p.specialty)
            for p in professionals
        ]

    async def free_slots(self, pro_id: str, date: str) -> list[CalendarSlot]:
        return await self._slots.free_on(pro_id, date)

    async def next_meeting(self, client: AuthenticatedUser) -> Optional[Meeting]:
        """The client's earliest appointment from today on."""
        if not is_permitted(client.role, client.plan, Action.JOIN_MEETING):
            raise PlanNotEligibleError(Action.JOIN_MEETING.value, client.plan.value)

        upcoming = await self._appointments.for_client(client.id, date_type.today().isoformat())
        if not upcoming:
            return None

        appointment = upcoming[0]
        pro = await self._users.get_by_id(appointment.pro_id)
        professional = (
            ProfessionalSummary(id=pro.id, name=pro.name, specialty=pro.specialty)
            if pro
            else None
        )
        return Meeting(appointment=appointment, professional=professional)

    # -------------------------------------------------------------------------
    # Professional calendar
    # -------------------------------------------------------------------------

    async def month_calendar(self, pro_id: str, month: int, year: int) -> CalendarMonth:
        first_day, last_day = month_bounds(month, year)
        slots = await self._slots.for_pro_between(pro_id, first_day, last_day)
        reservations = await self._appointments.for_pro_between(pro_id, first_day, last_day)
        return CalendarMonth(slots=slots, reservations=reservations)

    async def add_slot(self, pro_id: str, date: str, hour: str) -> CalendarSlot:
        try:
            return await self._slots.create({
                "pro_id": pro_id,
                "date": date,
                "hour": hour,
                "status": SlotStatus.FREE.value,
            })
        except DuplicateKeyError as e:
            raise SlotAlreadyExistsError(date, hour) from e

    async def move_slot(
        self,
        pro_id: str,
        slot_id: str,
        date: Optional[str],
        hour: Optional[str],
    ) -> CalendarSlot:
        slot = await self._owned_slot(pro_id, slot_id)

        changes = {key: value for key, value in (("date", date), ("hour", hour)) if value}
        if not changes:
            return slot

        # Only free slots move; a booking landing in between leaves zero rows
        try:
            updated = await self._slots.update_where(
                {"id": slot.id, "pro_id": pro_id, "status": SlotStatus.FREE.value},
                changes,
            )
        except DuplicateKeyError as e:
            raise SlotAlreadyExistsError(changes.get("date", slot.date), changes.get("hour", slot.hour)) from e
        if not updated:
            raise SlotReservedError(slot.id)
        return updated[0]

    async def delete_slot(self, pro_id: str, slot_id: str) -> None:
        slot = await self._owned_slot(pro_id, slot_id)
        deleted = await self._slots.delete_where(
            id=slot.id,
            pro_id=pro_id,
            status=SlotStatus.FREE.value,
        )
        if not deleted:
            raise SlotReservedError(slot.id)

    async def _owned_slot(self, pro_id: str, slot_id: str) -> CalendarSlot:
        slot = await self._slots.find_one(id=slot_id, pro_id=pro_id)
        if slot is None:
            raise SlotNotFoundError(slot_id)
        if slot.status == SlotStatus.RESERVED:
            raise SlotReservedError(slot.id)
        return slot
