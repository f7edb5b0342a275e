"""
Scheduling repositories.

Encapsulates gateway access for the pro_calendar_slots and appointments
tables.
"""

from typing import Optional

from shared.gateway import Row
from shared.repository import BaseRepository

from .models import Appointment, CalendarSlot, SlotStatus


class SlotRepository(BaseRepository[CalendarSlot]):
    """Repository for calendar slots."""

    table = "pro_calendar_slots"

    def _map(self, row: Row) -> CalendarSlot:
        return CalendarSlot(**row)

    async def find_at(self, pro_id: str, date: str, hour: str) -> Optional[CalendarSlot]:
        return await self.find_one(pro_id=pro_id, date=date, hour=hour)

    async def transition(
        self,
        slot_id: str,
        expected: SlotStatus,
        new: SlotStatus,
    ) -> Optional[CalendarSlot]:
        """
        Move a slot from one status to another if it is still in `expected`.

        The status check and the write are one conditional update, so of
        several concurrent callers at most one sees the slot returned; the
        others get None.
        """
        updated = await self.update_where(
            {"id": slot_id, "status": expected.value},
            {"status": new.value},
        )
        return updated[0] if updated else None

    async def for_pro_between(self, pro_id: str, first_day: str, last_day: str) -> list[CalendarSlot]:
        rows = await self._db.fetch_all(
            self.table,
            {"pro_id": pro_id},
            gte={"date": first_day},
            lte={"date": last_day},
            order_by=("date", "hour"),
        )
        return [self._map(row) for row in rows]

    async def free_on(self, pro_id: str, date: str) -> list[CalendarSlot]:
        rows = await self._db.fetch_all(
            self.table,
            {"pro_id": pro_id, "date": date, "status": SlotStatus.FREE.value},
            order_by=("hour",),
        )
        return [self._map(row) for row in rows]


class AppointmentRepository(BaseRepository[Appointment]):
    """Repository for appointments."""

    table = "appointments"

    def _map(self, row: Row) -> Appointment:
        return Appointment(**row)

    async def for_pro_between(self, pro_id: str, first_day: str, last_day: str) -> list[Appointment]:
        rows = await self._db.fetch_all(
            self.table,
            {"pro_id": pro_id},
            gte={"date": first_day},
            lte={"date": last_day},
            order_by=("date", "hour"),
        )
        return [self._map(row) for row in rows]

    async def for_client(self, client_id: str, from_day: Optional[str] = None) -> list[Appointment]:
        rows = await self._db.fetch_all(
            self.table,
            {"client_id": client_id},
            gte={"date": from_day} if from_day else None,
            order_by=("date", "hour"),
        )
        return [self._map(row) for row in rows]
