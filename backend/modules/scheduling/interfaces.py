"""
Scheduling module interface.

Client booking, the professional calendar and the meeting lookup.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    Appointment,
    CalendarMonth,
    CalendarSlot,
    Meeting,
    ProfessionalSummary,
)


@runtime_checkable
class ISchedulingService(Protocol):
    """Interface for scheduling operations."""

    async def book_slot(
        self,
        client: AuthenticatedUser,
        pro_id: str,
        date: str,
        hour: str,
    ) -> Appointment:
        """
        Reserve a free slot for the client.

        Returns:
            The created appointment

        Raises:
            PlanNotEligibleError: If the client's plan does not allow booking
            SlotUnavailableError: If the slot does not exist, is reserved, or
                was taken by a concurrent booking
        """
        ...

    async def list_specialties(self) -> list[str]:
        """Distinct specialties offered by professionals."""
        ...

    async def list_professionals(self, specialty: str) -> list[ProfessionalSummary]:
        """Professionals with the given specialty."""
        ...

    async def free_slots(self, pro_id: str, date: str) -> list[CalendarSlot]:
        """Free slots of a professional on one day."""
        ...

    async def next_meeting(self, client: AuthenticatedUser) -> Optional[Meeting]:
        """
        The client's next appointment with professional details.

        Raises:
            PlanNotEligibleError: If the client's plan does not include meetings
        """
        ...

    async def month_calendar(self, pro_id: str, month: int, year: int) -> CalendarMonth:
        """A professional's slots and appointments for one month."""
        ...

    async def add_slot(self, pro_id: str, date: str, hour: str) -> CalendarSlot:
        """Offer a new free slot."""
        ...

    async def move_slot(
        self,
        pro_id: str,
        slot_id: str,
        date: Optional[str],
        hour: Optional[str],
    ) -> CalendarSlot:
        """Move one of the professional's free slots."""
        ...

    async def delete_slot(self, pro_id: str, slot_id: str) -> None:
        """Withdraw one of the professional's free slots."""
        ...
