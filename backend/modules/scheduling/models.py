"""
Scheduling module data models.

Calendar slots, appointments and the request/response shapes of the
booking and professional calendar endpoints.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
HOUR_PATTERN = r"^\d{2}:\d{2}$"


class SlotStatus(str, Enum):
    """
    Slot lifecycle.

    FREE -> RESERVED is the only transition; RESERVED is terminal.
    """

    FREE = "free"
    RESERVED = "reserved"


class CalendarSlot(BaseModel):
    """A professional's offered appointment time."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., description="Slot ID")
    pro_id: str = Field(..., description="Owning professional")
    date: str = Field(..., description="Day (YYYY-MM-DD)")
    hour: str = Field(..., description="Start time (HH:MM)")
    status: SlotStatus = Field(default=SlotStatus.FREE, description="Slot status")


class Appointment(BaseModel):
    """
    A booked appointment.

    There is no foreign key to the slot; the slot is the one with the same
    (pro_id, date, hour).
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(..., description="Appointment ID")
    client_id: str = Field(..., description="Booking client")
    pro_id: str = Field(..., description="Professional")
    date: str = Field(..., description="Day (YYYY-MM-DD)")
    hour: str = Field(..., description="Start time (HH:MM)")


class ProfessionalSummary(BaseModel):
    """Professional as listed to clients."""

    id: str
    name: str
    specialty: Optional[str] = None


class Meeting(BaseModel):
    """The caller's next appointment with the professional's details."""

    appointment: Appointment
    professional: Optional[ProfessionalSummary] = None


class BookingRequest(BaseModel):
    """Slot a client wants to book."""

    pro_id: str = Field(..., min_length=1, description="Professional ID")
    date: str = Field(..., pattern=DATE_PATTERN, description="Day (YYYY-MM-DD)")
    hour: str = Field(..., pattern=HOUR_PATTERN, description="Start time (HH:MM)")


class SlotCreateRequest(BaseModel):
    """New free slot for the calling professional."""

    date: str = Field(..., pattern=DATE_PATTERN)
    hour: str = Field(..., pattern=HOUR_PATTERN)


class SlotUpdateRequest(BaseModel):
    """Move a free slot to another day or hour."""

    date: Optional[str] = Field(None, pattern=DATE_PATTERN)
    hour: Optional[str] = Field(None, pattern=HOUR_PATTERN)


class CalendarMonth(BaseModel):
    """A professional's slots and appointments for one month."""

    slots: list[CalendarSlot] = Field(default_factory=list)
    reservations: list[Appointment] = Field(default_factory=list)


# Response envelopes


class BookingResult(BaseModel):
    ok: bool = True
    appointment: Appointment


class SlotResult(BaseModel):
    ok: bool = True
    slot: CalendarSlot


class SlotListResult(BaseModel):
    ok: bool = True
    slots: list[CalendarSlot]


class CalendarResult(BaseModel):
    ok: bool = True
    slots: list[CalendarSlot]
    reservations: list[Appointment]


class SpecialtiesResult(BaseModel):
    ok: bool = True
    types: list[str]


class ProfessionalsResult(BaseModel):
    ok: bool = True
    professionals: list[ProfessionalSummary]


class MeetingResult(BaseModel):
    ok: bool = True
    meeting: Optional[Meeting] = None
    error: Optional[str] = None


class DeletedResult(BaseModel):
    ok: bool = True
