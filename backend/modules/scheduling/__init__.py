"""
Scheduling module.

Professional calendars, the slot booking state machine and meetings.

Public API:
- ISchedulingService: Interface for scheduling operations
- CalendarSlot, Appointment, SlotStatus: Data models
- Scheduling exceptions: SlotUnavailableError, etc.
"""

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
    SlotUnavailableError,
    SlotNotFoundError,
    SlotAlreadyExistsError,
    SlotReservedError,
    InvalidMonthError,
)

__all__ = [
    # Interface
    "ISchedulingService",
    # Models
    "Appointment",
    "CalendarMonth",
    "CalendarSlot",
    "Meeting",
    "ProfessionalSummary",
    "SlotStatus",
    # Exceptions
    "SlotUnavailableError",
    "SlotNotFoundError",
    "SlotAlreadyExistsError",
    "SlotReservedError",
    "InvalidMonthError",
]
