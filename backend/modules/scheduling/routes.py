"""
Scheduling API endpoints.

Client side: discover professionals, list free slots, book, see the next
meeting. Professional side: month calendar and slot CRUD.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user, require_action, require_roles
from api.dependencies import get_scheduling_service
from shared.models import AuthenticatedUser, Role
from modules.policy import Action

from .interfaces import ISchedulingService
from .models import (
    BookingRequest,
    BookingResult,
    CalendarResult,
    DeletedResult,
    MeetingResult,
    ProfessionalsResult,
    SlotCreateRequest,
    SlotListResult,
    SlotResult,
    SlotUpdateRequest,
    SpecialtiesResult,
    DATE_PATTERN,
)

router = APIRouter()

require_professional = require_roles(Role.PROFESSIONAL)


# -------------------------------------------------------------------------
# Client scheduling
# -------------------------------------------------------------------------


@router.get("/schedule/types", response_model=SpecialtiesResult)
async def schedule_types(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> SpecialtiesResult:
    """Specialties offered by professionals."""
    return SpecialtiesResult(types=await service.list_specialties())


@router.get("/schedule/professionals", response_model=ProfessionalsResult)
async def schedule_professionals(
    type: str = Query(..., min_length=1, description="Specialty"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> ProfessionalsResult:
    """Professionals with one specialty."""
    return ProfessionalsResult(professionals=await service.list_professionals(type))


@router.get("/schedule/slots", response_model=SlotListResult)
async def schedule_slots(
    pro_id: str = Query(..., min_length=1),
    date: str = Query(..., pattern=DATE_PATTERN),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> SlotListResult:
    """Free slots of a professional on one day."""
    return SlotListResult(slots=await service.free_slots(pro_id, date))


@router.post("/schedule/book", response_model=BookingResult)
async def schedule_book(
    request: BookingRequest,
    user: AuthenticatedUser = Depends(require_action(Action.BOOK_APPOINTMENT)),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> BookingResult:
    """
    Book a slot.

    Answers 409 when the slot does not exist, is already reserved, or was
    taken by a concurrent booking.
    """
    appointment = await service.book_slot(user, request.pro_id, request.date, request.hour)
    return BookingResult(appointment=appointment)


@router.get("/meeting", response_model=MeetingResult, response_model_exclude_none=True)
async def meeting(
    user: AuthenticatedUser = Depends(require_action(Action.JOIN_MEETING)),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> MeetingResult:
    """The caller's next appointment with the professional's details."""
    upcoming = await service.next_meeting(user)
    if upcoming is None:
        return MeetingResult(ok=False, error="You have no meetings")
    return MeetingResult(meeting=upcoming)


# -------------------------------------------------------------------------
# Professional calendar
# -------------------------------------------------------------------------


@router.get("/pro/calendar", response_model=CalendarResult)
async def pro_calendar(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(..., ge=1970, le=9999),
    user: AuthenticatedUser = Depends(require_professional),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> CalendarResult:
    """The caller's slots and appointments for one month."""
    view = await service.month_calendar(user.id, month, year)
    return CalendarResult(slots=view.slots, reservations=view.reservations)


@router.post("/pro/calendar/slot", response_model=SlotResult)
async def pro_calendar_add_slot(
    request: SlotCreateRequest,
    user: AuthenticatedUser = Depends(require_professional),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> SlotResult:
    """Offer a new free slot."""
    return SlotResult(slot=await service.add_slot(user.id, request.date, request.hour))


@router.put("/pro/calendar/slot/{slot_id}", response_model=SlotResult)
async def pro_calendar_update_slot(
    slot_id: str,
    request: SlotUpdateRequest,
    user: AuthenticatedUser = Depends(require_professional),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> SlotResult:
    """Move a free slot to another day or hour."""
    slot = await service.move_slot(user.id, slot_id, request.date, request.hour)
    return SlotResult(slot=slot)


@router.delete("/pro/calendar/slot/{slot_id}", response_model=DeletedResult)
async def pro_calendar_delete_slot(
    slot_id: str,
    user: AuthenticatedUser = Depends(require_professional),
    service: ISchedulingService = Depends(get_scheduling_service),
) -> DeletedResult:
    """Withdraw a free slot."""
    await service.delete_slot(user.id, slot_id)
    return DeletedResult()
