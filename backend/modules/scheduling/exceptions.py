"""
Scheduling module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class SlotUnavailableError(ConflictError):
    """
    Raised when a booking targets a slot that does not exist or is taken.

    Both cases share one message so a client cannot discover which slots exist.
    """

    def __init__(self, pro_id: str, date: str, hour: str):
        super().__init__(
            "Slot already reserved",
            code="SLOT_UNAVAILABLE",
            details={"pro_id": pro_id, "date": date, "hour": hour},
        )


class SlotNotFoundError(NotFoundError):
    """Raised when a professional addresses a slot they do not own."""

    def __init__(self, slot_id: str):
        super().__init__(
            "Slot not found",
            code="SLOT_NOT_FOUND",
            details={"slot_id": slot_id},
        )


class SlotAlreadyExistsError(ConflictError):
    """Raised when a professional already offers the same day and hour."""

    def __init__(self, date: str, hour: str):
        super().__init__(
            "A slot already exists at that time",
            code="SLOT_EXISTS",
            details={"date": date, "hour": hour},
        )


class SlotReservedError(ConflictError):
    """Raised when editing or deleting a reserved slot."""

    def __init__(self, slot_id: str):
        super().__init__(
            "Reserved slots cannot be changed",
            code="SLOT_RESERVED",
            details={"slot_id": slot_id},
        )


class InvalidMonthError(ValidationError):
    """Raised for a calendar month outside 1..12."""

    def __init__(self, month: int, year: int):
        super().__init__(
            "Invalid month",
            code="INVALID_MONTH",
            details={"month": month, "year": year},
        )
