"""
Admin module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidRoleError(ValidationError):
    """Raised when assigning a role that does not exist."""

    def __init__(self, role: str):
        super().__init__(
            "Invalid role",
            code="INVALID_ROLE",
            details={"role": role},
        )


class SelfDeletionError(ValidationError):
    """Raised when an admin tries to delete their own account."""

    def __init__(self, user_id: str):
        super().__init__(
            "You cannot delete your own account",
            code="SELF_DELETION",
            details={"user_id": user_id},
        )
