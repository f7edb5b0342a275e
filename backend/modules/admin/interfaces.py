"""
Admin module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from modules.auth.models import PublicUser

from .models import PlatformStats


@runtime_checkable
class IAdminService(Protocol):
    """Interface for platform administration."""

    async def stats(self) -> PlatformStats:
        """User counts by role and plan, content and appointment counts."""
        ...

    async def list_users(self) -> list[PublicUser]:
        ...

    async def update_role(self, user_id: str, role: str) -> PublicUser:
        """
        Change a user's role.

        The user's existing credentials keep the old role until they expire.

        Raises:
            InvalidRoleError: If role is not a known role
            UserNotFoundError: If the user does not exist
        """
        ...

    async def delete_user(self, admin: AuthenticatedUser, user_id: str) -> None:
        """
        Raises:
            SelfDeletionError: If the admin targets their own account
            UserNotFoundError: If the user does not exist
        """
        ...
