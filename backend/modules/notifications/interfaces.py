"""
Notification module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Notice, ProNotification


@runtime_checkable
class INotificationService(Protocol):
    """Interface for client notices and professional notifications."""

    def client_notices(self, user: AuthenticatedUser) -> list[Notice]:
        """
        Notices for a client.

        A greeting and a reminder for everyone, plus one notice that depends
        on the plan carried by the session.
        """
        ...

    async def pro_notifications(self, pro_id: str, unread_only: bool = False) -> list[ProNotification]:
        """A professional's notifications, newest first."""
        ...

    async def mark_read(self, pro_id: str, notification_id: str) -> None:
        """
        Raises:
            NotificationNotFoundError: If the notification is not the caller's
        """
        ...

    async def mark_unread(self, pro_id: str, notification_id: str) -> None:
        ...
