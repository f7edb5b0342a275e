"""
Notifications module.

Client notices derived from the session, and stored notifications for
professionals with read/unread state.
"""

from .interfaces import INotificationService
from .models import Notice, ProNotification
from .exceptions import NotificationNotFoundError

__all__ = [
    "INotificationService",
    "Notice",
    "ProNotification",
    "NotificationNotFoundError",
]
