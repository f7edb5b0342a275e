"""
Admin module.

Platform statistics and user administration for admins.
"""

from .interfaces import IAdminService
from .models import PlatformStats
from .exceptions import InvalidRoleError, SelfDeletionError, UserNotFoundError

__all__ = [
    "IAdminService",
    "PlatformStats",
    "InvalidRoleError",
    "SelfDeletionError",
    "UserNotFoundError",
]
