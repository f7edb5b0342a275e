"""
User repository.

Encapsulates access to the users table. Used by the auth module for
registration and login and by the admin and scheduling modules for lookups.
"""

from typing import Any, Optional

from shared.gateway import Row
from shared.models import Role
from shared.repository import BaseRepository

from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user records.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for that.
    """

    table = "users"

    def _map(self, row: Row) -> UserRecord:
        return UserRecord(**row)

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        return await self.find_one(email=email)

    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        return await self.find_one(id=user_id)

    async def set_fields(self, user_id: str, **changes: Any) -> Optional[UserRecord]:
        """Update one user and return the stored row, or None if absent."""
        updated = await self.update_where({"id": user_id}, changes)
        return updated[0] if updated else None

    async def professionals(self, specialty: Optional[str] = None) -> list[UserRecord]:
        filters: dict[str, Any] = {"role": Role.PROFESSIONAL.value}
        if specialty is not None:
            filters["specialty"] = specialty
        return await self.find_all(**filters)
