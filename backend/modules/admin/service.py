"""
Admin service implementation.
"""

import logging
from collections import Counter

from shared.gateway import IPersistenceGateway
from shared.models import AuthenticatedUser, Role
from modules.auth.models import PublicUser
from modules.auth.repository import UserRepository

from .interfaces import IAdminService
from .models import PlatformStats
from .exceptions import InvalidRoleError, SelfDeletionError, UserNotFoundError

logger = logging.getLogger(__name__)


class AdminService(IAdminService):
    def __init__(self, gateway: IPersistenceGateway):
        self._db = gateway
        self._users = UserRepository(gateway)

    async def stats(self) -> PlatformStats:
        users = await self._db.fetch_all("users", columns="id, role, plan")
        contents = await self._db.fetch_all("contents", columns="id")
        appointments = await self._db.fetch_all("appointments", columns="id")

        return PlatformStats(
            users=len(users),
            users_by_role=dict(Counter(str(row.get("role")) for row in users)),
            users_by_plan=dict(Counter(str(row.get("plan")) for row in users)),
            content=len(contents),
            appointments=len(appointments),
        )

    async def list_users(self) -> list[PublicUser]:
        return [user.public() for user in await self._users.find_all()]

    async def update_role(self, user_id: str, role: str) -> PublicUser:
        try:
            new_role = Role((role or "").strip().lower())
        except ValueError:
            raise InvalidRoleError(role)

        user = await self._users.set_fields(user_id, role=new_role.value)
        if user is None:
            raise UserNotFoundError(user_id)

        logger.info("User %s is now %s", user_id, new_role.value)
        return user.public()

    async def delete_user(self, admin: AuthenticatedUser, user_id: str) -> None:
        if user_id == admin.id:
            raise SelfDeletionError(user_id)

        deleted = await self._users.delete_where(id=user_id)
        if not deleted:
            raise UserNotFoundError(user_id)
        logger.info("Admin %s deleted user %s", admin.id, user_id)
