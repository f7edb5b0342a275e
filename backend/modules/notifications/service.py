"""
Notification service implementation.
"""

import logging

from shared.gateway import IPersistenceGateway
from shared.models import AuthenticatedUser, Plan

from .interfaces import INotificationService
from .models import Notice, ProNotification
from .exceptions import NotificationNotFoundError
from .repository import ProNotificationRepository

logger = logging.getLogger(__name__)

PLAN_NOTICES: dict[Plan, str] = {
    Plan.SILVER: "You have access to more premium content",
    Plan.PREMIUM: "Full access to all content",
}


class NotificationService(INotificationService):
    def __init__(self, gateway: IPersistenceGateway):
        self._notifications = ProNotificationRepository(gateway)

    def client_notices(self, user: AuthenticatedUser) -> list[Notice]:
        notices = [
            Notice(msg=f"Hello {user.name}"),
            Notice(msg="Check your available content"),
        ]
        plan_notice = PLAN_NOTICES.get(user.plan)
        if plan_notice:
            notices.append(Notice(msg=plan_notice))
        return notices

    async def pro_notifications(self, pro_id: str, unread_only: bool = False) -> list[ProNotification]:
        return await self._notifications.for_pro(pro_id, unread_only)

    async def mark_read(self, pro_id: str, notification_id: str) -> None:
        await self._mark(pro_id, notification_id, True)

    async def mark_unread(self, pro_id: str, notification_id: str) -> None:
        await self._mark(pro_id, notification_id, False)

    async def _mark(self, pro_id: str, notification_id: str, is_read: bool) -> None:
        updated = await self._notifications.set_read(pro_id, notification_id, is_read)
        if not updated:
            raise NotificationNotFoundError(notification_id)
        logger.debug("Notification %s marked is_read=%s", notification_id, is_read)
