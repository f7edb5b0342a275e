"""
Repository for the pro_notifications table.
"""

from shared.gateway import Row
from shared.repository import BaseRepository

from .models import ProNotification


class ProNotificationRepository(BaseRepository[ProNotification]):
    table = "pro_notifications"

    def _map(self, row: Row) -> ProNotification:
        return ProNotification(**row)

    async def for_pro(self, pro_id: str, unread_only: bool = False) -> list[ProNotification]:
        """A professional's notifications, newest first."""
        filters = {"pro_id": pro_id}
        if unread_only:
            filters["is_read"] = False
        rows = await self._db.fetch_all(self.table, filters, order_by=("-created_at",))
        return [self._map(row) for row in rows]

    async def set_read(self, pro_id: str, notification_id: str, is_read: bool) -> list[ProNotification]:
        return await self.update_where(
            {"id": notification_id, "pro_id": pro_id},
            {"is_read": is_read},
        )
