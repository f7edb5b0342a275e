"""
Content repositories for the contents and pro_uploads tables.
"""

from typing import Optional

from shared.gateway import Row
from shared.repository import BaseRepository

from .models import ContentItem, Upload


class ContentRepository(BaseRepository[ContentItem]):
    """Repository for content items."""

    table = "contents"

    def _map(self, row: Row) -> ContentItem:
        return ContentItem(**row)

    async def catalog(self, free_only: bool) -> list[ContentItem]:
        """All content ordered by category and day, optionally only free items."""
        rows = await self._db.fetch_all(
            self.table,
            {"is_free": True} if free_only else None,
            order_by=("category", "day"),
        )
        return [self._map(row) for row in rows]

    async def by_creator(self, user_id: str) -> list[ContentItem]:
        return await self.find_all(created_by=user_id)

    async def get_by_id(self, content_id: str) -> Optional[ContentItem]:
        return await self.find_one(id=content_id)


class UploadRepository(BaseRepository[Upload]):
    """Repository for professional uploads."""

    table = "pro_uploads"

    def _map(self, row: Row) -> Upload:
        return Upload(**row)

    async def owned(self, pro_id: str, upload_id: str) -> Optional[Upload]:
        return await self.find_one(id=upload_id, pro_id=pro_id)
