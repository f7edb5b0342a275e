"""
Base repository class for record access.

Provides a common abstraction layer for all repositories, encapsulating
persistence gateway access for one table.
"""

from typing import Any, Generic, Optional, TypeVar

from .gateway import IPersistenceGateway, Row


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for record operations:
    - Gateway access via self._db
    - The table name via self.table
    - Generic type parameter for model type hints

    Subclasses implement domain-specific queries and handle dict-to-Pydantic
    model mapping internally through _map().

    Example:
        class SlotRepository(BaseRepository[CalendarSlot]):
            table = "pro_calendar_slots"

            def _map(self, row: Row) -> CalendarSlot:
                return CalendarSlot(**row)
    """

    table: str = ""

    def __init__(self, db: IPersistenceGateway) -> None:
        """
        Initialize the repository with a persistence gateway.

        Args:
            db: Gateway instance for record operations.
        """
        self._db = db

    def _map(self, row: Row) -> T:
        raise NotImplementedError

    async def find_one(self, **filters: Any) -> Optional[T]:
        """Return the first record matching the filters, or None."""
        row = await self._db.fetch_one(self.table, filters)
        return self._map(row) if row else None

    async def find_all(self, **filters: Any) -> list[T]:
        """Return every record matching the filters."""
        rows = await self._db.fetch_all(self.table, filters)
        return [self._map(row) for row in rows]

    async def create(self, data: dict[str, Any]) -> T:
        """Insert a record and return it."""
        return self._map(await self._db.insert(self.table, data))

    async def update_where(self, filters: dict[str, Any], changes: dict[str, Any]) -> list[T]:
        """Update matching records and return the updated ones."""
        rows = await self._db.update(self.table, filters, changes)
        return [self._map(row) for row in rows]

    async def delete_where(self, **filters: Any) -> list[T]:
        """Delete matching records and return the deleted ones."""
        rows = await self._db.delete(self.table, filters)
        return [self._map(row) for row in rows]
