"""
Persistence gateway.

Every module reads and writes records through IPersistenceGateway, a small
capability interface over a table-oriented store. Filters are exact-equality
and AND-combined; the only inequality support is the inclusive gte/lte bounds
used by the calendar month view.

SupabaseGateway is the production implementation. The Supabase client is
synchronous, so each call is pushed to Starlette's threadpool and awaited,
which makes every persistence call a suspend point for the event loop.
"""

import logging
from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable

import httpx
from postgrest.exceptions import APIError
from starlette.concurrency import run_in_threadpool
from supabase import Client

from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

Row = dict[str, Any]
Filters = Mapping[str, Any]

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class PersistenceError(ExternalServiceError):
    """Raised when the persistence service rejects or fails a call."""

    def __init__(self, operation: str, table: str, reason: str = ""):
        super().__init__(
            f"Persistence {operation} on '{table}' failed",
            service="supabase",
            code="PERSISTENCE_ERROR",
            details={"operation": operation, "table": table, "reason": reason},
        )


class DuplicateKeyError(PersistenceError):
    """Raised when a write would break a unique key of the table."""

    def __init__(self, operation: str, table: str, reason: str = ""):
        super().__init__(operation, table, reason)
        self.code = "DUPLICATE_KEY"


@runtime_checkable
class IPersistenceGateway(Protocol):
    """
    Record-level CRUD against named tables.

    Implementations must make update() atomic per row, so that an update
    filtered on the current value of a column acts as a compare-and-swap.
    The caller learns whether the swap happened from the number of rows
    returned.

    Unique keys are enforced by the store, not by callers: insert() and
    update() raise DuplicateKeyError rather than write a second row with
    the same key. pro_calendar_slots is unique on (pro_id, date, hour)
    and users on email.
    """

    async def fetch_one(
        self,
        table: str,
        filters: Filters,
        columns: str = "*",
    ) -> Optional[Row]:
        """Return the first row matching all filters, or None."""
        ...

    async def fetch_all(
        self,
        table: str,
        filters: Optional[Filters] = None,
        *,
        columns: str = "*",
        gte: Optional[Filters] = None,
        lte: Optional[Filters] = None,
        order_by: Sequence[str] = (),
    ) -> list[Row]:
        """
        Return every row matching all filters.

        Args:
            table: Table name
            filters: Column -> value equality filters
            columns: Column selection (PostgREST syntax)
            gte: Column -> inclusive lower bound
            lte: Column -> inclusive upper bound
            order_by: Column names; prefix with '-' for descending
        """
        ...

    async def insert(self, table: str, data: Mapping[str, Any]) -> Row:
        """Insert one row and return it with server-assigned fields."""
        ...

    async def update(
        self,
        table: str,
        filters: Filters,
        changes: Mapping[str, Any],
    ) -> list[Row]:
        """Update every matching row and return the updated rows."""
        ...

    async def delete(self, table: str, filters: Filters) -> list[Row]:
        """Delete every matching row and return the deleted rows."""
        ...


class SupabaseGateway(IPersistenceGateway):
    """IPersistenceGateway backed by Supabase (PostgREST)."""

    def __init__(self, client: Client) -> None:
        self._db = client

    async def fetch_one(
        self,
        table: str,
        filters: Filters,
        columns: str = "*",
    ) -> Optional[Row]:
        def query() -> list[Row]:
            builder = self._db.table(table).select(columns)
            for key, value in filters.items():
                builder = builder.eq(key, value)
            return builder.limit(1).execute().data

        rows = await self._run("fetch_one", table, query)
        return rows[0] if rows else None

    async def fetch_all(
        self,
        table: str,
        filters: Optional[Filters] = None,
        *,
        columns: str = "*",
        gte: Optional[Filters] = None,
        lte: Optional[Filters] = None,
        order_by: Sequence[str] = (),
    ) -> list[Row]:
        def query() -> list[Row]:
            builder = self._db.table(table).select(columns)
            for key, value in (filters or {}).items():
                builder = builder.eq(key, value)
            for key, value in (gte or {}).items():
                builder = builder.gte(key, value)
            for key, value in (lte or {}).items():
                builder = builder.lte(key, value)
            for column in order_by:
                if column.startswith("-"):
                    builder = builder.order(column[1:], desc=True)
                else:
                    builder = builder.order(column)
            return builder.execute().data

        return await self._run("fetch_all", table, query)

    async def insert(self, table: str, data: Mapping[str, Any]) -> Row:
        def query() -> list[Row]:
            return self._db.table(table).insert(dict(data)).execute().data

        rows = await self._run("insert", table, query)
        if not rows:
            raise PersistenceError("insert", table, "no row returned")
        return rows[0]

    async def update(
        self,
        table: str,
        filters: Filters,
        changes: Mapping[str, Any],
    ) -> list[Row]:
        def query() -> list[Row]:
            builder = self._db.table(table).update(dict(changes))
            for key, value in filters.items():
                builder = builder.eq(key, value)
            return builder.execute().data

        return await self._run("update", table, query)

    async def delete(self, table: str, filters: Filters) -> list[Row]:
        def query() -> list[Row]:
            builder = self._db.table(table).delete()
            for key, value in filters.items():
                builder = builder.eq(key, value)
            return builder.execute().data

        return await self._run("delete", table, query)

    async def _run(self, operation: str, table: str, query) -> list[Row]:
        try:
            return await run_in_threadpool(query)
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.info("Supabase %s on %s hit a unique key: %s", operation, table, e.message)
                raise DuplicateKeyError(operation, table, str(e)) from e
            logger.error("Supabase %s on %s failed: %s", operation, table, e)
            raise PersistenceError(operation, table, str(e)) from e
        except httpx.HTTPError as e:
            logger.error("Supabase %s on %s failed: %s", operation, table, e)
            raise PersistenceError(operation, table, str(e)) from e
