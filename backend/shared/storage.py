"""
File storage passthrough for Supabase Storage buckets.
"""

import logging
import time
from typing import Protocol, runtime_checkable

import httpx
from starlette.concurrency import run_in_threadpool
from storage3.utils import StorageException
from supabase import Client

from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class StorageError(ExternalServiceError):
    """Raised when a storage upload or removal fails."""

    def __init__(self, bucket: str, path: str, reason: str = ""):
        super().__init__(
            f"Storage operation on '{bucket}/{path}' failed",
            service="supabase-storage",
            code="STORAGE_ERROR",
            details={"bucket": bucket, "path": path, "reason": reason},
        )


@runtime_checkable
class IFileStorage(Protocol):
    """Stores uploaded files and hands back a public URL."""

    async def store(
        self,
        bucket: str,
        filename: str,
        content: bytes,
        content_type: str,
    ) -> str:
        """Store a file and return its public URL."""
        ...

    async def remove(self, bucket: str, path: str) -> None:
        """Remove a stored file."""
        ...


def object_name(filename: str) -> str:
    """Prefix a client filename with the current epoch milliseconds."""
    return f"{int(time.time() * 1000)}_{filename}"


class SupabaseStorage(IFileStorage):
    """IFileStorage backed by Supabase Storage."""

    def __init__(self, client: Client) -> None:
        self._db = client

    async def store(
        self,
        bucket: str,
        filename: str,
        content: bytes,
        content_type: str,
    ) -> str:
        path = object_name(filename)

        def upload() -> str:
            files = self._db.storage.from_(bucket)
            files.upload(path, content, {"content-type": content_type})
            return files.get_public_url(path)

        try:
            return await run_in_threadpool(upload)
        except (StorageException, httpx.HTTPError) as e:
            logger.error("Upload to %s/%s failed: %s", bucket, path, e)
            raise StorageError(bucket, path, str(e)) from e

    async def remove(self, bucket: str, path: str) -> None:
        def delete() -> None:
            self._db.storage.from_(bucket).remove([path])

        try:
            await run_in_threadpool(delete)
        except (StorageException, httpx.HTTPError) as e:
            logger.error("Removal of %s/%s failed: %s", bucket, path, e)
            raise StorageError(bucket, path, str(e)) from e


def path_from_url(bucket: str, url: str) -> str:
    """Recover the object path inside a bucket from its public URL."""
    marker = f"/{bucket}/"
    if marker not in url:
        return url
    return url.split(marker, 1)[1].split("?", 1)[0]
