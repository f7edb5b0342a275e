"""
Content service implementation.

Plan-gated content listing, professional uploads and the shared admin /
professional content CRUD. Files are passed through to the file storage;
only their public URLs are persisted.
"""

import logging
from typing import Optional

from shared.config import get_settings
from shared.gateway import IPersistenceGateway
from shared.models import AuthenticatedUser, Role
from shared.storage import IFileStorage, StorageError, path_from_url
from modules.policy import content_is_unrestricted

from .interfaces import IContentService
from .models import ALLOWED_MIME_TYPES, ContentFields, ContentItem, IncomingFile, Upload
from .exceptions import (
    ContentAccessDeniedError,
    ContentNotFoundError,
    MissingTitleError,
    NoFilesError,
    UnsupportedFileTypeError,
    UploadNotFoundError,
)
from .repository import ContentRepository, UploadRepository

logger = logging.getLogger(__name__)


def check_file_type(file: IncomingFile) -> None:
    if file.content_type not in ALLOWED_MIME_TYPES:
        raise UnsupportedFileTypeError(file.filename, file.content_type)


class ContentService(IContentService):
    """Content service backed by the persistence gateway and file storage."""

    def __init__(
        self,
        gateway: IPersistenceGateway,
        storage: IFileStorage,
        uploads_bucket: Optional[str] = None,
        contents_bucket: Optional[str] = None,
    ):
        settings = get_settings()
        self._content = ContentRepository(gateway)
        self._uploads = UploadRepository(gateway)
        self._storage = storage
        self._uploads_bucket = uploads_bucket or settings.uploads_bucket
        self._contents_bucket = contents_bucket or settings.contents_bucket

    # -------------------------------------------------------------------------
    # Viewing
    # -------------------------------------------------------------------------

    async def visible_content(self, viewer: AuthenticatedUser) -> list[ContentItem]:
        return await self._content.catalog(free_only=not content_is_unrestricted(viewer.plan))

    async def content_by_creator(self, user_id: str) -> list[ContentItem]:
        return await self._content.by_creator(user_id)

    async def all_content(self) -> list[ContentItem]:
        return await self._content.catalog(free_only=False)

    # -------------------------------------------------------------------------
    # Professional uploads
    # -------------------------------------------------------------------------

    async def upload_files(
        self,
        pro_id: str,
        title: Optional[str],
        category: Optional[str],
        files: list[IncomingFile],
    ) -> list[Upload]:
        if not files:
            raise NoFilesError()
        for file in files:
            check_file_type(file)

        uploaded = []
        for file in files:
            url = await self._storage.store(
                self._uploads_bucket, file.filename, file.data, file.content_type
            )
            uploaded.append(await self._uploads.create({
                "pro_id": pro_id,
                "title": title,
                "category": category,
                "filepath": url,
                "mime": file.content_type,
            }))

        logger.info("Professional %s uploaded %d file(s)", pro_id, len(uploaded))
        return uploaded

    async def list_uploads(self, pro_id: str) -> list[Upload]:
        return await self._uploads.find_all(pro_id=pro_id)

    async def update_upload(
        self,
        pro_id: str,
        upload_id: str,
        title: Optional[str],
        category: Optional[str],
        file: Optional[IncomingFile],
    ) -> Upload:
        upload = await self._uploads.owned(pro_id, upload_id)
        if upload is None:
            raise UploadNotFoundError(upload_id)

        changes = {key: value for key, value in (("title", title), ("category", category)) if value is not None}
        if file is not None:
            check_file_type(file)
            changes["filepath"] = await self._storage.store(
                self._uploads_bucket, file.filename, file.data, file.content_type
            )
            changes["mime"] = file.content_type

        if not changes:
            return upload

        updated = await self._uploads.update_where({"id": upload.id, "pro_id": pro_id}, changes)
        if not updated:
            raise UploadNotFoundError(upload_id)

        if file is not None:
            await self._discard(upload.filepath)
        return updated[0]

    async def delete_upload(self, pro_id: str, upload_id: str) -> None:
        deleted = await self._uploads.delete_where(id=upload_id, pro_id=pro_id)
        if not deleted:
            raise UploadNotFoundError(upload_id)
        for upload in deleted:
            await self._discard(upload.filepath)

    async def _discard(self, url: str) -> None:
        """Remove an object no upload row points at any more; failures leave an orphan."""
        path = path_from_url(self._uploads_bucket, url)
        try:
            await self._storage.remove(self._uploads_bucket, path)
        except StorageError:
            logger.warning("Orphaned object %s/%s left in storage", self._uploads_bucket, path, exc_info=True)

    # -------------------------------------------------------------------------
    # Content CRUD (admins, and professionals on their own items)
    # -------------------------------------------------------------------------

    async def create_content(
        self,
        author: AuthenticatedUser,
        fields: ContentFields,
        file: Optional[IncomingFile],
    ) -> ContentItem:
        if not (fields.title or "").strip():
            raise MissingTitleError()

        data = fields.changes()
        data.setdefault("is_free", False)
        data["created_by"] = author.id
        if file is not None:
            check_file_type(file)
            data["url"] = await self._storage.store(
                self._contents_bucket, file.filename, file.data, file.content_type
            )

        item = await self._content.create(data)
        logger.info("User %s created content %s", author.id, item.id)
        return item

    async def update_content(
        self,
        editor: AuthenticatedUser,
        content_id: str,
        fields: ContentFields,
        file: Optional[IncomingFile],
    ) -> ContentItem:
        item = await self._editable(editor, content_id)

        changes = fields.changes()
        if file is not None:
            check_file_type(file)
            changes["url"] = await self._storage.store(
                self._contents_bucket, file.filename, file.data, file.content_type
            )
        if not changes:
            return item

        updated = await self._content.update_where({"id": item.id}, changes)
        if not updated:
            raise ContentNotFoundError(content_id)
        return updated[0]

    async def delete_content(self, editor: AuthenticatedUser, content_id: str) -> None:
        item = await self._editable(editor, content_id)
        await self._content.delete_where(id=item.id)
        logger.info("User %s deleted content %s", editor.id, item.id)

    async def _editable(self, editor: AuthenticatedUser, content_id: str) -> ContentItem:
        item = await self._content.get_by_id(content_id)
        if item is None:
            raise ContentNotFoundError(content_id)
        if editor.role != Role.ADMIN and item.created_by != editor.id:
            raise ContentAccessDeniedError(content_id, editor.id)
        return item
