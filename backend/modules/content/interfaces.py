"""
Content module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import ContentFields, ContentItem, IncomingFile, Upload


@runtime_checkable
class IContentService(Protocol):
    """Interface for content and upload operations."""

    async def visible_content(self, viewer: AuthenticatedUser) -> list[ContentItem]:
        """
        Content the viewer's plan gives access to.

        Free plans see only items flagged free; paid plans see everything.
        """
        ...

    async def content_by_creator(self, user_id: str) -> list[ContentItem]:
        """Content created by one user."""
        ...

    async def upload_files(
        self,
        pro_id: str,
        title: Optional[str],
        category: Optional[str],
        files: list[IncomingFile],
    ) -> list[Upload]:
        """
        Store files for a professional.

        Raises:
            NoFilesError: If files is empty
            UnsupportedFileTypeError: If any file is not allow-listed (nothing
                is stored in that case)
        """
        ...

    async def list_uploads(self, pro_id: str) -> list[Upload]:
        ...

    async def update_upload(
        self,
        pro_id: str,
        upload_id: str,
        title: Optional[str],
        category: Optional[str],
        file: Optional[IncomingFile],
    ) -> Upload:
        ...

    async def delete_upload(self, pro_id: str, upload_id: str) -> None:
        ...

    async def all_content(self) -> list[ContentItem]:
        ...

    async def create_content(
        self,
        author: AuthenticatedUser,
        fields: ContentFields,
        file: Optional[IncomingFile],
    ) -> ContentItem:
        ...

    async def update_content(
        self,
        editor: AuthenticatedUser,
        content_id: str,
        fields: ContentFields,
        file: Optional[IncomingFile],
    ) -> ContentItem:
        ...

    async def delete_content(self, editor: AuthenticatedUser, content_id: str) -> None:
        ...
