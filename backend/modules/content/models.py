"""
Content module data models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ALLOWED_MIME_TYPES = frozenset({
    "video/mp4",
    "image/jpeg",
    "image/png",
    "image/webp",
    "application/pdf",
})


class ContentItem(BaseModel):
    """A piece of platform content."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    title: str = ""
    category: Optional[str] = None
    day: Optional[int] = None
    description: Optional[str] = None
    url: Optional[str] = None
    is_free: bool = False
    created_by: Optional[str] = None


class Upload(BaseModel):
    """A file uploaded by a professional."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    pro_id: str
    title: Optional[str] = None
    category: Optional[str] = None
    filepath: str
    mime: str


class IncomingFile(BaseModel):
    """A file received in a multipart request."""

    filename: str
    content_type: str
    data: bytes = Field(repr=False)


class ContentFields(BaseModel):
    """Editable content fields; None means unchanged."""

    title: Optional[str] = None
    category: Optional[str] = None
    day: Optional[int] = None
    description: Optional[str] = None
    is_free: Optional[bool] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


# Response envelopes


class ContentListResult(BaseModel):
    ok: bool = True
    content: list[ContentItem]


class ContentResult(BaseModel):
    ok: bool = True
    content: ContentItem


class UploadListResult(BaseModel):
    ok: bool = True
    items: list[Upload]


class UploadResult(BaseModel):
    ok: bool = True
    item: Upload


class DeletedResult(BaseModel):
    ok: bool = True
