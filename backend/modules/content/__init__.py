"""
Content module.

Plan-gated content catalog, professional uploads and content CRUD.

Public API:
- IContentService: Interface for content operations
- ContentItem, Upload, IncomingFile: Data models
- ALLOWED_MIME_TYPES: Upload allow-list
"""

from .interfaces import IContentService
from .models import ALLOWED_MIME_TYPES, ContentFields, ContentItem, IncomingFile, Upload
from .exceptions import (
    NoFilesError,
    UnsupportedFileTypeError,
    MissingTitleError,
    ContentNotFoundError,
    UploadNotFoundError,
    ContentAccessDeniedError,
)

__all__ = [
    "IContentService",
    "ALLOWED_MIME_TYPES",
    "ContentFields",
    "ContentItem",
    "IncomingFile",
    "Upload",
    "NoFilesError",
    "UnsupportedFileTypeError",
    "MissingTitleError",
    "ContentNotFoundError",
    "UploadNotFoundError",
    "ContentAccessDeniedError",
]
