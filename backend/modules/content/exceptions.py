"""
Content module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError, ValidationError


class NoFilesError(ValidationError):
    """Raised when an upload request carries no files."""

    def __init__(self):
        super().__init__("At least one file is required", code="NO_FILES")


class UnsupportedFileTypeError(ValidationError):
    """Raised when a file's MIME type is not allow-listed."""

    def __init__(self, filename: str, content_type: str):
        super().__init__(
            "File type not allowed",
            code="UNSUPPORTED_FILE_TYPE",
            details={"filename": filename, "content_type": content_type},
        )


class MissingTitleError(ValidationError):
    """Raised when content is created without a title."""

    def __init__(self):
        super().__init__("Title is required", code="MISSING_TITLE")


class ContentNotFoundError(NotFoundError):
    """Raised when a content item does not exist."""

    def __init__(self, content_id: str):
        super().__init__(
            "Content not found",
            code="CONTENT_NOT_FOUND",
            details={"content_id": content_id},
        )


class UploadNotFoundError(NotFoundError):
    """Raised when an upload does not exist or belongs to someone else."""

    def __init__(self, upload_id: str):
        super().__init__(
            "Upload not found",
            code="UPLOAD_NOT_FOUND",
            details={"upload_id": upload_id},
        )


class ContentAccessDeniedError(AuthorizationError):
    """Raised when a professional edits content created by someone else."""

    def __init__(self, content_id: str, user_id: str):
        super().__init__(
            "Access denied",
            code="CONTENT_ACCESS_DENIED",
            details={"content_id": content_id, "user_id": user_id},
        )
