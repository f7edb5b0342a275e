"""
Base exception classes for the Serpleno backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps every base to one HTTP status and a fixed message, so
internal detail never reaches the client.
"""

from typing import Optional, Any


class SerplenoError(Exception):
    """
    Base exception for all Serpleno errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    redirect: Optional[str] = None

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def envelope(self) -> dict[str, Any]:
        """Response body shown to the client."""
        body: dict[str, Any] = {"ok": False, "error": self.message}
        if self.redirect:
            body["redirect"] = self.redirect
        return body


class ValidationError(SerplenoError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(SerplenoError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401
    redirect = "/login"


class AuthorizationError(SerplenoError):
    """Authorization failed (insufficient role or plan)."""

    status_code = 403


class NotFoundError(SerplenoError):
    """Resource not found."""

    status_code = 404


class ConflictError(SerplenoError):
    """The resource is not in the state the operation requires."""

    status_code = 409


class ExternalServiceError(SerplenoError):
    """Error communicating with an external service."""

    status_code = 500
    public_message = "Internal error"

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service

    def envelope(self) -> dict[str, Any]:
        """Upstream detail is logged, never returned."""
        return {"ok": False, "error": self.public_message}
