"""
Error response models.

Standardized envelope returned by every failing request.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Standard error response format."""

    ok: bool = False
    error: str
    redirect: Optional[str] = None
    restricted: Optional[bool] = None


# OpenAPI documentation for the statuses every protected router can answer
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    401: {"model": ErrorResponse, "description": "Missing, invalid or expired credential"},
    403: {"model": ErrorResponse, "description": "Role or plan does not allow this action"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}
