"""
Exception handlers.

Every failure leaves the API as the same envelope:
    {"ok": false, "error": "<fixed message>", "redirect": "<optional>"}
Upstream and unexpected errors are logged with their detail and answered
with a generic message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import ExternalServiceError, SerplenoError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Missing or invalid fields"
INTERNAL_MESSAGE = "Internal error"


async def serpleno_error_handler(request: Request, exc: SerplenoError) -> JSONResponse:
    if isinstance(exc, ExternalServiceError):
        logger.error(
            "Upstream failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.to_dict(),
            exc_info=exc,
        )
    elif exc.status_code >= 500:
        logger.error("Error on %s %s: %s", request.method, request.url.path, exc.to_dict())
    else:
        logger.debug("%s on %s %s", exc.code, request.method, request.url.path)

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.envelope(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Invalid request on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"ok": False, "error": VALIDATION_MESSAGE})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"ok": False, "error": INTERNAL_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on an application."""
    app.add_exception_handler(SerplenoError, serpleno_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
