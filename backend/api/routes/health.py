"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.config import get_settings
from shared.gateway import IPersistenceGateway, PersistenceError

from ..dependencies import get_gateway

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    gateway: IPersistenceGateway = Depends(get_gateway),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs one lightweight query; answers 503 when the database is unreachable.
    """
    try:
        await gateway.fetch_one("users", {}, columns="id")
    except PersistenceError:
        logger.warning("Readiness check failed: database unreachable")
        response.status_code = 503
        return ReadinessResponse(status="unavailable", database="unreachable")
    return ReadinessResponse(status="ready", database="connected")
