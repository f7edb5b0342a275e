"""
Notification API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user, require_action
from api.dependencies import get_notification_service
from shared.models import AuthenticatedUser
from modules.policy import Action

from .interfaces import INotificationService
from .models import MarkedResult, NoticesResult, ProNotificationsResult

router = APIRouter()

require_pro_reader = require_action(Action.READ_PRO_NOTIFICATIONS)


@router.get("/notifications", response_model=NoticesResult)
async def notifications(
    user: AuthenticatedUser = Depends(get_current_user),
    service: INotificationService = Depends(get_notification_service),
) -> NoticesResult:
    """Greeting and plan notices for the caller."""
    return NoticesResult(notices=service.client_notices(user))


@router.get("/pro/notifications", response_model=ProNotificationsResult)
async def pro_notifications(
    filter: Optional[str] = Query(None, description="'unread' to hide read notifications"),
    user: AuthenticatedUser = Depends(require_pro_reader),
    service: INotificationService = Depends(get_notification_service),
) -> ProNotificationsResult:
    items = await service.pro_notifications(user.id, unread_only=filter == "unread")
    return ProNotificationsResult(notifications=items)


@router.post("/pro/notifications/{notification_id}/read", response_model=MarkedResult)
async def mark_read(
    notification_id: str,
    user: AuthenticatedUser = Depends(require_pro_reader),
    service: INotificationService = Depends(get_notification_service),
) -> MarkedResult:
    await service.mark_read(user.id, notification_id)
    return MarkedResult()


@router.post("/pro/notifications/{notification_id}/unread", response_model=MarkedResult)
async def mark_unread(
    notification_id: str,
    user: AuthenticatedUser = Depends(require_pro_reader),
    service: INotificationService = Depends(get_notification_service),
) -> MarkedResult:
    await service.mark_unread(user.id, notification_id)
    return MarkedResult()
