"""
Notification module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Notice(BaseModel):
    """A message shown to a client, computed from their session."""

    msg: str


class ProNotification(BaseModel):
    """A stored notification addressed to a professional."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    pro_id: str
    message: str = ""
    is_read: bool = False
    created_at: Optional[datetime] = None


class NoticesResult(BaseModel):
    ok: bool = True
    notices: list[Notice]


class ProNotificationsResult(BaseModel):
    ok: bool = True
    notifications: list[ProNotification]


class MarkedResult(BaseModel):
    ok: bool = True
