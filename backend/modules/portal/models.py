"""
Portal module data models.
"""

from pydantic import BaseModel

from shared.models import AuthenticatedUser

HOME_SLIDES = ["slide1.png", "slide2.png", "slide3.png", "slide4.png"]


class PortalSections(BaseModel):
    """Sections of the client portal."""

    schedule: bool = True
    notifications: bool = True
    content: bool = True
    payments: bool = True


class ProTools(BaseModel):
    """Tools of the professional dashboard."""

    calendar: bool = True
    upload: bool = True
    content: bool = True
    notifications: bool = True
    clients: bool = True


class HomeResult(BaseModel):
    ok: bool = True
    user: AuthenticatedUser
    slides: list[str]


class PortalResult(BaseModel):
    ok: bool = True
    user: AuthenticatedUser
    dashboard: PortalSections


class ProDashboardResult(BaseModel):
    ok: bool = True
    user: AuthenticatedUser
    tools: ProTools
