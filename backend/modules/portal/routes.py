"""
Landing pages for clients and professionals.

These endpoints only describe what the caller may open; the data behind
each section is served by the scheduling, content and notification routes.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user, require_action, require_roles
from shared.models import AuthenticatedUser, Role
from modules.policy import Action

from .models import HOME_SLIDES, HomeResult, PortalResult, PortalSections, ProDashboardResult, ProTools

router = APIRouter()


@router.get("/home", response_model=HomeResult)
async def home(user: AuthenticatedUser = Depends(get_current_user)) -> HomeResult:
    return HomeResult(user=user, slides=list(HOME_SLIDES))


@router.get("/portal", response_model=PortalResult)
async def portal(user: AuthenticatedUser = Depends(require_action(Action.OPEN_PORTAL))) -> PortalResult:
    """
    Client portal for paid plans.

    Free-plan callers get 403 with restricted=true and a redirect to /plans.
    """
    return PortalResult(user=user, dashboard=PortalSections())


@router.get("/pro/dashboard", response_model=ProDashboardResult)
async def pro_dashboard(
    user: AuthenticatedUser = Depends(require_roles(Role.PROFESSIONAL)),
) -> ProDashboardResult:
    return ProDashboardResult(user=user, tools=ProTools())
