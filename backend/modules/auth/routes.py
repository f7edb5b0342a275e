"""
Authentication API endpoints.

Public login/registration plus the authenticated session helpers
(student validation, plan update, role redirect, current identity).
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser
from modules.policy import home_redirect

from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResult,
    MeResult,
    RedirectResult,
    RegisterRequest,
    RegisterResult,
    SessionResult,
    UpdatePlanRequest,
    ValidateStudentRequest,
)

router = APIRouter()


@router.post("/auth/login", response_model=LoginResult)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResult:
    """Exchange email and password for a session credential."""
    return await service.login(request.email, request.password)


@router.post("/auth/register", response_model=RegisterResult)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> RegisterResult:
    """Create a client account on the free plan."""
    return await service.register(request.name, request.email, request.password)


@router.get("/auth/me", response_model=MeResult)
async def me(user: AuthenticatedUser = Depends(get_current_user)) -> MeResult:
    """Return the identity carried by the presented credential."""
    return MeResult(user=user)


@router.post("/validate-student", response_model=SessionResult)
async def validate_student(
    request: ValidateStudentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> SessionResult:
    """
    Promote the caller to the student plan.

    Requires an institutional (.edu) email. Returns a reissued credential.
    """
    return await service.validate_student(user, request.email, request.code)


@router.post("/update-plan", response_model=SessionResult)
async def update_plan(
    request: UpdatePlanRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> SessionResult:
    """Store a new plan for the caller and reissue their credential."""
    return await service.update_plan(user, request.plan)


@router.get("/redirect-home", response_model=RedirectResult)
async def redirect_home(user: AuthenticatedUser = Depends(get_current_user)) -> RedirectResult:
    """Landing page for the caller's role."""
    return RedirectResult(redirect=home_redirect(user.role))
