"""
Authorization gate.

Two stages run as FastAPI dependencies before any route body:

1. Identity: extract the credential, verify it, and attach the identity to
   the request (get_current_user / get_optional_user).
2. Predicate: check role membership (require_roles) or a policy table
   action (require_action) against the identity from stage 1. The
   credential is never verified twice.

A request rejected by either stage never reaches its route body.
"""

import logging
from typing import Any, Optional

from fastapi import Depends, Request
from pydantic import ValidationError as PydanticValidationError

from shared.models import AuthenticatedUser, Role
from modules.auth.exceptions import (
    InsufficientRoleError,
    InvalidTokenError,
    MissingTokenError,
    PlanNotEligibleError,
)
from modules.auth.session import SessionCodec, extract_token
from modules.policy import Action, is_permitted, roles_for
from modules.policy.table import PLAN_GATED_ACTIONS

from ..dependencies import get_session_codec

logger = logging.getLogger(__name__)


def get_user_from_claims(claims: dict[str, Any]) -> AuthenticatedUser:
    """
    Convert verified claims to an AuthenticatedUser.

    Raises:
        InvalidTokenError: If the claims do not describe a known user shape
    """
    try:
        return AuthenticatedUser(**claims)
    except PydanticValidationError:
        raise InvalidTokenError()


async def get_current_user(
    request: Request,
    codec: SessionCodec = Depends(get_session_codec),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = await extract_token(request)
    if token is None:
        raise MissingTokenError()

    claims = codec.verify_session(token)
    if claims is None:
        raise InvalidTokenError()

    user = get_user_from_claims(claims)
    request.state.user = user
    return user


async def get_optional_user(
    request: Request,
    codec: SessionCodec = Depends(get_session_codec),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Missing or invalid credentials yield None instead of an error.
    """
    token = await extract_token(request)
    claims = codec.verify_session(token) if token else None
    if claims is None:
        request.state.user = None
        return None

    try:
        user = get_user_from_claims(claims)
    except InvalidTokenError:
        user = None
    request.state.user = user
    return user


def require_roles(*roles: Role):
    """
    Build a dependency that admits only the given roles.

    Usage:
        @router.get("/admin/users")
        async def users(user: AuthenticatedUser = Depends(require_roles(Role.ADMIN))):
            ...
    """
    allowed = [role.value for role in roles]

    async def dependency(
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if user.role not in roles:
            logger.info("User %s (%s) denied; requires %s", user.id, user.role.value, allowed)
            raise InsufficientRoleError(allowed, user.role.value)
        return user

    return dependency


def require_action(action: Action):
    """
    Build a dependency that admits callers the policy table allows.

    Plan-gated actions fail with PlanNotEligibleError (which carries the
    upgrade redirect); role-gated actions fail with InsufficientRoleError.
    """

    async def dependency(
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if is_permitted(user.role, user.plan, action):
            return user

        if action in PLAN_GATED_ACTIONS:
            raise PlanNotEligibleError(action.value, user.plan.value)
        allowed = [role.value for role in roles_for(action)]
        logger.info("User %s (%s) denied %s; requires %s", user.id, user.role.value, action.value, allowed)
        raise InsufficientRoleError(allowed, user.role.value)

    return dependency


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
RequireProfessional = Depends(require_roles(Role.PROFESSIONAL))
RequireAdmin = Depends(require_roles(Role.ADMIN))
