"""
Admin API endpoints.

Content CRUD under /admin/content lives with the content module.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import require_action
from api.dependencies import get_admin_service
from shared.models import AuthenticatedUser
from modules.policy import Action

from .interfaces import IAdminService
from .models import DeletedResult, StatsResult, UpdateRoleRequest, UserListResult, UserResult

router = APIRouter(prefix="/admin")

require_stats = require_action(Action.VIEW_STATS)
require_user_manager = require_action(Action.MANAGE_USERS)


@router.get("/dashboard", response_model=StatsResult)
async def dashboard(
    user: AuthenticatedUser = Depends(require_stats),
    service: IAdminService = Depends(get_admin_service),
) -> StatsResult:
    return StatsResult(stats=await service.stats())


@router.get("/stats", response_model=StatsResult)
async def stats(
    user: AuthenticatedUser = Depends(require_stats),
    service: IAdminService = Depends(get_admin_service),
) -> StatsResult:
    """User counts by role and plan, content and appointment counts."""
    return StatsResult(stats=await service.stats())


@router.get("/users", response_model=UserListResult)
async def list_users(
    user: AuthenticatedUser = Depends(require_user_manager),
    service: IAdminService = Depends(get_admin_service),
) -> UserListResult:
    return UserListResult(users=await service.list_users())


@router.post("/users/update-role", response_model=UserResult)
async def update_role(
    request: UpdateRoleRequest,
    user: AuthenticatedUser = Depends(require_user_manager),
    service: IAdminService = Depends(get_admin_service),
) -> UserResult:
    return UserResult(user=await service.update_role(request.user_id, request.role))


@router.delete("/users/{user_id}", response_model=DeletedResult)
async def delete_user(
    user_id: str,
    user: AuthenticatedUser = Depends(require_user_manager),
    service: IAdminService = Depends(get_admin_service),
) -> DeletedResult:
    """Delete an account other than the caller's own."""
    await service.delete_user(user, user_id)
    return DeletedResult()
