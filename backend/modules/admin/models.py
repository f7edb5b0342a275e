"""
Admin module data models.
"""

from pydantic import BaseModel, Field

from modules.auth.models import PublicUser


class PlatformStats(BaseModel):
    """Platform-wide counters."""

    users: int = 0
    users_by_role: dict[str, int] = Field(default_factory=dict)
    users_by_plan: dict[str, int] = Field(default_factory=dict)
    content: int = 0
    appointments: int = 0


class UpdateRoleRequest(BaseModel):
    user_id: str = Field(..., description="User to change")
    role: str = Field(..., description="New role")


class StatsResult(BaseModel):
    ok: bool = True
    stats: PlatformStats


class UserListResult(BaseModel):
    ok: bool = True
    users: list[PublicUser]


class UserResult(BaseModel):
    ok: bool = True
    user: PublicUser


class DeletedResult(BaseModel):
    ok: bool = True
