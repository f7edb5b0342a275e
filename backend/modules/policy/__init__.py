"""
Policy module.

Static role/plan permission table used by the authorization gate and by the
services that filter results per plan.

Public API:
- Action: Guarded actions
- is_permitted: (role, plan, action) -> bool
- roles_for: roles granted a role-gated action
- content_is_unrestricted, home_redirect, plan_details: table lookups
"""

from .table import (
    Action,
    PLAN_PERMISSIONS,
    ROLE_PERMISSIONS,
    HOME_REDIRECTS,
    PLAN_CATALOG,
    UPGRADE_REDIRECT,
    is_permitted,
    roles_for,
    content_is_unrestricted,
    home_redirect,
    plan_details,
)

__all__ = [
    "Action",
    "PLAN_PERMISSIONS",
    "ROLE_PERMISSIONS",
    "HOME_REDIRECTS",
    "PLAN_CATALOG",
    "UPGRADE_REDIRECT",
    "is_permitted",
    "roles_for",
    "content_is_unrestricted",
    "home_redirect",
    "plan_details",
]
