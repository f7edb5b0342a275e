"""
Role and plan policy table.

Every access rule of the platform lives here as data. Routes and services ask
is_permitted() instead of comparing role or plan strings themselves, so the
whole policy can be audited and tested in one place.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from shared.models import Plan, Role


class Action(str, Enum):
    """Actions guarded by the policy table."""

    VIEW_FREE_CONTENT = "view_free_content"
    VIEW_FULL_CONTENT = "view_full_content"
    OPEN_PORTAL = "open_portal"
    BOOK_APPOINTMENT = "book_appointment"
    JOIN_MEETING = "join_meeting"
    MANAGE_CALENDAR = "manage_calendar"
    MANAGE_UPLOADS = "manage_uploads"
    READ_PRO_NOTIFICATIONS = "read_pro_notifications"
    MANAGE_CONTENT = "manage_content"
    MANAGE_USERS = "manage_users"
    VIEW_STATS = "view_stats"


_PAID_PLAN_ACTIONS = frozenset({
    Action.VIEW_FREE_CONTENT,
    Action.VIEW_FULL_CONTENT,
    Action.OPEN_PORTAL,
    Action.BOOK_APPOINTMENT,
    Action.JOIN_MEETING,
})

PLAN_PERMISSIONS: dict[Plan, frozenset[Action]] = {
    Plan.FREE: frozenset({Action.VIEW_FREE_CONTENT}),
    Plan.SILVER: _PAID_PLAN_ACTIONS,
    Plan.PREMIUM: _PAID_PLAN_ACTIONS,
    Plan.STUDENT: _PAID_PLAN_ACTIONS,
}

ROLE_PERMISSIONS: dict[Role, frozenset[Action]] = {
    Role.CLIENT: frozenset(),
    Role.PROFESSIONAL: frozenset({
        Action.MANAGE_CALENDAR,
        Action.MANAGE_UPLOADS,
        Action.READ_PRO_NOTIFICATIONS,
        Action.MANAGE_CONTENT,
    }),
    Role.ADMIN: frozenset({
        Action.MANAGE_USERS,
        Action.VIEW_STATS,
        Action.MANAGE_CONTENT,
    }),
}

# Actions decided by plan alone; all others are decided by role alone
PLAN_GATED_ACTIONS = frozenset().union(*PLAN_PERMISSIONS.values())

HOME_REDIRECTS: dict[Role, str] = {
    Role.ADMIN: "/admin/dashboard",
    Role.PROFESSIONAL: "/pro/dashboard",
    Role.CLIENT: "/home",
}
DEFAULT_HOME = "/home"

# Where a caller denied a plan-gated action is sent
UPGRADE_REDIRECT = "/plans"

PLAN_CATALOG: dict[Plan, dict] = {
    Plan.FREE: {
        "name": "Free Plan",
        "monthly": None,
        "yearly": None,
        "features": ["Basic content", "Limited access"],
    },
    Plan.SILVER: {
        "name": "Silver Plan",
        "monthly": Decimal("15000"),
        "yearly": Decimal("150000"),
        "features": ["Full content", "1 appointment per month"],
    },
    Plan.PREMIUM: {
        "name": "Premium Plan",
        "monthly": Decimal("25000"),
        "yearly": Decimal("250000"),
        "features": ["Unlimited appointments", "Advanced material"],
    },
    Plan.STUDENT: {
        "name": "Student Plan",
        "monthly": Decimal("10000"),
        "yearly": Decimal("100000"),
        "features": ["Full content", "Appointments", "Requires an institutional email"],
    },
}


def _as_role(role: Union[Role, str]) -> Optional[Role]:
    try:
        return Role(role)
    except ValueError:
        return None


def _as_plan(plan: Union[Plan, str]) -> Optional[Plan]:
    try:
        return Plan(plan)
    except ValueError:
        return None


def is_permitted(
    role: Union[Role, str],
    plan: Union[Plan, str],
    action: Action,
) -> bool:
    """
    Decide whether a caller with this role and plan may perform an action.

    Unknown roles or plans are denied everything.
    """
    if action in PLAN_GATED_ACTIONS:
        known_plan = _as_plan(plan)
        return known_plan is not None and action in PLAN_PERMISSIONS[known_plan]

    known_role = _as_role(role)
    return known_role is not None and action in ROLE_PERMISSIONS[known_role]


def roles_for(action: Action) -> list[Role]:
    """Roles the table grants a role-gated action to, in declaration order."""
    return [role for role, actions in ROLE_PERMISSIONS.items() if action in actions]


def content_is_unrestricted(plan: Union[Plan, str]) -> bool:
    """True when the plan sees every content item, not only free ones."""
    return is_permitted(Role.CLIENT, plan, Action.VIEW_FULL_CONTENT)


def home_redirect(role: Union[Role, str]) -> str:
    """Landing page for a role after login."""
    known_role = _as_role(role)
    if known_role is None:
        return DEFAULT_HOME
    return HOME_REDIRECTS.get(known_role, DEFAULT_HOME)


def plan_details(plan: Union[Plan, str]) -> Optional[dict]:
    """Catalog entry for a plan, or None if the plan is unknown."""
    known_plan = _as_plan(plan)
    if known_plan is None:
        return None
    return PLAN_CATALOG[known_plan]
