"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, Field


class Role(str, Enum):
    """Account roles."""

    CLIENT = "client"
    PROFESSIONAL = "professional"
    ADMIN = "admin"


class Plan(str, Enum):
    """Subscription plans."""

    FREE = "free"
    SILVER = "silver"
    PREMIUM = "premium"
    STUDENT = "student"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from the session credential claims and made
    available to route handlers via dependency injection. It is a snapshot
    taken at login time: role and plan changes made later are only visible
    once a new credential is issued.
    """

    id: str = Field(..., description="User ID")
    name: str = Field(default="", description="Display name")
    email: str = Field(..., description="User's email address")
    role: Role = Field(default=Role.CLIENT, description="Account role")
    plan: Plan = Field(default=Plan.FREE, description="Subscription plan")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore registered claims (exp, iat)
        "coerce_numbers_to_str": True,
    }

    def to_claims(self) -> dict[str, str]:
        """Claims embedded in a session credential for this user."""
        return self.model_dump(mode="json")
