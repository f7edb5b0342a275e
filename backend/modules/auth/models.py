"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shared.models import AuthenticatedUser, Plan, Role


class UserRecord(BaseModel):
    """A row of the users table, including the password hash."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str
    name: str = ""
    email: str
    password_hash: str = ""
    role: Role = Role.CLIENT
    plan: Plan = Plan.FREE
    specialty: Optional[str] = None

    def public(self) -> "PublicUser":
        """The user as it may be shown to clients."""
        return PublicUser(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            plan=self.plan,
            specialty=self.specialty,
        )

    def identity(self) -> AuthenticatedUser:
        """Identity snapshot embedded in a session credential."""
        return AuthenticatedUser(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            plan=self.plan,
        )


class PublicUser(BaseModel):
    """User data safe to return in responses (no password hash)."""

    id: str
    name: str
    email: str
    role: Role
    plan: Plan
    specialty: Optional[str] = None


class LoginRequest(BaseModel):
    """Credentials posted to /auth/login."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Plain password")


class RegisterRequest(BaseModel):
    """Fields posted to /auth/register."""

    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., description="Plain password")


class ValidateStudentRequest(BaseModel):
    """Institutional email and verification code for the student plan."""

    email: str = Field(..., description="Institutional email address")
    code: str = Field(..., description="Verification code")


class UpdatePlanRequest(BaseModel):
    """New plan for the calling user."""

    plan: str = Field(..., description="Plan name")


class LoginResult(BaseModel):
    """Successful login: credential, landing page and user."""

    ok: bool = True
    token: str
    redirect: str
    user: PublicUser


class RegisterResult(BaseModel):
    """Successful registration."""

    ok: bool = True
    message: str = "Registration successful"
    user: PublicUser


class SessionResult(BaseModel):
    """A freshly issued credential after a plan change."""

    ok: bool = True
    token: str
    redirect: Optional[str] = None


class RedirectResult(BaseModel):
    """Role-based landing page."""

    ok: bool = True
    redirect: str


class MeResult(BaseModel):
    """Identity carried by the presented credential."""

    ok: bool = True
    user: AuthenticatedUser
