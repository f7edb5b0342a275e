"""
Authentication module.

Handles registration, login, session credentials and plan changes.

Public API:
- IAuthService: Interface for account operations
- SessionCodec: Credential signing and verification
- UserRecord, PublicUser: User models
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService
from .session import SessionCodec, extract_token
from .models import UserRecord, PublicUser
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    MissingFieldsError,
    EmailAlreadyRegisteredError,
    NotInstitutionalEmailError,
    UnknownPlanError,
    AccountNotFoundError,
    InsufficientRoleError,
    PlanNotEligibleError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Session
    "SessionCodec",
    "extract_token",
    # Models
    "UserRecord",
    "PublicUser",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "MissingFieldsError",
    "EmailAlreadyRegisteredError",
    "NotInstitutionalEmailError",
    "UnknownPlanError",
    "AccountNotFoundError",
    "InsufficientRoleError",
    "PlanNotEligibleError",
]
