"""
Authentication module interface.

Other modules and the API layer should depend on IAuthService, not the
concrete implementation. This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import LoginResult, RegisterResult, SessionResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account and session operations.

    This protocol defines the contract that the auth module exposes.
    Implementations must provide all these methods.
    """

    async def register(self, name: str, email: str, password: str) -> RegisterResult:
        """
        Create a client account on the free plan.

        Raises:
            MissingFieldsError: If any field is empty
            EmailAlreadyRegisteredError: If the email has an account
        """
        ...

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Check credentials and issue a session credential.

        Raises:
            MissingFieldsError: If email or password is empty
            InvalidCredentialsError: If the email is unknown or the password wrong
        """
        ...

    async def validate_student(
        self,
        user: AuthenticatedUser,
        email: str,
        code: str,
    ) -> SessionResult:
        """
        Promote the caller to the student plan.

        Raises:
            MissingFieldsError: If email or code is empty
            NotInstitutionalEmailError: If the email is not institutional
        """
        ...

    async def update_plan(self, user: AuthenticatedUser, plan: str) -> SessionResult:
        """
        Store a new plan for the caller and reissue their credential.

        Raises:
            UnknownPlanError: If the plan is not in the catalog
        """
        ...
