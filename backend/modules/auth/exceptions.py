"""
Authentication module exceptions.

These exceptions are raised by the auth module and the authorization gate,
and are turned into response envelopes by the API error handlers.
"""

from typing import Any

from shared.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError


class MissingTokenError(AuthenticationError):
    """Raised when no session credential is provided."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """
    Raised when a session credential fails verification.

    Malformed, expired and tampered credentials are deliberately reported
    with the same message.
    """

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised on login with an unknown email or a wrong password."""

    def __init__(self):
        super().__init__("Incorrect email or password", code="INVALID_CREDENTIALS")


class MissingFieldsError(ValidationError):
    """Raised when required fields are empty."""

    def __init__(self, *fields: str):
        super().__init__(
            "All fields are required",
            code="MISSING_FIELDS",
            details={"fields": list(fields)},
        )


class EmailAlreadyRegisteredError(ValidationError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "This email is already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class NotInstitutionalEmailError(ValidationError):
    """Raised when student validation gets a non-institutional email."""

    def __init__(self, email: str):
        super().__init__(
            "Not an institutional email",
            code="NOT_INSTITUTIONAL_EMAIL",
            details={"email": email},
        )


class UnknownPlanError(ValidationError):
    """Raised when a plan name is not in the catalog."""

    def __init__(self, plan: str):
        super().__init__(
            f"Unknown plan: {plan}",
            code="UNKNOWN_PLAN",
            details={"plan": plan},
        )


class AccountNotFoundError(NotFoundError):
    """Raised when the caller's credential names a user that no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="ACCOUNT_NOT_FOUND",
            details={"user_id": user_id},
        )


class InsufficientRoleError(AuthorizationError):
    """Raised when the caller's role does not allow the route."""

    def __init__(self, required_roles: list[str], user_role: str):
        super().__init__(
            "Access denied",
            code="INSUFFICIENT_ROLE",
            details={"required_roles": required_roles, "user_role": user_role},
        )


class PlanNotEligibleError(AuthorizationError):
    """Raised when the caller's plan does not include an action."""

    redirect = "/plans"

    def __init__(self, action: str, plan: str, message: str = "Your plan does not include this feature"):
        super().__init__(
            message,
            code="PLAN_NOT_ELIGIBLE",
            details={"action": action, "plan": plan},
        )

    def envelope(self) -> dict[str, Any]:
        body = super().envelope()
        body["restricted"] = True
        return body
