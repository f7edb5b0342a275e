"""
Authentication service implementation.

Registers and logs in users against the users table and issues session
credentials through the session codec.
"""

import logging
import re

from shared.gateway import DuplicateKeyError, IPersistenceGateway
from shared.models import AuthenticatedUser, Plan, Role
from modules.policy import home_redirect

from .interfaces import IAuthService
from .models import LoginResult, RegisterResult, SessionResult
from .exceptions import (
    AccountNotFoundError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    MissingFieldsError,
    NotInstitutionalEmailError,
    UnknownPlanError,
)
from .passwords import hash_password, verify_password
from .repository import UserRepository
from .session import SessionCodec

logger = logging.getLogger(__name__)

INSTITUTIONAL_EMAIL = re.compile(r"^[^@\s]+@[\w.-]+\.edu(\.[a-z]{2})?$", re.IGNORECASE)

STUDENT_CHECKOUT_REDIRECT = f"/pay?plan={Plan.STUDENT.value}"


def is_institutional_email(email: str) -> bool:
    """True for addresses on an .edu domain, optionally with a country suffix."""
    return bool(INSTITUTIONAL_EMAIL.match(email.strip()))


def parse_plan(plan: str) -> Plan:
    try:
        return Plan(plan.strip().lower())
    except (AttributeError, ValueError):
        raise UnknownPlanError(str(plan))


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Credentials embed a snapshot of the user. Plan changes made here reissue
    the caller's credential; credentials issued earlier stay valid until they
    expire.
    """

    def __init__(self, gateway: IPersistenceGateway, codec: SessionCodec):
        self._users = UserRepository(gateway)
        self._codec = codec

    async def register(self, name: str, email: str, password: str) -> RegisterResult:
        """Create a client account on the free plan."""
        name, email = (name or "").strip(), (email or "").strip().lower()
        if not name or not email or not password:
            raise MissingFieldsError("name", "email", "password")

        if await self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        try:
            user = await self._users.create({
                "name": name,
                "email": email,
                "password_hash": hash_password(password),
                "role": Role.CLIENT.value,
                "plan": Plan.FREE.value,
            })
        except DuplicateKeyError as e:
            raise EmailAlreadyRegisteredError(email) from e
        logger.info("Registered user %s", user.id)

        return RegisterResult(user=user.public())

    async def login(self, email: str, password: str) -> LoginResult:
        """Check credentials and issue a session credential."""
        email = (email or "").strip().lower()
        if not email or not password:
            raise MissingFieldsError("email", "password")

        user = await self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise InvalidCredentialsError()

        return LoginResult(
            token=self._codec.create_session(user.identity().to_claims()),
            redirect=home_redirect(user.role),
            user=user.public(),
        )

    async def validate_student(
        self,
        user: AuthenticatedUser,
        email: str,
        code: str,
    ) -> SessionResult:
        """Promote the caller to the student plan."""
        email = (email or "").strip()
        if not email or not (code or "").strip():
            raise MissingFieldsError("email", "code")

        if not is_institutional_email(email):
            raise NotInstitutionalEmailError(email)

        token = await self._change_plan(user, Plan.STUDENT)
        return SessionResult(token=token, redirect=STUDENT_CHECKOUT_REDIRECT)

    async def update_plan(self, user: AuthenticatedUser, plan: str) -> SessionResult:
        """Store a new plan for the caller and reissue their credential."""
        token = await self._change_plan(user, parse_plan(plan))
        return SessionResult(token=token)

    async def _change_plan(self, user: AuthenticatedUser, plan: Plan) -> str:
        if await self._users.set_fields(user.id, plan=plan.value) is None:
            raise AccountNotFoundError(user.id)
        logger.info("User %s moved from plan %s to %s", user.id, user.plan.value, plan.value)
        refreshed = user.model_copy(update={"plan": plan})
        return self._codec.create_session(refreshed.to_claims())
