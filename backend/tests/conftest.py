"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import timedelta

from shared.config import get_settings
from shared.models import AuthenticatedUser, Plan, Role
from shared.database import reset_client_cache
from modules.auth.session import SessionCodec, reset_session_codec
from api.dependencies import reset_container
from tests.fakes import InMemoryGateway, InMemoryStorage


# Test signing secret (only for testing)
TEST_SESSION_SECRET = "test-session-secret-for-testing-only"


def make_user(
    user_id: str = "user-1",
    role: Role = Role.CLIENT,
    plan: Plan = Plan.FREE,
    name: str = "Ana",
    email: str = "ana@example.com",
) -> AuthenticatedUser:
    """Build an identity as the gate would attach it."""
    return AuthenticatedUser(id=user_id, name=name, email=email, role=role, plan=plan)


def create_test_token(
    user: AuthenticatedUser | None = None,
    expired: bool = False,
    secret: str = TEST_SESSION_SECRET,
) -> str:
    """
    Create a session credential for testing.

    Args:
        user: Identity to embed; a free-plan client by default
        expired: If True, the credential expired an hour ago
        secret: Signing secret
    """
    ttl = timedelta(hours=-1) if expired else timedelta(days=7)
    codec = SessionCodec(secret, ttl=ttl)
    return codec.create_session((user or make_user()).to_claims())


def auth_headers_for(user: AuthenticatedUser) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_test_token(user)}"}


@pytest.fixture(autouse=True)
def session_environment(monkeypatch):
    """Configure the signing secret and drop every cached singleton."""
    monkeypatch.setenv("SESSION_SECRET", TEST_SESSION_SECRET)
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
    get_settings.cache_clear()
    reset_session_codec()
    reset_client_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_session_codec()
    reset_client_cache()
    reset_container()


@pytest.fixture
def gateway() -> InMemoryGateway:
    """Empty in-memory persistence gateway."""
    return InMemoryGateway()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def client_user() -> AuthenticatedUser:
    return make_user("client-1", Role.CLIENT, Plan.PREMIUM)


@pytest.fixture
def free_user() -> AuthenticatedUser:
    return make_user("client-2", Role.CLIENT, Plan.FREE, name="Bruno", email="bruno@example.com")


@pytest.fixture
def pro_user() -> AuthenticatedUser:
    return make_user("pro-1", Role.PROFESSIONAL, Plan.FREE, name="Dr. Silva", email="silva@example.com")


@pytest.fixture
def admin_user() -> AuthenticatedUser:
    return make_user("admin-1", Role.ADMIN, Plan.FREE, name="Root", email="root@example.com")
