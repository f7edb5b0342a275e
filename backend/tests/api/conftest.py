"""
Fixtures for API tests.

Services are the real implementations, wired to the in-memory gateway and
storage through FastAPI dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_admin_service,
    get_auth_service,
    get_content_service,
    get_gateway,
    get_notification_service,
    get_plan_service,
    get_scheduling_service,
    get_session_codec,
)
from modules.admin.service import AdminService
from modules.auth.service import AuthService
from modules.auth.session import SessionCodec
from modules.content.service import ContentService
from modules.notifications.service import NotificationService
from modules.plans.service import PlanService
from modules.scheduling.service import SchedulingService
from tests.conftest import TEST_SESSION_SECRET


@pytest.fixture
def codec() -> SessionCodec:
    return SessionCodec(TEST_SESSION_SECRET)


@pytest.fixture
def app(gateway, storage, codec):
    """Create a fresh app for each test, backed by the in-memory doubles."""
    app = create_app()
    auth = AuthService(gateway, codec)
    app.dependency_overrides[get_session_codec] = lambda: codec
    app.dependency_overrides[get_gateway] = lambda: gateway
    app.dependency_overrides[get_auth_service] = lambda: auth
    app.dependency_overrides[get_plan_service] = lambda: PlanService(auth)
    app.dependency_overrides[get_scheduling_service] = lambda: SchedulingService(gateway)
    app.dependency_overrides[get_content_service] = lambda: ContentService(gateway, storage)
    app.dependency_overrides[get_notification_service] = lambda: NotificationService(gateway)
    app.dependency_overrides[get_admin_service] = lambda: AdminService(gateway)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
