"""Tests for health check endpoints and error envelopes."""

import pytest
from fastapi import APIRouter

from shared.gateway import PersistenceError
from tests.conftest import auth_headers_for, make_user


class TestHealthEndpoints:
    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "0.1.0"}

    def test_readiness_check(self, client, gateway):
        response = client.get("/api/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}
        assert gateway.calls == [("fetch_one", "users")]

    def test_readiness_when_database_is_down(self, client, gateway):
        gateway.fail("fetch_one", "users", PersistenceError("fetch_one", "users", "connection refused"))
        response = client.get("/api/ready")
        assert response.status_code == 503
        assert response.json()["database"] == "unreachable"


class TestErrorEnvelopes:
    def test_upstream_failure_is_generic(self, client, gateway):
        gateway.fail("fetch_all", "contents", PersistenceError("fetch_all", "contents", "relation \"contents\" does not exist"))

        response = client.get("/content", headers=auth_headers_for(make_user()))

        assert response.status_code == 500
        assert response.json() == {"ok": False, "error": "Internal error"}

    def test_unexpected_exception_is_generic(self, app, client):
        router = APIRouter()

        @router.get("/boom")
        async def boom():
            raise KeyError("secret detail")

        app.include_router(router)
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"ok": False, "error": "Internal error"}

    def test_unknown_route(self, client):
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json() == {"ok": False, "error": "Not Found"}


class TestOpenAPI:
    def test_error_envelope_is_documented(self, app):
        schema = app.openapi()
        booking = schema["paths"]["/schedule/book"]["post"]["responses"]
        assert {"401", "403"} <= set(booking)
        assert "ErrorResponse" in schema["components"]["schemas"]
