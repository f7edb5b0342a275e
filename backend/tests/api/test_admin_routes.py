"""Tests for admin endpoints."""

import pytest

from tests.conftest import auth_headers_for


@pytest.fixture
def population(gateway, admin_user):
    gateway.seed(
        "users",
        {"id": admin_user.id, "name": "Root", "email": "root@example.com", "password_hash": "h", "role": "admin", "plan": "free"},
        {"id": "c-1", "name": "Ana", "email": "a@example.com", "password_hash": "h", "role": "client", "plan": "silver"},
    )
    gateway.seed("contents", {"title": "Intro"})


class TestAdminRoutes:
    @pytest.mark.parametrize("path", ["/admin/dashboard", "/admin/stats"])
    def test_stats(self, client, population, admin_user, path):
        response = client.get(path, headers=auth_headers_for(admin_user))

        stats = response.json()["stats"]
        assert stats["users"] == 2
        assert stats["users_by_plan"] == {"free": 1, "silver": 1}
        assert stats["content"] == 1
        assert stats["appointments"] == 0

    def test_users_never_expose_hashes(self, client, population, admin_user):
        response = client.get("/admin/users", headers=auth_headers_for(admin_user))
        users = response.json()["users"]
        assert {u["id"] for u in users} == {admin_user.id, "c-1"}
        assert all("password_hash" not in u for u in users)

    def test_update_role(self, client, gateway, population, admin_user):
        response = client.post(
            "/admin/users/update-role",
            json={"user_id": "c-1", "role": "professional"},
            headers=auth_headers_for(admin_user),
        )
        assert response.json()["user"]["role"] == "professional"

    def test_update_role_invalid(self, client, population, admin_user):
        response = client.post(
            "/admin/users/update-role",
            json={"user_id": "c-1", "role": "owner"},
            headers=auth_headers_for(admin_user),
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid role"

    def test_delete_user(self, client, gateway, population, admin_user):
        response = client.delete("/admin/users/c-1", headers=auth_headers_for(admin_user))
        assert response.json() == {"ok": True}
        assert [row["id"] for row in gateway.rows("users")] == [admin_user.id]

    def test_cannot_delete_self(self, client, gateway, population, admin_user):
        response = client.delete(f"/admin/users/{admin_user.id}", headers=auth_headers_for(admin_user))
        assert response.status_code == 400
        assert len(gateway.rows("users")) == 2
