"""Tests for /api/session — demo login, current user, logout."""

from taskmanager.config import get_settings
from taskmanager.core.errors import DatabaseError
from taskmanager.services.category_service import CategoryService
from tests.api.helpers import login


class TestLogin:

    async def test_login_returns_user_and_sets_cookie(self, client):
        res = await client.post("/api/session/login", json={"username": "carol"})
        assert res.status_code == 200
        assert res.json() == {"username": "carol"}
        assert get_settings().session_cookie_name in res.cookies

    async def test_login_strips_username(self, client):
        body = await login(client, "  dave  ")
        assert body == {"username": "dave"}
        assert (await client.get("/api/session/user")).json() == {"username": "dave"}

    async def test_first_login_seeds_default_categories(self, client):
        await login(client, "erin")
        names = sorted(c["name"] for c in (await client.get("/api/categories")).json())
        assert names == ["Personal", "Shopping", "Work"]

    async def test_second_login_does_not_reseed(self, make_client):
        first = await make_client()
        await login(first, "frank")
        custom = await first.post(
            "/api/categories", json={"name": "Extra", "colorCode": "#ABCDEF"},
        )
        assert custom.status_code == 201

        second = await make_client()
        await login(second, "frank")
        res = await second.get("/api/categories")
        assert len(res.json()) == 4

    async def test_blank_username_is_400(self, client):
        res = await client.post("/api/session/login", json={"username": "   "})
        assert res.status_code == 400
        body = res.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["field"] == "username"

    async def test_missing_username_is_400(self, client):
        res = await client.post("/api/session/login", json={})
        assert res.status_code == 400
        assert res.json()["field"] == "username"

    async def test_username_too_long_is_400(self, client):
        res = await client.post("/api/session/login", json={"username": "u" * 51})
        assert res.status_code == 400

    async def test_failed_seeding_leaves_client_anonymous(self, client, monkeypatch):
        async def seeding_fails(self, user_id):
            raise DatabaseError("connection reset", "commit")

        monkeypatch.setattr(
            CategoryService, "ensure_default_categories", seeding_fails,
        )
        res = await client.post("/api/session/login", json={"username": "gina"})
        assert res.status_code == 500
        assert (await client.get("/api/session/user")).status_code == 401


class TestCurrentUser:

    async def test_returns_logged_in_user(self, alice):
        res = await alice.get("/api/session/user")
        assert res.status_code == 200
        assert res.json() == {"username": "alice"}

    async def test_anonymous_is_401(self, client):
        res = await client.get("/api/session/user")
        assert res.status_code == 401
        assert res.json() == {
            "message": "No authenticated user found in session",
            "code": "UNAUTHORIZED",
        }

    async def test_dev_auto_login(self, client, monkeypatch):
        monkeypatch.setattr(get_settings(), "dev_auto_login_user", "devuser")
        res = await client.get("/api/session/user")
        assert res.status_code == 200
        assert res.json() == {"username": "devuser"}


class TestLogout:

    async def test_logout_clears_session(self, alice):
        res = await alice.post("/api/session/logout")
        assert res.status_code == 204
        assert (await alice.get("/api/session/user")).status_code == 401
        assert (await alice.get("/api/tasks")).status_code == 401

    async def test_logout_when_anonymous_is_204(self, client):
        res = await client.post("/api/session/logout")
        assert res.status_code == 204

    async def test_data_survives_relogin(self, alice):
        await alice.post("/api/categories", json={"name": "Kept", "colorCode": "#010203"})
        await alice.post("/api/session/logout")
        await login(alice, "alice")
        names = [c["name"] for c in (await alice.get("/api/categories")).json()]
        assert "Kept" in names
