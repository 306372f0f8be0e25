"""Tests for the global error handlers — envelope shape and opaque 500s."""

from fastapi.exceptions import RequestValidationError

from taskmanager.api.error_handlers import build_validation_error_response
from taskmanager.core.errors import DatabaseError
from taskmanager.services.task_service import TaskService
from tests.api.helpers import login


async def test_unexpected_error_is_opaque_500(make_client, monkeypatch):
    async def boom(self, *args, **kwargs):
        raise RuntimeError("secret connection string postgres://admin:pw@db")

    monkeypatch.setattr(TaskService, "list_tasks", boom)
    c = await make_client(raise_app_exceptions=False)
    await login(c, "alice")

    res = await c.get("/api/tasks")
    assert res.status_code == 500
    assert res.json() == {
        "message": "An unexpected error occurred. Please try again later.",
        "code": "INTERNAL_SERVER_ERROR",
    }
    assert "secret" not in res.text


async def test_database_error_is_opaque_500(make_client, monkeypatch):
    async def fail(self, *args, **kwargs):
        raise DatabaseError("relation \"tasks\" does not exist", "query")

    monkeypatch.setattr(TaskService, "list_tasks", fail)
    c = await make_client()
    await login(c, "alice")

    res = await c.get("/api/tasks")
    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_SERVER_ERROR"
    assert "relation" not in res.text


async def test_malformed_json_is_400(alice):
    res = await alice.post(
        "/api/tasks", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["code"] == "VALIDATION_ERROR"


class TestBuildValidationErrorResponse:

    def test_strips_location_prefix(self):
        exc = RequestValidationError([
            {"loc": ("body", "category", "name"), "msg": "too long", "type": "x"},
            {"loc": ("body", "title"), "msg": "ignored", "type": "x"},
        ])
        assert build_validation_error_response(exc) == {
            "message": "too long",
            "code": "VALIDATION_ERROR",
            "field": "category.name",
        }

    def test_body_level_error_has_no_field(self):
        exc = RequestValidationError([
            {"loc": ("body",), "msg": "Field required", "type": "missing"},
        ])
        body = build_validation_error_response(exc)
        assert "field" not in body
        assert body["message"] == "Field required"

    def test_no_errors(self):
        body = build_validation_error_response(RequestValidationError([]))
        assert body == {"message": "Invalid request data", "code": "VALIDATION_ERROR"}
