"""Error Handlers — error kind → HTTP status mapping and body shape."""

import pytest
from httpx import ASGITransport, AsyncClient
from fastapi import FastAPI

from learn_api.api.error_handlers import error_body, register_error_handlers, status_for
from learn_api.core.errors import (
    AccessDeniedError, DatabaseError, ErrorCategory, InvalidHierarchyError,
    InvalidPathError, LearnApiError, NotFoundError, ValidationError,
)


@pytest.mark.parametrize("exc,expected", [
    (NotFoundError("Article", "1"), 404),
    (InvalidPathError("empty path"), 404),
    (ValidationError("bad limit", "limit"), 400),
    (AccessDeniedError("learn:read"), 403),
    (InvalidHierarchyError([1]), 500),
    (DatabaseError("down", "query"), 503),
    (LearnApiError("odd", "ODD", ErrorCategory.VALIDATION), 500),
])
def test_status_for(exc, expected):
    assert status_for(exc) == expected


def test_subclass_inherits_parent_status():
    class MissingArticle(NotFoundError):
        pass

    assert status_for(MissingArticle("Article", "x")) == 404


def test_error_body_shape():
    assert error_body(404, "Article 'x' not found") == {
        "statusCode": 404,
        "message": "Article 'x' not found",
        "error": "Not Found",
    }


@pytest.fixture
async def failing_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/database")
    async def database():
        raise DatabaseError("connection refused to 10.0.0.5", "query")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_server_errors_hide_details(failing_client):
    res = await failing_client.get("/database")
    assert res.status_code == 503
    assert res.json() == {
        "statusCode": 503,
        "message": "Service Unavailable",
        "error": "Service Unavailable",
    }


async def test_unhandled_exception_is_generic_500(failing_client):
    res = await failing_client.get("/boom")
    assert res.status_code == 500
    assert res.json()["message"] == "Internal server error"
    assert "secret" not in res.text
