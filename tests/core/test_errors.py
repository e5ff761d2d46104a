"""Tests for the error taxonomy and its HTTP rendering."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.errors import (
    NotFoundError,
    PersistenceError,
    UpstreamError,
    ValidationError,
    register_exception_handlers,
)


def test_status_codes():
    assert ValidationError("x").status_code == 400
    assert NotFoundError("x").status_code == 404
    assert PersistenceError("x").status_code == 500
    assert UpstreamError("x").status_code == 500


async def test_errors_render_as_error_body():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/missing")
    async def missing():
        raise NotFoundError("ISP not found")

    @app.get("/upstream")
    async def upstream():
        raise UpstreamError("Failed to get AI recommendation")

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/missing")
        assert response.status_code == 404
        assert response.json() == {"error": "ISP not found"}

        response = await client.get("/upstream")
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to get AI recommendation"}
