import pytest
from httpx import AsyncClient, ASGITransport


@pytest.mark.asyncio
async def test_health_ok(test_app):
    """
    `/health` answers 200 with the service name, without touching the database.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/health")

    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["service"] == "weather-report"


@pytest.mark.asyncio
async def test_health_db_ok(test_app):
    """
    `/health/db` runs `SELECT 1` against the (test) database.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/health/db")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "db": "ok"}
