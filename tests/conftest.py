import random
from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.db import get_db
from app.models import Base, WeatherRecord
from app.main import app
from app.repositories.weather_reading_repository import WeatherReadingRepository
from app.schemas.weather import WeatherReading

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """
    Create an in-memory SQLite async engine with all tables for one test.
    """
    engine = create_async_engine(TEST_DB_URL, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine):
    """
    Provide a fresh AsyncSession bound to the test engine.
    """
    TestingSessionLocal = sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def repository(db_session):
    return WeatherReadingRepository(db_session, timeout_s=5.0)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def fixed_clock():
    return lambda: date(2024, 6, 1)


@pytest.fixture
def make_reading():
    """
    Factory for readings with sensible defaults.
    """
    def _make(**overrides) -> WeatherReading:
        values = {
            "city": "London",
            "temperature": 20,
            "conditions": "Sunny",
            "humidity": 60,
            "wind_speed": 10,
            "date_recorded": "2024-06-01",
        }
        values.update(overrides)
        return WeatherReading(**values)

    return _make


@pytest_asyncio.fixture
async def store_readings(db_session):
    """
    Insert rows directly, bypassing the repository.
    """
    async def _store(*readings: WeatherReading) -> None:
        for reading in readings:
            db_session.add(WeatherRecord(**reading.model_dump(mode="json")))
        await db_session.commit()

    return _store


@pytest.fixture
def test_app(db_session):
    """
    Return the FastAPI app with get_db overridden to use the test session.
    """
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()
