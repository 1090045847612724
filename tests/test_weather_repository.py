import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DatabaseError
from app.models.weather_record import WeatherRecord
from app.repositories.weather_reading_repository import WeatherReadingRepository


@pytest.mark.asyncio
async def test_save_appends_row(repository, db_session, make_reading):
    await repository.save(make_reading(city="London", temperature=21))
    await repository.save(make_reading(city="London", temperature=23))

    rows = (await db_session.execute(select(WeatherRecord))).scalars().all()

    assert len(rows) == 2
    assert {r.temperature for r in rows} == {21, 23}
    assert all(r.conditions == "Sunny" for r in rows)


@pytest.mark.asyncio
async def test_query_history_empty_store_returns_empty_list(repository):
    assert await repository.query_history("London") == []


@pytest.mark.asyncio
async def test_query_history_filters_city_and_orders_by_recency(repository, store_readings, make_reading):
    await store_readings(
        make_reading(city="London", date_recorded="2023-01-01", temperature=18),
        make_reading(city="Paris", date_recorded="2023-01-02", temperature=30),
        make_reading(city="London", date_recorded="2023-01-03", temperature=20),
        make_reading(city="London", date_recorded="2023-01-02", temperature=19),
    )

    readings = await repository.query_history("London")

    assert [r.date_recorded for r in readings] == ["2023-01-03", "2023-01-02", "2023-01-01"]
    assert all(r.city == "London" for r in readings)


@pytest.mark.asyncio
async def test_query_history_applies_inclusive_date_floor(repository, store_readings, make_reading):
    await store_readings(
        make_reading(date_recorded="2022-12-31"),
        make_reading(date_recorded="2023-01-01"),
        make_reading(date_recorded="2023-02-15"),
    )

    readings = await repository.query_history("London", "2023-01-01")

    assert [r.date_recorded for r in readings] == ["2023-02-15", "2023-01-01"]


@pytest.mark.asyncio
async def test_query_all_for_city_ignores_dates(repository, store_readings, make_reading):
    await store_readings(
        make_reading(date_recorded="2020-01-01"),
        make_reading(date_recorded="2024-01-01"),
        make_reading(city="Oslo"),
    )

    readings = await repository.query_all_for_city("London")

    assert len(readings) == 2


@pytest.mark.asyncio
async def test_store_error_raises_database_error():
    db = MagicMock(spec=AsyncSession)
    db.execute = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("Database connection failed"))
    )
    repository = WeatherReadingRepository(db)

    with pytest.raises(DatabaseError, match="Database connection failed"):
        await repository.query_history("London")


@pytest.mark.asyncio
async def test_slow_store_times_out_as_database_error():
    async def hang(*args, **kwargs):
        await asyncio.sleep(10)

    db = MagicMock(spec=AsyncSession)
    db.execute = AsyncMock(side_effect=hang)
    repository = WeatherReadingRepository(db, timeout_s=0.05)

    with pytest.raises(DatabaseError, match="timed out"):
        await repository.query_all_for_city("London")


@pytest.mark.asyncio
async def test_failed_save_rolls_back(make_reading):
    db = MagicMock(spec=AsyncSession)
    db.flush = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk I/O error")))
    db.rollback = AsyncMock()
    repository = WeatherReadingRepository(db)

    with pytest.raises(DatabaseError, match="disk I/O error"):
        await repository.save(make_reading())

    db.rollback.assert_awaited_once()
    db.commit.assert_not_called()


@pytest.mark.asyncio
async def test_save_with_hung_store_times_out_including_rollback(make_reading):
    async def hang(*args, **kwargs):
        await asyncio.sleep(10)

    db = MagicMock(spec=AsyncSession)
    db.flush = AsyncMock(side_effect=hang)
    db.rollback = AsyncMock(side_effect=hang)
    repository = WeatherReadingRepository(db, timeout_s=0.05)

    with pytest.raises(DatabaseError, match="timed out"):
        await asyncio.wait_for(repository.save(make_reading()), timeout=1.0)

    db.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_rollback_keeps_original_database_error(make_reading):
    db = MagicMock(spec=AsyncSession)
    db.flush = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk I/O error")))
    db.rollback = AsyncMock(side_effect=OperationalError("ROLLBACK", {}, Exception("no connection")))
    repository = WeatherReadingRepository(db)

    with pytest.raises(DatabaseError, match="disk I/O error"):
        await repository.save(make_reading())
