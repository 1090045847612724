import asyncio
import logging
from typing import Awaitable, List, Optional, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DatabaseError
from app.models.weather_record import WeatherRecord
from app.schemas.weather import WeatherReading

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WeatherReadingRepository:
    """
    Repository for weather reading persistence.

    Encapsulates every database operation on the `weather_data` table.
    Each operation is bounded by `timeout_s`; store failures and timeouts
    are reported as `DatabaseError`, while a query with no matching rows
    returns an empty list.
    """

    def __init__(self, db: AsyncSession, timeout_s: float = 5.0):
        """
        Initialize the repository with an active database session.

        Args:
            db: Asynchronous SQLAlchemy session.
            timeout_s: Upper bound in seconds for each database call.
        """
        self.db = db
        self.timeout_s = timeout_s

    async def _bounded(self, op: Awaitable[T], action: str) -> T:
        """
        Await a database operation within `timeout_s`.

        Args:
            op: The pending session call.
            action: Short description used in the timeout message.

        Returns:
            Whatever `op` returns.

        Raises:
            DatabaseError: If `op` times out or raises a SQLAlchemy error.
        """
        try:
            return await asyncio.wait_for(op, timeout=self.timeout_s)
        except asyncio.TimeoutError as e:
            raise DatabaseError(
                f"Database operation timed out after {self.timeout_s}s while {action}"
            ) from e
        except SQLAlchemyError as e:
            raise DatabaseError(str(getattr(e, "orig", None) or e)) from e

    async def _commit(self) -> None:
        await self.db.flush()
        await self.db.commit()

    async def save(self, reading: WeatherReading) -> WeatherRecord:
        """
        Append one reading to the store.

        Args:
            reading: The reading to persist.

        Returns:
            The inserted `WeatherRecord` row.

        Raises:
            DatabaseError: If the insert or commit fails or times out.
        """
        record = WeatherRecord(**reading.model_dump(mode="json"))
        self.db.add(record)

        try:
            await self._bounded(self._commit(), "saving a reading")
        except DatabaseError:
            try:
                await self._bounded(self.db.rollback(), "rolling back a failed save")
            except DatabaseError as rollback_error:
                logger.warning("Rollback after failed save also failed: %s", rollback_error.message)
            raise

        logger.debug("Saved reading for %s on %s", record.city, record.date_recorded)
        return record

    @staticmethod
    def _city_query(city: str) -> Select:
        # Most recent first; id breaks ties between readings of the same day.
        return (
            select(WeatherRecord)
            .where(WeatherRecord.city == city)
            .order_by(WeatherRecord.date_recorded.desc(), WeatherRecord.id.desc())
        )

    async def _fetch(self, stmt: Select, action: str) -> List[WeatherReading]:
        """
        Run a select over `weather_data` and convert the rows to readings.

        Args:
            stmt: Select statement returning `WeatherRecord` rows.
            action: Short description used in the timeout message.

        Returns:
            The rows as `WeatherReading` values, in query order.
        """
        result = await self._bounded(self.db.execute(stmt), action)
        return [WeatherReading.model_validate(row) for row in result.scalars().all()]

    async def query_history(
        self,
        city: str,
        from_date: Optional[str] = None,
    ) -> List[WeatherReading]:
        """
        Retrieve stored readings for a city, most recent first.

        Args:
            city: City name, matched exactly.
            from_date: Optional inclusive lower bound as YYYY-MM-DD. ISO dates
                compare correctly as strings.

        Returns:
            The matching readings; empty if there are none.

        Raises:
            DatabaseError: If the query fails or times out.
        """
        stmt = self._city_query(city)
        if from_date:
            stmt = stmt.where(WeatherRecord.date_recorded >= from_date)

        return await self._fetch(stmt, f"loading history for {city}")

    async def query_all_for_city(self, city: str) -> List[WeatherReading]:
        """
        Retrieve every stored reading for a city, most recent first.
        """
        return await self._fetch(self._city_query(city), f"loading readings for {city}")
