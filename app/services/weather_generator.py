from __future__ import annotations

import logging
import random
from datetime import date, datetime, timezone
from typing import Callable, Optional, Protocol, Sequence, TypeVar

from app.core.errors import DatabaseError
from app.repositories.weather_reading_repository import WeatherReadingRepository
from app.schemas.weather import Conditions, WeatherReading

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """
    Source of randomness used to synthesize readings.

    `random.Random` satisfies it; tests pass a seeded instance.
    """

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


class WeatherGenerator:
    """
    Produces synthetic weather readings and records them.

    Values are uniform draws within fixed bounds; nothing is derived from
    previous readings.
    """

    TEMPERATURE_RANGE = (5, 40)
    HUMIDITY_RANGE = (0, 100)
    WIND_SPEED_RANGE = (0, 50)
    CONDITIONS = tuple(Conditions)

    def __init__(
        self,
        repository: WeatherReadingRepository,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], date] = today_utc,
    ):
        self.repository = repository
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock

    def synthesize(self, city: str) -> WeatherReading:
        """
        Build a reading for `city` without persisting it.
        """
        return WeatherReading(
            city=city,
            temperature=self.rng.randint(*self.TEMPERATURE_RANGE),
            conditions=self.rng.choice(self.CONDITIONS),
            humidity=self.rng.randint(*self.HUMIDITY_RANGE),
            wind_speed=self.rng.randint(*self.WIND_SPEED_RANGE),
            date_recorded=self.clock().isoformat(),
        )

    async def generate(self, city: str) -> WeatherReading:
        """
        Generate a reading for `city` and store it.

        A failed save is logged and otherwise ignored: the caller always
        gets the generated reading back.

        Args:
            city: Non-empty city name, already validated by the caller.

        Returns:
            The generated reading.
        """
        reading = self.synthesize(city)

        try:
            await self.repository.save(reading)
        except DatabaseError as e:
            logger.warning("Could not save reading for %s: %s", city, e.message)

        return reading
