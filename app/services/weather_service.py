from __future__ import annotations

from typing import List, Optional, Tuple

from app.core.dates import format_date
from app.core.errors import NotFoundError, ValidationError
from app.repositories.weather_reading_repository import WeatherReadingRepository
from app.schemas.weather import WeatherAnalysis, WeatherReading
from app.services.statistics import analyze
from app.services.weather_generator import WeatherGenerator


class WeatherService:
    """
    Entry point used by the weather routes.

    Validates request input, then delegates to the generator (live weather)
    or the repository and statistics engine (history and analysis).
    """

    def __init__(self, repository: WeatherReadingRepository, generator: WeatherGenerator):
        self.repository = repository
        self.generator = generator

    @staticmethod
    def _require_city(city: Optional[str]) -> str:
        city = (city or "").strip()
        if not city:
            raise ValidationError("City parameter is required")
        return city

    async def get_weather(self, city: Optional[str]) -> WeatherReading:
        """
        Generate (and store) a reading for `city`.

        Raises:
            ValidationError: If `city` is missing or blank.
        """
        return await self.generator.generate(self._require_city(city))

    async def get_history(
        self,
        city: Optional[str],
        from_date: Optional[str] = None,
    ) -> List[WeatherReading]:
        """
        Stored readings for `city`, most recent first.

        Args:
            city: City name; surrounding whitespace is ignored.
            from_date: Optional inclusive lower bound (YYYY-MM-DD).

        Returns:
            The matching readings, possibly none.

        Raises:
            ValidationError: If `city` is blank or `from_date` is not a date.
        """
        city = self._require_city(city)
        if from_date:
            from_date = format_date(from_date)
        return await self.repository.query_history(city, from_date)

    async def get_analysis(self, city: Optional[str]) -> Tuple[str, int, WeatherAnalysis]:
        """
        Analyse every stored reading for a city.

        Returns:
            The normalised city name, the number of readings analysed
            and their analysis.

        Raises:
            NotFoundError: If the city has no stored readings.
        """
        city = self._require_city(city)
        readings = await self.repository.query_all_for_city(city)
        if not readings:
            raise NotFoundError("No data found for this city")
        return city, len(readings), analyze(readings)
