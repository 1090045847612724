from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.db import get_db
from app.repositories.weather_reading_repository import WeatherReadingRepository
from app.schemas.weather import (
    ErrorResponse,
    WeatherAnalysisResponse,
    WeatherHistoryResponse,
    WeatherResponse,
)
from app.services.weather_generator import WeatherGenerator
from app.services.weather_service import WeatherService

router = APIRouter(prefix="/weather", tags=["Weather"])


def get_weather_service(db: AsyncSession = Depends(get_db)) -> WeatherService:
    """
    Build a `WeatherService` bound to the request's database session.
    """
    repository = WeatherReadingRepository(db, timeout_s=settings.db_timeout_s)
    return WeatherService(repository=repository, generator=WeatherGenerator(repository))


@router.get(
    "",
    response_model=WeatherResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Current weather for a city",
    description=(
        "Generates a simulated weather reading for `city` and stores it.\n\n"
        "The reading is returned even if storing it fails."
    ),
)
async def get_weather(
    city: Optional[str] = Query(None, description="City name"),
    service: WeatherService = Depends(get_weather_service),
):
    reading = await service.get_weather(city)
    return WeatherResponse(data=reading)


@router.get(
    "/history/{city}",
    response_model=WeatherHistoryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Stored readings for a city",
    description=(
        "Returns the stored readings for `city`, most recent first.\n\n"
        "- `from` (YYYY-MM-DD) keeps only readings recorded on or after that date.\n"
        "- A city without readings yields an empty list."
    ),
)
async def get_city_history(
    city: str,
    from_date: Optional[str] = Query(None, alias="from", description="Start date (YYYY-MM-DD)"),
    service: WeatherService = Depends(get_weather_service),
):
    readings = await service.get_history(city, from_date)
    return WeatherHistoryResponse(data=readings)


@router.get(
    "/analysis/{city}",
    response_model=WeatherAnalysisResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Statistics over stored readings",
    description=(
        "Computes high/low/average temperature, humidity and wind speed over every "
        "stored reading for `city`, plus a short summary. Returns 404 when the city "
        "has no readings."
    ),
)
async def get_weather_analysis(
    city: str,
    service: WeatherService = Depends(get_weather_service),
):
    city, data_points, analysis = await service.get_analysis(city)
    return WeatherAnalysisResponse(city=city, data_points=data_points, analysis=analysis)
