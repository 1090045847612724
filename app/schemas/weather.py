from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Conditions(str, Enum):
    """
    Sky conditions a synthetic reading can report.
    """

    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"
    STORMY = "Stormy"


class WeatherReading(BaseModel):
    """
    One weather observation for a city on a given day.

    Readings are immutable once produced.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    city: str = Field(..., min_length=1, examples=["London"])
    temperature: int = Field(..., description="Temperature in degrees Celsius", examples=[21])
    conditions: Conditions = Field(..., examples=["Sunny"])
    humidity: float = Field(..., ge=0, le=100, description="Relative humidity percentage")
    wind_speed: float = Field(..., ge=0, description="Wind speed in km/h")
    date_recorded: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="Date of the reading (YYYY-MM-DD)",
        examples=["2024-06-01"],
    )


class StatRange(BaseModel):
    """
    High, low and mean of one metric over a set of readings.
    """

    high: Union[int, float]
    low: Union[int, float]
    average: Union[int, float]


class WeatherAnalysis(BaseModel):
    """
    Per-metric statistics plus a short textual summary.
    """

    temperature: StatRange
    humidity: StatRange
    wind_speed: StatRange
    summary: str = Field(..., examples=["Warm. Humid. Calm winds."])


class WeatherResponse(BaseModel):
    """
    Response payload for GET /weather.
    """

    success: bool = True
    data: WeatherReading


class WeatherHistoryResponse(BaseModel):
    """
    Response payload for GET /weather/history/{city}.
    """

    success: bool = True
    data: list[WeatherReading] = Field(default_factory=list)


class WeatherAnalysisResponse(BaseModel):
    """
    Response payload for GET /weather/analysis/{city}.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    city: str
    data_points: int = Field(..., alias="dataPoints", description="Number of readings analysed")
    analysis: WeatherAnalysis


class ErrorResponse(BaseModel):
    """
    Failure envelope shared by every endpoint.
    """

    success: bool = False
    error: str
