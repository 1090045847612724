"""
Aggregate statistics over stored weather readings.

Everything here is pure: no I/O and no randomness. Means are computed with
`math.fsum`, so results do not depend on the order of the input.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from app.schemas.weather import StatRange, WeatherAnalysis, WeatherReading

# Summary thresholds, applied to the averages of each metric.
HOT_FROM = 30.0
WARM_FROM = 20.0
MILD_FROM = 10.0
HUMID_FROM = 60.0
WINDY_FROM = 15.0


def average(values: Iterable[float]) -> float:
    """
    Arithmetic mean of `values`, or 0 when there are none.
    """
    values = list(values)
    if not values:
        return 0
    return math.fsum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """
    Median of `values`, or 0 when there are none.

    Works on a sorted copy; the caller's sequence is left untouched. For an
    even count the two middle values are averaged.
    """
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return 0

    mid = n // 2
    if n % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def stat_range(values: Sequence[float]) -> StatRange:
    """
    High, low and average of a non-empty series.
    """
    if not values:
        raise ValueError("stat_range() requires at least one value")
    return StatRange(high=max(values), low=min(values), average=average(values))


def classify_temperature(avg: float) -> str:
    """
    Hot, Warm, Mild or Cold for an average temperature in degrees Celsius.
    """
    if avg >= HOT_FROM:
        return "Hot."
    if avg >= WARM_FROM:
        return "Warm."
    if avg >= MILD_FROM:
        return "Mild."
    return "Cold."


def classify_humidity(avg: float) -> str:
    """Humid at or above `HUMID_FROM` percent, Dry below."""
    return "Humid." if avg >= HUMID_FROM else "Dry."


def classify_wind(avg: float) -> str:
    """Windy at or above `WINDY_FROM` km/h, Calm winds below."""
    return "Windy." if avg >= WINDY_FROM else "Calm winds."


def summarize(temperature_avg: float, humidity_avg: float, wind_avg: float) -> str:
    """
    One sentence per metric, in the order temperature, humidity, wind.

    >>> summarize(22.5, 65, 12.5)
    'Warm. Humid. Calm winds.'
    """
    return " ".join(
        (
            classify_temperature(temperature_avg),
            classify_humidity(humidity_avg),
            classify_wind(wind_avg),
        )
    )


def analyze(readings: Sequence[WeatherReading]) -> WeatherAnalysis:
    """
    Compute per-metric statistics and a summary for a set of readings.

    Args:
        readings: At least one reading. Order is irrelevant.

    Returns:
        The `WeatherAnalysis` for the set.

    Raises:
        ValueError: If `readings` is empty. Callers are expected to report
            "no data" themselves before getting here.
    """
    if not readings:
        raise ValueError("analyze() requires at least one reading")

    temperature = stat_range([r.temperature for r in readings])
    humidity = stat_range([r.humidity for r in readings])
    wind_speed = stat_range([r.wind_speed for r in readings])

    return WeatherAnalysis(
        temperature=temperature,
        humidity=humidity,
        wind_speed=wind_speed,
        summary=summarize(temperature.average, humidity.average, wind_speed.average),
    )
