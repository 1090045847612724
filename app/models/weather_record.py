from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class WeatherRecord(Base):
    """
    Stored weather reading.

    One row per generated reading. Rows are append-only: they are
    inserted once and never updated.
    """

    __tablename__ = "weather_data"

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Internal unique identifier for the reading",
    )

    city: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        comment="City the reading was generated for",
    )

    temperature: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Temperature in degrees Celsius",
    )

    conditions: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="Sky conditions (Sunny, Cloudy, Rainy, Stormy)",
    )

    humidity: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Relative humidity percentage",
    )

    wind_speed: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Wind speed in km/h",
    )

    date_recorded: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Date of the reading as YYYY-MM-DD",
    )

    # ------------------------------------------------------------------
    # Constraints
    # ------------------------------------------------------------------

    __table_args__ = (
        Index("ix_weather_data_city_date", "city", "date_recorded"),
    )
