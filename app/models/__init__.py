from app.models.base import Base
from app.models.weather_record import WeatherRecord

__all__ = ["Base", "WeatherRecord"]
