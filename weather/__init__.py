"""ABOUTME: City weather lookup - validation, geocoding, forecast shaping and transports."""

from .arguments import ArgumentErrors, WeatherRequest, parse_weather_arguments
from .config import WeatherSettings
from .service import WeatherService

__all__ = [
    "ArgumentErrors",
    "WeatherRequest",
    "parse_weather_arguments",
    "WeatherSettings",
    "WeatherService",
]
