"""ABOUTME: Pytest configuration and shared fixtures for weather server tests.

Provides Open-Meteo shaped sample payloads and fake collaborators so the
pipeline can be exercised without any network calls.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from weather.config import WeatherSettings
from weather.forecast import ForecastResponse, ForecastSection
from weather.geocoding import ResolvedLocation
from weather.service import WeatherService

# 2024-01-01T00:00:00Z
BASE_TIME = 1704067200
HOUR = 3600
DAY = 86400


def make_http_response(payload):
    """MagicMock standing in for an httpx.Response with a JSON body."""
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = payload
    resp.raise_for_status = MagicMock()
    return resp


def hourly_section(count, start=BASE_TIME, temps=None, winds=None):
    temps = temps if temps is not None else [10.0 + i for i in range(count)]
    winds = winds if winds is not None else [5.0 + i for i in range(count)]
    return ForecastSection(time=start, time_end=start + count * HOUR, interval=HOUR, values=[temps, winds])


def daily_section(count, start=BASE_TIME, t_max=None, t_min=None, precip=None, wind_max=None):
    t_max = t_max if t_max is not None else [20.0 + i for i in range(count)]
    t_min = t_min if t_min is not None else [10.0 + i for i in range(count)]
    precip = precip if precip is not None else [0.5 * i for i in range(count)]
    wind_max = wind_max if wind_max is not None else [15.0 + i for i in range(count)]
    return ForecastSection(
        time=start,
        time_end=start + count * DAY,
        interval=DAY,
        values=[t_max, t_min, precip, wind_max],
    )


@pytest.fixture
def paris():
    """Fixture providing a resolved location."""
    return ResolvedLocation(latitude=48.85341, longitude=2.3488, display_name="Paris, Île-de-France, France")


@pytest.fixture
def mock_geocoding_data():
    """Fixture providing a sample Open-Meteo geocoding response."""
    return {
        "results": [
            {
                "id": 2988507,
                "name": "Paris",
                "latitude": 48.85341,
                "longitude": 2.3488,
                "country": "France",
                "admin1": "Île-de-France",
                "timezone": "Europe/Paris",
            }
        ],
        "generationtime_ms": 0.5,
    }


@pytest.fixture
def mock_current_data():
    """Fixture providing a sample Open-Meteo current-weather response (unixtime)."""
    return {
        "latitude": 48.86,
        "longitude": 2.34,
        "utc_offset_seconds": 3600,
        "timezone": "Europe/Paris",
        "current": {
            "time": BASE_TIME,
            "interval": 900,
            "temperature_2m": 20.449,
            "wind_speed_10m": 19.96,
        },
    }


@pytest.fixture
def current_response():
    """Fixture providing a parsed current-weather ForecastResponse."""
    return ForecastResponse(
        utc_offset_seconds=3600,
        current=ForecastSection(time=BASE_TIME, time_end=BASE_TIME + 900, interval=900, values=[20.449, 19.96]),
    )


@pytest.fixture
def mock_geocoder(paris):
    """Fixture providing a geocoder that always resolves to Paris."""
    return AsyncMock(return_value=paris)


@pytest.fixture
def mock_fetcher(current_response):
    """Fixture providing a forecast fetcher returning the current-weather response."""
    return AsyncMock(return_value=current_response)


@pytest.fixture
def service(mock_geocoder, mock_fetcher):
    """Fixture providing a WeatherService wired to fake collaborators."""
    return WeatherService(WeatherSettings(mcp_text_output="0"), geocoder=mock_geocoder, forecast_fetcher=mock_fetcher)


@pytest.fixture(autouse=True)
def clear_text_output_env(monkeypatch):
    """Keep the developer's MCP_TEXT_OUTPUT from changing default formats in tests."""
    monkeypatch.delenv("MCP_TEXT_OUTPUT", raising=False)
