"""ABOUTME: Forecast request construction and the Open-Meteo forecast adapter.

build_forecast_query maps {mode, units, days} onto the variables and unit
parameters Open-Meteo expects. fetch_forecast sends the query and exposes the
reply as aligned sections whose variables are indexed by position, in the same
order the query requested them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from common.http_utils import error_reason, safe_http_get
from .arguments import WeatherRequest

logger = logging.getLogger(__name__)

# ============================================================================
# CONSTANTS
# ============================================================================

WEATHER_API = "https://api.open-meteo.com/v1/forecast"
API_TIMEOUT_SECONDS = 10.0

# Variable order is positional: the normalizer reads variables(0), variables(1), ...
CURRENT_PARAMS = ["temperature_2m", "wind_speed_10m"]
HOURLY_PARAMS = ["temperature_2m", "wind_speed_10m"]
DAILY_PARAMS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "wind_speed_10m_max",
]

# Hourly asks for two days and is trimmed to 24 entries later
HOURLY_FORECAST_DAYS = 2
HOURLY_PAST_DAYS = 0

# Seconds between samples for series sections
SECTION_INTERVALS = {"hourly": 3600, "daily": 86400}

# Unit display tags
CELSIUS_DISPLAY_UNIT = "°C"
FAHRENHEIT_DISPLAY_UNIT = "°F"
PRECIPITATION_DISPLAY_UNIT = "mm"


def get_unit_symbol(units: str) -> str:
    """Get temperature unit symbol for a unit system."""
    return FAHRENHEIT_DISPLAY_UNIT if units == "imperial" else CELSIUS_DISPLAY_UNIT


def get_wind_speed_unit(units: str) -> str:
    """Get wind speed unit ("mph" or "km/h") for a unit system."""
    return "mph" if units == "imperial" else "km/h"


# ============================================================================
# REQUEST BUILDER
# ============================================================================


@dataclass(frozen=True)
class ForecastQuery:
    """Parameters sent to the forecast provider for one request."""

    section: str
    variables: List[str]
    temperature_unit: str
    windspeed_unit: str
    forecast_days: Optional[int] = None
    past_days: Optional[int] = None

    def to_params(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Render the query as Open-Meteo HTTP parameters."""
        params: Dict[str, Any] = {
            "latitude": latitude,
            "longitude": longitude,
            "timezone": "auto",
            "timeformat": "unixtime",
            self.section: ",".join(self.variables),
            "temperature_unit": self.temperature_unit,
            "windspeed_unit": self.windspeed_unit,
        }
        if self.past_days is not None:
            params["past_days"] = self.past_days
        if self.forecast_days is not None:
            params["forecast_days"] = self.forecast_days
        return params


def build_forecast_query(request: WeatherRequest) -> ForecastQuery:
    """Map a validated request onto forecast provider parameters.

    Args:
        request: Validated WeatherRequest

    Returns:
        ForecastQuery for the request's mode and unit system
    """
    if request.units == "imperial":
        temperature_unit, windspeed_unit = "fahrenheit", "mph"
    else:
        temperature_unit, windspeed_unit = "celsius", "kmh"

    if request.mode == "current":
        return ForecastQuery("current", list(CURRENT_PARAMS), temperature_unit, windspeed_unit)
    if request.mode == "hourly":
        return ForecastQuery(
            "hourly",
            list(HOURLY_PARAMS),
            temperature_unit,
            windspeed_unit,
            forecast_days=HOURLY_FORECAST_DAYS,
            past_days=HOURLY_PAST_DAYS,
        )
    return ForecastQuery(
        "daily",
        list(DAILY_PARAMS),
        temperature_unit,
        windspeed_unit,
        forecast_days=request.resolved_days,
    )


# ============================================================================
# RESPONSE MODEL
# ============================================================================


@dataclass
class ForecastSection:
    """One block of a forecast response.

    ``time`` is the first sample's unix time (GMT); ``time_end`` is exclusive.
    For the current block each variable is a single value, for hourly/daily
    blocks each variable is a list aligned with the timestamps.
    """

    time: int
    time_end: int
    interval: int
    values: List[Any] = field(default_factory=list)

    def variables(self, index: int) -> Any:
        """Variable at a requested position, or None if the provider omitted it."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return None


@dataclass
class ForecastResponse:
    """Forecast provider reply for a single location."""

    utc_offset_seconds: int = 0
    current: Optional[ForecastSection] = None
    hourly: Optional[ForecastSection] = None
    daily: Optional[ForecastSection] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any], query: ForecastQuery) -> "ForecastResponse":
        """Build a response from Open-Meteo JSON requested with ``timeformat=unixtime``."""
        response = cls(utc_offset_seconds=int(data.get("utc_offset_seconds") or 0))

        block = data.get(query.section)
        if not isinstance(block, dict):
            return response

        if query.section == "current":
            start = int(block.get("time") or 0)
            interval = int(block.get("interval") or 0)
            section = ForecastSection(
                time=start,
                time_end=start + interval,
                interval=interval,
                values=[block.get(name) for name in query.variables],
            )
        else:
            times = block.get("time") or []
            interval = SECTION_INTERVALS[query.section]
            start = int(times[0]) if times else 0
            section = ForecastSection(
                time=start,
                time_end=start + len(times) * interval,
                interval=interval,
                values=[_as_list(block.get(name)) for name in query.variables],
            )

        setattr(response, query.section, section)
        return response


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


# ============================================================================
# FETCH
# ============================================================================


class ForecastAPIError(Exception):
    """Forecast provider answered with an error status."""


async def fetch_forecast(
    query: ForecastQuery,
    latitude: float,
    longitude: float
) -> Optional[ForecastResponse]:
    """Fetch a forecast for one location.

    Args:
        query: Parameters built by build_forecast_query
        latitude: Latitude coordinate
        longitude: Longitude coordinate

    Returns:
        ForecastResponse, or None if the provider returned no data

    Raises:
        ForecastAPIError: If the provider answered with an error status
        httpx.HTTPError: If the request could not be completed
    """
    logger.debug(f"Fetching {query.section} forecast for ({latitude}, {longitude})")

    try:
        resp = await safe_http_get(
            WEATHER_API,
            params=query.to_params(latitude, longitude),
            timeout=API_TIMEOUT_SECONDS
        )
    except httpx.HTTPStatusError as e:
        reason = error_reason(e.response) or f"HTTP {e.response.status_code}"
        logger.error(f"{query.section} forecast request rejected for ({latitude}, {longitude}): {reason}")
        raise ForecastAPIError(reason) from e

    data = resp.json()
    if not isinstance(data, dict) or not data:
        logger.warning(f"Empty forecast response for ({latitude}, {longitude})")
        return None
    return ForecastResponse.from_json(data, query)
