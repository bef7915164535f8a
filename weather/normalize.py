"""ABOUTME: Reshape forecast provider sections into current/hourly/daily payloads.

All physical quantities are rounded to one decimal place, half away from zero.
Anything that is not a finite number becomes None. Series are cut to the
shortest of their aligned arrays so mismatched provider arrays never index out
of range.
"""

import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Dict, List, Optional

from .arguments import WeatherRequest
from .forecast import (
    PRECIPITATION_DISPLAY_UNIT,
    ForecastResponse,
    ForecastSection,
    get_unit_symbol,
    get_wind_speed_unit,
)
from .geocoding import ResolvedLocation

HOURLY_MAX_ENTRIES = 24

_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: Any) -> Optional[float]:
    """Round a provider sample to one decimal place.

    Ties go away from zero (20.45 -> 20.5, -20.45 -> -20.5). The decimal
    representation of the float is rounded, not its binary value, so 20.449
    gives 20.4 and 19.96 gives 20.0.

    Returns:
        Rounded float, or None for missing, non-numeric or non-finite input
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the one decimal place
        ctx.prec = max(28, exact.adjusted() + 3)
        rounded = float(exact.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
    # Fold -0.0 into 0.0
    return rounded + 0.0


def sample_times(section: ForecastSection, utc_offset_seconds: int) -> List[datetime]:
    """Rebuild one local wall-clock timestamp per sample.

    Each timestamp is ``time + i * interval + utc_offset_seconds`` read as UTC,
    so its calendar fields show local time at the forecast location.
    """
    if section.interval <= 0:
        return []
    count = max(0, (section.time_end - section.time) // section.interval)
    return [
        datetime.fromtimestamp(section.time + i * section.interval + utc_offset_seconds, tz=timezone.utc)
        for i in range(count)
    ]


def format_time_iso(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def _series(section: ForecastSection, index: int) -> List[Any]:
    values = section.variables(index)
    return values if isinstance(values, list) else []


def _at(values: List[Any], index: int) -> Optional[float]:
    return round_one_decimal(values[index]) if index < len(values) else None


def _base_payload(request: WeatherRequest, location: ResolvedLocation) -> Dict[str, Any]:
    return {
        "location": location.display_name,
        "latitude": location.latitude,
        "longitude": location.longitude,
        "units": request.units,
        "mode": request.mode,
    }


def normalize_current(
    section: ForecastSection,
    request: WeatherRequest,
    location: ResolvedLocation
) -> Dict[str, Any]:
    """Current conditions: variables(0) is temperature, variables(1) wind speed."""
    payload = _base_payload(request, location)
    payload["current"] = {
        "temperature": round_one_decimal(section.variables(0)),
        "temperature_unit": get_unit_symbol(request.units),
        "wind_speed": round_one_decimal(section.variables(1)),
        "wind_speed_unit": get_wind_speed_unit(request.units),
    }
    return payload


def normalize_hourly(
    section: ForecastSection,
    utc_offset_seconds: int,
    request: WeatherRequest,
    location: ResolvedLocation
) -> Dict[str, Any]:
    """Next 24 hourly samples, starting at the first one the provider returned."""
    times = sample_times(section, utc_offset_seconds)
    temp = _series(section, 0)
    wind = _series(section, 1)
    count = min(HOURLY_MAX_ENTRIES, len(temp), len(wind), len(times))

    temp_unit = get_unit_symbol(request.units)
    wind_unit = get_wind_speed_unit(request.units)
    items = [
        {
            "time_iso": format_time_iso(times[i]),
            "temperature": round_one_decimal(temp[i]),
            "temperature_unit": temp_unit,
            "wind_speed": round_one_decimal(wind[i]),
            "wind_speed_unit": wind_unit,
        }
        for i in range(count)
    ]

    payload = _base_payload(request, location)
    payload["hourly_next_24h"] = items
    return payload


def normalize_daily(
    section: ForecastSection,
    utc_offset_seconds: int,
    request: WeatherRequest,
    location: ResolvedLocation
) -> Dict[str, Any]:
    """Daily summary, one entry per day the provider returned for every variable.

    ``days`` echoes the horizon that was requested, not the number of entries.
    """
    times = sample_times(section, utc_offset_seconds)
    t_max = _series(section, 0)
    t_min = _series(section, 1)
    precip = _series(section, 2)
    wind_max = _series(section, 3)
    count = min(len(t_max), len(t_min), len(precip), len(wind_max), len(times))

    temp_unit = get_unit_symbol(request.units)
    wind_unit = get_wind_speed_unit(request.units)
    days_out = [
        {
            "date": times[i].date().isoformat(),
            "t_max": _at(t_max, i),
            "t_min": _at(t_min, i),
            "temperature_unit": temp_unit,
            "precipitation_sum": _at(precip, i),
            "precipitation_unit": PRECIPITATION_DISPLAY_UNIT,
            "wind_speed_10m_max": _at(wind_max, i),
            "wind_speed_unit": wind_unit,
        }
        for i in range(count)
    ]

    payload = _base_payload(request, location)
    payload["days"] = request.resolved_days
    payload["daily"] = days_out
    return payload


def normalize_forecast(
    response: ForecastResponse,
    request: WeatherRequest,
    location: ResolvedLocation
) -> Optional[Dict[str, Any]]:
    """Build the payload for the request's mode.

    Returns:
        Normalized payload, or None if the response lacks the mode's section
    """
    if request.mode == "current":
        if response.current is None:
            return None
        return normalize_current(response.current, request, location)
    if request.mode == "hourly":
        if response.hourly is None:
            return None
        return normalize_hourly(response.hourly, response.utc_offset_seconds, request, location)
    if response.daily is None:
        return None
    return normalize_daily(response.daily, response.utc_offset_seconds, request, location)
