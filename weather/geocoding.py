"""ABOUTME: City name to coordinates via the Open-Meteo Geocoding API."""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from common.http_utils import safe_http_get

logger = logging.getLogger(__name__)

GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"
GEOCODING_MAX_RESULTS = 1
GEOCODING_LANGUAGE = "en"
API_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class ResolvedLocation:
    """Best geocoding match for a requested city."""

    latitude: float
    longitude: float
    display_name: str


def build_display_name(name: Optional[str], admin1: Optional[str], country: Optional[str]) -> str:
    """Join the non-empty parts of name, region and country with ", "."""
    return ", ".join(part for part in (name, admin1, country) if part)


async def resolve_location(name: str) -> Optional[ResolvedLocation]:
    """Resolve a city name to its best Open-Meteo geocoding match.

    A non-success HTTP status is reported the same way as "no match": both
    return None. Connection failures and unreadable bodies still raise.

    Args:
        name: Free-text city name (already trimmed)

    Returns:
        ResolvedLocation for the first result, or None if nothing matched
    """
    logger.debug(f"Geocoding location: '{name}'")

    params = {
        "name": name,
        "count": GEOCODING_MAX_RESULTS,
        "language": GEOCODING_LANGUAGE,
        "format": "json",
    }
    try:
        resp = await safe_http_get(GEOCODING_API, params=params, timeout=API_TIMEOUT_SECONDS)
    except httpx.HTTPStatusError as e:
        logger.warning(f"Geocoding returned HTTP {e.response.status_code} for '{name}'")
        return None

    data = resp.json()
    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        logger.info(f"Location not found: '{name}'")
        return None

    first = results[0]
    location = ResolvedLocation(
        latitude=first["latitude"],
        longitude=first["longitude"],
        display_name=build_display_name(first.get("name"), first.get("admin1"), first.get("country")),
    )
    logger.info(
        f"Geocoded '{name}' to {location.display_name} ({location.latitude}, {location.longitude})"
    )
    return location
