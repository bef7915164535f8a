"""ABOUTME: The get_weather handler shared by every transport.

Validate -> geocode -> build query -> fetch -> normalize -> package. Each
failure along the way becomes a well-formed ResultEnvelope; nothing raises out
of WeatherService.get_weather.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from common.envelope import ResultEnvelope, package_result
from common.error_handling import (
    ERROR_INVALID_ARGUMENTS,
    ERROR_LOCATION_NOT_FOUND,
    ERROR_NO_DATA,
    create_error_result,
    create_fetch_error,
    create_not_found_error,
    create_validation_error,
    missing_section_code,
)
from tool_progress import (
    STAGE_ASSEMBLING,
    STAGE_FETCHING,
    STAGE_GEOCODING,
    NullProgress,
    ProgressReporter,
)

from .arguments import ArgumentErrors, parse_weather_arguments
from .config import WeatherSettings
from .forecast import ForecastQuery, ForecastResponse, build_forecast_query, fetch_forecast
from .geocoding import ResolvedLocation, resolve_location
from .normalize import normalize_forecast

logger = logging.getLogger(__name__)

Geocoder = Callable[[str], Awaitable[Optional[ResolvedLocation]]]
ForecastFetcher = Callable[[ForecastQuery, float, float], Awaitable[Optional[ForecastResponse]]]


class WeatherService:
    """Runs the weather pipeline for one request at a time; holds no request state.

    Args:
        settings: Process-wide settings (default format)
        geocoder: Location resolver (default: Open-Meteo geocoding)
        forecast_fetcher: Forecast provider adapter (default: Open-Meteo forecast)
    """

    def __init__(
        self,
        settings: Optional[WeatherSettings] = None,
        geocoder: Geocoder = resolve_location,
        forecast_fetcher: ForecastFetcher = fetch_forecast,
    ):
        self.settings = settings or WeatherSettings()
        self.geocoder = geocoder
        self.forecast_fetcher = forecast_fetcher

    async def get_weather(
        self,
        args: Any,
        progress: Optional[ProgressReporter] = None
    ) -> ResultEnvelope:
        """Answer a get_weather call.

        Args:
            args: Untyped argument mapping (city, units, mode, days, format)
            progress: Reporter for the three pipeline checkpoints (optional)

        Returns:
            ResultEnvelope describing the forecast or the failure
        """
        progress = progress or NullProgress()

        parsed = parse_weather_arguments(args, self.settings.default_format)
        if isinstance(parsed, ArgumentErrors):
            logger.warning(f"{ERROR_INVALID_ARGUMENTS}: {parsed.issues}")
            return create_validation_error(parsed.issues)

        request = parsed
        logger.info(
            f"Weather request: city='{request.city}', mode={request.mode}, "
            f"units={request.units}, days={request.resolved_days}, format={request.format}"
        )

        try:
            await self._report(progress, STAGE_GEOCODING, f"Geocoding {request.city}...")
            location = await self.geocoder(request.city)
            if location is None:
                logger.warning(f"{ERROR_LOCATION_NOT_FOUND}: '{request.city}'")
                return create_not_found_error(request.city)

            query = build_forecast_query(request)
            await self._report(progress, STAGE_FETCHING, f"Fetching {request.mode} forecast...")
            response = await self.forecast_fetcher(query, location.latitude, location.longitude)
            if response is None:
                return create_error_result(request.format, ERROR_NO_DATA)

            await self._report(progress, STAGE_ASSEMBLING, "Preparing weather data...")
            payload = normalize_forecast(response, request, location)
            if payload is None:
                code = missing_section_code(request.mode)
                logger.warning(f"{code} for {location.display_name}")
                return create_error_result(request.format, code)
        except Exception as e:
            logger.error(f"Weather fetch failed for '{request.city}': {e}", exc_info=True)
            return create_fetch_error(str(e))

        logger.info(f"Successfully retrieved {request.mode} weather for {location.display_name}")
        return package_result(request.format, payload)

    async def _report(self, progress: ProgressReporter, stage: str, detail: str) -> None:
        """Emit a checkpoint; a failing reporter never changes the outcome."""
        try:
            await progress.update(stage, detail)
        except Exception as e:
            logger.warning(f"Progress update '{stage}' failed: {e}")
