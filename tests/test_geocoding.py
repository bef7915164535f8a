"""ABOUTME: Tests for Open-Meteo geocoding - all HTTP calls are mocked."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from weather.geocoding import GEOCODING_API, build_display_name, resolve_location
from conftest import make_http_response


class TestDisplayName:
    """Tests for display name construction."""

    def test_all_parts(self):
        assert build_display_name("Paris", "Île-de-France", "France") == "Paris, Île-de-France, France"

    def test_skips_missing_and_empty_parts(self):
        assert build_display_name("Monaco", None, "Monaco") == "Monaco, Monaco"
        assert build_display_name("Springfield", "", "United States") == "Springfield, United States"


@pytest.mark.asyncio
async def test_resolve_location_success(mock_geocoding_data):
    """Test the first result is returned with a joined display name."""
    mock_get = AsyncMock(return_value=make_http_response(mock_geocoding_data))
    with patch("weather.geocoding.safe_http_get", mock_get):
        location = await resolve_location("Paris")

    assert location.latitude == 48.85341
    assert location.longitude == 2.3488
    assert location.display_name == "Paris, Île-de-France, France"

    args, kwargs = mock_get.call_args
    assert args[0] == GEOCODING_API
    assert kwargs["params"] == {"name": "Paris", "count": 1, "language": "en", "format": "json"}


@pytest.mark.asyncio
async def test_resolve_location_no_results():
    """Test a response without results means not found."""
    mock_get = AsyncMock(return_value=make_http_response({"generationtime_ms": 0.3}))
    with patch("weather.geocoding.safe_http_get", mock_get):
        assert await resolve_location("Atlantis") is None


@pytest.mark.asyncio
async def test_resolve_location_empty_results():
    """Test an empty results array means not found."""
    mock_get = AsyncMock(return_value=make_http_response({"results": []}))
    with patch("weather.geocoding.safe_http_get", mock_get):
        assert await resolve_location("Atlantis") is None


@pytest.mark.asyncio
async def test_resolve_location_http_error_is_not_found():
    """Test an error status from the geocoder is folded into not found."""
    request = httpx.Request("GET", GEOCODING_API)
    response = httpx.Response(503, request=request)
    error = httpx.HTTPStatusError("Service Unavailable", request=request, response=response)

    with patch("weather.geocoding.safe_http_get", AsyncMock(side_effect=error)):
        assert await resolve_location("Paris") is None


@pytest.mark.asyncio
async def test_resolve_location_connection_error_raises():
    """Test connection failures propagate to the caller."""
    error = httpx.ConnectError("connection refused")
    with patch("weather.geocoding.safe_http_get", AsyncMock(side_effect=error)):
        with pytest.raises(httpx.ConnectError):
            await resolve_location("Paris")
