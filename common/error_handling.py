"""ABOUTME: Shared error handling utilities for the weather tool.

Provides standardized error codes and error envelope creation functions so every
transport reports failures the same way.
"""

from typing import Any, Dict, List

from .envelope import OutputFormat, ResultEnvelope, json_item, package_result, text_item


# =============================================================================
# Error Code Constants
# =============================================================================

# Input validation errors
ERROR_INVALID_ARGUMENTS: str = "invalid_arguments"

# Resource errors
ERROR_LOCATION_NOT_FOUND: str = "location_not_found"

# Provider data errors
ERROR_NO_DATA: str = "no_data"
ERROR_MISSING_CURRENT: str = "missing_current"
ERROR_MISSING_HOURLY: str = "missing_hourly"
ERROR_MISSING_DAILY: str = "missing_daily"

_MISSING_SECTION_CODES: Dict[str, str] = {
    "current": ERROR_MISSING_CURRENT,
    "hourly": ERROR_MISSING_HOURLY,
    "daily": ERROR_MISSING_DAILY,
}


def missing_section_code(mode: str) -> str:
    """Error code for a forecast response lacking the section for ``mode``."""
    return _MISSING_SECTION_CODES[mode]


# =============================================================================
# Main Error Creation Function
# =============================================================================

def create_error_result(fmt: OutputFormat, error_code: str) -> ResultEnvelope:
    """Create an error envelope whose payload follows the requested format.

    This is the main error creation function for domain errors reported by
    the forecast provider. Use the convenience wrappers below for errors with
    a fixed representation.

    Args:
        fmt: Requested output format ("json" or "text")
        error_code: Machine-readable error code (use ERROR_* constants)

    Returns:
        ResultEnvelope with isError set

    Example:
        result = create_error_result("text", ERROR_MISSING_HOURLY)
    """
    return package_result(fmt, {"error": error_code}, is_error=True)


# =============================================================================
# Convenience Wrapper Functions
# =============================================================================

def create_validation_error(issues: List[Dict[str, Any]]) -> ResultEnvelope:
    """Create an argument validation error.

    Always structured, whatever format the caller asked for: clients that only
    render text still get machine-parseable issue detail.

    Args:
        issues: One ``{"path": [...], "message": str}`` dict per problem

    Returns:
        ResultEnvelope with a single json item and isError set
    """
    payload = {"error": ERROR_INVALID_ARGUMENTS, "issues": issues}
    return ResultEnvelope(content=[json_item(payload)], is_error=True)


def create_not_found_error(city: str) -> ResultEnvelope:
    """Create a location-not-found error naming the city as the caller sent it.

    Example:
        return create_not_found_error("Atlantis")
    """
    return ResultEnvelope(
        content=[text_item(f'Could not find location for "{city}"')],
        is_error=True,
    )


def create_fetch_error(error_message: str) -> ResultEnvelope:
    """Create an error for any failure raised while fetching or shaping weather data.

    Args:
        error_message: Message of the underlying exception

    Returns:
        ResultEnvelope with a single text item and isError set
    """
    return ResultEnvelope(
        content=[text_item(f"Failed to fetch weather: {error_message}")],
        is_error=True,
    )
