"""ABOUTME: Common MCP server utilities and shared infrastructure."""

from .mcp_base import MCPServerBase
from .envelope import (
    ResultEnvelope,
    TextContentItem,
    JsonContentItem,
    package_result,
)
from .error_handling import (
    # Error code constants
    ERROR_INVALID_ARGUMENTS,
    ERROR_LOCATION_NOT_FOUND,
    ERROR_NO_DATA,
    ERROR_MISSING_CURRENT,
    ERROR_MISSING_HOURLY,
    ERROR_MISSING_DAILY,
    # Error creation functions
    create_error_result,
    create_validation_error,
    create_not_found_error,
    create_fetch_error,
)

__all__ = [
    "MCPServerBase",
    # Envelope
    "ResultEnvelope",
    "TextContentItem",
    "JsonContentItem",
    "package_result",
    # Error code constants
    "ERROR_INVALID_ARGUMENTS",
    "ERROR_LOCATION_NOT_FOUND",
    "ERROR_NO_DATA",
    "ERROR_MISSING_CURRENT",
    "ERROR_MISSING_HOURLY",
    "ERROR_MISSING_DAILY",
    # Error creation functions
    "create_error_result",
    "create_validation_error",
    "create_not_found_error",
    "create_fetch_error",
]
