"""ABOUTME: Shared validation utility module for MCP tool arguments.

Provides reusable validation logic for tool inputs. Supports both Pydantic field
validators and standalone validation functions for use outside of Pydantic models.

Design:
- Field validator functions (for @field_validator decorators)
- Standalone validator functions (return tuple[bool, Optional[str]])
- Helpers that flatten pydantic errors into path/message issues
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError


# =============================================================================
# Pydantic Field Validator Functions (for @field_validator decorators)
# =============================================================================

def validate_non_empty_string_field(v: str, field_name: str = "field") -> str:
    """Pydantic field validator for non-empty strings.

    Validates that a string is not empty or whitespace-only.

    Args:
        v: String value to validate
        field_name: Name of field for error messages (default: "field")

    Returns:
        Validated and stripped string

    Raises:
        ValueError: If string is empty or whitespace-only

    Usage:
        @field_validator("city")
        @classmethod
        def validate_city(cls, v: str) -> str:
            return validate_non_empty_string_field(v, field_name="city")
    """
    is_valid, error = validate_non_empty_string(v, field_name)
    if not is_valid:
        raise ValueError(error)
    return v.strip()


# =============================================================================
# Standalone Validator Functions (for non-Pydantic validation)
# =============================================================================

def validate_non_empty_string(
    value: str,
    field_name: str = "field"
) -> Tuple[bool, Optional[str]]:
    """Validate that string is not empty and return (is_valid, error_message).

    Args:
        value: String value to validate
        field_name: Name of field for error messages (default: "field")

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if valid
        - (False, error_message) if invalid
    """
    if not isinstance(value, str):
        return False, f"{field_name} must be a string, got {type(value).__name__}"

    if not value.strip():
        return False, f"{field_name} is required"

    return True, None


def validate_integer_range(
    value: int,
    min_val: int,
    max_val: int,
    field_name: str = "value"
) -> Tuple[bool, Optional[str]]:
    """Validate that integer is within range.

    Args:
        value: Integer value to validate
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive)
        field_name: Name of field for error messages (default: "value")

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if valid
        - (False, error_message) if invalid

    Example:
        is_valid, error = validate_integer_range(days, 7, 10, "days")
    """
    if not isinstance(value, int) or isinstance(value, bool):
        return False, f"{field_name} must be an integer, got {type(value).__name__}"

    if value < min_val or value > max_val:
        return False, f"{field_name} must be between {min_val} and {max_val}"

    return True, None


# =============================================================================
# Error Report Helpers
# =============================================================================

def validation_issues(error: ValidationError) -> List[Dict[str, Any]]:
    """Flatten a pydantic ValidationError into ``{"path", "message"}`` issues.

    Messages raised from our own validators come through as
    "Value error, <message>"; the prefix is dropped so callers see the bare text.
    """
    issues = []
    for item in error.errors():
        message = item.get("msg", "")
        if item.get("type") == "value_error" and message.startswith("Value error, "):
            message = message[len("Value error, "):]
        issues.append({
            "path": [str(part) for part in item.get("loc", ())],
            "message": message,
        })
    return issues
