"""ABOUTME: Argument validation for the get_weather tool.

Turns the untyped argument mapping a transport hands over into either a
validated WeatherRequest or an ArgumentErrors report. Every transport goes
through parse_weather_arguments; nothing downstream sees raw input.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from common.envelope import OutputFormat
from common.validation import (
    validate_integer_range,
    validate_non_empty_string_field,
    validation_issues,
)

# Coarse bound accepted for any mode
MIN_DAYS = 1
MAX_DAYS = 16

# Range enforced (and clamped to) in daily mode
DAILY_MIN_DAYS = 7
DAILY_MAX_DAYS = 10
DEFAULT_DAILY_DAYS = 7

Units = Literal["metric", "imperial"]
Mode = Literal["current", "hourly", "daily"]


class WeatherRequest(BaseModel):
    """Validated get_weather arguments."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    city: str = Field(..., description="City name to query")
    units: Units = Field(default="metric", description="Units system (metric or imperial)")
    mode: Mode = Field(
        default="current",
        description="Data mode: 'current' (default), 'hourly' (next ~24h), or 'daily' (next 7-10 days)"
    )
    days: Optional[int] = Field(
        default=None,
        ge=MIN_DAYS,
        le=MAX_DAYS,
        validate_default=True,
        description="For daily mode only: number of forecast days (7-10). Defaults to 7."
    )
    format: OutputFormat = Field(
        default="json",
        description="Response format: 'json' or 'text' (compat mode returning stringified JSON)"
    )

    @field_validator("city")
    @classmethod
    def validate_city(cls, v: str) -> str:
        return validate_non_empty_string_field(v, field_name="city")

    @field_validator("days", mode="before")
    @classmethod
    def reject_boolean_days(cls, v: Any) -> Any:
        # bool is an int subclass; lax int parsing would accept it
        if isinstance(v, bool):
            raise ValueError("days must be an integer")
        return v

    @field_validator("days")
    @classmethod
    def validate_daily_range(cls, v: Optional[int], info: ValidationInfo) -> Optional[int]:
        """Daily mode narrows days (defaulting to 7) to the 7-10 range."""
        if info.data.get("mode") != "daily":
            return v
        effective = DEFAULT_DAILY_DAYS if v is None else v
        is_valid, _ = validate_integer_range(effective, DAILY_MIN_DAYS, DAILY_MAX_DAYS, "days")
        if not is_valid:
            raise ValueError(
                f"days must be between {DAILY_MIN_DAYS} and {DAILY_MAX_DAYS} for daily mode"
            )
        return v

    @property
    def resolved_days(self) -> Optional[int]:
        """Forecast horizon actually requested: clamped days for daily, None otherwise."""
        if self.mode != "daily":
            return None
        days = DEFAULT_DAILY_DAYS if self.days is None else self.days
        return min(DAILY_MAX_DAYS, max(DAILY_MIN_DAYS, days))


@dataclass
class ArgumentErrors:
    """Failed parse: one ``{"path": [...], "message": str}`` entry per issue."""

    issues: List[Dict[str, Any]] = field(default_factory=list)


ParsedArguments = Union[WeatherRequest, ArgumentErrors]


def parse_weather_arguments(
    raw: Any,
    default_format: OutputFormat = "json"
) -> ParsedArguments:
    """Validate raw tool arguments.

    Args:
        raw: Untyped argument mapping from a transport
        default_format: Format used when the caller does not pick one

    Returns:
        WeatherRequest on success, ArgumentErrors otherwise
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        return ArgumentErrors(issues=[{"path": [], "message": "arguments must be an object"}])

    data = dict(raw)
    data.setdefault("format", default_format)

    try:
        return WeatherRequest.model_validate(data)
    except ValidationError as e:
        return ArgumentErrors(issues=validation_issues(e))
