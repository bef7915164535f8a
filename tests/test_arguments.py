"""ABOUTME: Tests for get_weather argument validation.

Covers defaults, enum checks, the coarse and daily day ranges, and the
path/message issue report.
"""

import pytest

from weather.arguments import ArgumentErrors, WeatherRequest, parse_weather_arguments


def issue_paths(result):
    assert isinstance(result, ArgumentErrors)
    return [issue["path"] for issue in result.issues]


class TestDefaults:
    """Tests for defaulting of optional arguments."""

    def test_minimal_request(self):
        """Test that only city is required."""
        result = parse_weather_arguments({"city": "Paris"})
        assert isinstance(result, WeatherRequest)
        assert result.city == "Paris"
        assert result.units == "metric"
        assert result.mode == "current"
        assert result.days is None
        assert result.format == "json"

    def test_city_is_trimmed(self):
        """Test surrounding whitespace is removed from city."""
        result = parse_weather_arguments({"city": "  New York \n"})
        assert result.city == "New York"

    def test_default_format_is_injected(self):
        """Test the configured default format applies when none is given."""
        result = parse_weather_arguments({"city": "Paris"}, default_format="text")
        assert result.format == "text"

    def test_explicit_format_overrides_default(self):
        """Test an explicit format wins over the configured default."""
        result = parse_weather_arguments({"city": "Paris", "format": "json"}, default_format="text")
        assert result.format == "json"

    def test_unknown_keys_are_ignored(self):
        """Test extra keys do not fail validation."""
        result = parse_weather_arguments({"city": "Paris", "lang": "fr"})
        assert isinstance(result, WeatherRequest)

    def test_none_arguments_mean_empty(self):
        """Test missing arguments report the missing city."""
        assert issue_paths(parse_weather_arguments(None)) == [["city"]]


class TestFieldErrors:
    """Tests for per-field schema failures."""

    def test_empty_city(self):
        """Test empty city is rejected on path city."""
        assert issue_paths(parse_weather_arguments({"city": ""})) == [["city"]]

    def test_whitespace_city(self):
        """Test whitespace-only city is rejected."""
        result = parse_weather_arguments({"city": "   "})
        assert issue_paths(result) == [["city"]]
        assert result.issues[0]["message"] == "city is required"

    def test_missing_city(self):
        """Test city is required."""
        assert ["city"] in issue_paths(parse_weather_arguments({"mode": "hourly"}))

    def test_non_string_city(self):
        """Test numbers are not accepted as city names."""
        assert issue_paths(parse_weather_arguments({"city": 42})) == [["city"]]

    @pytest.mark.parametrize("field,value", [
        ("units", "kelvin"),
        ("mode", "weekly"),
        ("format", "xml"),
    ])
    def test_enum_fields(self, field, value):
        """Test enum fields reject values outside their set."""
        result = parse_weather_arguments({"city": "Paris", field: value})
        assert issue_paths(result) == [[field]]

    @pytest.mark.parametrize("days", [0, 17, 7.5, True, "seven"])
    def test_days_coarse_bound(self, days):
        """Test days must be an integer in 1-16."""
        result = parse_weather_arguments({"city": "Paris", "mode": "hourly", "days": days})
        assert issue_paths(result) == [["days"]]

    def test_numeric_string_days_accepted(self):
        """Test query-string style days are coerced to int."""
        result = parse_weather_arguments({"city": "Paris", "mode": "daily", "days": "8"})
        assert result.days == 8

    def test_multiple_issues_reported_together(self):
        """Test every failing field is reported."""
        result = parse_weather_arguments({"city": "", "units": "kelvin"})
        assert sorted(issue_paths(result)) == [["city"], ["units"]]


class TestDailyRange:
    """Tests for the daily-mode days refinement."""

    def test_daily_days_below_range(self):
        """Test {mode: daily, days: 3} is rejected on path days."""
        result = parse_weather_arguments({"mode": "daily", "days": 3})
        assert ["days"] in issue_paths(result)
        days_issue = next(i for i in result.issues if i["path"] == ["days"])
        assert days_issue["message"] == "days must be between 7 and 10 for daily mode"

    def test_daily_days_above_range(self):
        """Test days above 10 fail in daily mode even though 1-16 allows them."""
        result = parse_weather_arguments({"city": "Paris", "mode": "daily", "days": 14})
        assert issue_paths(result) == [["days"]]

    @pytest.mark.parametrize("days,expected", [(None, 7), (7, 7), (9, 9), (10, 10)])
    def test_resolved_days_daily(self, days, expected):
        """Test resolved days for daily mode defaults to 7 and stays in 7-10."""
        args = {"city": "Paris", "mode": "daily"}
        if days is not None:
            args["days"] = days
        assert parse_weather_arguments(args).resolved_days == expected

    @pytest.mark.parametrize("mode", ["current", "hourly"])
    def test_days_ignored_outside_daily(self, mode):
        """Test days outside 7-10 are fine and unused for other modes."""
        result = parse_weather_arguments({"city": "Paris", "mode": mode, "days": 3})
        assert isinstance(result, WeatherRequest)
        assert result.resolved_days is None
