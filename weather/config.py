"""ABOUTME: Process-wide settings for the weather tool.

Settings are read once at startup and injected into the handler, so tests can
build a WeatherSettings with explicit values instead of touching the environment.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from common.envelope import OutputFormat


class WeatherSettings(BaseSettings):
    """Weather tool configuration from environment.

    MCP_TEXT_OUTPUT=1 switches the default response format to text.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    mcp_text_output: Optional[str] = None

    @property
    def default_format(self) -> OutputFormat:
        return "text" if self.mcp_text_output == "1" else "json"
