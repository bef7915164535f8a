"""ABOUTME: Weather MCP Server - get_weather tool over the MCP protocol.

Geocodes the city with Open-Meteo and returns current, hourly or daily forecast
data (no API key required). Validation and shaping happen in WeatherService;
this module only maps MCP tool arguments in and the result envelope out.
"""

import json
import time
from typing import Annotated, Any, Tuple

from mcp.server.fastmcp import Context
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from common.envelope import JsonContentItem, ResultEnvelope, dumps_compact
from common.mcp_base import MCPServerBase
from tool_progress import ContextProgress, NullProgress

from .config import WeatherSettings
from .service import WeatherService

# Initialize MCP server with base class
server = MCPServerBase("weather", logger_name=__name__)
mcp = server.get_mcp()
logger = server.get_logger()

service = WeatherService(WeatherSettings())

TOOL_NAME = "get_weather"
TOOL_DESCRIPTION = (
    "Get weather for a city. Provide 'city', optional 'units' (metric|imperial), and "
    "optional 'mode' ('current' | 'hourly' | 'daily'). For daily, you can also set 'days' (7-10)."
)


def to_call_tool_result(envelope: ResultEnvelope) -> CallToolResult:
    """Translate a result envelope into an MCP CallToolResult.

    Text items become TextContent. A json item becomes TextContent holding the
    compact JSON plus structuredContent carrying the payload itself.
    """
    content = []
    structured = None
    for item in envelope.content:
        if isinstance(item, JsonContentItem):
            content.append(TextContent(type="text", text=dumps_compact(item.payload)))
            if isinstance(item.payload, dict):
                structured = item.payload
        else:
            content.append(TextContent(type="text", text=item.text))
    return CallToolResult(content=content, structuredContent=structured, isError=envelope.is_error)


def describe_error(envelope: ResultEnvelope) -> Tuple[str, str]:
    """Pull an error code and message out of an error envelope for logging.

    Domain errors carry {"error": code} as a json item or as compact JSON text.
    Free-text failures (not found, fetch errors) log as tool_error.
    """
    item = envelope.content[0]
    if isinstance(item, JsonContentItem):
        payload, message = item.payload, dumps_compact(item.payload)
    else:
        message = item.text
        try:
            payload = json.loads(item.text)
        except ValueError:
            payload = None
    code = payload.get("error") if isinstance(payload, dict) else None
    return code or "tool_error", message


@mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
async def get_weather(
    city: Annotated[Any, Field(description="City name to query")] = None,
    units: Annotated[Any, Field(description="Units system (metric or imperial)")] = None,
    mode: Annotated[Any, Field(
        description="Data mode: 'current' (default), 'hourly' (next ~24h), or 'daily' (next 7-10 days)"
    )] = None,
    days: Annotated[Any, Field(
        description="For daily mode only: number of forecast days (7-10). Defaults to 7."
    )] = None,
    format: Annotated[Any, Field(
        description="Response format: 'json' (default) or 'text' (compat mode returning stringified JSON)"
    )] = None,
    ctx: Context = None
) -> CallToolResult:
    """Get weather for a city.

    Parameters are left untyped here so the shared validator reports every
    problem in one invalid_arguments result instead of the SDK rejecting the
    call first.
    """
    raw = {"city": city, "units": units, "mode": mode, "days": days, "format": format}
    args = {key: value for key, value in raw.items() if value is not None}

    server.log_tool_start(TOOL_NAME, **args)
    started = time.monotonic()

    progress = ContextProgress(ctx) if ctx else NullProgress()
    envelope = await service.get_weather(args, progress=progress)
    if envelope.is_error:
        code, message = describe_error(envelope)
        server.log_tool_error(TOOL_NAME, code, message, city=args.get("city"))

    server.log_tool_complete(
        TOOL_NAME,
        is_error=envelope.is_error,
        duration_ms=int((time.monotonic() - started) * 1000)
    )
    return to_call_tool_result(envelope)


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================


if __name__ == "__main__":
    logger.info("Starting Weather MCP server (stdio)...")
    server.run(transport="stdio")
