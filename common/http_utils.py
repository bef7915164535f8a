"""ABOUTME: HTTP client utilities for MCP tools - async HTTP operations with standard error handling."""

from typing import Optional, Dict, Any
import httpx

# Constants
DEFAULT_HTTP_TIMEOUT = 10.0


async def safe_http_get(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    follow_redirects: bool = True
) -> httpx.Response:
    """Perform async HTTP GET with standard error handling."""
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=follow_redirects) as client:
        response = await client.get(url, headers=headers, params=params)
        response.raise_for_status()
        return response


def error_reason(response: httpx.Response) -> Optional[str]:
    """Extract the ``reason`` field of a JSON error body, if the server sent one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return None


__all__ = [
    "DEFAULT_HTTP_TIMEOUT",
    "safe_http_get",
    "error_reason",
]
