"""ABOUTME: Weather server launcher - picks the transport from the environment.

SERVER_TRANSPORT selects how get_weather is exposed:
- stdio: MCP over stdin/stdout
- streamable-http: MCP over HTTP, bound to HOST:PORT
- http: plain /weather query endpoint plus /weather/stream events, bound to HOST:PORT
"""

import logging
import sys
import os

# Setup logging early
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "streamable-http", "http")


def run_server(transport: str = "stdio", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the weather server on the requested transport.

    Args:
        transport: One of TRANSPORTS
        host: Host to bind to for HTTP transports (default: 0.0.0.0 for Docker)
        port: Port to bind to for HTTP transports (default: 8000)
    """
    if transport not in TRANSPORTS:
        raise ValueError(f"Unknown transport: {transport}")

    if transport == "http":
        import uvicorn
        from weather.http_app import create_app

        logger.info(f"Starting weather HTTP service on {host}:{port}")
        uvicorn.run(create_app(), host=host, port=port)
        return

    from weather.server import mcp

    if transport == "streamable-http":
        mcp.settings.host = host
        mcp.settings.port = port
        logger.info(f"Starting weather MCP server on {host}:{port} (transport: streamable-http)")
    else:
        logger.info("Starting weather MCP server (transport: stdio)")
    mcp.run(transport=transport)


def main() -> None:
    transport = os.getenv("SERVER_TRANSPORT", "stdio")
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    try:
        run_server(transport, host, port)
    except Exception as e:
        logger.error(f"Weather server failed to start: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
