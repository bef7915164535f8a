"""ABOUTME: Base class for MCP servers with common initialization and logging patterns.

Uses the official MCP SDK (modelcontextprotocol/python-sdk) instead of community FastMCP.
"""

import logging
from mcp.server.fastmcp import FastMCP


def setup_logging(logger_name: str, level: int = logging.INFO) -> logging.Logger:
    """Configure logging for an MCP server.

    Args:
        logger_name: Name of the logger (typically __name__)
        level: Logging level (default: logging.INFO)

    Returns:
        Configured logger instance
    """
    logging.basicConfig(level=level)
    return logging.getLogger(logger_name)


class MCPServerBase:
    """Base class for MCP servers with common patterns.

    Provides:
    - Standard MCP server initialization
    - Consistent logging setup
    - Tool start/complete/error log lines

    Note: The plain HTTP and event-stream endpoints live in weather/http_app.py
    """

    def __init__(self, server_name: str, logger_name: str = __name__):
        """Initialize MCP server base.

        Args:
            server_name: Name of the MCP server (e.g., "weather")
            logger_name: Logger to write to (default: this module)
        """
        self.server_name = server_name
        self.mcp = FastMCP(server_name)
        self.logger = setup_logging(logger_name)

    def get_logger(self) -> logging.Logger:
        """Get the logger instance.

        Returns:
            Configured logger for this server
        """
        return self.logger

    def get_mcp(self) -> FastMCP:
        """Get the FastMCP server instance.

        Returns:
            FastMCP server for tool registration
        """
        return self.mcp

    def run(self, transport: str = "stdio") -> None:
        """Run the MCP server.

        Args:
            transport: Transport protocol ("stdio", "streamable-http", "sse")
        """
        self.mcp.run(transport=transport)

    def log_tool_start(self, tool_name: str, **params) -> None:
        """Log tool invocation with parameters.

        Examples:
            >>> server.log_tool_start("get_weather", city="Paris", mode="daily")
        """
        if params:
            param_str = ", ".join(f"{k}={v}" for k, v in params.items())
            self.logger.info(f"{tool_name} started: {param_str}")
        else:
            self.logger.info(f"{tool_name} started")

    def log_tool_complete(self, tool_name: str, **metrics) -> None:
        """Log tool completion with execution metrics.

        Examples:
            >>> server.log_tool_complete("get_weather", is_error=False, duration_ms=150)
        """
        if metrics:
            metric_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
            self.logger.info(f"{tool_name} completed: {metric_str}")
        else:
            self.logger.info(f"{tool_name} completed")

    def log_tool_error(
        self,
        tool_name: str,
        error_code: str,
        error_message: str,
        **context
    ) -> None:
        """Log tool error with context.

        Args:
            tool_name: Name of the tool that failed
            error_code: Machine-readable error code
            error_message: Human-readable error message
            **context: Additional error context
        """
        context_str = ", ".join(f"{k}={v}" for k, v in context.items()) if context else ""
        if context_str:
            self.logger.error(f"{tool_name} error [{error_code}]: {error_message} ({context_str})")
        else:
            self.logger.error(f"{tool_name} error [{error_code}]: {error_message}")
