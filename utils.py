"""
Shared utilities for the MCP Sample Server.
"""

import logging
import sys

from mcp.types import TextContent


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout is reserved for the MCP protocol."""
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)
    root.setLevel(level)


def text_result(text: str) -> list[TextContent]:
    """Wrap plain text as a single-item tool result."""
    return [TextContent(type="text", text=text)]
