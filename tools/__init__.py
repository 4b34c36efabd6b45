"""
MCP Sample Tools - Tool definitions and dispatcher.
"""

import logging

from mcp.types import Tool, TextContent

from tools import greet, echo, summarize, get_config, configure


logger = logging.getLogger(__name__)

# Collect all tools
TOOLS: list[Tool] = [
    greet.TOOL,
    echo.TOOL,
    summarize.TOOL,
    get_config.TOOL,
    configure.TOOL,
]

# Map tool names to handlers
_HANDLERS = {
    "greet": greet.handle,
    "echo": echo.handle,
    "summarize": summarize.handle,
    "get_sample_config": get_config.handle,
    "configure_sample_server": configure.handle,
}


async def call_tool(name: str, arguments: dict | None) -> list[TextContent]:
    """Dispatch a tool call to the appropriate handler."""
    handler = _HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name}")
    logger.debug("Calling tool %s", name)
    return await handler(arguments or {})
