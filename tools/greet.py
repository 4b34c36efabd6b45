"""
greet tool - Greet someone by name.
"""

import logging

from mcp.types import Tool, TextContent

from sample import greet
from utils import text_result


logger = logging.getLogger(__name__)

TOOL = Tool(
    name="greet",
    description="Return a greeting for the given name, e.g. \"Hello, World!\".",
    inputSchema={
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name to greet (may be empty)"
            }
        },
        "required": ["name"]
    }
)


async def handle(arguments: dict) -> list[TextContent]:
    """Handle greet tool call."""
    name = arguments.get("name")

    # An empty string is a valid name; only a missing one is an error
    if name is None:
        return text_result("Error: name is required")

    logger.debug("Greeting %r", name)
    return text_result(greet(str(name)))
