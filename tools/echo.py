"""
echo tool - Return the input text unchanged.
"""

from mcp.types import Tool, TextContent

from utils import text_result


TOOL = Tool(
    name="echo",
    description="Echo the provided text back to the caller.",
    inputSchema={
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": "Text to echo (default: empty)",
                "default": ""
            }
        },
        "required": []
    }
)


async def handle(arguments: dict) -> list[TextContent]:
    """Handle echo tool call."""
    text = arguments.get("text", "")
    return text_result("" if text is None else str(text))
