"""
summarize tool - Truncate text to its first N words.
"""

from mcp.types import Tool, TextContent

from utils import text_result


DEFAULT_MAX_WORDS = 50
ELLIPSIS = " …"

TOOL = Tool(
    name="summarize",
    description="Summarize text by keeping its first maxWords words.",
    inputSchema={
        "type": "object",
        "properties": {
            "text": {
                "type": "string",
                "description": "Text to summarize"
            },
            "maxWords": {
                "type": "integer",
                "description": f"Maximum number of words to keep (default: {DEFAULT_MAX_WORDS})",
                "default": DEFAULT_MAX_WORDS
            }
        },
        "required": []
    }
)


def summarize(text: str, max_words: int) -> str:
    """Keep the first max_words whitespace-separated words of text."""
    if not text or not text.strip():
        return "(empty input)"

    words = text.split()
    if len(words) <= max_words:
        return text.strip()

    return " ".join(words[:max_words]) + ELLIPSIS


async def handle(arguments: dict) -> list[TextContent]:
    """Handle summarize tool call."""
    text = arguments.get("text")
    raw_max = arguments.get("maxWords", DEFAULT_MAX_WORDS)

    error = text_result(f"Error: maxWords must be an integer, got {raw_max!r}")

    # bool is an int subclass; fractional floats would silently truncate
    if isinstance(raw_max, bool) or (isinstance(raw_max, float) and not raw_max.is_integer()):
        return error

    try:
        max_words = int(raw_max)
    except (TypeError, ValueError):
        return error

    if max_words < 1:
        return text_result("Error: maxWords must be at least 1")

    return text_result(summarize("" if text is None else str(text), max_words))
