"""
get_sample_config tool - Show the sample's fixed configuration.
"""

import json

from mcp.types import Tool, TextContent

from sample import DEFAULT_CONFIG, SampleConfig
from utils import text_result


TOOL = Tool(
    name="get_sample_config",
    description="Return the sample configuration (apiEndpoint, timeout, debug) as JSON.",
    inputSchema={
        "type": "object",
        "properties": {}
    }
)


async def handle(arguments: dict, sample_config: SampleConfig = DEFAULT_CONFIG) -> list[TextContent]:
    """Handle get_sample_config tool call."""
    return text_result(json.dumps(sample_config.as_dict(), indent=2))
