"""
configure_sample_server tool - View or change the server log level.
"""

import logging

from mcp.types import Tool, TextContent

import config
from utils import configure_logging, text_result


logger = logging.getLogger(__name__)

TOOL = Tool(
    name="configure_sample_server",
    description="Show or change the MCP Sample Server log level. The setting is saved for future sessions.",
    inputSchema={
        "type": "object",
        "properties": {
            "log_level": {
                "type": "string",
                "description": "New log level. If not provided, shows the current level.",
                "enum": config.LOG_LEVELS
            }
        },
        "required": []
    }
)


async def handle(arguments: dict) -> list[TextContent]:
    """Handle configure_sample_server tool call."""
    log_level = arguments.get("log_level")

    if not log_level:
        return text_result(
            f"Current log level: {config.get_log_level()}\n\n"
            f"Available levels: {', '.join(config.LOG_LEVELS)}"
        )

    canonical = config.normalize_log_level(str(log_level))
    if canonical is None:
        return text_result(
            f"✗ Error: Unknown log level: {log_level}\n\n"
            f"Choose one of: {', '.join(config.LOG_LEVELS)}"
        )

    config.set_log_level(canonical)
    configure_logging(canonical)
    logger.info("Log level set to %s", canonical)

    return text_result(
        f"✓ Log level set to {canonical}\n\n"
        f"This setting has been saved and will be remembered for future sessions."
    )
