#!/usr/bin/env python3
"""
MCP Sample Server
A Model Context Protocol server hosting the greeting sample.
"""

import asyncio
import logging

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Tool, TextContent, Resource
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

import config
import resources
import tools
from utils import configure_logging


logger = logging.getLogger(__name__)

# Initialize the MCP server
app = Server("mcp-sample-server")


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return tools.TOOLS


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    return await tools.call_tool(name, arguments)


@app.list_resources()
async def list_resources() -> list[Resource]:
    """List available resources."""
    return resources.RESOURCES


@app.read_resource()
async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
    """Read a resource by URI."""
    return resources.read_resource(str(uri))


async def main():
    """Run the MCP server."""
    configure_logging(config.get_log_level())
    logger.info("Starting %s", app.name)
    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
