"""
sample://info resource - Server information.
"""

from mcp.types import Resource


RESOURCE = Resource(
    uri="sample://info",
    name="MCP Sample Server Info",
    mimeType="text/plain",
    description="Information about this MCP sample server"
)


def read() -> str:
    """Read the info resource."""
    return """MCP Sample Server v0.1.0

A Model Context Protocol server hosting a small greeting sample.

Tools:
- greet: "Hello, <name>!"
- echo: return text unchanged
- summarize: keep the first maxWords words
- get_sample_config: show the sample configuration
- configure_sample_server: view or change the log level

Resources:
- sample://sample.js: the sample JavaScript source
- sample://config: the sample configuration as JSON
"""
