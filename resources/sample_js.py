"""
sample://sample.js resource - The greeting sample as JavaScript source.
"""

from mcp.types import Resource

from sample import SAMPLE_SOURCE


RESOURCE = Resource(
    uri="sample://sample.js",
    name="Sample JavaScript",
    mimeType="text/javascript",
    description="JavaScript module exporting greet() and config"
)


def read() -> str:
    """Read the sample.js resource."""
    return SAMPLE_SOURCE
