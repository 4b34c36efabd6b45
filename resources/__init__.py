"""
MCP Sample Resources - Resource definitions and reader.
"""

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource

from resources import info, sample_js, sample_config


# Collect all resources
RESOURCES: list[Resource] = [
    info.RESOURCE,
    sample_js.RESOURCE,
    sample_config.RESOURCE,
]

# Map resource URIs to their modules (RESOURCE + read)
_MODULES = {
    "sample://info": info,
    "sample://sample.js": sample_js,
    "sample://config": sample_config,
}


def read_resource(uri: str) -> list[ReadResourceContents]:
    """Read a resource by URI, tagged with its advertised MIME type."""
    module = _MODULES.get(str(uri))
    if module is None:
        raise ValueError(f"Unknown resource: {uri}")
    return [ReadResourceContents(content=module.read(), mime_type=module.RESOURCE.mimeType)]
