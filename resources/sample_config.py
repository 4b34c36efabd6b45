"""
sample://config resource - The sample configuration as JSON.
"""

import json

from mcp.types import Resource

from sample import DEFAULT_CONFIG, SampleConfig


RESOURCE = Resource(
    uri="sample://config",
    name="Sample Config",
    mimeType="application/json",
    description="apiEndpoint, timeout and debug settings of the sample"
)


def read(sample_config: SampleConfig = DEFAULT_CONFIG) -> str:
    """Read the config resource."""
    return json.dumps(sample_config.as_dict(), indent=2)
