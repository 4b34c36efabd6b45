"""
Greeting sample - a pure greeting function and its fixed configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SampleConfig:
    """Settings that ship with the sample. Frozen once created."""

    api_endpoint: str = "/mcp"
    timeout: int = 5000  # milliseconds
    debug: bool = True

    def as_dict(self) -> dict:
        """Return the exported mapping (camelCase keys, exactly three)."""
        return {
            "apiEndpoint": self.api_endpoint,
            "timeout": self.timeout,
            "debug": self.debug,
        }


DEFAULT_CONFIG = SampleConfig()


def greet(name: str) -> str:
    """Return a greeting for name."""
    return f"Hello, {name}!"


# Served verbatim as the sample://sample.js resource
SAMPLE_SOURCE = """// Sample JavaScript resource
function greet(name) {
    return `Hello, ${name}!`;
}

const config = {
    apiEndpoint: '/mcp',
    timeout: 5000,
    debug: true
};

export { greet, config };
"""
