"""Tests for the greeting sample."""

from __future__ import annotations

import dataclasses

import pytest

from sample import DEFAULT_CONFIG, SAMPLE_SOURCE, SampleConfig, greet


def test_greet_world():
    assert greet("World") == "Hello, World!"


def test_greet_empty_name():
    assert greet("") == "Hello, !"


@pytest.mark.parametrize("name", ["Ada", "  spaced  ", "Zoë", "${name}", "{0}"])
def test_greet_is_plain_concatenation(name: str):
    assert greet(name) == "Hello, " + name + "!"
    assert greet(name) == greet(name)


def test_greet_requires_name():
    with pytest.raises(TypeError):
        greet()  # type: ignore[call-arg]


def test_default_config_values():
    assert DEFAULT_CONFIG.api_endpoint == "/mcp"
    assert DEFAULT_CONFIG.timeout == 5000
    assert DEFAULT_CONFIG.debug is True


def test_default_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.timeout = 1  # type: ignore[misc]
    assert DEFAULT_CONFIG.timeout == 5000


def test_as_dict_has_exactly_three_keys():
    assert DEFAULT_CONFIG.as_dict() == {"apiEndpoint": "/mcp", "timeout": 5000, "debug": True}
    assert len(dataclasses.fields(SampleConfig)) == 3


def test_sample_source_exports_greet_and_config():
    assert "function greet(name)" in SAMPLE_SOURCE
    assert "apiEndpoint: '/mcp'" in SAMPLE_SOURCE
    assert SAMPLE_SOURCE.rstrip().endswith("export { greet, config };")
