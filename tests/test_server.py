"""Tests for the server handlers, called directly and through request dispatch."""

from __future__ import annotations

import json

import pytest
from mcp import types

import server


async def test_list_tools_returns_registry():
    names = {tool.name for tool in await server.list_tools()}
    assert "greet" in names


async def test_call_tool_delegates():
    result = await server.call_tool("greet", {"name": "MCP"})
    assert result[0].text == "Hello, MCP!"


async def test_read_resource_accepts_resource_uri():
    listed = await server.list_resources()
    js = next(resource for resource in listed if resource.name == "Sample JavaScript")

    contents = await server.read_resource(js.uri)
    assert "export { greet, config };" in contents[0].content


@pytest.mark.parametrize(
    ("uri", "mime_type"),
    [
        ("sample://info", "text/plain"),
        ("sample://sample.js", "text/javascript"),
        ("sample://config", "application/json"),
    ],
)
async def test_read_resource_request_keeps_mime_type(uri: str, mime_type: str):
    handler = server.app.request_handlers[types.ReadResourceRequest]
    request = types.ReadResourceRequest(
        method="resources/read",
        params=types.ReadResourceRequestParams(uri=uri),
    )

    result = (await handler(request)).root

    assert len(result.contents) == 1
    assert result.contents[0].mimeType == mime_type


async def test_read_config_request_returns_json_text():
    handler = server.app.request_handlers[types.ReadResourceRequest]
    request = types.ReadResourceRequest(
        method="resources/read",
        params=types.ReadResourceRequestParams(uri="sample://config"),
    )

    result = (await handler(request)).root

    assert json.loads(result.contents[0].text)["apiEndpoint"] == "/mcp"


async def test_call_tool_request_wraps_text_result():
    handler = server.app.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="greet", arguments={"name": "World"}),
    )

    result = (await handler(request)).root

    assert not result.isError
    assert result.content[0].type == "text"
    assert result.content[0].text == "Hello, World!"
