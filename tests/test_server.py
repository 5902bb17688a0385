"""Tests for server.py — MCP request handlers over a private registry."""
import pytest
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_PARAMS,
    CallToolRequest,
    CallToolRequestParams,
    ListToolsRequest,
)

from weather_mcp.server import create_server


def _call_request(name, arguments=None):
    return CallToolRequest(method="tools/call", params=CallToolRequestParams(name=name, arguments=arguments))


class TestListTools:
    @pytest.mark.asyncio
    async def test_tools_from_registry(self, coords_registry):
        server = create_server(coords_registry)
        result = await server.request_handlers[ListToolsRequest](ListToolsRequest(method="tools/list"))
        [tool] = result.root.tools
        assert tool.name == "coords"
        assert tool.inputSchema["required"] == ["latitude", "longitude"]


class TestCallTool:
    @pytest.mark.asyncio
    async def test_echo(self, echo_registry):
        server = create_server(echo_registry)
        result = await server.request_handlers[CallToolRequest](_call_request("echo", {"msg": "hi"}))
        assert result.root.isError is False
        assert [(c.type, c.text) for c in result.root.content] == [("text", "hi")]

    @pytest.mark.asyncio
    async def test_validation_failure_skips_handler(self, coords_registry, counter):
        server = create_server(coords_registry)
        result = await server.request_handlers[CallToolRequest](
            _call_request("coords", {"latitude": 120, "longitude": 0})
        )
        assert result.root.isError is True
        assert "latitude" in result.root.content[0].text
        assert counter.calls == []

    @pytest.mark.asyncio
    async def test_missing_arguments(self, echo_registry):
        server = create_server(echo_registry)
        result = await server.request_handlers[CallToolRequest](_call_request("echo"))
        assert result.root.isError is True
        assert "msg" in result.root.content[0].text

    @pytest.mark.asyncio
    async def test_unknown_tool(self, echo_registry):
        server = create_server(echo_registry)
        with pytest.raises(McpError) as exc:
            await server.request_handlers[CallToolRequest](_call_request("missing", {}))
        assert exc.value.error.code == INVALID_PARAMS
        assert exc.value.error.message == "Unknown tool: missing"
