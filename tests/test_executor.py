"""Tests for tools/executor.py — lookup, validation short-circuit, failure containment."""
import asyncio

import httpx
import pytest

from weather_mcp.tools.errors import HandlerFault, UnknownToolError
from weather_mcp.tools.executor import execute_tool
from weather_mcp.tools.registry import ContentBlock, ToolParam, ToolResult


class TestEcho:
    @pytest.mark.asyncio
    async def test_echo(self, echo_registry):
        result = await execute_tool("echo", {"msg": "hi"}, registry=echo_registry)
        assert result.content == [ContentBlock("hi")]
        assert result.to_dict()["content"] == [{"type": "text", "text": "hi"}]
        assert result.is_error is False

    @pytest.mark.asyncio
    async def test_echo_missing_field(self, echo_registry):
        result = await execute_tool("echo", {}, registry=echo_registry)
        assert result.is_error is True
        assert len(result.content) == 1
        assert "msg" in result.content[0].text
        assert "missing" in result.content[0].text

    @pytest.mark.asyncio
    async def test_unknown_tool_raises(self, echo_registry):
        with pytest.raises(UnknownToolError):
            await execute_tool("missing", {}, registry=echo_registry)

    @pytest.mark.asyncio
    async def test_idempotent(self, echo_registry):
        first = await execute_tool("echo", {"msg": "same"}, registry=echo_registry)
        second = await execute_tool("echo", {"msg": "same"}, registry=echo_registry)
        assert first == second


class TestValidationShortCircuit:
    @pytest.mark.asyncio
    async def test_out_of_range_latitude(self, coords_registry, counter):
        result = await execute_tool("coords", {"latitude": 120, "longitude": 0}, registry=coords_registry)
        assert result.is_error is True
        assert "latitude" in result.content[0].text
        assert "90" in result.content[0].text
        assert counter.calls == []

    @pytest.mark.asyncio
    async def test_missing_required(self, coords_registry, counter):
        result = await execute_tool("coords", {"latitude": 10}, registry=coords_registry)
        assert 'Invalid arguments for tool "coords"' in result.content[0].text
        assert "longitude" in result.content[0].text
        assert counter.calls == []

    @pytest.mark.asyncio
    async def test_valid_runs_once(self, coords_registry, counter):
        result = await execute_tool("coords", {"latitude": 10, "longitude": 20}, registry=coords_registry)
        assert result.is_error is False
        assert result.content
        assert counter.calls == [{"latitude": 10, "longitude": 20}]


class TestFailureContainment:
    def _register_failing(self, registry, exc):
        @registry.tool(
            "lookup",
            params=[ToolParam("address")],
            action="geocoding address",
            subject="{address}",
        )
        async def lookup(address: str, context=None, **kwargs):
            raise exc

    @pytest.mark.asyncio
    async def test_timeout(self, registry):
        self._register_failing(registry, httpx.ConnectTimeout("timed out"))
        result = await execute_tool("lookup", {"address": "Paris"}, registry=registry)
        assert result.is_error is True
        assert result.content == [ContentBlock('Error geocoding address "Paris": timed out')]

    @pytest.mark.asyncio
    async def test_handler_fault(self, registry):
        self._register_failing(registry, HandlerFault("No results"))
        result = await execute_tool("lookup", {"address": "Nowhere"}, registry=registry)
        assert len(result.content) == 1
        assert "Error" in result.content[0].text
        assert "Nowhere" in result.content[0].text

    @pytest.mark.asyncio
    async def test_exception_without_message(self, registry):
        self._register_failing(registry, asyncio.TimeoutError())
        result = await execute_tool("lookup", {"address": "Oslo"}, registry=registry)
        assert result.content[0].text == 'Error geocoding address "Oslo": TimeoutError'

    @pytest.mark.asyncio
    async def test_empty_result_is_error(self, registry):
        @registry.tool("empty", action="doing nothing", subject="-")
        async def empty(context=None, **kwargs):
            return ToolResult()

        result = await execute_tool("empty", {}, registry=registry)
        assert result.is_error is True
        assert "no content" in result.content[0].text


class TestContextForwarding:
    @pytest.mark.asyncio
    async def test_context_passed_to_handler(self, registry, context):
        seen = []

        @registry.tool("whoami")
        async def whoami(context=None, **kwargs):
            seen.append(context)
            return ToolResult.text(context.user_agent)

        result = await execute_tool("whoami", {}, context=context, registry=registry)
        assert seen == [context]
        assert result.content[0].text == "pytest-agent/1.0"

    @pytest.mark.asyncio
    async def test_no_context(self, echo_registry):
        result = await execute_tool("echo", {"msg": "hi"}, registry=echo_registry)
        assert result.content[0].text == "hi"
