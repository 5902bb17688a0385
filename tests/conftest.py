"""Shared fixtures: private registries and request contexts."""
import pytest

from weather_mcp.context import RequestContext
from weather_mcp.tools.registry import ToolParam, ToolRegistry, ToolResult


class CallCounter:
    """Deterministic stub handler that records its calls."""

    def __init__(self):
        self.calls = []

    async def __call__(self, context=None, **kwargs) -> ToolResult:
        self.calls.append(kwargs)
        return ToolResult.text(f"ok {sorted(kwargs.items())}")


@pytest.fixture
def registry():
    return ToolRegistry()


@pytest.fixture
def echo_registry(registry):
    @registry.tool(
        "echo",
        description="Echo a message back",
        params=[ToolParam("msg", description="message to echo")],
        action="echoing message",
        subject="{msg}",
    )
    async def echo(msg: str, context=None, **kwargs) -> ToolResult:
        return ToolResult.text(msg)

    return registry


@pytest.fixture
def counter():
    return CallCounter()


@pytest.fixture
def coords_registry(registry, counter):
    registry.tool(
        "coords",
        params=[
            ToolParam("latitude", type="number", minimum=-90, maximum=90),
            ToolParam("longitude", type="number", minimum=-180, maximum=180),
        ],
        action="checking coordinates",
        subject="({latitude}, {longitude})",
    )(counter)
    return registry


@pytest.fixture
def context():
    return RequestContext(
        headers={"User-Agent": "pytest-agent/1.0", "Authorization": "Bearer secret-token"},
        request_id="req-0001",
    )
