"""
MCP server exposing the tool registry.

tools/list is rendered from the registry, tools/call goes through
execute_tool with the inbound HTTP headers packaged as a RequestContext.
"""
import logging
from typing import List

from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_PARAMS,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
    Tool,
)

from . import __version__
from .context import RequestContext
from .tools import ToolRegistry, UnknownToolError, execute_tool, registry as default_registry

logger = logging.getLogger(__name__)

SERVER_NAME = "weather-mcp"


def _request_context(server: Server) -> RequestContext:
    """Headers of the HTTP request behind the current MCP request, if any."""
    try:
        request = getattr(server.request_context, "request", None)
    except LookupError:
        request = None
    headers = dict(request.headers) if request is not None else {}
    return RequestContext(headers=headers)


def create_server(registry: ToolRegistry = default_registry) -> Server:
    """Create and configure the MCP server."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        tools = [Tool(**tool) for tool in registry.list_tools()]
        logger.info(f"Listing {len(tools)} tools")
        return tools

    # Registered directly so UnknownToolError surfaces as a JSON-RPC error;
    # the call_tool() decorator turns every exception into an error result.
    async def call_tool(request: CallToolRequest) -> ServerResult:
        context = _request_context(server)
        logger.info(f"[{context.request_id}] Tool call: {request.params.name}")
        logger.debug(f"[{context.request_id}] headers: {dict(context.masked_headers())}")
        try:
            result = await execute_tool(
                request.params.name, request.params.arguments, context=context, registry=registry,
            )
        except UnknownToolError as e:
            raise McpError(ErrorData(code=INVALID_PARAMS, message=str(e)))
        return ServerResult(CallToolResult(
            content=[TextContent(type="text", text=block.text) for block in result.content],
            isError=result.is_error,
        ))

    server.request_handlers[CallToolRequest] = call_tool
    return server
