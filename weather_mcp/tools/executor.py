"""Tool executor — lookup, validate, run, and contain handler failures."""
import logging
import time
from typing import Any, Mapping, Optional

from ..context import RequestContext
from .errors import HandlerFault, UnknownToolError, ValidationError
from .registry import ToolRegistry, ToolResult, registry as default_registry
from .schema import validate_arguments

logger = logging.getLogger(__name__)


async def execute_tool(
    tool_name: str,
    args: Optional[Mapping[str, Any]],
    context: Optional[RequestContext] = None,
    registry: ToolRegistry = default_registry,
) -> ToolResult:
    """Execute a registered tool by name.

    Raises UnknownToolError for unregistered names. Everything after the
    lookup is reported as a ToolResult: validation failures and handler
    exceptions become a single error text block.
    """
    tool = registry.get(tool_name)
    if not tool:
        logger.warning(f"Unknown tool: {tool_name}")
        raise UnknownToolError(tool_name)

    try:
        validated = validate_arguments(tool.params, args)
    except ValidationError as e:
        logger.info(f"Tool {tool_name} rejected arguments: {e}")
        return ToolResult.error(f'Invalid arguments for tool "{tool_name}": {e}')

    arg_str = ", ".join(f"{k}={v!r}" for k, v in validated.items())
    logger.info(f"Executing tool: {tool_name}({arg_str})")
    t0 = time.monotonic()

    try:
        result = await tool.handler(**validated, context=context)
        if not isinstance(result, ToolResult) or not result.content:
            raise HandlerFault("tool returned no content")
    except Exception as e:
        logger.error(f"Tool {tool_name} failed: {e}", exc_info=True)
        result = ToolResult.error(f'Error {tool.action} "{tool.describe_input(validated)}": {_message(e)}')

    elapsed = time.monotonic() - t0
    logger.info(f"Tool {tool_name}: {elapsed:.2f}s -> {'error' if result.is_error else 'ok'}")
    return result


def _message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__
