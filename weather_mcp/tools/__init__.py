"""Tool system — registry, validation, executor."""
from .errors import ToolError, DuplicateToolError, UnknownToolError, ValidationError, HandlerFault
from .registry import register_tool, registry, ToolRegistry, ToolDef, ToolParam, ToolResult, ContentBlock
from .schema import validate_arguments
from .executor import execute_tool

# Auto-import builtin tools to trigger @register_tool decorators
from .builtin import *  # noqa
