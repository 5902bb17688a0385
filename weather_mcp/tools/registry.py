"""Tool registry — decorator-based tool registration and lookup."""
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional

from .errors import DuplicateToolError

logger = logging.getLogger(__name__)


@dataclass
class ToolParam:
    name: str
    type: str = "string"  # "string" | "number" | "integer" | "boolean"
    description: str = ""
    required: bool = True
    default: Any = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True)
class ContentBlock:
    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass
class ToolResult:
    content: List[ContentBlock] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, *texts: str) -> "ToolResult":
        return cls(content=[ContentBlock(t) for t in texts])

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=[ContentBlock(message)], is_error=True)

    def to_dict(self) -> Dict[str, Any]:
        return {"content": [b.to_dict() for b in self.content], "isError": self.is_error}


@dataclass
class ToolDef:
    name: str
    description: str
    params: List[ToolParam]
    handler: Callable[..., Awaitable[ToolResult]]
    action: str = ""  # e.g. "geocoding address", used in error text
    subject: str = ""  # format string over the arguments, e.g. "{address}"

    def describe_input(self, args: Dict[str, Any]) -> str:
        """Render the input identifier used in error messages."""
        if not self.subject:
            return ", ".join(f"{k}={v}" for k, v in args.items() if v not in (None, ""))
        try:
            return self.subject.format(**args)
        except (KeyError, IndexError, ValueError):
            return self.subject

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }


class ToolRegistry:
    """Named tool definitions. Written at start-up, read-only afterwards."""

    def __init__(self):
        self._tools: Dict[str, ToolDef] = {}

    def register(self, tool: ToolDef):
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool
        logger.info(f"Registered tool: {tool.name}")

    def tool(
        self,
        name: str,
        description: str = "",
        params: Optional[List[ToolParam]] = None,
        action: str = "",
        subject: str = "",
    ):
        """Decorator to register a tool function."""
        def decorator(func):
            self.register(ToolDef(
                name=name,
                description=description or func.__doc__ or "",
                params=params or [],
                handler=func,
                action=action or f"running tool {name}",
                subject=subject,
            ))
            return func
        return decorator

    def get(self, name: str) -> Optional[ToolDef]:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return sorted(self._tools)

    def list_tools(self) -> List[Dict[str, Any]]:
        """Tool listing in the shape returned by tools/list."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema(),
            }
            for _, tool in sorted(self._tools.items())
        ]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


registry = ToolRegistry()


def register_tool(
    name: str,
    description: str = "",
    params: Optional[List[ToolParam]] = None,
    action: str = "",
    subject: str = "",
):
    """Decorator registering a tool on the process-wide registry."""
    return registry.tool(name, description=description, params=params, action=action, subject=subject)
