"""Tool system errors."""
from dataclasses import dataclass
from typing import List


class ToolError(Exception):
    """Base class for tool registry / invocation errors."""


class DuplicateToolError(ToolError):
    def __init__(self, name: str):
        super().__init__(f"Tool already registered: {name}")
        self.name = name


class UnknownToolError(ToolError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(ToolError):
    """One or more arguments failed the tool's schema."""

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        super().__init__("; ".join(str(v) for v in self.violations))


class HandlerFault(ToolError):
    """Raised by a handler when it cannot produce a result (empty results, bad input)."""
