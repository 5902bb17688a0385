"""Argument validation against a tool's declared params."""
import math
from typing import Any, Dict, List, Mapping, Optional

from .errors import ValidationError, Violation
from .registry import ToolParam

_TYPE_NAMES = {
    "string": "a string",
    "number": "a number",
    "integer": "an integer",
    "boolean": "a boolean",
}


def _coerce(param: ToolParam, value: Any) -> Any:
    """Return the value in the param's type, or raise ValueError."""
    if param.type == "string":
        if isinstance(value, str):
            return value
    elif param.type == "boolean":
        if isinstance(value, bool):
            return value
    elif param.type == "integer":
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    elif param.type == "number":
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if isinstance(value, float) and not math.isfinite(value):
                raise ValueError("must be a finite number")
            return value
    else:
        raise ValueError(f"has unsupported type {param.type!r}")
    raise ValueError(f"expected {_TYPE_NAMES[param.type]}, got {type(value).__name__}")


def _check_bounds(param: ToolParam, value: Any) -> Optional[str]:
    if param.minimum is not None and value < param.minimum:
        return f"must be >= {param.minimum:g} (got {value})"
    if param.maximum is not None and value > param.maximum:
        return f"must be <= {param.maximum:g} (got {value})"
    return None


def validate_arguments(params: List[ToolParam], raw: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Validate raw arguments, returning the cleaned mapping.

    Every declared param is checked for presence, type and bounds; all
    violations are collected before raising ValidationError. Missing
    optional params take their default, undeclared keys are dropped.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValidationError([Violation("arguments", f"expected an object, got {type(raw).__name__}")])

    validated: Dict[str, Any] = {}
    violations: List[Violation] = []

    for param in params:
        value = raw.get(param.name)
        if value is None:
            if param.required:
                violations.append(Violation(param.name, "required field is missing"))
            else:
                validated[param.name] = param.default
            continue

        try:
            value = _coerce(param, value)
        except ValueError as e:
            violations.append(Violation(param.name, str(e)))
            continue

        if param.type in ("number", "integer"):
            problem = _check_bounds(param, value)
            if problem:
                violations.append(Violation(param.name, problem))
                continue

        validated[param.name] = value

    if violations:
        raise ValidationError(violations)
    return validated
