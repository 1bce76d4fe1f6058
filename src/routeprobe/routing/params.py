"""Path parameter parsing and value coercion.

Built-in converters for route path segments like ``{id:int}``, plus the
looser coercion applied to query-string and body values, including
whole-body binding of dataclass parameters.
"""

import dataclasses
import types
from collections.abc import Mapping
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

T = TypeVar("T")

# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"-?\d+", int),
    "float": (r"-?\d+(?:\.\d+)?", float),
    "path": (r".+", str),
}

_TRUTHY = frozenset({"true", "1", "yes", "on"})


def convert_param(value: str, param_type: str) -> str | int | float:
    """Convert a captured path parameter string to the target type.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    return target_type(value)


def coerce(value: Any, annotation: Any) -> Any:
    """Convert a query or body *value* to *annotation*, if it is a simple type.

    ``X | None`` is unwrapped to ``X``. Unknown annotations and failed
    conversions return *value* unchanged; binding never raises.
    """
    target = _unwrap_optional(annotation)

    if target is str:
        return value.strip() if isinstance(value, str) else str(value)

    if target is bool:
        if isinstance(value, str):
            return value.lower() in _TRUTHY
        return bool(value)

    if target is int or target is float:
        if isinstance(value, bool):
            return value
        try:
            return target(value)
        except (ValueError, TypeError):
            return value

    return value


def is_bindable_dataclass(annotation: Any) -> bool:
    """Return True if *annotation* is a dataclass type (not an instance)."""
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def bind_dataclass(cls: type[T], data: Mapping[str, Any]) -> T:
    """Create a dataclass instance from a body mapping.

    Each field present in *data* is coerced to its annotated type.
    Missing fields use the dataclass default, so a required field that
    is absent raises ``TypeError`` from the dataclass constructor.
    """
    try:
        hints = get_type_hints(cls)
    except (NameError, TypeError):
        hints = {}

    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):  # type: ignore[arg-type]
        if f.name in data:
            kwargs[f.name] = coerce(data[f.name], hints.get(f.name, f.type))
    return cls(**kwargs)


def _unwrap_optional(annotation: Any) -> Any:
    """Extract the base type from ``X | None`` or return *annotation* as-is."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation
