"""Action arguments — declared parameters paired with their bound values.

Every formal parameter of the matched action appears in the result, in
declaration order. Parameters the request did not supply carry the
``UNPROVIDED`` marker instead of being dropped.
"""

import inspect
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final

from routeprobe.errors import ConfigurationError


class _Unprovided:
    """Marker for a declared argument that received no value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNPROVIDED"

    def __bool__(self) -> bool:
        return False


UNPROVIDED: Final = _Unprovided()

# *args / **kwargs cannot be bound by name from a route
_BINDABLE = frozenset({
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
})


@dataclass(frozen=True, slots=True)
class ArgumentContext:
    """One action argument: its declared type and the value bound to it."""

    name: str
    type: Any
    value: Any = UNPROVIDED

    @property
    def is_provided(self) -> bool:
        return self.value is not UNPROVIDED


def action_parameters(controller_type: type, action_name: str) -> list[tuple[str, Any]]:
    """Return ``(name, annotation)`` for each bindable parameter of an action.

    The implicit ``self`` of instance methods is skipped. Unannotated
    parameters report ``typing.Any``.

    Raises:
        ConfigurationError: If *controller_type* has no callable
            attribute named *action_name*.
    """
    action = getattr(controller_type, action_name, None)
    if action is None or not callable(action):
        msg = f"{controller_type.__name__} has no action named {action_name!r}"
        raise ConfigurationError(msg)

    params = list(inspect.signature(action).parameters.values())
    raw = inspect.getattr_static(controller_type, action_name)
    if not isinstance(raw, (staticmethod, classmethod)) and params:
        params = params[1:]

    try:
        hints = typing.get_type_hints(action)
    except (NameError, TypeError):
        # Unresolvable forward references: fall back to raw annotations
        hints = {}

    result: list[tuple[str, Any]] = []
    for param in params:
        if param.kind not in _BINDABLE:
            continue
        annotation = hints.get(param.name, param.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = Any
        result.append((param.name, annotation))
    return result


def build_route_arguments(
    controller_type: type,
    action_name: str,
    raw_values: Mapping[str, Any],
) -> Mapping[str, ArgumentContext]:
    """Pair every declared action parameter with its raw bound value.

    Keys follow declaration order. Names missing from *raw_values* are
    recorded as ``UNPROVIDED``; names in *raw_values* that the action does
    not declare are ignored.
    """
    arguments = {
        name: ArgumentContext(name=name, type=annotation, value=raw_values.get(name, UNPROVIDED))
        for name, annotation in action_parameters(controller_type, action_name)
    }
    return MappingProxyType(arguments)
