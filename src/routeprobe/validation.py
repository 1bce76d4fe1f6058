"""Validation state — immutable snapshot of binding/validation errors.

routeprobe does not validate anything itself. Whatever model-binding
machinery the application uses hands back a ``{field: [messages]}``
mapping, and this snapshot carries it into the resolution outcome.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

# A route-level validator: body mapping in, field -> messages out
Validator: TypeAlias = Callable[[Mapping[str, Any]], Mapping[str, list[str]]]


@dataclass(frozen=True, slots=True)
class ValidationState:
    """The validation errors captured for a resolved route.

    ``is_valid`` is True when there are no errors.
    The state is falsy when invalid, so you can write::

        if not outcome.validation_state:
            print(outcome.validation_state.errors)

    ``errors`` maps field paths to tuples of error messages::

        {"title": ("This field is required",),
         "author.email": ("Must be a valid email address",)}
    """

    errors: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {name: tuple(messages) for name, messages in self.errors.items() if messages}
        object.__setattr__(self, "errors", MappingProxyType(frozen))

    @classmethod
    def valid(cls) -> ValidationState:
        """A snapshot with no errors."""
        return cls()

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def errors_for(self, field_path: str) -> list[str]:
        """Messages recorded for *field_path* (empty if none)."""
        return list(self.errors.get(field_path, ()))

    def __bool__(self) -> bool:
        """Falsy when invalid."""
        return self.is_valid
