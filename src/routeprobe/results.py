"""Action result kinds.

Frozen dataclasses that controller actions return. Each kind reports a
short tag through its ``result_kind`` class attribute; assertion
failures use the tag to say what was expected and what came back.

Any class can join in by declaring ``result_kind``. Objects without one
are tagged with their lowercased class name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class ActionResult(Protocol):
    """Capability: a value that can name its own result kind."""

    result_kind: ClassVar[str]


def kind_of(value: Any) -> str:
    """Return the kind tag of *value* (``"none"`` for ``None``)."""
    if value is None:
        return "none"
    return getattr(type(value), "result_kind", type(value).__name__.lower())


def kind_name(kind: type) -> str:
    """Return the kind tag a result type declares."""
    return getattr(kind, "result_kind", kind.__name__.lower())


@dataclass(frozen=True, slots=True)
class EmptyResult:
    """Nothing to send: the status line and no body."""

    result_kind: ClassVar[str] = "empty"

    status: int = 200

    @property
    def payload(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Redirect:
    """A redirect to another URL."""

    result_kind: ClassVar[str] = "redirect"

    url: str
    permanent: bool = False

    @property
    def status(self) -> int:
        return 301 if self.permanent else 302

    @property
    def payload(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class ViewResult:
    """Render a named template with a context.

    Usage::

        return ViewResult("items/detail.html", item=item)
    """

    result_kind: ClassVar[str] = "view"

    name: str
    context: dict[str, Any] = field(default_factory=dict)

    def __init__(self, name: str, /, **context: Any) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "context", context)

    @property
    def payload(self) -> dict[str, Any]:
        return self.context


@dataclass(frozen=True, slots=True)
class ContentResult:
    """A literal body with a content type."""

    result_kind: ClassVar[str] = "content"

    body: str | bytes
    content_type: str = "text/plain; charset=utf-8"
    status: int = 200

    @property
    def payload(self) -> str | bytes:
        return self.body


@dataclass(frozen=True, slots=True)
class StatusCodeResult:
    """A bare status code."""

    result_kind: ClassVar[str] = "status_code"

    status: int

    @property
    def payload(self) -> None:
        return None
