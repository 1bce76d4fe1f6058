"""routeprobe exception hierarchy.

Shared across the route table, outcome model, and assertion builders so
every module raises and catches the same types.
"""

from dataclasses import dataclass

from routeprobe.routing.classify import is_method_not_allowed


class RouteProbeError(Exception):
    """Base for all routeprobe-specific errors."""


class ConfigurationError(RouteProbeError):
    """Raised when a route registration or collaborator contract is invalid.

    Typically raised while building a ``RouteTable``, before any request
    is resolved.
    """


class ProbeAssertionError(RouteProbeError, AssertionError):
    """A failed expectation about a route or an action result.

    Subclasses ``AssertionError`` so pytest reports it as a test failure
    rather than an error.
    """


class UnresolvedRoute(ProbeAssertionError):
    """The request was expected to resolve but the resolver rejected it.

    Carries the raw diagnostic from the resolver so the failure shows
    exactly what the routing layer said.
    """

    def __init__(self, error: str, *, method: str | None = None, path: str | None = None) -> None:
        self.error = error
        self.method = method
        self.path = path
        target = f"{method} {path!r}" if method and path else "route"
        super().__init__(f"Expected {target} to resolve, but it did not: {error}")

    @property
    def method_not_allowed(self) -> bool:
        """True when the resolver rejected the method, not the path."""
        return is_method_not_allowed(self.error)


@dataclass(frozen=True, slots=True)
class KindMismatch(ProbeAssertionError):
    """An action returned a result of a different kind than expected."""

    controller_name: str
    action_name: str
    expected: str
    actual: str
    caller: str | None = None

    def __str__(self) -> str:
        where = f"{self.action_name} action in {self.controller_name}"
        if self.caller:
            where = f"{where} (from {self.caller})"
        return f"When calling {where} expected result to be {self.expected}, but instead received {self.actual}."
