"""Resolved and Unresolved — the two shapes of a resolution outcome.

An outcome is built once from whatever the resolver returned and never
changes afterwards. The success and failure cases are separate types, so
fields that only make sense for a match cannot be read off a failure::

    outcome = resolve_route(table, RouteRequest.get("/items/5"))
    match outcome:
        case Resolved(action_name=action):
            ...
        case Unresolved(unresolved_error=error):
            ...
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from routeprobe.routing.arguments import ArgumentContext, build_route_arguments
from routeprobe.routing.classify import is_method_not_allowed
from routeprobe.routing.match import MatchData, RouteData
from routeprobe.validation import ValidationState


@dataclass(frozen=True, slots=True)
class Resolved:
    """The request matched a controller action.

    ``route_arguments`` lists every parameter the action declares, in
    declaration order, whether or not the request supplied a value.
    """

    # Compares by value; the mapping fields make it unhashable
    __hash__ = None  # type: ignore[assignment]

    controller_type: type
    controller_name: str
    action_name: str
    route_arguments: Mapping[str, ArgumentContext]
    route_data: RouteData
    validation_state: ValidationState

    @classmethod
    def from_match(cls, match: MatchData) -> Resolved:
        """Build the success outcome from a resolver's match data."""
        return cls(
            controller_type=match.controller_type,
            controller_name=match.controller_name,
            action_name=match.action_name,
            route_arguments=build_route_arguments(
                match.controller_type, match.action_name, match.raw_route_values
            ),
            route_data=match.route_data,
            validation_state=match.validation_state,
        )

    @property
    def is_resolved(self) -> bool:
        return True

    @property
    def unresolved_error(self) -> None:
        return None

    @property
    def method_is_not_allowed(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Unresolved:
    """The resolver could not match the request.

    ``unresolved_error`` is the resolver's diagnostic, stored verbatim.
    """

    unresolved_error: str

    @property
    def is_resolved(self) -> bool:
        return False

    @property
    def method_is_not_allowed(self) -> bool:
        """True if the path exists but not for the request's method.

        Recomputed from ``unresolved_error`` on every access.
        """
        return is_method_not_allowed(self.unresolved_error)


RouteResolutionOutcome: TypeAlias = Resolved | Unresolved


def outcome_from(result: MatchData | str) -> RouteResolutionOutcome:
    """Turn a resolver's raw return value into an outcome."""
    if isinstance(result, str):
        return Unresolved(result)
    return Resolved.from_match(result)
