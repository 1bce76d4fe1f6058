"""RouteData and MatchData frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from routeprobe.validation import ValidationState


@dataclass(frozen=True, slots=True)
class RouteData:
    """Raw details of the route template that matched.

    Passed through untouched from the resolver.
    """

    template: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    methods: frozenset[str] = frozenset()
    name: str | None = None


@dataclass(frozen=True, slots=True)
class MatchData:
    """What a resolver returns on success.

    Every field is required: a resolver that matched a route must say
    which controller, how it named it, what it captured, and what the
    binding layer thought of the request.
    """

    controller_type: type
    controller_name: str
    action_name: str
    raw_route_values: Mapping[str, Any]
    route_data: RouteData
    validation_state: ValidationState


def controller_name_of(controller: Any) -> str:
    """Conventional controller name: ``ItemsController`` -> ``"Items"``.

    Accepts a controller class or instance.
    """
    cls = controller if isinstance(controller, type) else type(controller)
    return cls.__name__.removesuffix("Controller") or cls.__name__
