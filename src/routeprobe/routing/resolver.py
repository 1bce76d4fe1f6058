"""The resolver seam and the single resolution step."""

import logging
from typing import Protocol, runtime_checkable

from routeprobe.http.request import RouteRequest
from routeprobe.routing.match import MatchData
from routeprobe.routing.outcome import Resolved, RouteResolutionOutcome, outcome_from

logger = logging.getLogger("routeprobe.routing")


@runtime_checkable
class RouteResolver(Protocol):
    """Anything that can map a request onto a controller action.

    Returns ``MatchData`` on success and a diagnostic string on failure.
    ``RouteTable`` is the in-tree implementation; adapters for real
    frameworks implement the same method.
    """

    def resolve(self, request: RouteRequest) -> MatchData | str: ...


def resolve_route(resolver: RouteResolver, request: RouteRequest) -> RouteResolutionOutcome:
    """Resolve *request* once and capture the outcome.

    Exceptions raised by *resolver* propagate unchanged.
    """
    outcome = outcome_from(resolver.resolve(request))
    if isinstance(outcome, Resolved):
        logger.debug(
            "%s %s -> %s.%s", request.method, request.path, outcome.controller_name, outcome.action_name
        )
    else:
        logger.debug("%s %s -> unresolved: %s", request.method, request.path, outcome.unresolved_error)
    return outcome
