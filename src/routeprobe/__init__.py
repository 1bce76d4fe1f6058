"""routeprobe — capture and assert how requests resolve to controller actions.

Push a synthetic request through a routing layer, keep the outcome as an
immutable value, and assert on it from tests.

Basic usage::

    from routeprobe import RouteRequest, RouteTable, resolve_route

    table = RouteTable()
    table.add("GET", "/items/{id:int}", ItemsController, "get")

    outcome = resolve_route(table, RouteRequest.get("/items/5"))
    assert outcome.is_resolved
    assert outcome.route_arguments["id"].value == 5

Assertion helpers live in ``routeprobe.testing``::

    from routeprobe.testing import call_action

    call_action(ItemsController(), "delete", 5).empty().has_no_payload()
"""

__version__ = "0.1.0"
__all__ = [
    "UNPROVIDED",
    "ArgumentContext",
    "ConfigurationError",
    "ContentResult",
    "EmptyResult",
    "KindMismatch",
    "MatchData",
    "ProbeAssertionError",
    "Redirect",
    "Resolved",
    "ResolverConfig",
    "RouteData",
    "RouteProbeError",
    "RouteRequest",
    "RouteResolver",
    "RouteTable",
    "StatusCodeResult",
    "Unresolved",
    "UnresolvedRoute",
    "ValidationState",
    "ViewResult",
    "is_method_not_allowed",
    "resolve_route",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "UNPROVIDED": "routeprobe.routing.arguments",
    "ArgumentContext": "routeprobe.routing.arguments",
    "ConfigurationError": "routeprobe.errors",
    "ContentResult": "routeprobe.results",
    "EmptyResult": "routeprobe.results",
    "KindMismatch": "routeprobe.errors",
    "MatchData": "routeprobe.routing.match",
    "ProbeAssertionError": "routeprobe.errors",
    "Redirect": "routeprobe.results",
    "Resolved": "routeprobe.routing.outcome",
    "ResolverConfig": "routeprobe.config",
    "RouteData": "routeprobe.routing.match",
    "RouteProbeError": "routeprobe.errors",
    "RouteRequest": "routeprobe.http.request",
    "RouteResolver": "routeprobe.routing.resolver",
    "RouteTable": "routeprobe.routing.table",
    "StatusCodeResult": "routeprobe.results",
    "Unresolved": "routeprobe.routing.outcome",
    "UnresolvedRoute": "routeprobe.errors",
    "ValidationState": "routeprobe.validation",
    "ViewResult": "routeprobe.results",
    "is_method_not_allowed": "routeprobe.routing.classify",
    "resolve_route": "routeprobe.routing.resolver",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routeprobe`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
