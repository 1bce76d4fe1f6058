"""In-memory route table — a small reference resolver.

Maps path templates to controller actions and answers ``resolve()`` the
way a real routing layer would: match data on success, a status-line
diagnostic on failure. Matching is a linear scan in registration order.

Usage::

    table = RouteTable()
    table.add("GET", "/items/{id:int}", ItemsController, "get")
    table.add(["GET", "DELETE"], "/items/{id:int}/tags", ItemsController, "tags")

    outcome = resolve_route(table, RouteRequest.get("/items/5"))
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from routeprobe.config import ResolverConfig
from routeprobe.errors import ConfigurationError
from routeprobe.http.request import RouteRequest
from routeprobe.routing.arguments import action_parameters
from routeprobe.routing.match import MatchData, RouteData, controller_name_of
from routeprobe.routing.params import (
    CONVERTERS,
    bind_dataclass,
    coerce,
    convert_param,
    is_bindable_dataclass,
)
from routeprobe.validation import ValidationState, Validator


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/items``     (is_param=False)
    Param:   ``/{id}``      (is_param=True, param_name="id")
    Typed:   ``/{id:int}``  (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Parse a route template into segments.

    Raises ``ConfigurationError`` for ``<param>`` syntax, unknown
    converters, and ``path`` parameters that are not the last segment.
    """
    segments: list[PathSegment] = []
    parts = [p for p in path.strip("/").split("/") if p]
    for index, part in enumerate(parts):
        if part.startswith("<") and part.endswith(">"):
            msg = f"Route {path!r} uses <param> syntax; use {{param}} instead."
            raise ConfigurationError(msg)
        if not (part.startswith("{") and part.endswith("}")):
            segments.append(PathSegment(value=part))
            continue

        param_name, _, param_type = part[1:-1].partition(":")
        param_type = param_type or "str"
        if param_type not in CONVERTERS:
            msg = f"Route {path!r} uses unknown converter {param_type!r}."
            raise ConfigurationError(msg)
        if param_type == "path" and index != len(parts) - 1:
            msg = f"Route {path!r}: a path parameter must be the last segment."
            raise ConfigurationError(msg)
        segments.append(
            PathSegment(value=part, is_param=True, param_name=param_name, param_type=param_type)
        )
    return tuple(segments)


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One registered template and the action it maps to."""

    path: str
    segments: tuple[PathSegment, ...]
    methods: frozenset[str]
    controller_type: type
    action_name: str
    name: str | None = None
    validate: Validator | None = None

    @property
    def controller_name(self) -> str:
        return controller_name_of(self.controller_type)


def _has_trailing_slash(path: str) -> bool:
    return path != "/" and path.endswith("/")


class RouteTable:
    """Route registrations plus the ``RouteResolver`` protocol.

    Routes can be added until the table is frozen. The first ``resolve()``
    freezes it.
    """

    __slots__ = ("_config", "_entries", "_frozen")

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config or ResolverConfig()
        self._entries: list[RouteEntry] = []
        self._frozen = False

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def routes(self) -> list[RouteEntry]:
        return list(self._entries)

    def add(
        self,
        methods: str | Iterable[str],
        path: str,
        controller_type: type,
        action_name: str,
        *,
        name: str | None = None,
        validate: Validator | None = None,
    ) -> RouteEntry:
        """Register *path* for *methods* on ``controller_type.action_name``."""
        if self._frozen:
            msg = "Cannot add routes after the route table is frozen."
            raise ConfigurationError(msg)

        # Fails fast if the action does not exist
        action_parameters(controller_type, action_name)

        method_set = frozenset(
            m.upper() for m in ([methods] if isinstance(methods, str) else methods)
        )
        if not method_set:
            msg = f"Route {path!r} must allow at least one method."
            raise ConfigurationError(msg)

        entry = RouteEntry(
            path=path,
            segments=parse_path(path),
            methods=method_set,
            controller_type=controller_type,
            action_name=action_name,
            name=name,
            validate=validate,
        )
        self._entries.append(entry)
        return entry

    def freeze(self) -> None:
        """No more routes can be added."""
        self._frozen = True

    def resolve(self, request: RouteRequest) -> MatchData | str:
        """Match *request* against the table."""
        self._frozen = True
        path = request.path_only
        allowed: set[str] = set()

        for entry in self._entries:
            params = self._match_path(entry, path)
            if params is None:
                continue
            if request.method not in entry.methods:
                allowed |= entry.methods
                continue
            return self._bind(entry, request, params)

        if allowed:
            status = HTTPStatus.METHOD_NOT_ALLOWED
            return f"{status.value} {status.phrase}: Allowed methods: {', '.join(sorted(allowed))}"
        status = HTTPStatus.NOT_FOUND
        return f"{status.value} {status.phrase}: No route matches {request.method} {path!r}"

    # -- Matching --

    def _match_path(self, entry: RouteEntry, path: str) -> dict[str, str] | None:
        """Captured raw parameters if *path* fits *entry*, else None."""
        if self._config.strict_slashes and _has_trailing_slash(path) != _has_trailing_slash(entry.path):
            return None

        parts = [p for p in path.split("/") if p]
        captured: dict[str, str] = {}

        for index, seg in enumerate(entry.segments):
            if seg.is_param and seg.param_type == "path":
                if index >= len(parts):
                    return None
                captured[seg.param_name or ""] = "/".join(parts[index:])
                return captured
            if index >= len(parts):
                return None
            part = parts[index]
            if not seg.is_param:
                if part != seg.value:
                    return None
                continue
            pattern, _ = CONVERTERS[seg.param_type]
            if not re.fullmatch(pattern, part):
                return None
            captured[seg.param_name or ""] = part

        if len(parts) != len(entry.segments):
            return None
        return captured

    # -- Binding --

    def _bind(self, entry: RouteEntry, request: RouteRequest, captured: dict[str, str]) -> MatchData:
        types_by_name = {seg.param_name or "": seg.param_type for seg in entry.segments if seg.is_param}
        values: dict[str, Any] = {
            name: convert_param(raw, types_by_name[name]) for name, raw in captured.items()
        }
        binding_errors: dict[str, list[str]] = {}

        query = request.query if self._config.bind_query else {}
        body: Mapping[str, Any] = {}
        if self._config.bind_body and len(request.body) <= self._config.max_body_size:
            body = request.body_mapping()

        for name, annotation in action_parameters(entry.controller_type, entry.action_name):
            if name in values:
                continue
            if name in query:
                values[name] = coerce(query[name][0], annotation)
            elif is_bindable_dataclass(annotation) and body:
                try:
                    values[name] = bind_dataclass(annotation, body)
                except TypeError as exc:
                    binding_errors[name] = [str(exc)]
            elif name in body:
                values[name] = coerce(body[name], annotation)

        errors = dict(entry.validate(body)) if entry.validate is not None else {}
        for field_path, messages in binding_errors.items():
            errors[field_path] = [*errors.get(field_path, ()), *messages]

        return MatchData(
            controller_type=entry.controller_type,
            controller_name=entry.controller_name,
            action_name=entry.action_name,
            raw_route_values=values,
            route_data=RouteData(
                template=entry.path,
                path_params=dict(captured),
                methods=entry.methods,
                name=entry.name,
            ),
            validation_state=ValidationState(errors),
        )
