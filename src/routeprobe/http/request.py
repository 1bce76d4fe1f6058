"""Synthetic HTTP request handed to a resolver.

Nothing goes over the wire. A ``RouteRequest`` is the method, path,
headers, and body a test wants to push through the routing layer::

    RouteRequest.get("/items/5")
    RouteRequest.post("/items", json={"name": "lamp"})
    RouteRequest.put("/items/5", form={"name": "lamp"})
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qs, urlencode, urlsplit

from routeprobe.http.forms import FormData, is_form_content_type, parse_form_data

_JSON = "application/json"


@dataclass(frozen=True, slots=True)
class RouteRequest:
    """An immutable request description.

    ``path`` may carry a query string (``"/items?page=2"``); ``path_only``
    and ``query`` split it. Header names are matched case-insensitively.
    """

    method: str
    path: str
    body: bytes = b""
    headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode("utf-8"))

    # -- Constructors --

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        *,
        body: str | bytes = b"",
        headers: Mapping[str, str] | None = None,
        json: Any = None,
        form: Mapping[str, str] | None = None,
    ) -> RouteRequest:
        """Build a request, encoding a *json* or *form* body if given."""
        header_pairs = dict(headers or {})
        if json is not None:
            body = json_module.dumps(json)
            header_pairs.setdefault("Content-Type", _JSON)
        elif form is not None:
            body = urlencode(form)
            header_pairs.setdefault("Content-Type", "application/x-www-form-urlencoded")
        raw = body.encode("utf-8") if isinstance(body, str) else body
        return cls(method=method, path=path, body=raw, headers=tuple(header_pairs.items()))

    @classmethod
    def get(cls, path: str, **kwargs: Any) -> RouteRequest:
        return cls.build("GET", path, **kwargs)

    @classmethod
    def post(cls, path: str, **kwargs: Any) -> RouteRequest:
        return cls.build("POST", path, **kwargs)

    @classmethod
    def put(cls, path: str, **kwargs: Any) -> RouteRequest:
        return cls.build("PUT", path, **kwargs)

    @classmethod
    def patch(cls, path: str, **kwargs: Any) -> RouteRequest:
        return cls.build("PATCH", path, **kwargs)

    @classmethod
    def delete(cls, path: str, **kwargs: Any) -> RouteRequest:
        return cls.build("DELETE", path, **kwargs)

    # -- Accessors --

    @property
    def path_only(self) -> str:
        """The path without its query string."""
        return urlsplit(self.path).path or "/"

    @property
    def query(self) -> dict[str, list[str]]:
        """Query string as field name -> list of values."""
        return parse_qs(urlsplit(self.path).query, keep_blank_values=True)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first header value for *name*, or *default*."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default

    @property
    def content_type(self) -> str:
        return self.header("Content-Type") or ""

    # -- Body helpers --

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Parse the body as JSON. Raises ``ValueError`` on malformed input."""
        return json_module.loads(self.body)

    def form(self) -> FormData:
        """Parse the body as URL-encoded or multipart form data."""
        return parse_form_data(self.body, self.content_type)

    def body_mapping(self) -> Mapping[str, Any]:
        """The body as a field mapping, or ``{}`` if it is not one.

        JSON objects and form bodies qualify. Anything else, including
        malformed JSON or form data, yields an empty mapping.
        """
        if not self.body:
            return {}
        content_type = self.content_type.split(";", 1)[0].strip().lower()
        if content_type == _JSON or content_type.endswith("+json"):
            try:
                parsed = self.json()
            except ValueError:
                return {}
            return parsed if isinstance(parsed, dict) else {}
        if is_form_content_type(content_type):
            try:
                return self.form()
            except ValueError:
                return {}
        return {}
