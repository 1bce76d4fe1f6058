"""Shared fixtures: a route table wired to the sample controllers."""

import pytest

from controllers import FilesController, ItemsController, require_name
from routeprobe.routing.table import RouteTable


@pytest.fixture
def table() -> RouteTable:
    t = RouteTable()
    t.add("GET", "/items/{id:int}", ItemsController, "get", name="item")
    t.add("DELETE", "/items/{id:int}", ItemsController, "delete")
    t.add("GET", "/items/search", ItemsController, "search")
    t.add("POST", "/items", ItemsController, "create", validate=require_name)
    t.add(["PUT", "PATCH"], "/items/{id:int}/name", ItemsController, "rename")
    t.add("GET", "/ping", ItemsController, "ping")
    t.add("GET", "/files/{filepath:path}", FilesController, "download")
    return t
