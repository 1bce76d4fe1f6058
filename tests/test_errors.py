"""Tests for the routeprobe exception hierarchy."""

import pytest

from routeprobe.errors import (
    ConfigurationError,
    KindMismatch,
    ProbeAssertionError,
    RouteProbeError,
    UnresolvedRoute,
)


class TestHierarchy:
    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, RouteProbeError)
        assert not issubclass(ConfigurationError, AssertionError)

    def test_assertion_errors_fail_tests(self) -> None:
        for cls in (ProbeAssertionError, UnresolvedRoute, KindMismatch):
            assert issubclass(cls, RouteProbeError)
            assert issubclass(cls, AssertionError)


class TestUnresolvedRoute:
    def test_message_with_request(self) -> None:
        error = UnresolvedRoute("404 Not Found", method="GET", path="/x")
        assert str(error) == "Expected GET '/x' to resolve, but it did not: 404 Not Found"
        assert error.error == "404 Not Found"

    def test_message_without_request(self) -> None:
        assert str(UnresolvedRoute("boom")) == "Expected route to resolve, but it did not: boom"

    def test_method_not_allowed(self) -> None:
        assert UnresolvedRoute("405 Method Not Allowed").method_not_allowed is True
        assert UnresolvedRoute("404 Not Found").method_not_allowed is False


class TestKindMismatch:
    def test_fields(self) -> None:
        error = KindMismatch("Items", "delete", "empty", "redirect")
        assert (error.controller_name, error.action_name) == ("Items", "delete")
        assert error.caller is None

    def test_message(self) -> None:
        error = KindMismatch("Items", "delete", "empty", "redirect", caller="t.py::t")
        assert str(error) == (
            "When calling delete action in Items (from t.py::t) "
            "expected result to be empty, but instead received redirect."
        )

    def test_frozen(self) -> None:
        error = KindMismatch("Items", "delete", "empty", "redirect")
        with pytest.raises(AttributeError):
            error.expected = "view"  # type: ignore[misc]

    def test_raisable(self) -> None:
        with pytest.raises(KindMismatch, match="instead received none"):
            raise KindMismatch("Items", "get", "view", "none")
