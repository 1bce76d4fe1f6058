"""Test utilities for routeprobe.

Route assertions over resolution outcomes and fluent assertions over
action results. All public names are re-exported here::

    from routeprobe.testing import assert_resolves_to, call_action, probe_route
"""

from routeprobe.testing.actions import call_action
from routeprobe.testing.builders import (
    ActionContext,
    ActionResultAssertions,
    EmptyResultAssertions,
    ResultAssertions,
    continuation_for,
    register_assertions,
    should_return,
)
from routeprobe.testing.routes import (
    assert_method_not_allowed,
    assert_not_resolved,
    assert_resolves_to,
    assert_route_argument,
    assert_route_errors,
    assert_valid_route,
    probe_route,
)

__all__ = [
    "ActionContext",
    "ActionResultAssertions",
    "EmptyResultAssertions",
    "ResultAssertions",
    "assert_method_not_allowed",
    "assert_not_resolved",
    "assert_resolves_to",
    "assert_route_argument",
    "assert_route_errors",
    "assert_valid_route",
    "call_action",
    "continuation_for",
    "probe_route",
    "register_assertions",
    "should_return",
]
