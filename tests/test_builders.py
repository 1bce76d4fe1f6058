"""Tests for routeprobe.testing.builders — kind checks and continuations."""

from dataclasses import dataclass
from typing import ClassVar, Self

import pytest

from routeprobe.errors import KindMismatch, ProbeAssertionError
from routeprobe.results import ContentResult, EmptyResult, Redirect, ViewResult
from routeprobe.testing.builders import (
    ActionContext,
    ActionResultAssertions,
    EmptyResultAssertions,
    ResultAssertions,
    continuation_for,
    register_assertions,
    should_return,
)


def _wrap(result: object) -> ActionResultAssertions:
    return should_return(result, ActionContext("Items", "delete", caller=None))


@dataclass(frozen=True, slots=True)
class FileResult:
    result_kind: ClassVar[str] = "file"

    filename: str


@register_assertions(FileResult)
class FileResultAssertions(ResultAssertions[FileResult]):
    __slots__ = ()

    def named(self, filename: str) -> Self:
        return self.satisfies(lambda r: r.filename == filename, f"to be named {filename!r}")


class LoudEmptyResult(EmptyResult):
    pass


class TestActionContext:
    def test_caller_defaults_to_current_test(self) -> None:
        context = ActionContext("Items", "get")
        assert context.caller is not None
        assert context.caller.endswith("test_caller_defaults_to_current_test")

    def test_describe(self) -> None:
        assert ActionContext("Items", "get", caller=None).describe() == "get action in Items"
        assert (
            ActionContext("Items", "get", caller="t.py::t").describe()
            == "get action in Items (from t.py::t)"
        )


class TestOfKind:
    def test_match_returns_continuation(self) -> None:
        checked = _wrap(EmptyResult()).of_kind(EmptyResult)
        assert isinstance(checked, EmptyResultAssertions)
        assert checked.result == EmptyResult()

    def test_unregistered_kind_gets_generic_builder(self) -> None:
        checked = _wrap(ViewResult("a.html")).of_kind(ViewResult)
        assert type(checked) is ResultAssertions

    def test_mismatch_scenario(self) -> None:
        with pytest.raises(KindMismatch) as exc_info:
            _wrap(Redirect("/items")).of_kind(EmptyResult)
        error = exc_info.value
        assert error.controller_name == "Items"
        assert error.action_name == "delete"
        assert error.expected == "empty"
        assert error.actual == "redirect"
        assert str(error) == (
            "When calling delete action in Items expected result to be empty, "
            "but instead received redirect."
        )

    def test_mismatch_is_an_assertion_error(self) -> None:
        with pytest.raises(AssertionError):
            _wrap(None).of_kind(EmptyResult)

    def test_mismatch_names_none(self) -> None:
        with pytest.raises(KindMismatch, match="instead received none"):
            _wrap(None).empty()

    def test_mismatch_for_plain_object(self) -> None:
        with pytest.raises(KindMismatch, match="instead received str"):
            _wrap("text").of_kind(ContentResult)

    def test_mismatch_includes_caller(self) -> None:
        builder = should_return(Redirect("/"), ActionContext("Items", "delete", caller="t.py::t"))
        with pytest.raises(KindMismatch, match=r"\(from t.py::t\)"):
            builder.empty()

    def test_subclass_matches_and_inherits_continuation(self) -> None:
        checked = _wrap(LoudEmptyResult()).empty()
        assert isinstance(checked, EmptyResultAssertions)

    def test_new_kind_without_touching_builder(self) -> None:
        checked = _wrap(FileResult("report.csv")).of_kind(FileResult)
        assert isinstance(checked, FileResultAssertions)
        checked.named("report.csv")

    def test_new_kind_mismatch_uses_its_tag(self) -> None:
        with pytest.raises(KindMismatch, match="expected result to be file"):
            _wrap(EmptyResult()).of_kind(FileResult)


class TestContinuationFor:
    def test_registered(self) -> None:
        assert continuation_for(EmptyResult) is EmptyResultAssertions

    def test_nearest_base(self) -> None:
        assert continuation_for(LoudEmptyResult) is EmptyResultAssertions

    def test_fallback(self) -> None:
        assert continuation_for(Redirect) is ResultAssertions


class TestResultAssertions:
    def test_chain_returns_self(self) -> None:
        checked = _wrap(EmptyResult()).empty()
        assert checked.has_no_payload() is checked
        assert checked.with_status(200) is checked

    def test_and_provide_result(self) -> None:
        result = ViewResult("items/detail.html", id=5)
        assert _wrap(result).of_kind(ViewResult).and_provide_result() is result

    def test_satisfies_passes(self) -> None:
        _wrap(ViewResult("a.html")).of_kind(ViewResult).satisfies(lambda v: v.name == "a.html")

    def test_satisfies_failure_message(self) -> None:
        checked = _wrap(EmptyResult(status=204)).empty()
        with pytest.raises(ProbeAssertionError) as exc_info:
            checked.with_status(200)
        message = str(exc_info.value)
        assert "delete action in Items" in message
        assert "empty result to have status 200" in message
        assert "EmptyResult(status=204)" in message

    def test_satisfies_names_predicate(self) -> None:
        def is_permanent(redirect: Redirect) -> bool:
            return redirect.permanent

        checked = _wrap(Redirect("/")).of_kind(Redirect)
        with pytest.raises(ProbeAssertionError, match="to satisfy is_permanent"):
            checked.satisfies(is_permanent)

    def test_custom_continuation_failure(self) -> None:
        checked = _wrap(FileResult("a.csv")).of_kind(FileResult)
        with pytest.raises(ProbeAssertionError, match="to be named 'b.csv'"):
            checked.named("b.csv")
