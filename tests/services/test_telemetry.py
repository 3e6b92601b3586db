"""Tests for telemetry spans."""

from __future__ import annotations

from conectl.services.result import ServiceResult
from conectl.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@traced
def _op() -> ServiceResult:
    with trace_span("inner") as span:
        if span is not None:
            span.annotate("k", "v")
    return ServiceResult(ok=True, op="sample", meta={"existing": 1})


@traced
def _plain() -> int:
    return 7


class TestSpan:
    def test_unfinished_duration_is_zero(self) -> None:
        assert Span(name="x").duration_ms == 0.0

    def test_to_dict_nested(self) -> None:
        parent = Span(name="p")
        child = Span(name="c")
        parent.children.append(child)
        child.finish()
        parent.finish()
        d = parent.to_dict()
        assert d["name"] == "p"
        assert d["children"][0]["name"] == "c"


class TestTraced:
    def test_disabled_passthrough(self) -> None:
        disable_telemetry()
        result = _op()
        assert result.meta == {"existing": 1}

    def test_enabled_injects_tree(self) -> None:
        enable_telemetry()
        result = _op()
        assert result.meta is not None
        assert result.meta["existing"] == 1
        tree = result.meta["telemetry"]
        assert tree["children"][0] == {
            "name": "inner",
            "duration_ms": tree["children"][0]["duration_ms"],
            "annotations": {"k": "v"},
        }

    def test_non_result_return_untouched(self) -> None:
        enable_telemetry()
        assert _plain() == 7

    def test_trace_span_outside_traced_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None
