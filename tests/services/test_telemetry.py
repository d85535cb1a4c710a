"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

from textstamp.services.result import ServiceResult
from textstamp.services.stamp import StampService
from textstamp.services.telemetry import (
    Span,
    enable_telemetry,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "children" not in d
        assert "annotations" not in d

    def test_annotations(self) -> None:
        span = Span(name="root")
        span.annotate("width", 3)
        assert span.to_dict()["annotations"] == {"width": 3}


class TestDisabled:
    def test_trace_span_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_traced_leaves_meta_empty(self) -> None:
        assert StampService().render("ab").meta is None


class TestEnabled:
    def test_traced_injects_meta(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="op")

        enable_telemetry()
        result = op()
        assert result.meta is not None
        assert "telemetry" in result.meta

    def test_trace_span_without_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None

    def test_service_span_tree(self) -> None:
        enable_telemetry()
        result = StampService().layer("ooo\nooo", "x", col=1, row=1)
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "StampService.layer"
        names = [child["name"] for child in tree["children"]]
        assert names == ["padded_parse", "padded_parse", "composite"]
        assert tree["children"][0]["annotations"] == {"height": 2, "width": 3}

    def test_failed_result_still_traced(self) -> None:
        enable_telemetry()
        result = StampService().check("")
        assert not result.ok
        assert result.meta is not None
        assert result.meta["telemetry"]["name"] == "StampService.check"
