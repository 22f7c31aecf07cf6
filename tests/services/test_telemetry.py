"""Span trees: the Span type, trace_span blocks and @traced service methods."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from utf8ctl.services.codec import CodecService
from utf8ctl.services.result import ServiceError, ServiceResult
from utf8ctl.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)


@pytest.fixture
def telemetry() -> Generator[None]:
    enable_telemetry()
    yield
    disable_telemetry()


@pytest.fixture
def root_span(telemetry: None) -> Generator[Span]:
    root = Span(name="root")
    token = _current_span.set(root)
    yield root
    _current_span.reset(token)


def _refusal() -> ServiceResult:
    return ServiceResult(ok=False, op="decode", error=ServiceError(code="TOO_SHORT", message="short"))


class TestSpan:
    def test_open_span_reports_zero(self) -> None:
        span = Span(name="open")
        assert span.finished is None
        assert span.duration_ms == 0.0

    def test_end_records_finish(self) -> None:
        span = Span(name="closed")
        span.end()
        assert span.finished is not None
        assert span.duration_ms >= 0.0

    def test_child_is_linked_both_ways(self) -> None:
        root = Span(name="decode")
        leaf = root.child("decode_codepoints")
        assert leaf.parent is root
        assert root.children == [leaf]

    def test_bare_span_serializes_two_keys(self) -> None:
        span = Span(name="encode")
        span.end()
        assert set(span.to_dict()) == {"name", "duration_ms"}

    def test_tree_serialization(self) -> None:
        root = Span(name="decode")
        leaf = root.child("decode_codepoints")
        leaf.annotate("bytes", 4)
        leaf.end()
        root.end()
        tree = root.to_dict()
        assert tree["children"][0]["name"] == "decode_codepoints"
        assert tree["children"][0]["annotations"] == {"bytes": 4}
        assert "annotations" not in tree


class TestTraceSpan:
    def test_off_by_default(self) -> None:
        with trace_span("decode_codepoints") as span:
            assert span is None

    @pytest.mark.usefixtures("telemetry")
    def test_needs_an_active_root(self) -> None:
        with trace_span("decode_codepoints") as span:
            assert span is None

    def test_attaches_closed_child(self, root_span: Span) -> None:
        with trace_span("encode_text") as span:
            assert span is not None
            assert get_current_span() is span
        assert root_span.children[0].name == "encode_text"
        assert root_span.children[0].finished is not None
        assert get_current_span() is root_span

    def test_nesting_follows_with_blocks(self, root_span: Span) -> None:
        with trace_span("outer"), trace_span("inner"):
            pass
        with trace_span("sibling"):
            pass
        assert [c.name for c in root_span.children] == ["outer", "sibling"]
        assert [c.name for c in root_span.children[0].children] == ["inner"]


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="encode")

        assert op().meta is None

    @pytest.mark.usefixtures("telemetry")
    @pytest.mark.parametrize(
        "make",
        [
            lambda: ServiceResult(ok=True, op="encode"),
            _refusal,
        ],
        ids=["ok", "refused"],
    )
    def test_result_carries_span_tree(self, make) -> None:
        @traced
        def op() -> ServiceResult:
            with trace_span("stage"):
                pass
            return make()

        tree = op().meta["telemetry"]
        assert tree["name"].endswith("op")
        assert [c["name"] for c in tree["children"]] == ["stage"]

    @pytest.mark.usefixtures("telemetry")
    def test_existing_meta_is_merged(self) -> None:
        @traced
        def op() -> ServiceResult:
            return ServiceResult(ok=True, op="encode", meta={"source": "cli"})

        meta = op().meta
        assert meta["source"] == "cli"
        assert "telemetry" in meta

    @pytest.mark.usefixtures("telemetry")
    def test_plain_return_values_untouched(self) -> None:
        @traced
        def op() -> list[int]:
            return [0x61]

        assert op() == [0x61]

    @pytest.mark.usefixtures("telemetry")
    def test_raise_clears_active_span(self) -> None:
        @traced
        def op() -> ServiceResult:
            raise RuntimeError("codec crashed")

        with pytest.raises(RuntimeError, match="codec crashed"):
            op()
        assert _current_span.get() is None


@pytest.mark.usefixtures("telemetry")
class TestCodecTelemetry:
    def test_decode_span_tree(self, codec: CodecService) -> None:
        tree = codec.decode(b"hi").meta["telemetry"]
        assert tree["name"] == "CodecService.decode"
        assert tree["children"][0]["name"] == "decode_codepoints"
        assert tree["children"][0]["annotations"] == {"bytes": 2}

    def test_encode_span_tree(self, codec: CodecService) -> None:
        tree = codec.encode("abc").meta["telemetry"]
        assert tree["name"] == "CodecService.encode"
        assert tree["children"][0]["name"] == "encode_text"
        assert tree["children"][0]["annotations"] == {"chars": 3}

    def test_failed_decode_still_traced(self, codec: CodecService) -> None:
        result = codec.decode(b"\xff")
        assert not result.ok
        assert result.meta["telemetry"]["name"] == "CodecService.decode"
