"""Tests for operation-specific Rich renderers."""

from utf8ctl.output.renderers import render_quiet, render_result
from utf8ctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = _err("decode", "OVERLONG", "invalid utf8 byte sequence; overlong")
        output = render_result(result)
        assert "ERROR" in output
        assert "decode" in output
        assert "overlong" in output
        assert "code: OVERLONG" in output

    def test_detail_hidden_by_default(self) -> None:
        output = render_result(_err("decode", "OVERLONG", "Bad", offset=3))
        assert "detail" not in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("decode", "OVERLONG", "Bad", offset=3, byte="0xc0")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "offset: 3" in output
        assert "byte: 0xc0" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output


# ── Codepoint tables ─────────────────────────────────────────────────


class TestDecodeRenderer:
    def test_summary_and_table(self) -> None:
        result = _ok(
            "decode",
            codepoints=[0x61, 0x1F600],
            byte_length=5,
            policy="strict",
            skipped=0,
        )
        output = render_result(result)
        assert output.startswith("OK")
        assert "bytes: 5" in output
        assert "codepoints: 2" in output
        assert "policy: strict" in output
        assert "U+0061" in output
        assert "U+1F600" in output
        assert "f0 9f 98 80" in output
        assert "skipped" not in output

    def test_skipped_count_and_warnings(self) -> None:
        result = ServiceResult(
            ok=True,
            op="decode",
            data={"codepoints": [], "byte_length": 2, "policy": "lenient", "skipped": 1},
            warnings=["Skipped OVERLONG at offset 0"],
        )
        assert "skipped: 1" in render_result(result)
        assert "Skipped OVERLONG at offset 0" in render_result(result, verbose=True)

    def test_controls_escaped_in_char_column(self) -> None:
        result = _ok("decode", codepoints=[0x0A, 0x20], byte_length=2, policy="strict")
        output = render_result(result)
        assert "\\n" in output
        assert "\\u0020" in output

    def test_row_limit(self) -> None:
        result = _ok("decode", codepoints=list(range(0x61, 0x61 + 10)), byte_length=10)
        output = render_result(result, max_rows=4)
        assert "U+0064" in output
        assert "U+0065" not in output
        assert "6 more" in output

    def test_empty_has_no_table(self) -> None:
        output = render_result(_ok("decode", codepoints=[], byte_length=0, policy="strict"))
        assert "Codepoint" not in output


class TestCodepointsRenderer:
    def test_summary(self) -> None:
        result = _ok("codepoints", codepoints=[0xE9], byte_length=2, form="NFC")
        output = render_result(result)
        assert "count: 1" in output
        assert "form: NFC" in output
        assert "c3 a9" in output


# ── Scalar renderers ─────────────────────────────────────────────────


class TestEncodeRenderer:
    def test_fields(self) -> None:
        result = _ok("encode", hex="0xc3a9", bytes=[0xC3, 0xA9], byte_length=2, form="none")
        output = render_result(result)
        assert "hex: 0xc3a9" in output
        assert "bytes: 2" in output
        assert "form: none" in output


class TestEscapeRenderer:
    def test_literal(self) -> None:
        result = _ok("escape", literal='"hi\\n"', byte_length=3, policy="strict", skipped=0)
        assert 'literal: "hi\\n"' in render_result(result)


class TestStringifyRenderer:
    def test_fields(self) -> None:
        result = _ok(
            "stringify",
            code_units=[0xD83D, 0xDE00],
            labels=["0xd83d", "0xde00"],
            text="\U0001f600",
        )
        output = render_result(result)
        assert "code_units: 0xd83d 0xde00" in output
        assert "\U0001f600" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", count=3, items=[1, 2]))
        assert "OK" in output
        assert "count: 3" in output
        assert "items: [1,2]" in output


class TestVerboseMeta:
    def test_telemetry_tree(self) -> None:
        result = ServiceResult(
            ok=True,
            op="encode",
            data={"hex": "0x61", "byte_length": 1},
            meta={
                "telemetry": {
                    "name": "CodecService.encode",
                    "duration_ms": 0.5,
                    "children": [
                        {"name": "encode_text", "duration_ms": 0.2, "annotations": {"chars": 1}}
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "CodecService.encode" in output
        assert "encode_text  (chars=1)" in output

    def test_meta_hidden_without_verbose(self) -> None:
        result = ServiceResult(ok=True, op="encode", data={"hex": "0x61"}, meta={"k": "v"})
        assert "meta" not in render_result(result)


# ── Quiet mode ───────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_decode_text(self) -> None:
        assert render_quiet(_ok("decode", text="hi")) == "hi"

    def test_stringify_text(self) -> None:
        assert render_quiet(_ok("stringify", text="\U0001f600")) == "\U0001f600"

    def test_escape_literal(self) -> None:
        assert render_quiet(_ok("escape", literal='"a"')) == '"a"'

    def test_encode_hex(self) -> None:
        assert render_quiet(_ok("encode", hex="0x61")) == "0x61"

    def test_codepoints_labels(self) -> None:
        assert render_quiet(_ok("codepoints", labels=["U+0061", "U+00E9"])) == "U+0061 U+00E9"

    def test_unknown_op(self) -> None:
        assert render_quiet(_ok("custom")) == "OK: custom"

    def test_error(self) -> None:
        output = render_quiet(_err("decode", "TOO_SHORT", "invalid utf8 byte sequence; too short"))
        assert output == "ERROR: decode — invalid utf8 byte sequence; too short"
