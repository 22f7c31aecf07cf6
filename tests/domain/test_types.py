"""Tests for codec enums."""

from utf8ctl.domain.types import (
    DECODE_ERROR_DESCRIPTIONS,
    ErrorPolicy,
    NormalizationForm,
    Utf8ErrorReason,
)


class TestErrorPolicy:
    def test_values(self) -> None:
        assert ErrorPolicy("strict") is ErrorPolicy.STRICT
        assert ErrorPolicy("lenient") is ErrorPolicy.LENIENT

    def test_str(self) -> None:
        assert str(ErrorPolicy.LENIENT) == "lenient"


class TestNormalizationForm:
    def test_current_is_empty_string(self) -> None:
        assert NormalizationForm.CURRENT == ""

    def test_members(self) -> None:
        assert {f.value for f in NormalizationForm} == {"", "NFC", "NFD", "NFKC", "NFKD"}


class TestUtf8ErrorReason:
    def test_values_equal_names(self) -> None:
        for reason in Utf8ErrorReason:
            assert reason.value == reason.name

    def test_every_decoder_reason_described(self) -> None:
        decoder_reasons = set(Utf8ErrorReason) - {Utf8ErrorReason.INVALID_SURROGATE_PAIR}
        assert set(DECODE_ERROR_DESCRIPTIONS) == decoder_reasons
