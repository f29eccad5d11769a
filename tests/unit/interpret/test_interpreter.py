import dataclasses
from typing import Any, List, Tuple

import pytest

from zplview.barcodegen.fonts import FontResolutionError
from zplview.interpret.interpreter import (
    LABEL_FONT_KEY,
    interpret,
    interpret_code39,
    interpret_code128,
)
from zplview.interpret.modes import FNC1
from zplview.model.directive import Barcode39Directive, Barcode128Directive
from zplview.model.enums import FieldOrientation, Symbology
from zplview.model.interpretation import FontMetrics


class RecordingMetrics:
    """Font metrics lookup that remembers its calls."""

    def __init__(self, metrics: FontMetrics) -> None:
        self.metrics = metrics
        self.calls: List[Tuple[str, float]] = []

    def __call__(self, font_key: str, size: float) -> FontMetrics:
        self.calls.append((font_key, size))
        return self.metrics


@pytest.fixture
def metrics() -> RecordingMetrics:
    # code 128: ceil(12.5 + 2.0) = 15, code 39: ceil(-2.0 + 12.5) = 11
    return RecordingMetrics(FontMetrics(ascent=-2.0, descent=12.5))


class TestInterpretCode128:
    def test_start_code(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(Barcode128Directive(content=">9ABC", mode="N"), metrics)
        assert result.symbology == Symbology.CODE128_A
        assert result.encodable_content == "ABC"
        assert result.interpretation_label == "ABC"

    def test_stray_start_code_removed_before_resolution(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(Barcode128Directive(content="A>9B", mode="N"), metrics)
        assert result.symbology == Symbology.CODE128_B
        assert result.encodable_content == "AB"
        assert result.interpretation_label == "AB"

    def test_stray_start_code_in_other_modes(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(Barcode128Directive(content="12>;34", mode="D"), metrics)
        assert result.encodable_content == FNC1 + "1234"

    @pytest.mark.parametrize(
        "content,mode,label",
        [
            ("A>>89", "N", "A"),
            (">>89", None, ""),
            (">9123", "D", "123"),
            (">9ABC", "A", "ABC"),
            (">;123", "U", "1236"),
        ],
    )
    def test_label_free_of_start_codes(
        self, metrics: RecordingMetrics, content: str, mode: "str | None", label: str
    ) -> None:
        result = interpret_code128(Barcode128Directive(content=content, mode=mode), metrics)
        assert result.interpretation_label == label
        for token in (">9", ">:", ">;"):
            assert token not in result.interpretation_label
            assert token not in result.encodable_content

    def test_gs1_absent_mode(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(Barcode128Directive(content=">8012345678901"), metrics)
        assert result.encodable_content == FNC1 + "012345678901"
        assert result.interpretation_label == "012345678901"

    def test_mode_u(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(
            Barcode128Directive(content="0000000000000000001", mode="U"), metrics
        )
        assert result.symbology == Symbology.CODE128_C
        assert result.encodable_content == FNC1 + "00000000000000000017"
        assert result.interpretation_label == "00000000000000000017"

    def test_label_carved_out_of_height(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(Barcode128Directive(content="ABC", height=100), metrics)
        assert result.label_height == 15
        assert result.label_height_offset == 0
        assert result.final_symbol_height == 85
        assert result.height == 100

    def test_label_above_code(self, metrics: RecordingMetrics) -> None:
        directive = Barcode128Directive(
            content="ABC", height=100, print_interpretation_line_above_code=True
        )
        result = interpret_code128(directive, metrics)
        assert result.label_height_offset == 15

    def test_no_interpretation_line(self, metrics: RecordingMetrics) -> None:
        directive = Barcode128Directive(
            content="ABC", height=100, print_interpretation_line=False
        )
        result = interpret_code128(directive, metrics)
        assert result.label_height == 0
        assert result.final_symbol_height == 100

    def test_font_lookup(self, metrics: RecordingMetrics) -> None:
        interpret_code128(Barcode128Directive(content="ABC", module_width=3), metrics)
        assert len(metrics.calls) == 1
        key, size = metrics.calls[0]
        assert key == LABEL_FONT_KEY == "A"
        assert size == pytest.approx(21.6)

    def test_font_size_capped(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(Barcode128Directive(content="ABC", module_width=50), metrics)
        assert metrics.calls[0][1] == 72
        assert result.label_font_size == 72

    def test_pass_through_fields(self, metrics: RecordingMetrics) -> None:
        directive = Barcode128Directive(
            content="ABC",
            position=(12, 34),
            has_field_origin=False,
            field_orientation=FieldOrientation.ROTATED_90,
            module_width=3,
        )
        result = interpret_code128(directive, metrics)
        assert result.position == (12, 34)
        assert result.has_field_origin is False
        assert result.field_orientation is FieldOrientation.ROTATED_90
        assert result.module_width == 3

    def test_result_is_frozen(self, metrics: RecordingMetrics) -> None:
        result = interpret_code128(Barcode128Directive(content="ABC"), metrics)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.encodable_content = "X"  # type: ignore[misc]

    def test_font_errors_propagate(self) -> None:
        def failing(font_key: str, size: float) -> FontMetrics:
            raise FontResolutionError("no face")

        with pytest.raises(FontResolutionError):
            interpret_code128(Barcode128Directive(content="ABC"), failing)


class TestInterpretCode39:
    @pytest.mark.parametrize("content", ["*ABC123*", "ABC123", "**ABC123**", "*ABC123"])
    def test_label_wrapped_once(self, metrics: RecordingMetrics, content: str) -> None:
        result = interpret_code39(Barcode39Directive(content=content), metrics)
        assert result.interpretation_label == "*ABC123*"
        assert result.encodable_content == content
        assert result.symbology == Symbology.CODE39_EXTENDED

    def test_rewrap_is_idempotent(self, metrics: RecordingMetrics) -> None:
        first = interpret_code39(Barcode39Directive(content="A*B"), metrics)
        second = interpret_code39(
            Barcode39Directive(content=first.interpretation_label), metrics
        )
        assert first.interpretation_label == second.interpretation_label == "*A*B*"

    def test_label_added_to_height(self, metrics: RecordingMetrics) -> None:
        result = interpret_code39(Barcode39Directive(content="ABC", height=100), metrics)
        assert result.label_height == 11
        assert result.final_symbol_height == 111

    def test_no_control_handling(self, metrics: RecordingMetrics) -> None:
        result = interpret_code39(Barcode39Directive(content=">9A>8B"), metrics)
        assert result.encodable_content == ">9A>8B"


class TestInterpretDispatch:
    def test_code128(self, metrics: RecordingMetrics) -> None:
        result = interpret(Barcode128Directive(content=">;12"), metrics)
        assert result.symbology == Symbology.CODE128_C

    def test_code39(self, metrics: RecordingMetrics) -> None:
        result = interpret(Barcode39Directive(content="AB"), metrics)
        assert result.symbology == Symbology.CODE39_EXTENDED

    def test_custom_font_key(self, metrics: RecordingMetrics) -> None:
        interpret(Barcode39Directive(content="AB"), metrics, font_key="0")
        assert metrics.calls[0][0] == "0"

    def test_unknown_directive(self, metrics: RecordingMetrics) -> None:
        bogus: Any = object()
        with pytest.raises(AssertionError):
            interpret(bogus, metrics)
