"""Result types produced by barcode field interpretation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .enums import FieldOrientation, Symbology

__all__ = ["FontMetrics", "InterpretationResult"]


@dataclass(frozen=True, slots=True)
class FontMetrics:
    """
    Vertical font metrics, Skia convention.

    ``ascent`` is measured upwards from the baseline and is therefore
    negative; ``descent`` is positive.
    """

    ascent: float
    descent: float


@dataclass(frozen=True, slots=True)
class InterpretationResult:
    """
    Everything the encoder and the renderer need for one barcode field.

    Attributes:
        symbology: Variant passed to the encoder.
        encodable_content: Exact text to encode, may hold the FNC1 character.
        interpretation_label: Printable human-readable line, never holds FNC1.
        label_height: Height reserved for the interpretation line.
        label_height_offset: Label height when printed above the code, else 0.
        final_symbol_height: Requested height adjusted by ``label_height``.
        height: Requested height from the directive.
        label_font_size: Font size used for the interpretation line.
    """

    symbology: Symbology
    encodable_content: str
    interpretation_label: str
    label_height: int
    label_height_offset: int
    final_symbol_height: float
    height: float
    module_width: float
    label_font_size: float
    print_interpretation_line: bool
    position: Tuple[float, float]
    has_field_origin: bool
    field_orientation: FieldOrientation
