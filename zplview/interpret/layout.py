"""
Interpretation line layout.

Label heights are rounded up so the printed text is never clipped. The
two symbologies combine ascent and descent differently; each mirrors how
its encoder measures the text baseline, so the formulas must stay apart.
"""

from __future__ import annotations

import math
from typing import Final, NamedTuple

from zplview.model.interpretation import FontMetrics

__all__ = [
    "LABEL_FONT_SCALE",
    "MAX_LABEL_FONT_SIZE",
    "LabelLayout",
    "interpretation_font_size",
    "code128_label_layout",
    "code39_label_layout",
]

LABEL_FONT_SCALE: Final[float] = 7.2
MAX_LABEL_FONT_SIZE: Final[float] = 72.0


class LabelLayout(NamedTuple):
    label_height: int
    label_height_offset: int


def interpretation_font_size(module_width: float) -> float:
    """Font size for the interpretation line: ``min(module_width * 7.2, 72)``."""
    return min(module_width * LABEL_FONT_SCALE, MAX_LABEL_FONT_SIZE)


def _layout(label_height: int, above_code: bool) -> LabelLayout:
    return LabelLayout(label_height, label_height if above_code else 0)


def code128_label_layout(
    metrics: FontMetrics, print_line: bool, above_code: bool
) -> LabelLayout:
    """``ceil(descent - ascent)`` when the line is printed, else 0."""
    label_height = math.ceil(metrics.descent - metrics.ascent) if print_line else 0
    return _layout(label_height, above_code)


def code39_label_layout(
    metrics: FontMetrics, print_line: bool, above_code: bool
) -> LabelLayout:
    """``ceil(ascent + descent)`` when the line is printed, else 0."""
    label_height = math.ceil(metrics.ascent + metrics.descent) if print_line else 0
    return _layout(label_height, above_code)
