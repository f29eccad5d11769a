"""
RU: Интерпретация полей штрихкодов ZPL: символика, кодируемые данные, подпись и геометрия.
EN: Barcode field interpretation: symbology, encodable content, interpretation line and layout.

Every function here is pure. Font metrics come from a caller-supplied
lookup so the module does no I/O.

Example:
    >>> from zplview.model.directive import Barcode128Directive
    >>> from zplview.model.interpretation import FontMetrics
    >>> result = interpret(
    ...     Barcode128Directive(content=">;1234", height=100),
    ...     lambda key, size: FontMetrics(ascent=-9.3, descent=2.1),
    ... )
    >>> result.label_height, result.final_symbol_height
    (12, 88)
"""

from __future__ import annotations

import logging
from typing import Callable, Final, assert_never

from zplview.model.directive import (
    Barcode39Directive,
    Barcode128Directive,
    BarcodeDirective,
)
from zplview.model.enums import Symbology
from zplview.model.interpretation import FontMetrics, InterpretationResult

from .escapes import strip_invalid_start_codes
from .layout import code39_label_layout, code128_label_layout, interpretation_font_size
from .modes import transform_content

logger = logging.getLogger(__name__)

__all__ = [
    "LABEL_FONT_KEY",
    "CODE39_DELIMITER",
    "FontMetricsLookup",
    "interpret",
    "interpret_code128",
    "interpret_code39",
]

LABEL_FONT_KEY: Final[str] = "A"
CODE39_DELIMITER: Final[str] = "*"

FontMetricsLookup = Callable[[str, float], FontMetrics]


def interpret_code128(
    directive: Barcode128Directive,
    font_metrics: FontMetricsLookup,
    font_key: str = LABEL_FONT_KEY,
) -> InterpretationResult:
    """
    Interpret a ^BC field.

    Stray start codes are removed, the mode rules are applied and the
    interpretation line height is carved out of the requested height.
    """
    content = strip_invalid_start_codes(directive.content)
    transform = transform_content(content, directive.mode)

    font_size = interpretation_font_size(directive.module_width)
    layout = code128_label_layout(
        font_metrics(font_key, font_size),
        directive.print_interpretation_line,
        directive.print_interpretation_line_above_code,
    )
    logger.debug(
        "^BC mode=%r -> %s content=%r label=%r",
        directive.mode,
        transform.symbology.name,
        transform.content,
        transform.interpretation,
    )

    return InterpretationResult(
        symbology=transform.symbology,
        encodable_content=transform.content,
        interpretation_label=transform.interpretation,
        label_height=layout.label_height,
        label_height_offset=layout.label_height_offset,
        final_symbol_height=directive.height - layout.label_height,
        height=directive.height,
        module_width=directive.module_width,
        label_font_size=font_size,
        print_interpretation_line=directive.print_interpretation_line,
        position=directive.position,
        has_field_origin=directive.has_field_origin,
        field_orientation=directive.field_orientation,
    )


def interpret_code39(
    directive: Barcode39Directive,
    font_metrics: FontMetricsLookup,
    font_key: str = LABEL_FONT_KEY,
) -> InterpretationResult:
    """
    Interpret a ^B3 field.

    The interpretation line is the data wrapped in exactly one ``*`` on
    each side; the encoder gets the data unchanged. The line height is
    added on top of the requested height.
    """
    label = f"{CODE39_DELIMITER}{directive.content.strip(CODE39_DELIMITER)}{CODE39_DELIMITER}"

    font_size = interpretation_font_size(directive.module_width)
    layout = code39_label_layout(
        font_metrics(font_key, font_size),
        directive.print_interpretation_line,
        directive.print_interpretation_line_above_code,
    )

    return InterpretationResult(
        symbology=Symbology.CODE39_EXTENDED,
        encodable_content=directive.content,
        interpretation_label=label,
        label_height=layout.label_height,
        label_height_offset=layout.label_height_offset,
        final_symbol_height=directive.height + layout.label_height,
        height=directive.height,
        module_width=directive.module_width,
        label_font_size=font_size,
        print_interpretation_line=directive.print_interpretation_line,
        position=directive.position,
        has_field_origin=directive.has_field_origin,
        field_orientation=directive.field_orientation,
    )


def interpret(
    directive: BarcodeDirective,
    font_metrics: FontMetricsLookup,
    font_key: str = LABEL_FONT_KEY,
) -> InterpretationResult:
    """Interpret any supported barcode field."""
    if isinstance(directive, Barcode128Directive):
        return interpret_code128(directive, font_metrics, font_key)
    elif isinstance(directive, Barcode39Directive):
        return interpret_code39(directive, font_metrics, font_key)
    else:
        assert_never(directive)
