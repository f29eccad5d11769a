"""
Barcode field drawer: interpretation, encoding and canvas drawing for one field.

The encoded bitmap is held in a ``with`` block, so it is released even
when drawing fails.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from zplview.barcodegen.barcode_generator import BarcodeEncoder
from zplview.barcodegen.fonts import PillowFontMetricsProvider
from zplview.interpret.interpreter import LABEL_FONT_KEY, FontMetricsLookup, interpret
from zplview.model.directive import BarcodeDirective
from zplview.model.interpretation import InterpretationResult

from .label_canvas import LabelCanvas

logger = logging.getLogger(__name__)

__all__ = ["BarcodeFieldDrawer"]


class BarcodeFieldDrawer:
    """
    Draw ^BC and ^B3 fields onto a label canvas.

    Args:
        canvas: target canvas.
        encoder: bitmap encoder.
        font_metrics: font key + size -> FontMetrics.
        font_key: logical font used for interpretation lines.

    Example:
        >>> drawer = BarcodeFieldDrawer.from_config(load_config())
        >>> drawer.draw(Barcode128Directive(content=">;123456", height=100))
    """

    def __init__(
        self,
        canvas: LabelCanvas,
        encoder: BarcodeEncoder,
        font_metrics: FontMetricsLookup,
        font_key: str = LABEL_FONT_KEY,
    ) -> None:
        self.canvas = canvas
        self.encoder = encoder
        self.font_metrics = font_metrics
        self.font_key = font_key

    @classmethod
    def from_config(
        cls, config: Mapping[str, Any], canvas: Optional[LabelCanvas] = None
    ) -> BarcodeFieldDrawer:
        if canvas is None:
            canvas = LabelCanvas(
                config.get("canvas_width", 812),
                config.get("canvas_height", 1218),
                config.get("background", "white"),
            )
        return cls(
            canvas,
            BarcodeEncoder.from_config(config),
            PillowFontMetricsProvider.from_config(config),
            config.get("label_font_key", LABEL_FONT_KEY),
        )

    def draw(self, directive: BarcodeDirective) -> InterpretationResult:
        """
        Interpret, encode and draw one field.

        Raises:
            BarcodeEncodeError: the encoder rejected the content.
            FontResolutionError: the interpretation font could not be loaded.
        """
        result = interpret(directive, self.font_metrics, self.font_key)
        x, y = result.position

        with self.encoder.encode(
            result.symbology,
            result.encodable_content,
            module_width=result.module_width,
            height=result.final_symbol_height,
            include_label=result.print_interpretation_line,
            label=result.interpretation_label,
            label_font_size=result.label_font_size,
        ) as image:
            self.canvas.draw_barcode(
                image,
                result.height,
                image.width,
                result.has_field_origin,
                x,
                y,
                result.label_height_offset,
                result.field_orientation,
            )

        logger.info("Drew %s field at (%s, %s)", result.symbology.name, x, y)
        return result
