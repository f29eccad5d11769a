"""
Label canvas: composites encoded barcode bitmaps at ZPL field positions.

^FO positions give the top-left corner of the field. ^FT positions give
the bottom-left corner of the symbol in its own reading direction, so the
paste point depends on the field orientation.
"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Tuple

from PIL import Image

from zplview.model.enums import FieldOrientation

logger = logging.getLogger(__name__)

__all__ = ["LabelCanvas"]


class LabelCanvas:
    """
    RGB label canvas in printer dots.

    Args:
        width: canvas width in dots.
        height: canvas height in dots.
        background: fill colour.
    """

    def __init__(self, width: int = 812, height: int = 1218, background: str = "white") -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.image = Image.new("RGB", (width, height), color=background)

    @staticmethod
    def _field_typeset_anchor(
        x: float,
        y: float,
        width: float,
        height: float,
        orientation: FieldOrientation,
    ) -> Tuple[float, float]:
        if orientation is FieldOrientation.NORMAL:
            return x, max(y - height, 0)
        if orientation is FieldOrientation.ROTATED_90:
            return x, y
        if orientation is FieldOrientation.INVERTED_180:
            return x - width, y
        return x - height, y - width

    @staticmethod
    def _lift(
        x: float, y: float, offset: float, orientation: FieldOrientation
    ) -> Tuple[float, float]:
        # move against the symbol's own "down" direction
        if orientation is FieldOrientation.NORMAL:
            return x, y - offset
        if orientation is FieldOrientation.ROTATED_90:
            return x + offset, y
        if orientation is FieldOrientation.INVERTED_180:
            return x, y + offset
        return x - offset, y

    def draw_barcode(
        self,
        image: Image.Image,
        barcode_height: float,
        barcode_width: float,
        use_field_origin: bool,
        x: float,
        y: float,
        label_height_offset: float,
        orientation: FieldOrientation,
    ) -> None:
        """
        Paste an encoded barcode bitmap onto the canvas.

        Args:
            image: bitmap from the encoder; not closed here.
            barcode_height: requested field height (before label adjustment).
            barcode_width: bitmap width.
            use_field_origin: True for ^FO, False for ^FT positioning.
            x, y: field position in dots.
            label_height_offset: lift applied when the label sits above the code.
            orientation: field rotation.
        """
        if use_field_origin:
            px, py = x, y
        else:
            px, py = self._field_typeset_anchor(x, y, barcode_width, barcode_height, orientation)
        px, py = self._lift(px, py, label_height_offset, orientation)

        bitmap = image.convert("RGB")
        if orientation.degrees:
            # PIL rotates counter-clockwise
            rotated = bitmap.rotate(-orientation.degrees, expand=True)
            bitmap.close()
            bitmap = rotated

        logger.debug(
            "Drawing barcode %dx%d at (%s, %s) orientation=%s",
            bitmap.width,
            bitmap.height,
            px,
            py,
            orientation.value,
        )
        try:
            self.image.paste(bitmap, (int(round(px)), int(round(py))))
        finally:
            bitmap.close()

    def render_bytes(self) -> bytes:
        buf = BytesIO()
        self.image.save(buf, format="PNG")
        buf.seek(0)
        return buf.read()
