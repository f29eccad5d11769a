"""
model/enums.py

(Краткое RU: Перечисления для полей штрихкодов ZPL.)

EN: Domain enums for ZPL barcode fields: symbology variants handed to the
encoder, field orientations handed to the renderer and the ^BC mode flags.
No interpretation logic here.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Symbology(str, Enum):
    """Symbology variant the encoder must use. Exactly one per field."""

    CODE128_AUTO = "code128"
    CODE128_A = "code128a"
    CODE128_B = "code128b"
    CODE128_C = "code128c"
    CODE39_EXTENDED = "code39extended"

    @property
    def is_code128(self) -> bool:
        return self is not Symbology.CODE39_EXTENDED


class FieldOrientation(str, Enum):
    """^FW / ^BC orientation parameter."""

    NORMAL = "N"
    ROTATED_90 = "R"
    INVERTED_180 = "I"
    READ_FROM_BOTTOM_UP_270 = "B"

    @property
    def degrees(self) -> int:
        """Clockwise rotation in degrees."""
        return _ORIENTATION_DEGREES[self]


_ORIENTATION_DEGREES: Final = {
    FieldOrientation.NORMAL: 0,
    FieldOrientation.ROTATED_90: 90,
    FieldOrientation.INVERTED_180: 180,
    FieldOrientation.READ_FROM_BOTTOM_UP_270: 270,
}


class Code128Mode(str, Enum):
    """^BC mode parameter. An absent mode behaves as NORMAL."""

    NORMAL = "N"
    AUTOMATIC = "A"
    UCC_EAN = "D"
    UCC_CASE = "U"
