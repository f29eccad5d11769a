"""Domain model: directives, symbology enums and interpretation results."""

from .directive import Barcode39Directive, Barcode128Directive, BarcodeDirective
from .enums import Code128Mode, FieldOrientation, Symbology
from .interpretation import FontMetrics, InterpretationResult

__all__ = [
    "Barcode128Directive",
    "Barcode39Directive",
    "BarcodeDirective",
    "Code128Mode",
    "FieldOrientation",
    "Symbology",
    "FontMetrics",
    "InterpretationResult",
]
