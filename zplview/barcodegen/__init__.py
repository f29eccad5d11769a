"""
barcodegen

Boundary adapters for barcode fields: bitmap encoding and font metrics.

Public API:
    - BarcodeEncoder: python-barcode encoder for interpreted content (class)
    - BarcodeEncodeError: encoding failed
    - PillowFontMetricsProvider: font key + size -> FontMetrics (class)
    - FontResolutionError: font could not be resolved

Зависимости:
    Pillow, python-barcode
"""

from zplview.barcodegen.barcode_generator import (
    BarcodeEncodeError,
    BarcodeEncoder,
    EncoderOptions,
)
from zplview.barcodegen.fonts import FontResolutionError, PillowFontMetricsProvider

__all__ = [
    "BarcodeEncoder",
    "BarcodeEncodeError",
    "EncoderOptions",
    "PillowFontMetricsProvider",
    "FontResolutionError",
]
