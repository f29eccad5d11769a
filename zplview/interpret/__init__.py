"""
interpret

Pure interpretation of ZPL barcode fields into encoder and renderer inputs.

Public API:
    - interpret / interpret_code128 / interpret_code39
    - strip_invalid_start_codes, strip_start_codes, resolve_start_code: start code handling
    - transform_content, FNC1: ^BC mode rules
    - mode_u_check_digit: weighted 7/9 check digit for mode U
    - code128_label_layout, code39_label_layout, interpretation_font_size
"""

from .checksum import mode_u_check_digit, pad_mode_u_data
from .escapes import (
    START_CODE_MAP,
    resolve_start_code,
    strip_invalid_start_codes,
    strip_start_codes,
)
from .interpreter import (
    LABEL_FONT_KEY,
    FontMetricsLookup,
    interpret,
    interpret_code39,
    interpret_code128,
)
from .layout import (
    LabelLayout,
    code39_label_layout,
    code128_label_layout,
    interpretation_font_size,
)
from .modes import FNC1, ContentTransform, transform_content

__all__ = [
    "interpret",
    "interpret_code128",
    "interpret_code39",
    "LABEL_FONT_KEY",
    "FontMetricsLookup",
    "START_CODE_MAP",
    "strip_invalid_start_codes",
    "strip_start_codes",
    "resolve_start_code",
    "FNC1",
    "ContentTransform",
    "transform_content",
    "mode_u_check_digit",
    "pad_mode_u_data",
    "LabelLayout",
    "code128_label_layout",
    "code39_label_layout",
    "interpretation_font_size",
]
