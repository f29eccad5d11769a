"""
^BC mode dispatch.

Given normalized field data and the mode flag, produce the symbology, the
content handed to the encoder and the interpretation line.

    N (or absent)  start code selects the subset (default B), ``>8`` -> FNC1
    A              automatic subset selection, data untouched past the start code
    D              subset C, ``>8`` -> FNC1, FNC1 guaranteed at the start
    U              subset C, 19 digits + weighted check digit after FNC1
"""

from __future__ import annotations

import logging
from typing import Final, NamedTuple, Optional

from zplview.model.enums import Code128Mode, Symbology

from .checksum import mode_u_check_digit, pad_mode_u_data
from .escapes import resolve_start_code, strip_start_codes

logger = logging.getLogger(__name__)

__all__ = ["FNC1", "GS1_ESCAPE", "ContentTransform", "transform_content"]

# Function code 1 as expected by the encoder alphabet
FNC1: Final[str] = chr(200)
GS1_ESCAPE: Final[str] = ">8"

_FIXED_SUBSET_MODES: Final = frozenset(
    {Code128Mode.AUTOMATIC.value, Code128Mode.UCC_EAN.value, Code128Mode.UCC_CASE.value}
)


class ContentTransform(NamedTuple):
    symbology: Symbology
    content: str
    interpretation: str


def _label(text: str) -> str:
    return strip_start_codes(text.replace(GS1_ESCAPE, ""))


def _expand_gs1(content: str) -> tuple[str, str]:
    return content.replace(GS1_ESCAPE, FNC1), _label(content)


def _normal_mode(content: str) -> ContentTransform:
    symbology, content = resolve_start_code(content)
    encoded, interpretation = _expand_gs1(content)
    return ContentTransform(symbology, encoded, interpretation)


def transform_content(content: str, mode: Optional[str]) -> ContentTransform:
    """
    Apply the ^BC mode rules to already normalized field data.

    In modes A, D and U a leading start code is consumed but the mode
    still decides the subset. Interpretation lines never show start codes.
    Unknown modes log a warning and are interpreted as mode N.

    Examples:
        >>> transform_content("123", "D").content == FNC1 + "123"
        True
        >>> transform_content(">8123", None).interpretation
        '123'
    """
    if not mode or mode == Code128Mode.NORMAL.value:
        return _normal_mode(content)

    if mode in _FIXED_SUBSET_MODES:
        _, content = resolve_start_code(content)

    if mode == Code128Mode.AUTOMATIC.value:
        return ContentTransform(Symbology.CODE128_AUTO, content, strip_start_codes(content))

    if mode == Code128Mode.UCC_EAN.value:
        encoded, interpretation = _expand_gs1(content)
        if not encoded.startswith(FNC1):
            encoded = FNC1 + encoded
        return ContentTransform(Symbology.CODE128_C, encoded, interpretation)

    if mode == Code128Mode.UCC_CASE.value:
        digits = pad_mode_u_data(content)
        check = mode_u_check_digit(digits)
        return ContentTransform(
            Symbology.CODE128_C, f"{FNC1}{digits}{check}", f"{strip_start_codes(content)}{check}"
        )

    logger.warning("Unsupported ^BC mode %r, interpreting as mode N", mode)
    return _normal_mode(content)
