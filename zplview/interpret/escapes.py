"""
Code 128 start-code handling for ^BC field data.

A start code (``>9`` subset A, ``>:`` subset B, ``>;`` subset C) is only
meaningful as the first two characters of the field. Anywhere else it is
an invalid invocation and is deleted before interpretation.

See: Zebra support article "Creating GS1 Barcodes with Zebra Printers for
Data Matrix and Code 128 using ZPL".
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Final, Mapping, Pattern, Tuple

from zplview.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "START_CODE_MAP",
    "DEFAULT_SYMBOLOGY",
    "strip_invalid_start_codes",
    "strip_start_codes",
    "resolve_start_code",
]

START_CODE_MAP: Final[Mapping[str, Symbology]] = MappingProxyType(
    {
        ">9": Symbology.CODE128_A,
        ">:": Symbology.CODE128_B,
        ">;": Symbology.CODE128_C,
    }
)

DEFAULT_SYMBOLOGY: Final[Symbology] = Symbology.CODE128_B

_START_CODE_RE: Final[Pattern[str]] = re.compile(r"(>[9:;])(.+)", re.DOTALL)
_INVALID_INVOCATION_RE: Final[Pattern[str]] = re.compile(r"(?<=.)>[9:;]", re.DOTALL)
_START_CODE_TOKEN_RE: Final[Pattern[str]] = re.compile(r">[9:;]")


def strip_invalid_start_codes(content: str) -> str:
    """
    Delete every start code that is not at index 0.

    Deleting one token can join its neighbours into a new one
    (``"A>>99"`` -> ``"A>9"``), so the filter runs until nothing is left
    to remove. The result is therefore stable under a second call.

    Examples:
        >>> strip_invalid_start_codes("A>9B")
        'AB'
        >>> strip_invalid_start_codes(">9A>;B")
        '>9AB'
    """
    result = content
    while True:
        cleaned = _INVALID_INVOCATION_RE.sub("", result)
        if cleaned == result:
            break
        result = cleaned
    if result != content:
        logger.debug("Removed invalid start codes: %r -> %r", content, result)
    return result


def strip_start_codes(text: str) -> str:
    """
    Delete every start code, including a leading one.

    Used on interpretation lines, which never show start codes. Runs to a
    fixed point for the same reason as ``strip_invalid_start_codes``.

    Example:
        >>> strip_start_codes(">9A>>9;")
        'A'
    """
    result = text
    while True:
        cleaned = _START_CODE_TOKEN_RE.sub("", result)
        if cleaned == result:
            return result
        result = cleaned


def resolve_start_code(content: str) -> Tuple[Symbology, str]:
    """
    Map a leading start code to its Code 128 subset and strip it.

    The token counts only when at least one character follows it. Without
    a start code the subset defaults to B and the content is unchanged.

    Examples:
        >>> resolve_start_code(">9ABC")
        (<Symbology.CODE128_A: 'code128a'>, 'ABC')
        >>> resolve_start_code("ABC")
        (<Symbology.CODE128_B: 'code128b'>, 'ABC')
    """
    match = _START_CODE_RE.fullmatch(content)
    if match is None:
        return DEFAULT_SYMBOLOGY, content
    return START_CODE_MAP[match.group(1)], match.group(2)
