"""Check digit for ^BC mode U (UCC case mode) payloads."""

from __future__ import annotations

from typing import Final

__all__ = ["MODE_U_DATA_LENGTH", "pad_mode_u_data", "mode_u_check_digit"]

MODE_U_DATA_LENGTH: Final[int] = 19


def pad_mode_u_data(content: str) -> str:
    """Left-pad with '0' to 19 characters, then keep the first 19."""
    return content.rjust(MODE_U_DATA_LENGTH, "0")[:MODE_U_DATA_LENGTH]


def mode_u_check_digit(digits: str) -> str:
    """
    Weighted mod 10 check digit over exactly 19 characters.

    Weights alternate 7, 9, 7, 9, ... starting with 7 at index 0. This is
    not the UPC/EAN 3/1 scheme and must not be replaced by it.

    Characters are weighted by ``ord(c) - 48`` so the result stays a
    single digit even for non-numeric data.

    Example:
        >>> mode_u_check_digit("0000000000000000001")
        '7'
    """
    total = 0
    for i in range(MODE_U_DATA_LENGTH):
        total += (ord(digits[i]) - 48) * (i % 2 * 2 + 7)
    return str(total % 10)
