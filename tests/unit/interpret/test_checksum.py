import pytest

from zplview.interpret.checksum import (
    MODE_U_DATA_LENGTH,
    mode_u_check_digit,
    pad_mode_u_data,
)


@pytest.mark.parametrize(
    "digits,expected",
    [
        ("0000000000000000001", "7"),  # index 18 is even, weight 7
        ("1000000000000000000", "7"),
        ("0100000000000000000", "9"),
        ("1111111111111111111", "1"),  # 10 * 7 + 9 * 9 = 151
        ("1234567890123456789", "0"),  # 50 * 7 + 40 * 9 = 710
        ("0000000000000000000", "0"),
    ],
)
def test_mode_u_check_digit(digits: str, expected: str) -> None:
    assert mode_u_check_digit(digits) == expected


def test_weighting_is_not_upc() -> None:
    # UPC 3/1 weighting would give 3 for a single 1 at index 0
    assert mode_u_check_digit("1" + "0" * 18) != "3"


def test_pad_short_data() -> None:
    assert pad_mode_u_data("123") == "0000000000000000123"


def test_pad_truncates_long_data() -> None:
    assert pad_mode_u_data("1234567890123456789012345") == "1234567890123456789"


def test_pad_empty() -> None:
    assert pad_mode_u_data("") == "0" * MODE_U_DATA_LENGTH
