# RU: Неизменяемые описания полей штрихкодов ZPL (^BC, ^B3) с fail-fast проверкой геометрии.
# EN: Immutable ZPL barcode field directives (^BC, ^B3) with fail-fast geometry checks.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .enums import FieldOrientation

__all__ = [
    "Barcode128Directive",
    "Barcode39Directive",
    "BarcodeDirective",
]


def _check_geometry(module_width: float, height: float) -> None:
    if isinstance(module_width, bool) or not isinstance(module_width, (int, float)):
        raise TypeError(f"module_width must be a number, got {type(module_width)!r}")
    if isinstance(height, bool) or not isinstance(height, (int, float)):
        raise TypeError(f"height must be a number, got {type(height)!r}")
    if module_width <= 0:
        raise ValueError(f"module_width must be positive, got {module_width}")
    if height <= 0:
        raise ValueError(f"height must be positive, got {height}")


@dataclass(frozen=True, slots=True)
class Barcode128Directive:
    """
    A ^BC field: Code 128 with optional start codes, GS1 escapes and mode.

    ``mode`` is one of None, "", "N", "A", "D", "U". None and "" behave as
    "N". Other values are accepted, logged as a warning and interpreted
    exactly as mode N (start code, ``>8`` expansion and label).

    Example:
        >>> Barcode128Directive(content=">;0123456789", mode="N", height=100)
    """

    content: str
    mode: Optional[str] = None
    module_width: float = 2
    height: float = 10
    print_interpretation_line: bool = True
    print_interpretation_line_above_code: bool = False
    field_orientation: FieldOrientation = FieldOrientation.NORMAL
    position: Tuple[float, float] = (0, 0)
    has_field_origin: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError(f"content must be str, got {type(self.content)!r}")
        if self.mode is not None and not isinstance(self.mode, str):
            raise TypeError(f"mode must be str or None, got {type(self.mode)!r}")
        _check_geometry(self.module_width, self.height)


@dataclass(frozen=True, slots=True)
class Barcode39Directive:
    """A ^B3 field: Code 39, no modes and no escapes."""

    content: str
    module_width: float = 2
    height: float = 10
    print_interpretation_line: bool = True
    print_interpretation_line_above_code: bool = False
    field_orientation: FieldOrientation = FieldOrientation.NORMAL
    position: Tuple[float, float] = (0, 0)
    has_field_origin: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError(f"content must be str, got {type(self.content)!r}")
        _check_geometry(self.module_width, self.height)


BarcodeDirective = Union[Barcode128Directive, Barcode39Directive]
