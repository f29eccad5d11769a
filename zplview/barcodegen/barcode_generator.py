from __future__ import annotations

import logging
from typing import Any, Dict, Final, Mapping, Optional, Tuple, TypedDict

import barcode as pybarcode
from barcode.codex import Gs1_128
from barcode.errors import BarcodeError
from barcode.writer import ImageWriter
from PIL import Image

from zplview.interpret.modes import FNC1
from zplview.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeEncoder",
    "BarcodeEncodeError",
    "EncoderOptions",
]

MM_PER_INCH: Final[float] = 25.4


def _build_code39_full_ascii() -> Tuple[str, ...]:
    table = [""] * 128
    table[0] = "%U"
    for i in range(1, 27):
        table[i] = "$" + chr(64 + i)
    for i, ch in enumerate("ABCDE"):
        table[27 + i] = "%" + ch
    table[32] = " "
    for i in range(33, 48):
        table[i] = "/" + chr(32 + i)
    table[45] = "-"
    table[46] = "."
    for i in range(48, 58):
        table[i] = chr(i)
    table[58] = "/Z"
    for i, ch in enumerate("FGHIJ"):
        table[59 + i] = "%" + ch
    table[64] = "%V"
    for i in range(65, 91):
        table[i] = chr(i)
    for i, ch in enumerate("KLMNO"):
        table[91 + i] = "%" + ch
    table[96] = "%W"
    for i in range(97, 123):
        table[i] = "+" + chr(i - 32)
    for i, ch in enumerate("PQRST"):
        table[123 + i] = "%" + ch
    return tuple(table)


# Code 39 Extended: ASCII ordinal -> one or two base Code 39 characters
CODE39_FULL_ASCII: Final[Tuple[str, ...]] = _build_code39_full_ascii()


class EncoderOptions(TypedDict, total=False):
    """
    Типобезопасные опции кодировщика.

    dpi: printer resolution used to convert dots to millimetres
    quiet_zone: quiet zone width in modules
    background / foreground: colours of the rendered bitmap
    font_path: TrueType file for the interpretation line
    """

    dpi: int
    quiet_zone: int
    background: str
    foreground: str
    font_path: Optional[str]


class BarcodeEncodeError(Exception):
    """Barcode encoding failed (content outside the symbology alphabet, library error)."""


class BarcodeEncoder:
    """
    Encode interpreted barcode content into a bitmap with python-barcode.

    Geometry arrives in printer dots and is converted to the millimetres
    python-barcode expects using ``dpi``.

    python-barcode chooses Code 128 subsets itself, so CODE128_A/B/C and
    CODE128_AUTO all go through its ``code128`` class. The FNC1 marker is
    translated to the library's own FNC1 character. Code 39 Extended data is
    spelled with base Code 39 shift pairs, so lowercase and punctuation
    survive the library's uppercase-only alphabet.

    Example:
        >>> encoder = BarcodeEncoder({"dpi": 203})
        >>> with encoder.encode(Symbology.CODE128_B, "ABC", module_width=2, height=80) as img:
        ...     img.width > 0
        True
    """

    _pybarcode_support: Mapping[Symbology, str] = {
        Symbology.CODE128_AUTO: "code128",
        Symbology.CODE128_A: "code128",
        Symbology.CODE128_B: "code128",
        Symbology.CODE128_C: "code128",
        Symbology.CODE39_EXTENDED: "code39",
    }

    def __init__(self, options: Optional[EncoderOptions] = None) -> None:
        self.options: Dict[str, Any] = {
            "dpi": 203,
            "quiet_zone": 0,
            "background": "white",
            "foreground": "black",
            "font_path": None,
            **(options or {}),
        }

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> BarcodeEncoder:
        return cls(
            {
                "dpi": config.get("dpi", 203),
                "quiet_zone": config.get("quiet_zone", 0),
                "background": config.get("background", "white"),
                "foreground": config.get("foreground", "black"),
                "font_path": config.get("label_font_path"),
            }
        )

    def _dots_to_mm(self, dots: float) -> float:
        return dots * MM_PER_INCH / self.options["dpi"]

    @staticmethod
    def _full_ascii_to_code39(data: str) -> str:
        """Spell ASCII data with base Code 39 shift pairs (``a`` -> ``+A``)."""
        parts = []
        for ch in data:
            code = ord(ch)
            if code >= len(CODE39_FULL_ASCII):
                raise BarcodeEncodeError(f"Character {ch!r} cannot be encoded as Code 39 Extended")
            parts.append(CODE39_FULL_ASCII[code])
        return "".join(parts)

    @classmethod
    def _library_content(cls, symbology: Symbology, content: str) -> str:
        if symbology.is_code128:
            return content.replace(FNC1, Gs1_128.FNC1_CHAR)
        # python-barcode draws the start/stop characters itself
        return cls._full_ascii_to_code39(content.strip("*"))

    def encode(
        self,
        symbology: Symbology,
        content: str,
        *,
        module_width: float,
        height: float,
        include_label: bool = False,
        label: str = "",
        label_font_size: float = 10,
    ) -> Image.Image:
        """
        Render ``content`` as ``symbology``.

        Args:
            symbology: Variant chosen by interpretation.
            content: Encodable content, may hold FNC1.
            module_width: Narrow bar width in dots.
            height: Bar height in dots.
            include_label: Draw ``label`` as the interpretation line.
            label: Interpretation line text.
            label_font_size: Interpretation line font size.

        Returns:
            PIL image. The caller owns it and should close it, e.g. with ``with``.

        Raises:
            BarcodeEncodeError: the library rejected the content or failed to render.
        """
        barcode_name = self._pybarcode_support.get(symbology)
        if barcode_name is None:
            raise BarcodeEncodeError(f"Symbology {symbology} not supported by python-barcode")

        data = self._library_content(symbology, content)
        logger.debug("Encoding %s data=%r", symbology.name, data)

        writer_options: Dict[str, Any] = {
            "module_width": self._dots_to_mm(module_width),
            "module_height": self._dots_to_mm(max(height, 1)),
            "quiet_zone": self._dots_to_mm(self.options["quiet_zone"] * module_width),
            "dpi": self.options["dpi"],
            "font_size": max(int(round(label_font_size)), 1),
            "text_distance": 1,
            "write_text": include_label,
            "background": self.options["background"],
            "foreground": self.options["foreground"],
        }
        if self.options.get("font_path"):
            writer_options["font_path"] = self.options["font_path"]

        try:
            bclass = pybarcode.get_barcode_class(barcode_name)
            if symbology.is_code128:
                barcode_inst = bclass(data, writer=ImageWriter())
            else:
                barcode_inst = bclass(data, writer=ImageWriter(), add_checksum=False)
            img = barcode_inst.render(
                writer_options=writer_options, text=label if include_label else None
            )
        except BarcodeError as e:
            raise BarcodeEncodeError(
                f"Cannot encode {content!r} as {symbology.name}: {e}"
            ) from e
        except Exception as e:
            raise BarcodeEncodeError(f"Barcode image generation failed: {symbology.name}") from e

        if not isinstance(img, Image.Image):
            raise BarcodeEncodeError("Barcode output is not an Image.Image object")
        return img

    @classmethod
    def supported_types(cls) -> set[Symbology]:
        return set(cls._pybarcode_support.keys())
