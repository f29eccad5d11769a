"""
RU: Метрики шрифта подписи штрихкода через Pillow.
EN: Interpretation line font metrics backed by Pillow.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Union

from PIL import ImageFont
from PIL.ImageFont import FreeTypeFont
from PIL.ImageFont import ImageFont as PILImageFont

from zplview.interpret.layout import MAX_LABEL_FONT_SIZE
from zplview.model.interpretation import FontMetrics

logger = logging.getLogger(__name__)

__all__ = ["FontResolutionError", "PillowFontMetricsProvider"]

PillowFont = Union[FreeTypeFont, PILImageFont]


class FontResolutionError(Exception):
    """The logical font could not be resolved to a usable face."""


@lru_cache(maxsize=64)
def _load_font(path: Optional[str], size: float) -> PillowFont:
    if path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(path, size)


class PillowFontMetricsProvider:
    """
    Resolve logical ZPL font keys to Pillow fonts and report their metrics.

    Pillow reports ascent upwards as a positive number; the returned
    ``FontMetrics`` negate it to follow the Skia convention used by the
    layout code.

    Args:
        font_paths: logical font key -> TrueType path, or None for Pillow's
            bundled default face.

    Example:
        >>> metrics = PillowFontMetricsProvider({"A": None})
        >>> m = metrics("A", 14.4)
        >>> m.ascent < 0 < m.descent
        True
    """

    def __init__(self, font_paths: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self.font_paths: Dict[str, Optional[str]] = dict(font_paths or {"A": None})

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> PillowFontMetricsProvider:
        return cls({config.get("label_font_key", "A"): config.get("label_font_path")})

    def load_font(self, font_key: str, size: float) -> PillowFont:
        """
        Raises:
            FontResolutionError: unknown key, size outside (0, 72] or unreadable file.
        """
        if font_key not in self.font_paths:
            raise FontResolutionError(f"No font registered for key {font_key!r}")
        if not 0 < size <= MAX_LABEL_FONT_SIZE:
            raise FontResolutionError(
                f"Font size must be in (0, {MAX_LABEL_FONT_SIZE:g}], got {size}"
            )
        path = self.font_paths[font_key]
        try:
            return _load_font(path, size)
        except (OSError, ValueError) as e:
            raise FontResolutionError(
                f"Cannot load font {font_key!r} from {path!r} at size {size}"
            ) from e

    def __call__(self, font_key: str, size: float) -> FontMetrics:
        font = self.load_font(font_key, size)
        if not isinstance(font, FreeTypeFont):
            raise FontResolutionError(f"Font {font_key!r} is a bitmap font without scalable metrics")
        ascent, descent = font.getmetrics()
        logger.debug("Font %r size=%s ascent=%s descent=%s", font_key, size, ascent, descent)
        return FontMetrics(ascent=-float(ascent), descent=float(descent))
