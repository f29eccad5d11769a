"""
Пакет zplview
=============

Interpretation of ZPL barcode fields (^BC Code 128, ^B3 Code 39) for a
label viewer.

Этот пакет предоставляет:
    - Разбор управляющих последовательностей Code 128 (>9, >:, >;, >8)
    - Режимы ^BC (N, A, D, U) с контрольной цифрой режима U
    - Расчёт высоты подписи (interpretation line) по метрикам шрифта
    - Рендеринг через python-barcode и Pillow

Пример базового использования:
    >>> from zplview import Barcode128Directive, interpret
    >>> from zplview.model.interpretation import FontMetrics
    >>>
    >>> directive = Barcode128Directive(content=">9ABC", mode="N")
    >>> result = interpret(directive, lambda key, size: FontMetrics(-8.0, 2.0))
    >>> result.symbology, result.encodable_content
    (<Symbology.CODE128_A: 'code128a'>, 'ABC')

Управление конфигурацией:
    >>> import os
    >>> os.environ['ZPLVIEW_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from zplview import load_config, get_logger
    >>> config = load_config()
    >>> config['label_font_key']
    'A'

Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "zplview Development Team"
__description__ = "ZPL barcode field interpretation and rendering for label previews"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"zplview requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_ROOT_LOGGER_NAME = "zplview"


def _setup_logging() -> None:
    """
    Configure the package logger once.

    - stderr handler for WARNING and above
    - rotating file handler (logs/zplview.log) for the configured level
    - level from the ZPLVIEW_LOG_LEVEL environment variable (default INFO)

    Idempotent: a logger that already has handlers is left untouched.
    """
    log_level_str = os.environ.get("ZPLVIEW_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    try:
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / "zplview.log",
            maxBytes=10 * 1024 * 1024,  # 10 МБ
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    except OSError as e:
        root_logger.warning(
            "File logging unavailable (%s), logging to console only", e
        )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger in the ``zplview`` namespace.

    Args:
        module_name: usually ``__name__``. Names outside the package are
            prefixed with ``zplview.``; ``__main__`` maps to ``zplview.main``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Interpreting %s", "^BC")
    """
    if module_name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "label_font_key": "A",
    "label_font_path": None,
    "dpi": 203,
    "quiet_zone": 0,
    "background": "white",
    "foreground": "black",
    "canvas_width": 812,
    "canvas_height": 1218,
    "log_level": "INFO",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file merged over the defaults.

    Keys:
        - label_font_key: str - logical font for interpretation lines
        - label_font_path: Optional[str] - TrueType file; None uses Pillow's default font
        - dpi: int - printer resolution used to convert dots to millimetres
        - quiet_zone: int - quiet zone passed to the encoder, in modules
        - background / foreground: str - colours for encoded bitmaps
        - canvas_width / canvas_height: int - label canvas size in dots
        - log_level: str

    A missing file, invalid JSON or a non-object document logs a warning
    and the defaults are returned.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("config.json")

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info("Config file %s not found, using defaults", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Config file must contain a JSON object, got {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Config loaded from %s", config_path)
        logger.debug("Config: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Cannot parse %s: invalid JSON at line %d, column %d. Using defaults.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning("Cannot read %s: %s. Using defaults.", config_path, e)
    except ValueError as e:
        logger.warning("Invalid config format: %s. Using defaults.", e)

    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Report which third-party packages are importable.

    Returns:
        Mapping of distribution name to availability, e.g.
        ``{"pillow": True, "python-barcode": True}``.
    """
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    return dependencies


_setup_logging()

# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

from .interpret.interpreter import interpret, interpret_code39, interpret_code128  # noqa: E402
from .model.directive import (  # noqa: E402
    Barcode39Directive,
    Barcode128Directive,
    BarcodeDirective,
)
from .model.enums import FieldOrientation, Symbology  # noqa: E402
from .model.interpretation import FontMetrics, InterpretationResult  # noqa: E402

__all__ = [
    "__version__",
    "get_logger",
    "load_config",
    "check_dependencies",
    "interpret",
    "interpret_code128",
    "interpret_code39",
    "Barcode128Directive",
    "Barcode39Directive",
    "BarcodeDirective",
    "FieldOrientation",
    "Symbology",
    "FontMetrics",
    "InterpretationResult",
]
