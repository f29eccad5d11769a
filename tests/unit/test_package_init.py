"""
Unit tests for zplview/__init__.py: metadata, logging, configuration and public API.
"""

import json
import logging
import re
from pathlib import Path

import pytest

import zplview


class TestVersionMetadata:
    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", zplview.__version__)

    def test_version_components(self) -> None:
        expected = f"{zplview.VERSION_MAJOR}.{zplview.VERSION_MINOR}.{zplview.VERSION_PATCH}"
        assert zplview.__version__ == expected

    def test_metadata_attributes(self) -> None:
        for name in ("__author__", "__description__", "__license__", "__python_requires__"):
            value = getattr(zplview, name)
            assert isinstance(value, str) and value


class TestPublicAPI:
    def test_all_exports_exist(self) -> None:
        for name in zplview.__all__:
            assert hasattr(zplview, name), f"{name} listed in __all__ but missing"

    def test_interpret_exported(self) -> None:
        result = zplview.interpret(
            zplview.Barcode128Directive(content=">9ABC", mode="N"),
            lambda key, size: zplview.FontMetrics(ascent=-8.0, descent=2.0),
        )
        assert result.symbology is zplview.Symbology.CODE128_A


class TestLogging:
    def test_package_logger_configured(self) -> None:
        root = logging.getLogger("zplview")
        assert root.handlers
        assert root.propagate is False

    def test_setup_is_idempotent(self) -> None:
        root = logging.getLogger("zplview")
        before = list(root.handlers)
        zplview._setup_logging()
        assert root.handlers == before

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("zplview.interpret", "zplview.interpret"),
            ("my_plugin", "zplview.my_plugin"),
            ("__main__", "zplview.main"),
            (".relative", "zplview.relative"),
        ],
    )
    def test_get_logger_namespace(self, name: str, expected: str) -> None:
        assert zplview.get_logger(name).name == expected


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = zplview.load_config(tmp_path / "config.json")
        assert config == zplview._DEFAULT_CONFIG
        assert config is not zplview._DEFAULT_CONFIG

    def test_user_values_merged(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"dpi": 300, "label_font_key": "0"}), encoding="utf-8")
        config = zplview.load_config(path)
        assert config["dpi"] == 300
        assert config["label_font_key"] == "0"
        assert config["quiet_zone"] == zplview._DEFAULT_CONFIG["quiet_zone"]

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert zplview.load_config(path) == zplview._DEFAULT_CONFIG

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert zplview.load_config(path) == zplview._DEFAULT_CONFIG


def test_check_dependencies() -> None:
    deps = zplview.check_dependencies()
    assert set(deps) == {"pillow", "python-barcode"}
    assert all(isinstance(v, bool) for v in deps.values())
    assert deps["pillow"] is True
