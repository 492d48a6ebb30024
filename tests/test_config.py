"""Tests for settings (pagetiles.config)."""

import logging
from pathlib import Path

from fastapi.testclient import TestClient

from pagetiles.api.main import create_app
from pagetiles.config import TilesSettings


class TestTilesSettings:
    def test_defaults(self, monkeypatch):
        for var in ("TILES_DEFINITIONS_DIR", "TILES_TEMPLATES_DIR", "TILES_ACTIONS_FILE",
                    "TILES_DEFAULT_LOCALE", "TILES_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        settings = TilesSettings.from_env()

        assert settings.definitions_dir == Path("tiles")
        assert settings.templates_dir == Path("templates")
        assert settings.actions_file == Path("actions.yaml")
        assert settings.default_locale == "en"
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TILES_DEFINITIONS_DIR", str(tmp_path / "defs"))
        monkeypatch.setenv("TILES_DEFAULT_LOCALE", "fr_CA")
        monkeypatch.setenv("TILES_LOG_LEVEL", "debug")

        settings = TilesSettings.from_env()

        assert settings.definitions_dir == tmp_path / "defs"
        assert settings.default_locale == "fr_CA"
        assert settings.log_level == "DEBUG"

    def test_log_level_is_upper_cased(self):
        assert TilesSettings(log_level="debug").log_level == "DEBUG"

    def test_app_accepts_lower_case_log_level(self, tmp_path):
        settings = TilesSettings(
            definitions_dir=tmp_path / "tiles",
            templates_dir=tmp_path / "templates",
            actions_file=tmp_path / "actions.yaml",
            log_level="debug",
        )

        with TestClient(create_app(settings)) as client:
            assert client.get("/health").status_code == 200

        assert logging.getLogger("pagetiles").level == logging.DEBUG
