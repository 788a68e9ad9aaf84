"""Tests for application settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from kifudojo.settings import (
    AppSettings,
    configure_logging,
    load_settings,
    save_settings,
)


class TestAppSettings:
    def test_defaults(self) -> None:
        s = AppSettings()
        assert s.board_size == 19
        assert s.memorize_seconds == 5
        assert s.autoplay_interval_ms == 500
        assert s.sound_enabled is True
        assert s.log_level == "INFO"

    def test_unsupported_board_size(self) -> None:
        with pytest.raises(ValueError, match="Unsupported board size"):
            AppSettings(board_size=11)

    def test_non_positive_memorize_time(self) -> None:
        with pytest.raises(ValueError):
            AppSettings(memorize_seconds=0)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            AppSettings(log_level="chatty")

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        s = AppSettings.from_mapping({"board_size": 9, "theme": "dark"})
        assert s.board_size == 9

    def test_data_path_expands_user(self) -> None:
        assert "~" not in str(AppSettings().data_path)


class TestLoadSave:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path / "nope.json") == AppSettings()

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg" / "settings.json"
        settings = AppSettings(board_size=13, memorize_seconds=8, sound_enabled=False)
        save_settings(settings, path)
        assert load_settings(path) == settings

    def test_invalid_values_fall_back(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"board_size": 4}), encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="kifudojo.settings"):
            assert load_settings(path) == AppSettings()
        assert "Ignoring settings" in caplog.text

    def test_garbage_file_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("[1, 2", encoding="utf-8")
        assert load_settings(path) == AppSettings()


class TestConfigureLogging:
    def test_sets_level_and_single_handler(self) -> None:
        logger = logging.getLogger("kifudojo")
        saved = (logger.level, list(logger.handlers))
        try:
            logger.handlers.clear()
            configure_logging("debug")
            configure_logging("debug")
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
        finally:
            logger.setLevel(saved[0])
            logger.handlers[:] = saved[1]
