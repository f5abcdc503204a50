"""
Tests for numbersorter/settings.py
Validates constants and the JSON override file.
"""

import json

import pytest

from numbersorter import settings
from numbersorter.settings import defaults, load_settings


class TestConstants:

    def test_value_range(self):
        assert settings.VALUE_MIN == 1
        assert settings.VALUE_MAX == 1000

    def test_reseed_threshold(self):
        assert settings.VALUE_MIN <= settings.RESEED_THRESHOLD < settings.VALUE_MAX
        assert settings.RESEED_THRESHOLD == 30

    def test_swap_delay(self):
        assert settings.SWAP_DELAY_MS == 100

    def test_defaults_mirror_constants(self):
        cfg = defaults()
        assert cfg["swap_delay_ms"] == settings.SWAP_DELAY_MS
        assert cfg["grid_rows"] == settings.GRID_ROWS
        assert cfg["max_count"] == settings.MAX_COUNT


class TestLoadSettings:

    def write(self, tmp_path, data):
        p = tmp_path / "numbersorter_settings.json"
        p.write_text(data if isinstance(data, str) else json.dumps(data))
        return str(p)

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(str(tmp_path / "nope.json")) == defaults()

    def test_overrides_applied(self, tmp_path):
        path = self.write(tmp_path, {"swap_delay_ms": 20, "grid_rows": 4})
        cfg = load_settings(path)
        assert cfg["swap_delay_ms"] == 20
        assert cfg["grid_rows"] == 4
        assert cfg["fps"] == settings.FPS

    def test_zero_delay_allowed(self, tmp_path):
        assert load_settings(self.write(tmp_path, {"swap_delay_ms": 0}))["swap_delay_ms"] == 0

    @pytest.mark.parametrize("bad", [
        {"grid_rows": 0},
        {"grid_rows": "10"},
        {"fps": True},
        {"swap_delay_ms": -5},
        {"max_count": 2.5},
        {"log_level": "LOUD"},
        {"log_level": 10},
        {"log_file": ""},
        {"log_file": 5},
    ])
    def test_bad_values_ignored(self, tmp_path, bad):
        assert load_settings(self.write(tmp_path, bad)) == defaults()

    def test_logging_overrides(self, tmp_path):
        cfg = load_settings(self.write(tmp_path, {"log_level": "debug", "log_file": "run.log"}))
        assert cfg["log_level"] == "DEBUG"
        assert cfg["log_file"] == "run.log"

    def test_logging_defaults(self):
        cfg = defaults()
        assert cfg["log_level"] == "INFO"
        assert cfg["log_file"] is None

    def test_unknown_keys_ignored(self, tmp_path):
        cfg = load_settings(self.write(tmp_path, {"colour": "red", "fps": 30}))
        assert "colour" not in cfg
        assert cfg["fps"] == 30

    def test_broken_json_gives_defaults(self, tmp_path):
        assert load_settings(self.write(tmp_path, "{not json")) == defaults()

    def test_non_object_gives_defaults(self, tmp_path):
        assert load_settings(self.write(tmp_path, "[1, 2]")) == defaults()

    def test_problems_are_logged(self, tmp_path):
        import logging
        from numbersorter.log import logger

        records = []
        handler = logging.Handler()
        handler.emit = records.append
        logger.raw.addHandler(handler)
        try:
            load_settings(self.write(tmp_path, {"grid_rows": -1}))
        finally:
            logger.raw.removeHandler(handler)
        assert any("grid_rows" in r.getMessage() for r in records)
        assert all(r.levelno == logging.WARNING for r in records if "grid_rows" in r.getMessage())
