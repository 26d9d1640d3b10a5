"""Tests for the settings store."""

from __future__ import annotations

import json
import logging
import os

import pytest

from globdu.settings import Settings


def _write(path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")


class TestSettings:
    def test_default_location(self, isolate_settings):
        assert Settings().path == isolate_settings

    def test_missing_file(self, isolate_settings):
        settings = Settings()
        assert settings.get("defaults.reverse") is None
        assert settings.command_defaults() == {}

    def test_dot_notation(self, isolate_settings):
        _write(isolate_settings, {"defaults": {"reverse": True, "min_percentage": 2.5}})
        settings = Settings()
        assert settings.get("defaults.reverse") is True
        assert settings.get("defaults.min_percentage") == 2.5
        assert settings.get("defaults.missing", "x") == "x"
        assert settings.get("defaults.reverse.deeper") is None

    def test_command_defaults(self, isolate_settings):
        _write(isolate_settings, {"defaults": {"percentages": True}})
        assert Settings().command_defaults() == {"percentages": True}

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        _write(path, {"defaults": {"pattern": "src/*"}})
        assert Settings(path).get("defaults.pattern") == "src/*"

    def test_invalid_json_is_ignored(self, isolate_settings, caplog):
        _write(isolate_settings, "{broken")
        with caplog.at_level(logging.WARNING):
            settings = Settings()
        assert settings.command_defaults() == {}
        assert "Could not load settings" in caplog.text

    def test_non_object_top_level(self, isolate_settings, caplog):
        _write(isolate_settings, [1, 2, 3])
        with caplog.at_level(logging.WARNING):
            assert Settings().get("defaults") is None
        assert "not an object" in caplog.text

    def test_non_object_defaults(self, isolate_settings, caplog):
        _write(isolate_settings, {"defaults": "fast"})
        with caplog.at_level(logging.WARNING):
            assert Settings().command_defaults() == {}
        assert "non-object 'defaults'" in caplog.text

    def test_instance_is_cached(self):
        assert Settings.instance() is Settings.instance()

    def test_only_report_options_are_accepted(self, isolate_settings, caplog):
        _write(
            isolate_settings,
            {"defaults": {"reverse": True, "pattern": "src/*", "min_percentage": 1, "colour": "red"}},
        )
        with caplog.at_level(logging.WARNING):
            assert Settings().command_defaults() == {"reverse": True, "min_percentage": 1}
        assert "'pattern'" in caplog.text
        assert "'colour'" in caplog.text

    def test_wrong_types_are_dropped(self, isolate_settings, caplog):
        _write(
            isolate_settings,
            {"defaults": {"percentages": "yes", "by_path": True, "min_percentage": True}},
        )
        with caplog.at_level(logging.WARNING):
            assert Settings().command_defaults() == {"by_path": True}
        assert "wrong type" in caplog.text

    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
    def test_unsearchable_config_dir(self, isolate_settings):
        _write(isolate_settings, {"defaults": {"reverse": True}})
        isolate_settings.parent.chmod(0o444)
        try:
            settings = Settings()
        finally:
            isolate_settings.parent.chmod(0o755)
        assert settings.command_defaults() == {}
