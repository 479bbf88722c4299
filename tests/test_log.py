"""Tests for logging configuration."""

import json

import pytest
import structlog

from dnd5e import AbilityScore
from dnd5e.config import Settings
from dnd5e.log import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys):
        """JSON format renders one object per event."""
        configure_logging(Settings(_env_file=None, log_level="DEBUG", log_format="json"))

        AbilityScore.new_clamped(99)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "scalar_clamped"
        assert event["level"] == "debug"
        assert event["raw"] == 99
        assert event["value"] == 30
        assert "timestamp" in event

    def test_console_output(self, capsys):
        """Console format writes a readable line."""
        configure_logging(Settings(_env_file=None, log_level="DEBUG", log_format="console"))

        structlog.get_logger("test").info("character_loaded", name="Vex")

        output = capsys.readouterr().out
        assert "character_loaded" in output
        assert "Vex" in output

    def test_level_filters_events(self, capsys):
        """Events below the configured level are dropped."""
        configure_logging(Settings(_env_file=None, log_level="WARNING", log_format="json"))

        AbilityScore.new_clamped(99)

        assert capsys.readouterr().out == ""

    def test_lowercase_level(self, capsys):
        """Level names are case-insensitive."""
        configure_logging(Settings(_env_file=None, log_level="info", log_format="json"))

        structlog.get_logger("test").info("ready")

        assert json.loads(capsys.readouterr().out)["event"] == "ready"

    def test_unknown_level(self):
        """Unknown level names are rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(Settings(_env_file=None, log_level="CHATTY"))

    def test_uses_settings_by_default(self, monkeypatch, capsys):
        """Without arguments, configuration comes from the environment."""
        monkeypatch.setenv("DND5E_LOG_FORMAT", "json")
        monkeypatch.setenv("DND5E_LOG_LEVEL", "DEBUG")

        configure_logging()
        AbilityScore.new_clamped(0)

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert event["event"] == "scalar_clamped"
