"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from dnd5e import AbilityScore, MalformedEncodingError, from_data
from dnd5e.config import Settings, get_settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        """Decoding is strict and logs go to the console at INFO by default."""
        settings = Settings(_env_file=None)

        assert settings.decode_policy == "strict"
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_environment_override(self, monkeypatch):
        """DND5E_* variables override the defaults."""
        monkeypatch.setenv("DND5E_DECODE_POLICY", "clamp")
        monkeypatch.setenv("DND5E_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DND5E_LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.decode_policy == "clamp"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_invalid_policy(self, monkeypatch):
        """Unknown policies are rejected at load time."""
        monkeypatch.setenv("DND5E_DECODE_POLICY", "lenient")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_cached(self):
        """get_settings returns the same instance until the cache is cleared."""
        assert get_settings() is get_settings()


class TestDecodePolicyFromSettings:
    """Tests for the codec picking up the configured policy."""

    def test_strict_by_default(self):
        """Without configuration, out-of-range data is rejected."""
        with pytest.raises(MalformedEncodingError):
            from_data(AbilityScore, 35)

    def test_clamp_from_environment(self, monkeypatch):
        """DND5E_DECODE_POLICY=clamp makes decoders saturate."""
        monkeypatch.setenv("DND5E_DECODE_POLICY", "clamp")
        get_settings.cache_clear()

        assert from_data(AbilityScore, 35) == AbilityScore(30)

    def test_explicit_policy_wins(self, monkeypatch):
        """A policy argument overrides the configured one."""
        monkeypatch.setenv("DND5E_DECODE_POLICY", "clamp")
        get_settings.cache_clear()

        with pytest.raises(MalformedEncodingError):
            from_data(AbilityScore, 35, policy="strict")
