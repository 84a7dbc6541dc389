"""
Tests for solver settings.
"""

import pytest
from pydantic import ValidationError

from ..config import SolverSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "SPELLCASTER_PLAYER_HP",
        "SPELLCASTER_PLAYER_MANA",
        "SPELLCASTER_MAX_EXPANSIONS",
        "SPELLCASTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSolverSettings:
    """Tests for defaults and environment overrides."""

    def test_defaults(self):
        settings = get_settings()

        assert settings.player_hp == 50
        assert settings.player_mana == 500
        assert settings.max_expansions == 200_000
        assert settings.log_level == "WARNING"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SPELLCASTER_PLAYER_HP", "10")
        monkeypatch.setenv("SPELLCASTER_PLAYER_MANA", "250")
        monkeypatch.setenv("SPELLCASTER_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.player_hp == 10
        assert settings.player_mana == 250
        assert settings.log_level == "DEBUG"

    def test_budget_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("SPELLCASTER_MAX_EXPANSIONS", "none")
        assert get_settings().max_expansions is None

    def test_invalid_values_rejected(self, monkeypatch):
        monkeypatch.setenv("SPELLCASTER_PLAYER_MANA", "-1")
        with pytest.raises(ValidationError):
            get_settings()

    def test_explicit_values(self):
        settings = SolverSettings(player_hp=10, player_mana=250, max_expansions=5)
        assert settings.max_expansions == 5
