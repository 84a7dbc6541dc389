"""
Settings - Solver defaults, overridable from the environment.

Environment variables use the SPELLCASTER_ prefix:
    SPELLCASTER_PLAYER_HP=50
    SPELLCASTER_PLAYER_MANA=500
    SPELLCASTER_MAX_EXPANSIONS=200000
    SPELLCASTER_LOG_LEVEL=INFO
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SolverSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPELLCASTER_", extra="ignore", env_parse_none_str="none"
    )

    player_hp: int = Field(default=50, ge=1)
    player_mana: int = Field(default=500, ge=0)

    # None (SPELLCASTER_MAX_EXPANSIONS=none) disables the cutoff
    max_expansions: Optional[int] = Field(default=200_000, ge=1)

    log_level: LogLevel = "WARNING"


def get_settings() -> SolverSettings:
    """Build settings from the current environment."""
    return SolverSettings()
