"""
Pytest fixtures for Spellcaster tests.
"""

import pytest

from ..engine_core.effects import EffectTimers
from ..engine_core.state import Boss, CombatState, Player


@pytest.fixture
def weak_boss() -> Boss:
    """Boss from the first worked example (13 hp, 8 damage)."""
    return Boss(hit_points=13, damage=8)


@pytest.fixture
def tough_boss() -> Boss:
    """Boss from the second worked example (14 hp, 8 damage)."""
    return Boss(hit_points=14, damage=8)


@pytest.fixture
def small_start(weak_boss: Boss) -> CombatState:
    """10 hp / 250 mana player facing the weak boss."""
    return CombatState.initial(weak_boss, player_hp=10, player_mana=250)


@pytest.fixture
def make_state():
    """Factory for mid-fight states."""

    def _make(
        player_hp: int = 10,
        mana: int = 250,
        armor: int = 0,
        boss_hp: int = 13,
        boss_damage: int = 8,
        round: int = 0,
        mana_spent: int = 0,
        hard_mode: bool = False,
        shield: int = 0,
        poison: int = 0,
        recharge: int = 0,
    ) -> CombatState:
        return CombatState(
            player=Player(hit_points=player_hp, mana=mana, armor=armor),
            boss=Boss(hit_points=boss_hp, damage=boss_damage),
            round=round,
            mana_spent=mana_spent,
            hard_mode=hard_mode,
            timers=EffectTimers(shield=shield, poison=poison, recharge=recharge),
        )

    return _make
