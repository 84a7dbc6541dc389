"""
Combat State - Immutable snapshot of one point in a fight.

Design principles:
- Immutable: every mutation returns a new value
- Canonical: equality and hashing cover only battle-relevant fields
- No history: parent links live in the search arena, not on the state
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum

from .effects import EffectTimers


class Outcome(Enum):
    """State machine status of a combat state."""
    IN_PROGRESS = "in_progress"
    VICTORY = "victory"
    DEFEAT = "defeat"


def _require_non_negative(owner: str, **values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{owner}.{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class Player:
    """The wizard: hit points, mana pool and current armor."""
    hit_points: int
    mana: int
    armor: int = 0

    def __post_init__(self):
        _require_non_negative(
            "Player", hit_points=self.hit_points, mana=self.mana, armor=self.armor
        )

    @property
    def is_dead(self) -> bool:
        return self.hit_points == 0

    def lose_hit_points(self, amount: int) -> Player:
        """Unmitigated hit point loss, floored at 0."""
        return replace(self, hit_points=max(self.hit_points - amount, 0))

    def take_hit(self, damage: int) -> Player:
        """An attack reduced by armor. Always deals at least 1 damage."""
        return self.lose_hit_points(max(damage - self.armor, 1))

    def heal(self, amount: int) -> Player:
        return replace(self, hit_points=self.hit_points + amount)

    def spend_mana(self, amount: int) -> Player:
        if amount > self.mana:
            raise ValueError(f"Cannot spend {amount} mana with {self.mana} available")
        return replace(self, mana=self.mana - amount)

    def gain_mana(self, amount: int) -> Player:
        return replace(self, mana=self.mana + amount)

    def with_armor(self, armor: int) -> Player:
        return replace(self, armor=armor)


@dataclass(frozen=True)
class Boss:
    """The adversary. Damage is fixed for the whole fight."""
    hit_points: int
    damage: int

    def __post_init__(self):
        _require_non_negative("Boss", hit_points=self.hit_points, damage=self.damage)

    @property
    def is_dead(self) -> bool:
        return self.hit_points == 0

    def take_damage(self, amount: int) -> Boss:
        return replace(self, hit_points=max(self.hit_points - amount, 0))


@dataclass(frozen=True)
class CombatState:
    """
    Complete combat state after a number of rounds.

    Two states that describe the same situation after the same number of
    rounds compare equal no matter which spells led to them.
    """
    player: Player
    boss: Boss
    round: int = 0
    mana_spent: int = 0
    hard_mode: bool = False
    timers: EffectTimers = field(default_factory=EffectTimers)

    def __post_init__(self):
        _require_non_negative("CombatState", round=self.round, mana_spent=self.mana_spent)

    @classmethod
    def initial(
        cls,
        boss: Boss,
        player_hp: int = 50,
        player_mana: int = 500,
        hard_mode: bool = False,
    ) -> CombatState:
        """Create the starting state of a fight."""
        return cls(player=Player(hit_points=player_hp, mana=player_mana), boss=boss, hard_mode=hard_mode)

    @property
    def outcome(self) -> Outcome:
        if self.boss.is_dead:
            return Outcome.VICTORY
        if self.player.is_dead:
            return Outcome.DEFEAT
        return Outcome.IN_PROGRESS

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    def _copy_with(self, **kwargs) -> CombatState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
