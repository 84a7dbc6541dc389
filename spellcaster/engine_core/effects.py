"""
Effect Model - Timed status effects and their per-tick consequences.

Three effects exist:
- Shield: grants armor while active
- Poison: damages the boss on every tick
- Recharge: restores mana on every tick

Each effect owns one timer in EffectTimers counting the half-rounds it
stays active (0 = inactive). Ticks happen twice per full round, once
before the player acts and once before the boss attacks.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .state import CombatState


SHIELD_ARMOR = 7
POISON_DAMAGE = 3
RECHARGE_MANA = 101


class Effect(Enum):
    """Timed effects, in the order they are ticked and displayed."""
    SHIELD = "shield"
    POISON = "poison"
    RECHARGE = "recharge"

    @property
    def duration(self) -> int:
        return duration(self)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def duration(effect: Effect) -> int:
    """Number of ticks a freshly cast effect stays active."""
    if effect is Effect.RECHARGE:
        return 5
    return 6


@dataclass(frozen=True)
class EffectTimers:
    """Remaining ticks for each effect."""
    shield: int = 0
    poison: int = 0
    recharge: int = 0

    def __post_init__(self):
        for effect in Effect:
            if self.get(effect) < 0:
                raise ValueError(f"Negative timer for {effect.value}: {self.get(effect)}")

    def get(self, effect: Effect) -> int:
        return getattr(self, effect.value)

    def is_active(self, effect: Effect) -> bool:
        return self.get(effect) > 0

    def with_timer(self, effect: Effect, value: int) -> EffectTimers:
        """Return new timers with one effect's timer replaced."""
        values = {e.value: self.get(e) for e in Effect}
        values[effect.value] = value
        return EffectTimers(**values)

    def active(self) -> Iterator[tuple[Effect, int]]:
        """Yield (effect, remaining) for every running effect."""
        for effect in Effect:
            remaining = self.get(effect)
            if remaining > 0:
                yield effect, remaining


def tick(effect: Effect, state: CombatState) -> CombatState:
    """
    Advance one effect by a single tick.

    A running effect is decremented first and then applies its consequence.
    Shield armor follows the decremented timer, so armor drops to 0 on the
    tick that exhausts the shield. An inactive shield always forces armor
    back to 0.
    """
    remaining = state.timers.get(effect)
    if remaining == 0:
        if effect is Effect.SHIELD and state.player.armor != 0:
            return state._copy_with(player=state.player.with_armor(0))
        return state

    remaining -= 1
    new_state = state._copy_with(timers=state.timers.with_timer(effect, remaining))

    if effect is Effect.SHIELD:
        armor = SHIELD_ARMOR if remaining > 0 else 0
        return new_state._copy_with(player=new_state.player.with_armor(armor))
    if effect is Effect.POISON:
        return new_state._copy_with(boss=new_state.boss.take_damage(POISON_DAMAGE))
    if effect is Effect.RECHARGE:
        return new_state._copy_with(player=new_state.player.gain_mana(RECHARGE_MANA))
    raise ValueError(f"Unhandled effect: {effect}")


def tick_all(state: CombatState) -> CombatState:
    """Tick every effect once. The three effects touch disjoint fields."""
    for effect in Effect:
        state = tick(effect, state)
    return state
