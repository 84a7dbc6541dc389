"""
Spells - The five actions available to the player each round.

Two are instantaneous (Magic Missile, Drain) and three start a timed
effect (Shield, Poison, Recharge). The set is closed; the transition
generator branches over it exhaustively.
"""

from __future__ import annotations
from enum import Enum

from .effects import Effect


MISSILE_DAMAGE = 4
DRAIN_DAMAGE = 2
DRAIN_HEAL = 2


class Spell(Enum):
    """Castable spells, in the order the search tries them."""
    MAGIC_MISSILE = "magic_missile"
    DRAIN = "drain"
    SHIELD = "shield"
    POISON = "poison"
    RECHARGE = "recharge"

    @property
    def cost(self) -> int:
        return _COSTS[self]

    @property
    def effect(self) -> Effect | None:
        """The timed effect this spell starts, or None for instants."""
        return _EFFECTS.get(self)

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    @classmethod
    def from_name(cls, name: str) -> Spell:
        """
        Look up a spell by a loose name.

        Accepts "magic_missile", "magic-missile", "Magic Missile" and
        "missile" style spellings, case-insensitively.
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        if key == "missile":
            key = cls.MAGIC_MISSILE.value
        for spell in cls:
            if spell.value == key:
                return spell
        raise ValueError(f"Unknown spell: {name!r}")


_COSTS = {
    Spell.MAGIC_MISSILE: 53,
    Spell.DRAIN: 73,
    Spell.SHIELD: 113,
    Spell.POISON: 173,
    Spell.RECHARGE: 229,
}

_EFFECTS = {
    Spell.SHIELD: Effect.SHIELD,
    Spell.POISON: Effect.POISON,
    Spell.RECHARGE: Effect.RECHARGE,
}
