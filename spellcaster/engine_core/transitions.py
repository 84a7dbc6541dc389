"""
Transition Generator - Enumerates the states reachable by one full round.

A round runs these phases in order, stopping as soon as either side dies:
1. Hard-mode self-damage (1 hit point, ignores armor)
2. Effect tick before the player acts
3. Player casts one spell
4. Effect tick before the boss acts
5. Boss attack

The generator is used by:
1. The search engine to expand states
2. replay() to play a fixed spell sequence (CLI simulate, tests)

Illegal casts are pruned rather than reported: a spell that costs more
than the available mana, or that would restart a running effect, simply
produces no transition.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable

from .effects import tick_all
from .spell import Spell, MISSILE_DAMAGE, DRAIN_DAMAGE, DRAIN_HEAL
from .state import CombatState

logger = logging.getLogger(__name__)

HARD_MODE_DAMAGE = 1


class IllegalCastError(ValueError):
    """Raised by replay() when a requested spell cannot be cast."""

    def __init__(self, spell: Spell, round_number: int, reason: str):
        self.spell = spell
        self.round_number = round_number
        self.reason = reason
        super().__init__(f"Failed to cast {spell.display_name} in round {round_number}: {reason}")


class CombatOverError(ValueError):
    """Raised by replay() when spells remain after the fight has ended."""

    def __init__(self, spell: Spell, state: CombatState):
        self.spell = spell
        self.state = state
        super().__init__(
            f"Cannot cast {spell.display_name}: combat already ended in "
            f"{state.outcome.value} after round {state.round}"
        )


@dataclass(frozen=True)
class Transition:
    """
    One child of a state.

    spell is None when the round ended before the player acted, so no
    spell was cast or paid for.
    """
    spell: Spell | None
    state: CombatState


def cast_failure(state: CombatState, spell: Spell) -> str | None:
    """
    Check whether a spell can be cast in the given state.

    Returns a reason if the cast is illegal, None if it is legal.
    """
    if spell.cost > state.player.mana:
        return f"needs {spell.cost} mana, only {state.player.mana} available"
    effect = spell.effect
    if effect is not None and state.timers.is_active(effect):
        return f"{effect.display_name} is still active ({state.timers.get(effect)} ticks left)"
    return None


def cast(state: CombatState, spell: Spell) -> CombatState | None:
    """Apply the player's spell, or return None if it is illegal."""
    if cast_failure(state, spell) is not None:
        return None

    player = state.player.spend_mana(spell.cost)
    boss = state.boss
    timers = state.timers

    if spell is Spell.MAGIC_MISSILE:
        boss = boss.take_damage(MISSILE_DAMAGE)
    elif spell is Spell.DRAIN:
        boss = boss.take_damage(DRAIN_DAMAGE)
        player = player.heal(DRAIN_HEAL)
    elif spell in (Spell.SHIELD, Spell.POISON, Spell.RECHARGE):
        timers = timers.with_timer(spell.effect, spell.effect.duration)
    else:
        raise ValueError(f"Unhandled spell: {spell}")

    return state._copy_with(
        player=player,
        boss=boss,
        timers=timers,
        mana_spent=state.mana_spent + spell.cost,
    )


def open_round(state: CombatState) -> CombatState:
    """
    Run the phases before the player acts.

    The result may already be terminal: hard mode can kill the player and
    poison can kill the boss before any spell is chosen.
    """
    child = state._copy_with(round=state.round + 1)

    if child.hard_mode:
        child = child._copy_with(player=child.player.lose_hit_points(HARD_MODE_DAMAGE))
        if child.is_terminal:
            return child

    return tick_all(child)


def close_round(opened: CombatState, spell: Spell) -> CombatState | None:
    """Run the player's cast and the boss half of an opened round."""
    child = cast(opened, spell)
    if child is None or child.is_terminal:
        return child

    child = tick_all(child)
    if child.is_terminal:
        return child

    return child._copy_with(player=child.player.take_hit(child.boss.damage))


def play_round(state: CombatState, spell: Spell) -> CombatState | None:
    """
    Play one full round with the given spell.

    Returns None if the spell is illegal at the moment it would be cast.
    If the round ends before the player acts, the spell is never cast and
    the returned state carries no charge for it.
    """
    opened = open_round(state)
    if opened.is_terminal:
        return opened
    return close_round(opened, spell)


@dataclass
class TransitionGenerator:
    """
    Generates the children of a combat state.

    Stateless; holds the spell order so tests and callers can restrict the
    spell book.
    """
    spells: tuple[Spell, ...] = tuple(Spell)

    def generate(self, state: CombatState) -> list[Transition]:
        """
        Generate all states reachable by one full round.

        Terminal states have no children. When the round ends before the
        player acts, every spell leads to the same state and a single
        spell-less transition is returned.
        """
        if state.is_terminal:
            return []

        opened = open_round(state)
        if opened.is_terminal:
            return [Transition(spell=None, state=opened)]

        transitions = []
        for spell in self.spells:
            child = close_round(opened, spell)
            if child is not None:
                transitions.append(Transition(spell=spell, state=child))
        return transitions


def legal_transitions(state: CombatState) -> list[Transition]:
    """
    Convenience function to get all children of a state.

    Creates a TransitionGenerator with the full spell book.
    """
    return TransitionGenerator().generate(state)


def replay(state: CombatState, spells: Iterable[Spell]) -> list[Transition]:
    """
    Play a fixed spell sequence from a state.

    Returns one Transition per round played. Raises IllegalCastError when
    a spell cannot be cast and CombatOverError when spells remain after
    the fight has ended.
    """
    transitions: list[Transition] = []
    for spell in spells:
        if state.is_terminal:
            raise CombatOverError(spell, state)

        opened = open_round(state)
        if opened.is_terminal:
            logger.debug("Round %d ended before %s was cast", opened.round, spell.display_name)
            state = opened
            transitions.append(Transition(spell=None, state=state))
            continue

        reason = cast_failure(opened, spell)
        if reason is not None:
            raise IllegalCastError(spell, opened.round, reason)

        state = close_round(opened, spell)
        transitions.append(Transition(spell=spell, state=state))
    return transitions
