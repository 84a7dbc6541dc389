"""
Round trace formatting for CLI output and tests.

One line per state:
    [1] Poison - Player:2hp/77mp Boss:10hp Poison(5) - Mana spent:173
"""

from __future__ import annotations
from typing import Iterable

from .spell import Spell
from .state import CombatState

START_LABEL = "Start"
NO_CAST_LABEL = "Effects"


def format_state(label: str, state: CombatState) -> str:
    """Format a single state with the label of the spell that produced it."""
    line = (
        f"[{state.round}] {label} - "
        f"Player:{state.player.hit_points}hp/{state.player.mana}mp "
        f"Boss:{state.boss.hit_points}hp"
    )
    for effect, remaining in state.timers.active():
        line += f" {effect.display_name}({remaining})"
    return line + f" - Mana spent:{state.mana_spent}"


def format_trace(entries: Iterable) -> str:
    """
    Format a sequence of (spell, state) entries.

    Accepts HistoryEntry and Transition objects alike. The first entry is
    labelled as the start of the fight.
    """
    lines = []
    for position, entry in enumerate(entries):
        lines.append(format_state(_label(position, entry.spell), entry.state))
    return "\n".join(lines) + "\n" if lines else ""


def _label(position: int, spell: Spell | None) -> str:
    if spell is not None:
        return spell.display_name
    return START_LABEL if position == 0 else NO_CAST_LABEL
