"""
Engine Core - Combat state machine and minimum-mana search.

The engine:
1. Models timed effects (Shield, Poison, Recharge)
2. Holds immutable CombatState snapshots
3. Generates the states reachable by one full round
4. Runs a uniform-cost search for the cheapest win
"""

from .effects import Effect, EffectTimers, duration, tick, tick_all
from .state import Boss, CombatState, Outcome, Player
from .spell import Spell
from .transitions import (
    CombatOverError,
    IllegalCastError,
    Transition,
    TransitionGenerator,
    legal_transitions,
    play_round,
    replay,
)
from .search import (
    HistoryEntry,
    SearchEngine,
    SearchOutcome,
    SearchResult,
    find_min_mana,
    min_mana_hard,
    min_mana_standard,
)
from .trace import format_trace

__all__ = [
    "Effect",
    "EffectTimers",
    "duration",
    "tick",
    "tick_all",
    "Boss",
    "CombatState",
    "Outcome",
    "Player",
    "Spell",
    "CombatOverError",
    "IllegalCastError",
    "Transition",
    "TransitionGenerator",
    "legal_transitions",
    "play_round",
    "replay",
    "HistoryEntry",
    "SearchEngine",
    "SearchOutcome",
    "SearchResult",
    "find_min_mana",
    "min_mana_hard",
    "min_mana_standard",
    "format_trace",
]
