"""
Search Engine - Uniform-cost search for the cheapest winning spell sequence.

The engine:
1. Seeds a priority frontier with the initial state
2. Pops the state with the lowest mana spent
3. Skips states already expanded (canonical equality)
4. Returns the first Victory popped, which is optimal
5. Discards Defeat states and expands everything else

Only expanded and winning states are stored in an arena; parents are
arena indices, so the winning spell sequence can be rebuilt without
states referencing each other. Frontier entries carry the parent index
until they are popped.

Each SearchEngine.search() call owns its frontier, visited set and arena.
Searches share nothing and can run side by side.
"""

from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass, field
from enum import Enum

from .spell import Spell
from .state import Boss, CombatState, Outcome
from .transitions import TransitionGenerator

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_HP = 50
DEFAULT_PLAYER_MANA = 500


class SearchOutcome(Enum):
    """How a search ended."""
    SOLVED = "solved"
    UNWINNABLE = "unwinnable"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass(frozen=True)
class HistoryEntry:
    """One step of a winning line. The first entry is the initial state."""
    spell: Spell | None
    state: CombatState


@dataclass
class SearchResult:
    """
    Result of a search.

    min_mana is only set when a winning sequence was found; an unwinnable
    fight or an exhausted budget leaves it as None. stored counts the
    states kept in the history arena.
    """
    outcome: SearchOutcome
    min_mana: int | None = None
    expanded: int = 0
    stored: int = 0
    history: list[HistoryEntry] = field(default_factory=list)

    @property
    def is_solved(self) -> bool:
        return self.outcome is SearchOutcome.SOLVED

    @property
    def spells(self) -> list[Spell]:
        """Spells actually cast along the winning line."""
        return [entry.spell for entry in self.history if entry.spell is not None]

    @property
    def final_state(self) -> CombatState | None:
        return self.history[-1].state if self.history else None


@dataclass(frozen=True)
class _Node:
    state: CombatState
    spell: Spell | None
    parent: int | None


class SearchEngine:
    """
    Best-first search over combat states ordered by mana spent.

    Usage:
        engine = SearchEngine(max_expansions=100_000)
        result = engine.search(CombatState.initial(Boss(13, 8), 10, 250))
        if result.is_solved:
            print(result.min_mana)
    """

    def __init__(
        self,
        generator: TransitionGenerator | None = None,
        max_expansions: int | None = None,
    ):
        if max_expansions is not None and max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1, got {max_expansions}")
        self.generator = generator or TransitionGenerator()
        self.max_expansions = max_expansions

    def search(self, initial: CombatState) -> SearchResult:
        """
        Find the minimum mana needed to win from the initial state.

        Terminates on the first Victory popped, on frontier exhaustion
        (unwinnable) or when the expansion budget runs out.
        """
        logger.info(
            "Searching: boss %d hp / %d dmg, player %d hp / %d mana, hard_mode=%s",
            initial.boss.hit_points,
            initial.boss.damage,
            initial.player.hit_points,
            initial.player.mana,
            initial.hard_mode,
        )

        arena: list[_Node] = []
        # (mana_spent, push order, state, spell, parent arena index)
        frontier: list[tuple[int, int, CombatState, Spell | None, int | None]] = [
            (initial.mana_spent, 0, initial, None, None)
        ]
        pushed = 1
        visited: set[CombatState] = set()
        expanded = 0

        while frontier:
            _, _, state, spell, parent = heapq.heappop(frontier)

            if state in visited:
                continue
            visited.add(state)

            outcome = state.outcome
            if outcome is Outcome.DEFEAT:
                continue

            if outcome is Outcome.VICTORY:
                arena.append(_Node(state=state, spell=spell, parent=parent))
                logger.info(
                    "Solved: %d mana after %d expansions (%d states seen)",
                    state.mana_spent, expanded, len(visited),
                )
                return SearchResult(
                    outcome=SearchOutcome.SOLVED,
                    min_mana=state.mana_spent,
                    expanded=expanded,
                    stored=len(arena),
                    history=self._history(arena, len(arena) - 1),
                )

            if self.max_expansions is not None and expanded >= self.max_expansions:
                logger.warning(
                    "Expansion budget of %d exhausted with %d states on the frontier",
                    self.max_expansions, len(frontier) + 1,
                )
                return SearchResult(
                    outcome=SearchOutcome.BUDGET_EXHAUSTED,
                    expanded=expanded,
                    stored=len(arena),
                )

            arena.append(_Node(state=state, spell=spell, parent=parent))
            index = len(arena) - 1
            expanded += 1
            for transition in self.generator.generate(state):
                if transition.state in visited:
                    continue
                heapq.heappush(
                    frontier,
                    (transition.state.mana_spent, pushed, transition.state, transition.spell, index),
                )
                pushed += 1

        logger.info("No winning sequence after %d expansions", expanded)
        return SearchResult(outcome=SearchOutcome.UNWINNABLE, expanded=expanded, stored=len(arena))

    @staticmethod
    def _history(arena: list[_Node], index: int) -> list[HistoryEntry]:
        """Walk parent indices back to the root."""
        entries = []
        current: int | None = index
        while current is not None:
            node = arena[current]
            entries.append(HistoryEntry(spell=node.spell, state=node.state))
            current = node.parent
        entries.reverse()
        return entries


def find_min_mana(
    boss: Boss,
    player_hp: int = DEFAULT_PLAYER_HP,
    player_mana: int = DEFAULT_PLAYER_MANA,
    hard_mode: bool = False,
    max_expansions: int | None = None,
) -> SearchResult:
    """
    Convenience function to search a single encounter.

    Builds the initial state and runs a fresh SearchEngine.
    """
    initial = CombatState.initial(boss, player_hp=player_hp, player_mana=player_mana, hard_mode=hard_mode)
    return SearchEngine(max_expansions=max_expansions).search(initial)


def min_mana_standard(boss: Boss, max_expansions: int | None = None) -> SearchResult:
    """Minimum mana to beat the boss with the default 50 hp / 500 mana player."""
    return find_min_mana(boss, hard_mode=False, max_expansions=max_expansions)


def min_mana_hard(boss: Boss, max_expansions: int | None = None) -> SearchResult:
    """Same as min_mana_standard, losing 1 hit point at the start of every round."""
    return find_min_mana(boss, hard_mode=True, max_expansions=max_expansions)
