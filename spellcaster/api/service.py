"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Applies server defaults from SolverSettings
3. Maps engine results and errors to response models

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .schemas import (
    MAX_DAMAGE,
    MAX_HIT_POINTS,
    ErrorCode,
    ErrorResponse,
    RoundInfo,
    SolveRequest,
    SolveResponse,
    SolveStatus,
    SolveTextRequest,
)
from ..config import SolverSettings
from ..engine_core import Boss, CombatState, SearchEngine, SearchOutcome
from ..engine_core.search import HistoryEntry
from ..parsing import InputParseError, parse_boss

logger = logging.getLogger(__name__)


@dataclass
class SolverService:
    """
    Solver service.

    Usage:
        service = SolverService()
        response = service.solve(SolveRequest(boss=BossStats(hit_points=13, damage=8)))
    """
    settings: SolverSettings = field(default_factory=SolverSettings)

    def solve(self, request: SolveRequest) -> SolveResponse | ErrorResponse:
        """Run one search. Each call builds its own engine."""
        try:
            boss = Boss(hit_points=request.boss.hit_points, damage=request.boss.damage)
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)
        return self._solve(
            boss,
            hard_mode=request.hard_mode,
            player_hp=request.player_hp,
            player_mana=request.player_mana,
            include_trace=request.include_trace,
        )

    def solve_text(self, request: SolveTextRequest) -> SolveResponse | ErrorResponse:
        """Parse raw puzzle input, then solve."""
        try:
            boss = parse_boss(request.input_text)
        except InputParseError as e:
            logger.warning("Rejected boss input: %s", e)
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.INVALID_INPUT,
                details={"errors": e.errors},
            )
        if boss.hit_points > MAX_HIT_POINTS or boss.damage > MAX_DAMAGE:
            return ErrorResponse(
                error=f"Boss stats must be at most {MAX_HIT_POINTS} hit points and {MAX_DAMAGE} damage",
                error_code=ErrorCode.VALIDATION_ERROR,
            )
        return self._solve(
            boss,
            hard_mode=request.hard_mode,
            player_hp=request.player_hp,
            player_mana=request.player_mana,
            include_trace=request.include_trace,
        )

    def _solve(
        self,
        boss: Boss,
        hard_mode: bool,
        player_hp: int | None,
        player_mana: int | None,
        include_trace: bool,
    ) -> SolveResponse | ErrorResponse:
        try:
            initial = CombatState.initial(
                boss,
                player_hp=self.settings.player_hp if player_hp is None else player_hp,
                player_mana=self.settings.player_mana if player_mana is None else player_mana,
                hard_mode=hard_mode,
            )
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)

        result = SearchEngine(max_expansions=self.settings.max_expansions).search(initial)

        if result.outcome == SearchOutcome.BUDGET_EXHAUSTED:
            return ErrorResponse(
                error=f"No solution found within {self.settings.max_expansions} expansions",
                error_code=ErrorCode.BUDGET_EXHAUSTED,
                details={"expanded": result.expanded},
            )

        if result.outcome == SearchOutcome.UNWINNABLE:
            return SolveResponse(
                status=SolveStatus.UNWINNABLE,
                hard_mode=hard_mode,
                expanded=result.expanded,
            )

        return SolveResponse(
            status=SolveStatus.SOLVED,
            min_mana=result.min_mana,
            hard_mode=hard_mode,
            expanded=result.expanded,
            spells=[spell.display_name for spell in result.spells],
            rounds=[_round_info(entry) for entry in result.history] if include_trace else [],
        )


def _round_info(entry: HistoryEntry) -> RoundInfo:
    state = entry.state
    return RoundInfo(
        round=state.round,
        spell=entry.spell.display_name if entry.spell else None,
        player_hp=state.player.hit_points,
        player_mana=state.player.mana,
        boss_hp=state.boss.hit_points,
        mana_spent=state.mana_spent,
        active_effects={effect.value: remaining for effect, remaining in state.timers.active()},
    )
