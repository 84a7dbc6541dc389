"""
Pydantic Schemas for API - Request/response models for the solver.

Error Codes:
- INVALID_INPUT: Boss input text could not be parsed
- VALIDATION_ERROR: Request fields out of range
- BUDGET_EXHAUSTED: Search stopped before reaching an answer
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

# Upper bounds on request stats
MAX_HIT_POINTS = 10_000
MAX_DAMAGE = 10_000
MAX_MANA = 100_000


# =============================================================================
# Enums
# =============================================================================

class SolveStatus(str, Enum):
    """Outcome of a solve request."""
    SOLVED = "solved"
    UNWINNABLE = "unwinnable"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    BUDGET_EXHAUSTED = "BUDGET_EXHAUSTED"


# =============================================================================
# Request Models
# =============================================================================

class BossStats(BaseModel):
    """The adversary's starting stats."""
    hit_points: int = Field(..., ge=0, le=MAX_HIT_POINTS, description="Boss hit points")
    damage: int = Field(..., ge=0, le=MAX_DAMAGE, description="Boss attack damage")


class SolveRequest(BaseModel):
    """Request to find the minimum mana needed to win."""
    boss: BossStats
    hard_mode: bool = Field(False, description="Lose 1 hp at the start of every round")
    player_hp: Optional[int] = Field(None, ge=1, le=MAX_HIT_POINTS, description="Defaults to server setting")
    player_mana: Optional[int] = Field(None, ge=0, le=MAX_MANA, description="Defaults to server setting")
    include_trace: bool = Field(False, description="Return the winning rounds")


class SolveTextRequest(BaseModel):
    """Request carrying raw puzzle input instead of parsed stats."""
    input_text: str = Field(..., description="'Hit Points: N' and 'Damage: N' lines")
    hard_mode: bool = False
    player_hp: Optional[int] = Field(None, ge=1, le=MAX_HIT_POINTS)
    player_mana: Optional[int] = Field(None, ge=0, le=MAX_MANA)
    include_trace: bool = False


# =============================================================================
# Response Models
# =============================================================================

class RoundInfo(BaseModel):
    """One round of the winning line."""
    round: int
    spell: Optional[str] = Field(None, description="None for the start and for rounds ended by effects")
    player_hp: int
    player_mana: int
    boss_hp: int
    mana_spent: int
    active_effects: dict[str, int] = Field(default_factory=dict)


class SolveResponse(BaseModel):
    """Result of a solve request."""
    status: SolveStatus
    min_mana: Optional[int] = Field(None, description="Set only when status is 'solved'")
    hard_mode: bool
    expanded: int = Field(0, description="States expanded by the search")
    spells: list[str] = Field(default_factory=list)
    rounds: list[RoundInfo] = Field(default_factory=list)
    api_version: str = "v1"


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
