"""
API Module - Service and HTTP interface for the solver.

The service layer is usable on its own; create_app() wraps it in a
FastAPI application when the api extra is installed.
"""

from .schemas import (
    # Requests
    BossStats,
    SolveRequest,
    SolveTextRequest,
    # Responses
    SolveResponse,
    ErrorResponse,
    HealthResponse,
    RoundInfo,
    # Enums
    SolveStatus,
    ErrorCode,
)
from .service import SolverService
from .app import create_app

__all__ = [
    # Requests
    "BossStats",
    "SolveRequest",
    "SolveTextRequest",
    # Responses
    "SolveResponse",
    "ErrorResponse",
    "HealthResponse",
    "RoundInfo",
    # Enums
    "SolveStatus",
    "ErrorCode",
    # Service
    "SolverService",
    "create_app",
]
