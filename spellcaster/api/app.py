"""
FastAPI Application - REST API for the solver.

Endpoints:
    POST   /api/v1/solve         Solve from parsed boss stats
    POST   /api/v1/solve/text    Solve from raw puzzle input
    GET    /health               Health check

Every request runs an independent search; nothing is shared between
requests. Searches are CPU-bound, so the endpoints are plain (sync)
functions and FastAPI runs them in its worker threadpool.
"""

from typing import Union

from .. import __version__


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional SolverService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install 'spellcaster[api]'"
        )

    from .service import SolverService
    from .schemas import (
        ErrorCode,
        ErrorResponse,
        HealthResponse,
        SolveRequest,
        SolveResponse,
        SolveTextRequest,
    )

    app = FastAPI(
        title="Spellcaster API",
        description="Minimum-mana combat optimizer.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    solver_service = service or SolverService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    status_codes = {
        ErrorCode.INVALID_INPUT: 400,
        ErrorCode.VALIDATION_ERROR: 422,
        ErrorCode.BUDGET_EXHAUSTED: 503,
    }

    def to_response(result: Union[SolveResponse, ErrorResponse]):
        if isinstance(result, ErrorResponse):
            return JSONResponse(
                status_code=status_codes[result.error_code],
                content=result.model_dump(mode="json"),
            )
        return result

    # =========================================================================
    # Solve Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/solve",
        response_model=SolveResponse,
        responses={503: {"model": ErrorResponse}},
        tags=["Solver"],
        summary="Find the minimum mana needed to win",
    )
    def solve(request: SolveRequest):
        """Solve from already-parsed boss stats."""
        return to_response(solver_service.solve(request))

    @app.post(
        "/api/v1/solve/text",
        response_model=SolveResponse,
        responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
        tags=["Solver"],
        summary="Parse puzzle input and solve it",
    )
    def solve_text(request: SolveTextRequest):
        """Solve from raw 'Hit Points' / 'Damage' input text."""
        return to_response(solver_service.solve_text(request))

    # =========================================================================
    # System Endpoints
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="spellcaster",
            version=__version__,
        )

    return app
