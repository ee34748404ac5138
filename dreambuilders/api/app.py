"""
FastAPI Application - REST API for the Dream Builders engine.

Endpoints:
    GET    /health                          Health check
    GET    /api/v1/heroes                   List playable heroes
    POST   /api/v1/sessions                 Create game session
    GET    /api/v1/sessions                 List active sessions
    GET    /api/v1/sessions/{id}            Get session status
    DELETE /api/v1/sessions/{id}            End session
    GET    /api/v1/sessions/{id}/state      Get game state
    POST   /api/v1/sessions/{id}/moves      Submit a move

Move flow:
    1. POST /moves with an action_type (and index where the move needs one)
    2. If the response carries a pending_choice, the next move must be
       make_choice with an index into its options or cards
    3. end_turn hands the turn to the next seat and runs its turn begin

Bodies are pydantic models from schemas.py.
"""

from typing import Annotated, Union
import logging
import os

from .. import __version__

# Environment configuration
DREAMBUILDERS_ENV = os.getenv("DREAMBUILDERS_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("DREAMBUILDERS_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: APIService to serve; a fresh one when omitted

    Returns:
        FastAPI application instance
    """
    from fastapi import FastAPI, Query, Request
    from fastapi.exceptions import RequestValidationError
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from .service import APIService
    from .schemas import (
        # Request models
        CreateSessionRequest,
        MoveRequest,
        # Response models
        SessionResponse,
        GameStateResponse,
        MoveResponse,
        ErrorResponse,
        HeroListResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        # Enums
        ErrorCode,
    )

    logging.basicConfig(level=LOG_LEVEL)

    app = FastAPI(
        title="Dream Builders Engine API",
        description="""
Rules engine for Dream Builders, a single-player deck-building game about
growing a small business to $1,000,000 in revenue.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `INVALID_HERO` | Unknown hero id |
| `INVALID_MOVE` | The engine rejected the move |
| `VALIDATION_ERROR` | Malformed request body |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Service instance
    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: dict | None = None,
    ) -> JSONResponse:
        """JSONResponse carrying an ErrorResponse body."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            status_code=422,
            details={"errors": [str(e.get("msg", e)) for e in exc.errors()]},
        )

    # =========================================================================
    # Heroes
    # =========================================================================

    @app.get(
        "/api/v1/heroes",
        response_model=HeroListResponse,
        tags=["Catalog"],
        summary="List playable heroes",
    )
    async def list_heroes() -> HeroListResponse:
        return HeroListResponse(heroes=api_service.list_heroes())

    # =========================================================================
    # Sessions
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Unknown hero id"},
        },
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(request: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        """
        Create a new game session.

        One hero per seat. Seat "0" starts; its first turn has already
        begun when the response comes back.
        """
        try:
            return api_service.create_session(request)
        except ValueError as e:
            return make_error_response(ErrorCode.INVALID_HERO, str(e))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Status, heroes and seed of one session."""
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(
                ErrorCode.SESSION_NOT_FOUND,
                response.error,
                status_code=404,
            )
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        """Drop a session; its game state is discarded."""
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """Ids of sessions that have not ended."""
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    # =========================================================================
    # Game State and Moves
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get current game state",
    )
    async def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        response = api_service.get_game_state(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(
                ErrorCode.SESSION_NOT_FOUND,
                response.error,
                status_code=404,
            )
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/moves",
        response_model=MoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Move rejected by the engine"},
            404: {"model": ErrorResponse},
        },
        tags=["Game"],
        summary="Submit a move",
    )
    async def submit_move(session_id: str, request: MoveRequest) -> Union[MoveResponse, JSONResponse]:
        """
        Submit one move.

        Rejected moves leave the game state untouched.
        """
        response = api_service.submit_move(session_id, request)
        if isinstance(response, ErrorResponse):
            status_code = 404 if response.error_code == ErrorCode.SESSION_NOT_FOUND else 400
            return make_error_response(
                response.error_code,
                response.error,
                status_code=status_code,
                details=response.details,
            )
        return response

    # =========================================================================
    # System
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", service="dreambuilders", version=__version__)

    @app.get("/", tags=["System"])
    async def root():
        return {
            "service": "Dream Builders Engine API",
            "version": __version__,
            "environment": DREAMBUILDERS_ENV,
            "docs": "/api/docs",
        }

    return app


# For running directly: uvicorn dreambuilders.api.app:app
app = create_app()
