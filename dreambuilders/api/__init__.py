"""
API Module - HTTP interface.

Exposes the engine via REST API:
1. List heroes
2. Create game sessions
3. Submit moves and resolve pending choices
4. Read the game state and log

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    MoveRequest,
    # Responses
    SessionResponse,
    GameStateResponse,
    MoveResponse,
    ErrorResponse,
    # Shared
    CardSchema,
    BoardSchema,
    PlayerSchema,
    PendingChoiceSchema,
    HeroSchema,
    # Enums
    ErrorCode,
    MoveType,
    SessionStatus,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "MoveRequest",
    # Responses
    "SessionResponse",
    "GameStateResponse",
    "MoveResponse",
    "ErrorResponse",
    # Shared
    "CardSchema",
    "BoardSchema",
    "PlayerSchema",
    "PendingChoiceSchema",
    "HeroSchema",
    # Enums
    "ErrorCode",
    "MoveType",
    "SessionStatus",
    # Service
    "APIService",
    "create_app",
]
