"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when a caller picks heroes
- Holds the current game state
- Processes moves and bot turns
- Destroyed when game ends

Sessions are EPHEMERAL:
- No persistence to database
- Replayable from seed and action history
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
