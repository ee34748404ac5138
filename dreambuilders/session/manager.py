"""
Session Manager - In-memory registry of running games.

A session wraps one GameState from setup until the run is won, lost or
dropped by the caller:

1. create_session picks heroes and a seed and sets up the game;
   seat "0" is already in its first turn
2. moves go through a GameLoop bound to the session
3. end_session forgets the session and releases its state

Nothing is written to disk. A finished run can be rebuilt from
random_seed plus the game's action_history.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import time
import uuid

from ..engine_core.state import GameState
from ..engine_core.setup import setup_game

logger = logging.getLogger(__name__)

COMPLETED = "completed"


class SessionState(Enum):
    """Where a session is in its life."""
    CREATED = "created"  # first turn begun, no move yet
    ACTIVE = "active"
    GAME_OVER = "game_over"  # revenue goal reached or out of plays
    ABANDONED = "abandoned"  # ended early or swept as stale


@dataclass
class Session:
    """One run of the game, with the heroes and seed that produced it."""
    session_id: str
    hero_ids: list[str]
    created_at: float

    state: SessionState = SessionState.CREATED
    game_state: GameState | None = None
    random_seed: int | None = None
    updated_at: float | None = None

    def is_active(self) -> bool:
        return self.state in (SessionState.CREATED, SessionState.ACTIVE)

    def touch(self) -> None:
        """Record that a move was just applied."""
        self.updated_at = time.time()


class SessionManager:
    """Creates, looks up and retires sessions. Process-local only."""

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, hero_ids: list[str], random_seed: int | None = None) -> Session:
        """
        Set up a game for hero_ids (one per seat) and register it.

        Raises:
            ValueError: unknown hero id; nothing is registered
        """
        session_id = str(uuid.uuid4())
        game_state = setup_game(hero_ids, random_seed=random_seed, game_id=session_id)

        session = Session(
            session_id=session_id,
            hero_ids=list(hero_ids),
            created_at=time.time(),
            game_state=game_state,
            random_seed=random_seed,
        )
        self._sessions[session_id] = session
        logger.info("Created session %s (%s)", session_id, ", ".join(hero_ids))
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = COMPLETED) -> Session | None:
        """
        Forget a session and drop its game state.

        reason "completed" marks it GAME_OVER; anything else (a player
        quitting, a stale sweep) marks it ABANDONED. Returns the retired
        session, or None when the id is unknown.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return None
        session.state = SessionState.GAME_OVER if reason == COMPLETED else SessionState.ABANDONED
        session.game_state = None
        logger.info("Ended session %s (%s)", session_id, reason)
        return session

    def list_sessions(self) -> list[Session]:
        return list(self._sessions.values())

    def list_active_sessions(self) -> list[str]:
        """Ids of sessions still waiting for moves."""
        return [s.session_id for s in self._sessions.values() if s.is_active()]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Retire finished sessions created more than max_age_seconds ago.

        Games still in progress are kept however old they are.
        Returns how many sessions were removed.
        """
        cutoff = time.time() - max_age_seconds
        stale = [
            s.session_id for s in self._sessions.values()
            if s.created_at < cutoff and not s.is_active()
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
