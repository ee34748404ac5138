"""
Action System - Moves, payloads, and results.

Every player intent is an Action:
1. Card plays and the hero power
2. Trigger moves that materialize a deferred choice
3. Choice resolution
4. Manual sales and ending the turn

The reducer is the only thing that turns an Action into a new GameState.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of moves the reducer accepts."""
    PLAY_CARD = "play_card"
    USE_HERO_ABILITY = "use_hero_ability"
    TRIGGER_MIDNIGHT_OIL_DISCARD = "trigger_midnight_oil_discard"
    TRIGGER_FAST_PIVOT_DESTROY = "trigger_fast_pivot_destroy"
    MAKE_CHOICE = "make_choice"
    SELL_PRODUCT = "sell_product"
    END_TURN = "end_turn"


@dataclass
class ActionPayload:
    """
    Payload for an action.

    Moves carry at most a single integer: a hand index, a board
    product index, or a choice index.
    """
    player_id: str
    index: int | None = None


@dataclass
class Action:
    """
    One move by one player. Accepted moves are appended to the game's
    action_history, so a seed plus that list replays a whole run.
    """
    action_type: ActionType
    payload: ActionPayload
    timestamp: float | None = None
    action_id: str | None = None

    @property
    def player_id(self) -> str:
        return self.payload.player_id

    @property
    def index(self) -> int | None:
        return self.payload.index

    @classmethod
    def play_card(cls, player_id: str, index: int) -> Action:
        """Factory for playing the hand card at index."""
        return cls(ActionType.PLAY_CARD, ActionPayload(player_id, index))

    @classmethod
    def use_hero_ability(cls, player_id: str) -> Action:
        return cls(ActionType.USE_HERO_ABILITY, ActionPayload(player_id))

    @classmethod
    def trigger_midnight_oil_discard(cls, player_id: str) -> Action:
        return cls(ActionType.TRIGGER_MIDNIGHT_OIL_DISCARD, ActionPayload(player_id))

    @classmethod
    def trigger_fast_pivot_destroy(cls, player_id: str) -> Action:
        return cls(ActionType.TRIGGER_FAST_PIVOT_DESTROY, ActionPayload(player_id))

    @classmethod
    def make_choice(cls, player_id: str, index: int) -> Action:
        """Factory for resolving the front pending choice."""
        return cls(ActionType.MAKE_CHOICE, ActionPayload(player_id, index))

    @classmethod
    def sell_product(cls, player_id: str, index: int) -> Action:
        """Factory for selling one unit of the board Product at index."""
        return cls(ActionType.SELL_PRODUCT, ActionPayload(player_id, index))

    @classmethod
    def end_turn(cls, player_id: str) -> Action:
        return cls(ActionType.END_TURN, ActionPayload(player_id))

    def describe(self) -> str:
        """Short human readable form, used by the CLI."""
        if self.index is None:
            return self.action_type.value
        return f"{self.action_type.value} {self.index}"


@dataclass
class ActionResult:
    """
    Outcome of one reducer call.

    On success new_state is the mutated clone; on failure the caller's
    state is untouched and error_code names the rejection.
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    # For UI/presentation
    state_changes: list[str] = field(default_factory=list)

    # Front of the pending-choice queue after the move
    pending_choice: Any | None = None

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
