"""
Game Loop - Turn sequencing around the reducer.

The loop:
1. A move comes in (from a person or a bot)
2. The reducer validates and applies it to a copy of the state
3. On success the session swaps in the new state
4. Termination flags move the session to GAME_OVER
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TYPE_CHECKING
import logging

from ..engine_core.action import Action, ActionType
from ..engine_core.action_generator import legal_actions
from ..engine_core.reducer import apply_action

if TYPE_CHECKING:
    from .manager import Session
    from ..bots import BotPolicy

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """What the loop is waiting for."""
    WAITING_ACTION = "waiting_action"
    WAITING_CHOICE = "waiting_choice"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of processing one or more moves.

    Contains the log entries the moves produced and,
    when the game ended, its outcome.
    """
    success: bool
    loop_state: LoopState

    # Game log entries added by the move(s)
    changes: list[str] = field(default_factory=list)

    # Moves applied (bot turns)
    actions: list[str] = field(default_factory=list)

    # Front of the pending-choice queue, if any
    pending_choice: Any | None = None

    # Errors
    errors: list[str] = field(default_factory=list)
    error_code: str | None = None

    # Game over info
    game_over: bool = False
    winner: bool = False


class GameLoop:
    """
    Drives one session: human moves via submit, bot turns via run_bot_turn.

    Usage:
        loop = GameLoop(session)

        result = loop.submit(Action.play_card("0", 0))
        if result.pending_choice:
            result = loop.submit(Action.make_choice("0", 0))

        # Or let a bot finish the turn
        result = loop.run_bot_turn(GreedyPolicy())
    """

    def __init__(self, session: Session, max_actions_per_turn: int = 100):
        self.session = session
        self.max_actions_per_turn = max_actions_per_turn

    @property
    def state(self) -> LoopState:
        game_state = self.session.game_state
        if game_state is None or game_state.game_over:
            return LoopState.GAME_OVER
        if game_state.active_player.pending_choices:
            return LoopState.WAITING_CHOICE
        return LoopState.WAITING_ACTION

    def submit(self, action: Action) -> TurnResult:
        """Apply one move and update the session."""
        from .manager import SessionState

        if self.session.game_state is None:
            return TurnResult(
                success=False,
                loop_state=LoopState.GAME_OVER,
                errors=["Session has no game"],
            )

        result = apply_action(self.session.game_state, action)
        if not result.success:
            return TurnResult(
                success=False,
                loop_state=self.state,
                errors=[result.error or "Move rejected"],
                error_code=result.error_code,
            )

        self.session.game_state = result.new_state
        self.session.touch()
        if result.new_state.game_over:
            self.session.state = SessionState.GAME_OVER
            logger.info(
                "Session %s finished: %s",
                self.session.session_id,
                "win" if result.new_state.winner else "loss",
            )
        elif self.session.state == SessionState.CREATED:
            self.session.state = SessionState.ACTIVE

        return TurnResult(
            success=True,
            loop_state=self.state,
            changes=result.state_changes,
            actions=[action.describe()],
            pending_choice=result.pending_choice,
            game_over=result.new_state.game_over,
            winner=result.new_state.winner,
        )

    def run_bot_turn(self, policy: BotPolicy) -> TurnResult:
        """
        Let a policy play for the current seat until its turn ends.

        Stops early on game over or after max_actions_per_turn moves.
        """
        game_state = self.session.game_state
        if game_state is None or game_state.game_over:
            return TurnResult(success=False, loop_state=LoopState.GAME_OVER,
                              errors=["Game is over"])

        player_id = game_state.current_player
        changes: list[str] = []
        actions: list[str] = []
        last: TurnResult | None = None

        for _ in range(self.max_actions_per_turn):
            game_state = self.session.game_state
            if game_state.game_over or game_state.current_player != player_id:
                break
            legal = legal_actions(game_state, player_id)
            if not legal:
                break
            decision = policy.select_action(game_state, legal)
            last = self.submit(decision.action)
            if not last.success:
                logger.warning("Bot move %s rejected: %s", decision.action.describe(), last.errors)
                break
            changes.extend(last.changes)
            actions.extend(last.actions)
            if decision.action.action_type == ActionType.END_TURN:
                break
        else:
            # Safety valve: a policy that never ends its turn
            logger.warning("Bot hit %d moves; ending turn", self.max_actions_per_turn)
            game_state = self.session.game_state
            if not game_state.game_over and not game_state.active_player.pending_choices:
                last = self.submit(Action.end_turn(player_id))
                changes.extend(last.changes)

        game_state = self.session.game_state
        return TurnResult(
            success=last.success if last else False,
            loop_state=self.state,
            changes=changes,
            actions=actions,
            pending_choice=last.pending_choice if last else None,
            game_over=game_state.game_over,
            winner=game_state.winner,
        )

    def run_until_over(self, policy: BotPolicy, max_turns: int = 50) -> TurnResult:
        """Play whole turns with policy until the game ends or max_turns is hit."""
        result = TurnResult(success=True, loop_state=self.state)
        while self.session.game_state and not self.session.game_state.game_over:
            if self.session.game_state.turn > max_turns:
                break
            result = self.run_bot_turn(policy)
            if not result.success:
                break
        return result
