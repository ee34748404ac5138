"""
Engine Core - Deterministic rules engine.

The engine is the runtime that:
1. Holds GameState and the per-player effect context
2. Resolves sales and card discounts
3. Runs the turn lifecycle and win/loss checks
4. Applies moves via the reducer
5. Queues and resolves pending choices
"""

from .state import Board, Card, CardType, GameState, PlayerState
from .context import EffectContext, clear_temporary, ensure_context
from .choices import ChoiceType, PendingChoice, QueueState, peek_current, queue_state
from .action import Action, ActionType, ActionPayload, ActionResult
from .reducer import Reducer, apply_action
from .action_generator import legal_actions
from .sales import sell_product
from .turns import begin_turn, check_game_end, end_turn
from .setup import setup_game

__all__ = [
    "Board",
    "Card",
    "CardType",
    "GameState",
    "PlayerState",
    "EffectContext",
    "clear_temporary",
    "ensure_context",
    "ChoiceType",
    "PendingChoice",
    "QueueState",
    "peek_current",
    "queue_state",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Reducer",
    "apply_action",
    "legal_actions",
    "sell_product",
    "begin_turn",
    "check_game_end",
    "end_turn",
    "setup_game",
]
