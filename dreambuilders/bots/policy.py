"""
Bot Policy - Interface for automated play.

A BotPolicy takes a game state and the legal moves and returns a
decision. Pending choices are ordinary make_choice moves, so a single
select_action covers both turns and choices.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
import random
from typing import TYPE_CHECKING

from ..engine_core.action import ActionType
from ..engine_core.discounts import get_card_cost
from ..engine_core.sales import compute_sale_revenue

if TYPE_CHECKING:
    from ..engine_core.state import GameState
    from ..engine_core.action import Action


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains:
    - The action to take
    - A one-line reason, shown by the CLI
    """
    action: Action
    explanation: str = ""
    evaluated_actions: int = 0


class BotPolicy(ABC):
    """
    Picks one move from the legal ones for the seat to act.

    Policies only read the state; the GameLoop applies the move.
    """

    @abstractmethod
    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        """
        Choose one of legal_actions for the current seat.

        Args:
            state: Current game state
            legal_actions: Moves the reducer would accept

        Returns:
            BotDecision wrapping one of legal_actions
        """

    def get_name(self) -> str:
        """Label used in logs and the CLI."""
        return self.__class__.__name__


class RandomPolicy(BotPolicy):
    """Selects moves uniformly at random. Useful for fuzzing the engine."""

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")
        return BotDecision(
            action=self.rng.choice(legal_actions),
            explanation="Selected randomly",
            evaluated_actions=len(legal_actions),
        )


class GreedyPolicy(BotPolicy):
    """
    Greedy policy.

    Priority:
    1. Resolve the pending choice (first option)
    2. Materialize deferred triggers
    3. Sell the Product with the highest revenue for one unit
    4. Play the most expensive affordable card
    5. Use the hero power
    6. End the turn
    """

    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        by_type: dict[ActionType, list[Action]] = {}
        for action in legal_actions:
            by_type.setdefault(action.action_type, []).append(action)

        def decide(action: Action, why: str) -> BotDecision:
            return BotDecision(action=action, explanation=why, evaluated_actions=len(legal_actions))

        if ActionType.MAKE_CHOICE in by_type:
            return decide(by_type[ActionType.MAKE_CHOICE][0], "Resolve pending choice")

        for trigger in (ActionType.TRIGGER_FAST_PIVOT_DESTROY, ActionType.TRIGGER_MIDNIGHT_OIL_DISCARD):
            if trigger in by_type:
                return decide(by_type[trigger][0], "Resolve deferred effect")

        player = state.active_player

        if ActionType.SELL_PRODUCT in by_type:
            best = max(
                by_type[ActionType.SELL_PRODUCT],
                key=lambda a: compute_sale_revenue(state, player.player_id, player.board.products[a.index], 1),
            )
            return decide(best, "Sell best Product")

        if ActionType.PLAY_CARD in by_type:
            best = max(
                by_type[ActionType.PLAY_CARD],
                key=lambda a: get_card_cost(state, player.player_id, player.hand[a.index]),
            )
            return decide(best, f"Play {player.hand[best.index].name}")

        if ActionType.USE_HERO_ABILITY in by_type:
            return decide(by_type[ActionType.USE_HERO_ABILITY][0], "Use hero power")

        return decide(by_type.get(ActionType.END_TURN, legal_actions)[0], "Nothing left to do")
