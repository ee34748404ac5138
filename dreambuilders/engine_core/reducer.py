"""
Reducer - Applies moves to game state.

The reducer is the single point of state mutation for player moves.
All moves must go through apply_action().

Design principles:
- Works on a clone: a rejected move leaves the caller's state untouched
- Validates before applying
- Returns ActionResult with success/failure, never raises
- Delegates card behavior to the effect registry
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .state import GameState, CardType
from .action import Action, ActionType, ActionResult
from .choices import ChoiceType, PendingChoice, enqueue, peek_current
from .constants import HERO_ABILITY_COSTS
from .context import ensure_context
from .discounts import get_card_cost, consume_card_discounts
from .sales import sell_product
from .turns import check_game_end, end_turn, handle_card_play_effects

logger = logging.getLogger(__name__)


def play_restriction(state: GameState, player_id: str, card) -> str | None:
    """Card-specific play restriction, or None when the card may be played."""
    ctx = ensure_context(state, player_id)
    if card.effect == "global_launch_event" and ctx.played_actions_this_turn < 2:
        return f"{card.name} requires 2 Actions played this turn"
    if card.effect == "quick_learner" and not ctx.played_action_this_turn:
        return f"{card.name} requires another Action played this turn"
    return None


@dataclass
class Reducer:
    """
    Reducer applies moves to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply a move to the game state.

        Returns ActionResult with the new state or an error.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            return ActionResult.failure(*validation_error)

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code="NO_HANDLER",
            )

        new_state = state.clone()
        log_start = len(new_state.game_log)
        try:
            result = handler(new_state, action)
        except Exception as e:
            logger.exception("Handler for %s failed", action.action_type.value)
            return ActionResult.failure(str(e), error_code="HANDLER_ERROR")

        if not result.success:
            return result

        check_game_end(new_state)
        new_state.action_history.append(action)
        result.new_state = new_state
        result.state_changes = new_state.game_log[log_start:]
        result.pending_choice = peek_current(new_state.active_player)
        return result

    def _validate_action(self, state: GameState, action: Action) -> tuple[str, str] | None:
        """
        Checks shared by every move.

        Returns (error message, error code) if invalid, None if valid.
        """
        if state.game_over:
            return "Game is over - no moves allowed", "GAME_OVER"

        player_id = action.player_id
        if player_id not in state.players:
            return f"Player {player_id} not found", "INVALID_MOVE"

        if player_id != state.current_player:
            return f"Not player {player_id}'s turn", "NOT_YOUR_TURN"

        if action.action_type != ActionType.MAKE_CHOICE:
            if state.players[player_id].pending_choices:
                return "Resolve the pending choice first", "CHOICE_PENDING"

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLAY_CARD: self._handle_play_card,
            ActionType.USE_HERO_ABILITY: self._handle_use_hero_ability,
            ActionType.TRIGGER_MIDNIGHT_OIL_DISCARD: self._handle_midnight_oil_discard,
            ActionType.TRIGGER_FAST_PIVOT_DESTROY: self._handle_fast_pivot_destroy,
            ActionType.MAKE_CHOICE: self._handle_make_choice,
            ActionType.SELL_PRODUCT: self._handle_sell_product,
            ActionType.END_TURN: self._handle_end_turn,
        }
        return handlers.get(action_type)

    def _handle_play_card(self, state: GameState, action: Action) -> ActionResult:
        """Pay for a hand card, route it by type and resolve its effect."""
        from ..effects import resolve_card_effect

        player_id = action.player_id
        player = state.players[player_id]
        index = action.index

        if index is None or not 0 <= index < len(player.hand):
            return ActionResult.failure(f"No card at hand index {index}", "INVALID_MOVE")

        card = player.hand[index]
        restriction = play_restriction(state, player_id, card)
        if restriction:
            return ActionResult.failure(restriction, "INVALID_MOVE")

        cost = get_card_cost(state, player_id, card)
        if player.capital < cost:
            return ActionResult.failure(
                f"Cannot afford {card.name}: costs {cost}, have {player.capital}",
                "INVALID_MOVE",
            )

        player.capital -= cost
        consume_card_discounts(state, player_id, card)
        player.hand.pop(index)
        state.log(f"Played {card.name} for {cost} capital")

        handle_card_play_effects(state, player_id, card)

        # Actions resolve and are gone; everything else lands on the board first
        if card.card_type != CardType.ACTION:
            player.board.zone_for(card.card_type).append(card)
        resolve_card_effect(state, player_id, card)

        ctx = ensure_context(state, player_id)
        if ctx.extra_card_plays > 0:
            ctx.extra_card_plays -= 1

        return ActionResult.success_with_state(state)

    def _handle_use_hero_ability(self, state: GameState, action: Action) -> ActionResult:
        from ..effects.hero_powers import HERO_POWER_EFFECTS, hero_power_requirement

        player_id = action.player_id
        player = state.players[player_id]

        if player.hero_ability_used:
            return ActionResult.failure("Hero ability already used this turn", "INVALID_MOVE")

        cost = HERO_ABILITY_COSTS.get(player.hero)
        power = HERO_POWER_EFFECTS.get(player.hero)
        if cost is None or power is None:
            return ActionResult.failure(f"Hero {player.hero} has no ability", "INVALID_MOVE")
        if player.capital < cost:
            return ActionResult.failure(
                f"Hero ability costs {cost}, have {player.capital}",
                "INVALID_MOVE",
            )
        requirement = hero_power_requirement(state, player_id)
        if requirement:
            return ActionResult.failure(requirement, "INVALID_MOVE")

        player.capital -= cost
        player.hero_ability_used = True
        power(state, player_id)
        return ActionResult.success_with_state(state)

    def _handle_midnight_oil_discard(self, state: GameState, action: Action) -> ActionResult:
        player_id = action.player_id
        player = state.players[player_id]
        ctx = ensure_context(state, player_id)
        if not ctx.midnight_oil_discard_pending:
            return ActionResult.failure("No Midnight Oil discard pending", "INVALID_MOVE")

        ctx.midnight_oil_discard_pending = False
        if player.hand:
            enqueue(player, PendingChoice(
                choice_type=ChoiceType.DISCARD,
                effect="midnight_oil_discard",
                prompt="Midnight Oil: choose a card to discard",
            ))
        else:
            state.log("Midnight Oil: no cards to discard")
        return ActionResult.success_with_state(state)

    def _handle_fast_pivot_destroy(self, state: GameState, action: Action) -> ActionResult:
        player_id = action.player_id
        player = state.players[player_id]
        ctx = ensure_context(state, player_id)
        if not ctx.fast_pivot_product_destroy_pending:
            return ActionResult.failure("No Fast Pivot destroy pending", "INVALID_MOVE")

        ctx.fast_pivot_product_destroy_pending = False
        # Candidates are taken now; the board may have changed since the flag was set
        if player.board.products:
            enqueue(player, PendingChoice(
                choice_type=ChoiceType.DESTROY_PRODUCT,
                effect="fast_pivot_destroy",
                cards=[p.snapshot() for p in player.board.products],
                prompt="Fast Pivot: choose a Product to destroy",
            ))
        else:
            state.log("Fast Pivot: no Products to destroy")
        return ActionResult.success_with_state(state)

    def _handle_make_choice(self, state: GameState, action: Action) -> ActionResult:
        from ..effects.choice_handlers import resolve_choice

        if action.index is None:
            return ActionResult.failure("A choice index is required", "INVALID_CHOICE")
        return resolve_choice(state, action.player_id, action.index)

    def _handle_sell_product(self, state: GameState, action: Action) -> ActionResult:
        """Sell one unit of a board Product."""
        player_id = action.player_id
        products = state.players[player_id].board.products
        index = action.index

        if index is None or not 0 <= index < len(products):
            return ActionResult.failure(f"No Product at board index {index}", "INVALID_MOVE")
        product = products[index]
        if not product.is_active or not product.inventory:
            return ActionResult.failure(f"{product.name} has nothing to sell", "INVALID_MOVE")

        sell_product(state, player_id, product, 1)
        return ActionResult.success_with_state(state)

    def _handle_end_turn(self, state: GameState, action: Action) -> ActionResult:
        state.log(f"Player {action.player_id} ended turn {state.turn}")
        end_turn(state)
        return ActionResult.success_with_state(state)


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply a move.

    Creates a Reducer and applies the action.
    """
    return Reducer().apply(state, action)
