"""
Turn Lifecycle - Begin/end phase processing and win/loss evaluation.

TurnBegin -> PlayerActing -> TurnEnd, cycling through play_order.
The global turn counter advances when the last seat finishes.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .constants import CARDS_DRAWN_PER_TURN, MAX_CAPITAL, REVENUE_GOAL
from .context import clear_temporary, ensure_context
from .operations import draw_cards, gain_capital, gain_revenue, add_inventory
from .sales import sell_product, sell_first_available
from .state import CardType

if TYPE_CHECKING:
    from .state import Card, GameState

logger = logging.getLogger(__name__)

VISIONARY_CONFERENCE_REVENUE = 25_000

# Board effects that each sell one unit at turn begin
AUTO_SELLERS = (
    ("automate_checkout", CardType.TOOL, "Automate Checkout"),
    ("ai_salesbot", CardType.EMPLOYEE, "AI Salesbot"),
    ("delivery_drone_fleet", CardType.TOOL, "Delivery Drone Fleet"),
)


def check_game_end(state: GameState) -> None:
    """
    Evaluate win and loss. Safe to call after every mutation.

    Win: any player reached REVENUE_GOAL.
    Loss: every player has an empty deck and nothing affordable in hand.
    """
    if state.game_over:
        return

    for player in state.players.values():
        if player.revenue >= REVENUE_GOAL:
            state.game_over = True
            state.winner = True
            state.log(f"Player {player.player_id} reached ${REVENUE_GOAL:,} in revenue!")
            logger.info("Game %s won by player %s", state.game_id, player.player_id)
            return

    def stuck(player) -> bool:
        if player.deck:
            return False
        return not any(card.cost <= player.capital for card in player.hand)

    if state.players and all(stuck(p) for p in state.players.values()):
        state.game_over = True
        state.winner = False
        state.log("No cards left to play. Game over.")
        logger.info("Game %s lost: all players out of moves", state.game_id)


def process_automatic_sales(state: GameState, player_id: str) -> None:
    """Standing auto-sell behavior, run before anything else at turn begin."""
    board = state.players[player_id].board

    for product in list(board.active_products()):
        if product.effect == "popup_shop" and product.inventory > 0:
            revenue = sell_product(state, player_id, product, 1)
            state.log(f"Popup Shop sold itself for ${revenue:,}")

    for effect, card_type, name in AUTO_SELLERS:
        if board.has_effect(effect, card_type):
            revenue = sell_first_available(state, player_id)
            if revenue:
                state.log(f"{name} auto-sold a Product for ${revenue:,}")


def process_overhead_costs(state: GameState, player_id: str) -> None:
    """Drain capital for every Overhead card on the board."""
    player = state.players[player_id]
    board = player.board
    reduction = 0
    if board.has_effect("load_balancer", CardType.TOOL):
        reduction += 1
    if board.has_effect("patent_portfolio", CardType.TOOL):
        reduction += 1

    for card in board.all_cards():
        if not card.has_keyword("Overhead"):
            continue
        if card.is_product and not card.is_active:
            continue
        cost = max(0, (card.overhead_cost or 1) - reduction)
        if cost == 0:
            continue
        if player.capital >= cost:
            player.capital -= cost
            state.log(f"Paid {cost} overhead for {card.name}")
        elif card.is_product and not board.has_effect("security_patch", CardType.TOOL):
            card.is_active = False
            state.log(f"{card.name} went inactive: could not cover overhead")
        else:
            player.capital = 0
            state.log(f"Overhead for {card.name} drained remaining capital")


def begin_turn(state: GameState, player_id: str) -> None:
    """Run the TurnBegin phase for a player."""
    player = state.players[player_id]
    ctx = ensure_context(state, player_id)

    process_automatic_sales(state, player_id)
    check_game_end(state)
    if state.game_over:
        return

    base = min(state.turn, MAX_CAPITAL)
    if ctx.double_capital_gain:
        base = min(base * 2, MAX_CAPITAL)
        ctx.double_capital_gain = False
        state.log(f"Investor Buzz: starting capital doubled to {base}")
    player.capital = base

    if ctx.recurring_capital_next_turn:
        gain_capital(state, player_id, ctx.recurring_capital_next_turn)
        state.log(f"Deploy Script: +{ctx.recurring_capital_next_turn} capital")
        ctx.recurring_capital_next_turn = 0

    process_overhead_costs(state, player_id)
    draw_cards(state, player_id, CARDS_DRAWN_PER_TURN)

    from ..effects.passives import process_passive_effects
    process_passive_effects(state, player_id)

    player.hero_ability_used = False
    state.log(f"Turn {state.turn}: player {player_id} has {player.capital} capital")


def end_turn(state: GameState) -> None:
    """Run TurnEnd for the current player and hand over to the next seat."""
    player_id = state.current_player
    clear_temporary(state, player_id)
    check_game_end(state)

    order = state.play_order or list(state.players)
    index = order.index(player_id)
    next_index = (index + 1) % len(order)
    if next_index == 0:
        state.turn += 1
    state.current_player = order[next_index]

    if not state.game_over:
        begin_turn(state, state.current_player)


def handle_card_play_effects(state: GameState, player_id: str, card: Card) -> None:
    """Turn bookkeeping and board triggers for a card that was just paid for."""
    board = state.players[player_id].board
    ctx = ensure_context(state, player_id)
    ctx.cards_played_this_turn += 1

    if card.card_type == CardType.ACTION:
        ctx.played_action_this_turn = True
        ctx.played_actions_this_turn += 1
        if board.has_effect("visionary_conference", CardType.TOOL):
            gain_revenue(state, player_id, VISIONARY_CONFERENCE_REVENUE)
            state.log(f"Visionary Conference: +${VISIONARY_CONFERENCE_REVENUE:,}")
        if board.has_effect("innovation_lab", CardType.TOOL):
            draw_cards(state, player_id, 1, "Innovation Lab")
        if card.effect and card.effect != "quick_learner":
            ctx.last_action_effect = card.effect

    elif card.card_type == CardType.TOOL:
        ctx.played_tool_this_turn = True

    elif card.card_type == CardType.PRODUCT:
        if not ctx.first_product_played and board.has_effect("auto_fulfill", CardType.TOOL):
            add_inventory(state, player_id, card, 1)
            state.log(f"Auto-Fulfill Script: +1 inventory to {card.name}")
        if board.has_effect("advisory_board"):
            draw_cards(state, player_id, 1, "Advisory Board")
        ctx.first_product_played = True
