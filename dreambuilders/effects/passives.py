"""
Passive / recurring sweeps, run at turn begin.

These are not dispatched through the card registry. Each sweep scans
the board for the effect ids it knows and applies their fixed behavior,
since most of them depend on board composition (lowest inventory,
Tools controlled, Employees controlled).
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from ..engine_core.choices import ChoiceType, PendingChoice, enqueue
from ..engine_core.context import ensure_context
from ..engine_core.operations import add_inventory, draw_cards, gain_capital, gain_revenue
from ..engine_core.constants import APPEAL_REVENUE
from ..engine_core.state import CardType

if TYPE_CHECKING:
    from ..engine_core.state import GameState

logger = logging.getLogger(__name__)

TOOL = CardType.TOOL
EMPLOYEE = CardType.EMPLOYEE

INCUBATOR_OPTIONS = ["Gain 1 Capital", "Draw 1 Card"]
ANALYTICS_DECK_PEEK = 3
SERVER_FARM_REVENUE = 10_000
GROWTH_HACKING_REVENUE = 20_000
BUSINESS_DEVELOPMENT_REVENUE = 25_000


def process_passive_effects(state: GameState, player_id: str) -> None:
    """Run every sweep for the player. The hero-specific ones key off board cards, not the hero."""
    process_shared_passives(state, player_id)
    process_brand_builder_passives(state, player_id)
    process_automation_architect_passives(state, player_id)
    process_community_leader_passives(state, player_id)
    process_serial_founder_passives(state, player_id)
    # Last: every draw above has already come off the deck
    process_analytics_dashboard(state, player_id)


def _count(cards, effect: str) -> int:
    return sum(1 for c in cards if c.effect == effect)


def process_brand_builder_passives(state: GameState, player_id: str) -> None:
    board = state.players[player_id].board
    ctx = ensure_context(state, player_id)

    for _ in range(_count(board.tools, "content_calendar")):
        products = board.active_products()
        if products:
            lowest = min(products, key=lambda p: p.inventory)
            add_inventory(state, player_id, lowest, 1)
            state.log(f"Content Calendar: +1 inventory to {lowest.name}")

    if board.has_effect("email_list", TOOL) and len(board.products) >= 2:
        gain_capital(state, player_id, 1)
        state.log("Email List: +1 capital")

    if board.has_effect("personal_branding", TOOL) and ctx.played_action_last_turn:
        draw_cards(state, player_id, 1, "Personal Branding")


def process_automation_architect_passives(state: GameState, player_id: str) -> None:
    player = state.players[player_id]
    board = player.board
    tool_count = len(board.tools)

    for _ in range(_count(board.tools, "scale_systems")):
        gain_capital(state, player_id, tool_count)
        state.log(f"Scale Systems: +{tool_count} capital")

    if board.has_effect("custom_app", TOOL):
        draw_cards(state, player_id, 1, "Custom App")

    if board.has_effect("basic_script", TOOL):
        gain_capital(state, player_id, 1)
        state.log("Basic Script: +1 capital")

    if board.has_effect("ml_model", TOOL):
        gain_capital(state, player_id, tool_count)
        state.log(f"ML Model: +{tool_count} capital")

    for product in board.products:
        if product.effect == "server_farm" and product.is_active:
            gain_revenue(state, player_id, SERVER_FARM_REVENUE)
            state.log(f"Server Farm: +${SERVER_FARM_REVENUE:,}")


def process_analytics_dashboard(state: GameState, player_id: str) -> None:
    """Peek at the top of the deck after the sale turn; discard one or keep all."""
    player = state.players[player_id]
    ctx = ensure_context(state, player_id)
    if not (player.board.has_effect("analytics_dashboard", TOOL) and ctx.sold_product_last_turn and player.deck):
        return
    top = player.deck[-ANALYTICS_DECK_PEEK:]
    enqueue(player, PendingChoice(
        choice_type=ChoiceType.VIEW_DECK_AND_DISCARD,
        effect="analytics_dashboard",
        cards=[c.snapshot() for c in reversed(top)],
        prompt="Analytics Dashboard: discard a card from the top of your deck, or keep all",
        allow_finish=True,
    ))


def process_community_leader_passives(state: GameState, player_id: str) -> None:
    board = state.players[player_id].board
    ctx = ensure_context(state, player_id)

    if board.has_effect("mentorship_circle", TOOL) and board.employees:
        gain_capital(state, player_id, len(board.employees))
        state.log(f"Mentorship Circle: +{len(board.employees)} capital")

    if board.has_effect("steady_fans", TOOL) and ctx.cards_played_last_turn > 0:
        gain_capital(state, player_id, 1)
        state.log("Steady Fans: +1 capital")

    if board.has_effect("community_manager", EMPLOYEE):
        appeal = sum(p.appeal for p in board.active_products())
        if appeal > 0:
            gain_revenue(state, player_id, appeal * APPEAL_REVENUE)
            state.log(f"Community Manager: +${appeal * APPEAL_REVENUE:,} from appeal")


def process_serial_founder_passives(state: GameState, player_id: str) -> None:
    player = state.players[player_id]
    board = player.board

    if board.has_effect("legacy_playbook", TOOL) and len(board.products) >= 2:
        gain_capital(state, player_id, 1)
        state.log("Legacy Playbook: +1 capital")

    if board.has_effect("board_of_directors", EMPLOYEE):
        gain_capital(state, player_id, 2)
        state.log("Board of Directors: +2 capital")

    if board.has_effect("incubator_resources", TOOL):
        enqueue(player, PendingChoice(
            choice_type=ChoiceType.CHOOSE_OPTION,
            effect="incubator_resources_choice",
            options=list(INCUBATOR_OPTIONS),
            prompt="Incubator Resources: choose one",
        ))

    if board.has_effect("growth_hacking", TOOL):
        phase = state.turn % 3
        if phase == 0:
            gain_capital(state, player_id, 1)
            state.log("Growth Hacking: +1 capital")
        elif phase == 1:
            draw_cards(state, player_id, 1, "Growth Hacking")
        else:
            gain_revenue(state, player_id, GROWTH_HACKING_REVENUE)
            state.log(f"Growth Hacking: +${GROWTH_HACKING_REVENUE:,}")

    if board.has_effect("business_development", EMPLOYEE):
        phase = state.turn % 3
        if phase == 1:
            gain_capital(state, player_id, 1)
            state.log("Business Development: +1 capital")
        elif phase == 2:
            draw_cards(state, player_id, 1, "Business Development")
        else:
            gain_revenue(state, player_id, BUSINESS_DEVELOPMENT_REVENUE)
            state.log(f"Business Development: +${BUSINESS_DEVELOPMENT_REVENUE:,}")


def process_shared_passives(state: GameState, player_id: str) -> None:
    board = state.players[player_id].board
    ctx = ensure_context(state, player_id)

    if ctx.delayed_inventory_boost_turns > 0:
        products = board.active_products()
        if products:
            target = state.rng.choice(products)
            add_inventory(state, player_id, target, 1)
            state.log(f"Fulfillment App Integration: +1 inventory to {target.name}")
        ctx.delayed_inventory_boost_turns -= 1

    if board.has_effect("ad_budget_boost", TOOL):
        gain_capital(state, player_id, 1)
        state.log("Ad Budget Boost: +1 capital")

    if board.has_effect("inventory_forecast", TOOL) and board.products:
        gain_capital(state, player_id, len(board.products))
        state.log(f"Inventory Forecast: +{len(board.products)} capital")

    if board.has_effect("beta_tester_squad", EMPLOYEE) and ctx.sold_product_last_turn:
        gain_capital(state, player_id, 1)
        state.log("Beta Tester Squad: +1 capital")

    if board.has_effect("venture_capitalist", EMPLOYEE):
        gain_capital(state, player_id, 2)
        state.log("Venture Capitalist: +2 capital")

    if board.has_effect("influencer_partnership", EMPLOYEE):
        products = board.active_products()
        if products:
            add_inventory(state, player_id, products[0], 1)
            state.log(f"Influencer Partnership: +1 inventory to {products[0].name}")

    if board.has_effect("warehouse_manager", EMPLOYEE):
        for product in board.active_products():
            add_inventory(state, player_id, product, 1)
        state.log("Warehouse Manager: +1 inventory to each Product")

    logger.debug("Shared passives done for player %s", player_id)
