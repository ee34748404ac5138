"""
Hero powers, keyed by hero id.

Costs live in constants.HERO_ABILITY_COSTS; the reducer checks cost,
once-per-turn use and hero_power_requirement before calling a power.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from ..engine_core.choices import ChoiceType, PendingChoice, enqueue, product_choice
from ..engine_core.context import ensure_context
from ..engine_core.operations import draw_cards
from ..engine_core.state import CardType

if TYPE_CHECKING:
    from ..engine_core.state import GameState

ENGAGE_OPTIONS = ["Add 2 inventory to a Product", "All Products gain +1 Appeal this turn"]
DOUBLE_DOWN_OPTIONS = ["Draw 2 cards", "Add +1 inventory to all Products"]


def solo_hustler_grind(state: GameState, player_id: str) -> None:
    """Draw 1. A drawn Product costs 1 less this turn."""
    drawn = draw_cards(state, player_id, 1, "Grind")
    if drawn and drawn[0].card_type == CardType.PRODUCT:
        ensure_context(state, player_id).solo_hustler_discounted_card = drawn[0].card_id
        state.log(f"Grind: {drawn[0].name} costs 1 less this turn")


def brand_builder_engage(state: GameState, player_id: str) -> None:
    enqueue(state.players[player_id], PendingChoice(
        choice_type=ChoiceType.CHOOSE_OPTION,
        effect="brand_builder_engage",
        options=list(ENGAGE_OPTIONS),
        prompt="Engage: choose one",
    ))


def automation_architect_deploy(state: GameState, player_id: str) -> None:
    ensure_context(state, player_id).recurring_capital_next_turn += 1
    state.log("Deploy Script: +1 capital at the start of next turn")


def community_leader_viral(state: GameState, player_id: str) -> None:
    product_choice(
        state.players[player_id],
        "community_leader_viral",
        prompt="Go Viral: choose a Product to copy onto your deck",
    )


def serial_founder_double_down(state: GameState, player_id: str) -> None:
    enqueue(state.players[player_id], PendingChoice(
        choice_type=ChoiceType.CHOOSE_OPTION,
        effect="serial_founder_double_down",
        options=list(DOUBLE_DOWN_OPTIONS),
        prompt="Double Down: choose one",
    ))


HERO_POWER_EFFECTS: dict[str, Callable[[GameState, str], None]] = {
    "solo_hustler": solo_hustler_grind,
    "brand_builder": brand_builder_engage,
    "automation_architect": automation_architect_deploy,
    "community_leader": community_leader_viral,
    "serial_founder": serial_founder_double_down,
}


def hero_power_requirement(state: GameState, player_id: str) -> str | None:
    """Why the hero power cannot be used right now, or None."""
    player = state.players[player_id]
    has_product = bool(player.board.active_products())

    if player.hero == "brand_builder" and not has_product:
        return "Engage requires a Product in play"
    if player.hero == "community_leader":
        if ensure_context(state, player_id).cards_played_this_turn < 2:
            return "Go Viral requires 2 or more cards played this turn"
        if not has_product:
            return "Go Viral requires a Product in play"
    return None
