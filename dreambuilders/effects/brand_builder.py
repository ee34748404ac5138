"""
Brand Builder card effects: product support and revenue boosts.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.context import ensure_context
from ..engine_core.operations import add_inventory, draw_cards, gain_capital

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState

SOCIAL_PROOF_MULTIPLIER = 1.25


def brand_vision(state: GameState, player_id: str, card: Card) -> None:
    count = 2 if state.players[player_id].board.products else 1
    draw_cards(state, player_id, count, card.name)


def influencer_collab(state: GameState, player_id: str, card: Card) -> None:
    if state.players[player_id].board.products:
        gain_capital(state, player_id, 3)
        state.log(f"{card.name}: +3 capital")


def viral_post(state: GameState, player_id: str, card: Card) -> None:
    # The counter already includes this card
    if ensure_context(state, player_id).played_actions_this_turn > 1:
        gain_capital(state, player_id, 2)
        state.log(f"{card.name}: +2 capital")
    else:
        draw_cards(state, player_id, 1, card.name)


def founder_story(state: GameState, player_id: str, card: Card) -> None:
    count = 3 if state.players[player_id].board.employees else 2
    draw_cards(state, player_id, count, card.name)


def social_proof(state: GameState, player_id: str, card: Card) -> None:
    ensure_context(state, player_id).next_revenue_gain_multiplier = SOCIAL_PROOF_MULTIPLIER
    state.log(f"{card.name}: next revenue gain +25%")


def ugc_explosion(state: GameState, player_id: str, card: Card) -> None:
    for product in state.players[player_id].board.active_products():
        add_inventory(state, player_id, product, 3)
    state.log(f"{card.name}: +3 inventory to each Product")


EFFECTS = {
    "brand_vision": brand_vision,
    "influencer_collab": influencer_collab,
    "viral_post": viral_post,
    "founder_story": founder_story,
    "social_proof": social_proof,
    "ugc_explosion": ugc_explosion,
}

PASSIVES = {"content_calendar", "email_list", "visual_identity", "personal_branding"}
