"""
Solo Hustler card effects: draw, tempo and discounts.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.context import ensure_context
from ..engine_core.operations import draw_cards, gain_capital

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState


def hustle_hard(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 2, card.name)
    gain_capital(state, player_id, 1)


def bootstrap_capital(state: GameState, player_id: str, card: Card) -> None:
    gained = gain_capital(state, player_id, 2)
    state.log(f"{card.name}: +{gained} capital")


def fast_pivot(state: GameState, player_id: str, card: Card) -> None:
    """Defer the destroy choice until the player triggers it."""
    if state.players[player_id].board.products:
        ensure_context(state, player_id).fast_pivot_product_destroy_pending = True
        state.log(f"{card.name}: choose a Product to destroy")
    else:
        state.log(f"{card.name}: no Products to destroy")


def freelancer_network(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 2, card.name)


def resourceful_solutions(state: GameState, player_id: str, card: Card) -> None:
    ensure_context(state, player_id).next_card_discount += 2
    state.log(f"{card.name}: next card costs 2 less")


def scrappy_marketing(state: GameState, player_id: str, card: Card) -> None:
    if state.players[player_id].board.products:
        draw_cards(state, player_id, 2, card.name)
    else:
        state.log(f"{card.name}: no Product in play, nothing drawn")


def midnight_oil(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 3, card.name)
    ensure_context(state, player_id).midnight_oil_discard_pending = True


def quick_learner(state: GameState, player_id: str, card: Card) -> None:
    """Re-run the effect of the last Action played."""
    from . import CARD_EFFECTS

    last = ensure_context(state, player_id).last_action_effect
    effect = CARD_EFFECTS.get(last) if last else None
    if effect is None:
        state.log(f"{card.name}: nothing to copy")
        return
    state.log(f"{card.name}: copying {last}")
    effect(state, player_id, card)


EFFECTS = {
    "hustle_hard": hustle_hard,
    "bootstrap_capital": bootstrap_capital,
    "fast_pivot": fast_pivot,
    "freelancer_network": freelancer_network,
    "resourceful_solutions": resourceful_solutions,
    "scrappy_marketing": scrappy_marketing,
    "midnight_oil": midnight_oil,
    "quick_learner": quick_learner,
}

# Board presence only; handled by discounts
PASSIVES = {"diy_assembly", "shoestring_budget"}
