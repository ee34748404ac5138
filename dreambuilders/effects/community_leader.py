"""
Community Leader card effects: employees, combos and group restocks.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.choices import product_choice
from ..engine_core.context import ensure_context
from ..engine_core.operations import add_inventory, draw_cards, gain_capital

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState


def town_hall(state: GameState, player_id: str, card: Card) -> None:
    employees = len(state.players[player_id].board.employees)
    if employees:
        draw_cards(state, player_id, employees, card.name)
    else:
        state.log(f"{card.name}: no Employees, nothing drawn")


def mutual_aid(state: GameState, player_id: str, card: Card) -> None:
    gain_capital(state, player_id, 2)
    state.log(f"{card.name}: +2 capital")


def shared_spotlight(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 2, card.name)
    ctx = ensure_context(state, player_id)
    if ctx.cards_played_this_turn >= 2:
        ctx.next_card_discount += 1
        state.log(f"{card.name}: next card costs 1 less")


def live_ama(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 2, card.name)
    gain_capital(state, player_id, 1)


def merch_drop(state: GameState, player_id: str, card: Card) -> None:
    choice = product_choice(
        state.players[player_id],
        "merch_drop_add_inventory",
        prompt=f"{card.name}: choose a Product to gain +3 inventory",
    )
    if choice is None:
        state.log(f"{card.name}: no Products to restock")


def grassroots_launch(state: GameState, player_id: str, card: Card) -> None:
    for product in state.players[player_id].board.active_products():
        add_inventory(state, player_id, product, 2)
    state.log(f"{card.name}: +2 inventory to each Product")


EFFECTS = {
    "town_hall": town_hall,
    "mutual_aid": mutual_aid,
    "shared_spotlight": shared_spotlight,
    "live_ama": live_ama,
    "merch_drop": merch_drop,
    "grassroots_launch": grassroots_launch,
}

PASSIVES = {"hype_train", "mentorship_circle", "steady_fans", "community_manager"}
