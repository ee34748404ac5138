"""
Serial Founder card effects: exits, surges and bulk selling.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.choices import product_choice
from ..engine_core.context import ensure_context
from ..engine_core.operations import draw_cards, gain_capital
from ..engine_core.sales import sell_product

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState


def high_profile_exit(state: GameState, player_id: str, card: Card) -> None:
    """Sell every unit of every Product, then +2 capital per Product sold."""
    sold = 0
    for product in list(state.players[player_id].board.active_products()):
        if product.inventory > 0 and sell_product(state, player_id, product, product.inventory):
            sold += 1
    if sold:
        gain_capital(state, player_id, 2 * sold)
    state.log(f"{card.name}: sold out {sold} Product(s)")


def market_surge(state: GameState, player_id: str, card: Card) -> None:
    if state.players[player_id].board.products:
        gain_capital(state, player_id, 3)
        state.log(f"{card.name}: +3 capital")
    else:
        draw_cards(state, player_id, 2, card.name)


def investor_buzz(state: GameState, player_id: str, card: Card) -> None:
    ensure_context(state, player_id).double_capital_gain = True
    state.log(f"{card.name}: next capital gain is doubled")


def black_friday_blitz(state: GameState, player_id: str, card: Card) -> None:
    choice = product_choice(
        state.players[player_id],
        "black_friday_blitz_sell_product",
        predicate=lambda p: p.inventory > 0,
        prompt=f"{card.name}: choose a Product to sell up to 3 of",
    )
    if choice is None:
        state.log(f"{card.name}: nothing to sell")


def spin_off(state: GameState, player_id: str, card: Card) -> None:
    state.log(f"{card.name} launched with {card.inventory} inventory")


EFFECTS = {
    "high_profile_exit": high_profile_exit,
    "market_surge": market_surge,
    "investor_buzz": investor_buzz,
    "black_friday_blitz": black_friday_blitz,
    "spin_off": spin_off,
}

PASSIVES = {
    "advisory_board",
    "legacy_playbook",
    "serial_operator",
    "incubator_resources",
    "board_of_directors",
}
