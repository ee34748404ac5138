"""
Inventory support effects shared by every hero.

Most of these only enqueue a choose_card; the restock itself happens in
choice_handlers once the player picks a Product.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.choices import ChoiceType, PendingChoice, enqueue, product_choice
from ..engine_core.context import ensure_context
from ..engine_core.operations import add_inventory, draw_cards

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState

FULFILLMENT_TURNS = 2
LOW_STOCK_THRESHOLD = 2


def _choose_product(effect: str, prompt: str, predicate=None):
    def resolve(state: GameState, player_id: str, card: Card) -> None:
        choice = product_choice(state.players[player_id], effect, predicate, f"{card.name}: {prompt}")
        if choice is None:
            state.log(f"{card.name}: no eligible Products")
    resolve.__name__ = effect
    return resolve


add_inventory_to_product = _choose_product(
    "add_inventory_to_product", "choose a Product to gain +2 inventory")
add_inventory_if_empty = _choose_product(
    "add_inventory_if_empty", "choose an empty Product to gain +3 inventory",
    lambda p: p.inventory == 0)
inventory_and_sale_boost = _choose_product(
    "inventory_and_sale_boost", "choose a Product to restock and sell")
inventory_boost_plus_revenue = _choose_product(
    "inventory_boost_plus_revenue", "choose a Product to gain +2 inventory and +1000 next sale")
simple_inventory_boost = _choose_product(
    "simple_inventory_boost", "choose a Product to gain +1 inventory")


def add_inventory_to_low_stock(state: GameState, player_id: str, card: Card) -> None:
    restocked = 0
    for product in state.players[player_id].board.active_products():
        if product.inventory < LOW_STOCK_THRESHOLD:
            add_inventory(state, player_id, product, 1)
            restocked += 1
    state.log(f"{card.name}: restocked {restocked} Product(s)")


def multi_product_inventory_boost(state: GameState, player_id: str, card: Card) -> None:
    """Up to three picks, one at a time; may finish early."""
    player = state.players[player_id]
    products = player.board.active_products()
    if not products:
        state.log(f"{card.name}: no Products to restock")
        return
    ensure_context(state, player_id).warehouse_expansion_count = 0
    enqueue(player, PendingChoice(
        choice_type=ChoiceType.CHOOSE_CARD,
        effect="multi_product_inventory_boost",
        cards=[p.snapshot() for p in products],
        prompt=f"{card.name}: choose a Product to gain +1 inventory (up to 3)",
        allow_finish=True,
        source_card=card.snapshot(),
    ))


def delayed_inventory_boost(state: GameState, player_id: str, card: Card) -> None:
    ensure_context(state, player_id).delayed_inventory_boost_turns = FULFILLMENT_TURNS
    state.log(f"{card.name}: restocks a random Product for the next {FULFILLMENT_TURNS} turns")


def draw_and_inventory(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 1, card.name)
    product_choice(
        state.players[player_id],
        "draw_and_inventory",
        prompt=f"{card.name}: choose a Product to gain +1 inventory",
    )


EFFECTS = {
    "add_inventory_to_product": add_inventory_to_product,
    "add_inventory_if_empty": add_inventory_if_empty,
    "add_inventory_to_low_stock": add_inventory_to_low_stock,
    "multi_product_inventory_boost": multi_product_inventory_boost,
    "inventory_and_sale_boost": inventory_and_sale_boost,
    "inventory_boost_plus_revenue": inventory_boost_plus_revenue,
    "delayed_inventory_boost": delayed_inventory_boost,
    "draw_and_inventory": draw_and_inventory,
    "simple_inventory_boost": simple_inventory_boost,
}
