"""
Choice Resolution - Transition table for pending choices.

Each handler receives the front choice and a validated index, applies
its mutation and returns a ChoiceOutcome:

    POP              the choice is done
    REPLACE(choice)  the choice is done and `choice` takes its place at
                     the front (chained or multi-select choices)

resolve_choice performs the queue transition exactly once per call, so
no handler can apply a choice twice.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Callable

from ..engine_core.action import ActionResult
from ..engine_core.choices import (
    ChoiceOutcome,
    ChoiceType,
    PendingChoice,
    apply_outcome,
    peek_current,
)
from ..engine_core.constants import FINISH_CHOICE
from ..engine_core.context import ensure_context
from ..engine_core.operations import add_inventory, discard_from_hand, draw_cards, gain_capital
from ..engine_core.sales import sell_product

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState

logger = logging.getLogger(__name__)

Handler = Callable[["GameState", str, PendingChoice, int], ChoiceOutcome]

MULTI_PRODUCT_MAX_PICKS = 3
BLACK_FRIDAY_MAX_UNITS = 3
SUPPLIER_COLLAB_BONUS = 1000


def resolve_choice(state: GameState, player_id: str, index: int) -> ActionResult:
    """
    Resolve the front pending choice with index.

    Rejected (state untouched) when nothing is pending or the index is
    out of range for the choice's variant.
    """
    player = state.players[player_id]
    choice = peek_current(player)
    if choice is None:
        return ActionResult.failure("No pending choice", "NO_PENDING_CHOICE")
    if not choice.is_valid_index(player, index):
        return ActionResult.failure(
            f"Invalid choice index {index} for {choice.choice_type.value}",
            "INVALID_CHOICE",
        )

    handler = get_choice_handler(choice)
    if handler is None:
        _diagnostic(state, f"No handler for {choice.choice_type.value}/{choice.effect}")
        outcome = ChoiceOutcome.pop()
    else:
        outcome = handler(state, player_id, choice, index)

    apply_outcome(player, outcome)
    return ActionResult.success_with_state(state)


def get_choice_handler(choice: PendingChoice) -> Handler | None:
    """Specific (type, effect) handler first, then the type's generic one."""
    return (
        CHOICE_TRANSITIONS.get((choice.choice_type, choice.effect))
        or CHOICE_TRANSITIONS.get((choice.choice_type, None))
    )


def _diagnostic(state: GameState, message: str) -> None:
    state.log(f"[diagnostic] {message}")
    logger.warning(message)


def _live_product(state: GameState, player_id: str, choice: PendingChoice, index: int) -> Card | None:
    """The board card behind a snapshot, or None (with a diagnostic) if it is gone."""
    snapshot = choice.cards[index]
    live = state.players[player_id].board.find_instance(snapshot.instance_id)
    if live is None:
        _diagnostic(state, f"{snapshot.name} is no longer in play; {choice.effect} skipped")
    return live


# ============================================================================
# Generic handlers by choice type
# ============================================================================

def discard_card(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    card = state.players[player_id].hand.pop(index)
    state.log(f"Discarded {card.name}")
    return ChoiceOutcome.pop()


def discard_drawn_card(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    snapshot = choice.cards[index]
    if discard_from_hand(state, player_id, snapshot.instance_id) is None:
        _diagnostic(state, f"{snapshot.name} is no longer in hand")
    else:
        state.log(f"Discarded {snapshot.name}")
    return ChoiceOutcome.pop()


def discard_from_deck(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    if index == FINISH_CHOICE:
        state.log("Kept all cards on top of the deck")
        return ChoiceOutcome.pop()
    snapshot = choice.cards[index]
    deck = state.players[player_id].deck
    for i, card in enumerate(deck):
        if card.instance_id == snapshot.instance_id:
            deck.pop(i)
            state.log(f"Discarded {snapshot.name} from the top of the deck")
            break
    else:
        _diagnostic(state, f"{snapshot.name} is no longer in the deck")
    return ChoiceOutcome.pop()


def destroy_product(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    live = _live_product(state, player_id, choice, index)
    if live is not None:
        state.players[player_id].board.products.remove(live)
        state.log(f"Destroyed {live.name}")
    return ChoiceOutcome.pop()


# ============================================================================
# Specific handlers
# ============================================================================

def fast_pivot_destroy(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    """Destroy, then draw 2 and the next Product costs 2 less."""
    live = _live_product(state, player_id, choice, index)
    if live is None:
        return ChoiceOutcome.pop()
    state.players[player_id].board.products.remove(live)
    state.log(f"Fast Pivot: destroyed {live.name}")
    draw_cards(state, player_id, 2, "Fast Pivot")
    ensure_context(state, player_id).next_product_discount += 2
    return ChoiceOutcome.pop()


def incubator_resources(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    if index == 0:
        gain_capital(state, player_id, 1)
        state.log("Incubator Resources: +1 capital")
    else:
        draw_cards(state, player_id, 1, "Incubator Resources")
    return ChoiceOutcome.pop()


def double_down(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    if index == 0:
        draw_cards(state, player_id, 2, "Double Down")
    else:
        for product in state.players[player_id].board.active_products():
            add_inventory(state, player_id, product, 1)
        state.log("Double Down: +1 inventory to each Product")
    return ChoiceOutcome.pop()


def engage(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    if index == 1:
        ensure_context(state, player_id).global_appeal_boost += 1
        state.log("Engage: all Products gain +1 appeal this turn")
        return ChoiceOutcome.pop()

    products = state.players[player_id].board.active_products()
    if not products:
        _diagnostic(state, "Engage: no Products left to restock")
        return ChoiceOutcome.pop()
    return ChoiceOutcome.replace(PendingChoice(
        choice_type=ChoiceType.CHOOSE_CARD,
        effect="brand_builder_engage_add_inventory",
        cards=[p.snapshot() for p in products],
        prompt="Engage: choose a Product to gain +2 inventory",
    ))


def _restock(amount: int, label: str) -> Handler:
    """choose_card handler that adds a fixed amount of inventory."""
    def handler(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
        live = _live_product(state, player_id, choice, index)
        if live is not None:
            add_inventory(state, player_id, live, amount)
            state.log(f"{label}: +{amount} inventory to {live.name}")
        return ChoiceOutcome.pop()
    return handler


def supplier_collab(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    live = _live_product(state, player_id, choice, index)
    if live is not None:
        add_inventory(state, player_id, live, 2)
        boosts = ensure_context(state, player_id).product_revenue_boosts
        boosts[live.instance_id] = boosts.get(live.instance_id, 0) + SUPPLIER_COLLAB_BONUS
        state.log(f"Supplier Collab: +2 inventory to {live.name}, next sale +${SUPPLIER_COLLAB_BONUS:,}")
    return ChoiceOutcome.pop()


def viral_unboxing(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    live = _live_product(state, player_id, choice, index)
    if live is not None:
        add_inventory(state, player_id, live, 1)
        sell_product(state, player_id, live, 1)
    return ChoiceOutcome.pop()


def merch_drop(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    live = _live_product(state, player_id, choice, index)
    if live is not None:
        add_inventory(state, player_id, live, 3)
        ensure_context(state, player_id).next_product_discount += 1
        state.log(f"Merch Drop: +3 inventory to {live.name}, next Product costs 1 less")
    return ChoiceOutcome.pop()


def black_friday_blitz(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    live = _live_product(state, player_id, choice, index)
    if live is not None:
        units = min(BLACK_FRIDAY_MAX_UNITS, live.inventory or 0)
        if units > 0:
            sell_product(state, player_id, live, units)
        else:
            state.log(f"Black Friday Blitz: {live.name} is sold out")
    return ChoiceOutcome.pop()


def go_viral(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    """A fresh copy of the chosen Product goes on top of the deck."""
    from ..catalog import get_card_template

    live = _live_product(state, player_id, choice, index)
    if live is None:
        return ChoiceOutcome.pop()
    player = state.players[player_id]
    source = get_card_template(live.card_id) or live
    player.deck.append(source.instantiate(f"{live.instance_id}-viral-t{state.turn}"))
    state.log(f"Go Viral: a copy of {live.name} is on top of your deck")
    return ChoiceOutcome.pop()


def warehouse_expansion(state: GameState, player_id: str, choice: PendingChoice, index: int) -> ChoiceOutcome:
    """One pick of up to three; re-presents the remaining candidates."""
    if index == FINISH_CHOICE:
        state.log("Warehouse Expansion: finished")
        return ChoiceOutcome.pop()

    ctx = ensure_context(state, player_id)
    chosen = choice.cards[index]
    live = _live_product(state, player_id, choice, index)
    if live is not None:
        add_inventory(state, player_id, live, 1)
        ctx.warehouse_expansion_count += 1
        state.log(f"Warehouse Expansion: +1 inventory to {live.name}")

    remaining = [c for c in choice.cards if c.instance_id != chosen.instance_id]
    if ctx.warehouse_expansion_count < MULTI_PRODUCT_MAX_PICKS and remaining:
        return ChoiceOutcome.replace(replace(choice, cards=remaining))
    return ChoiceOutcome.pop()


CHOICE_TRANSITIONS: dict[tuple[ChoiceType, str | None], Handler] = {
    # Generic per type
    (ChoiceType.DISCARD, None): discard_card,
    (ChoiceType.CHOOSE_FROM_DRAWN_TO_DISCARD, None): discard_drawn_card,
    (ChoiceType.VIEW_DECK_AND_DISCARD, None): discard_from_deck,
    (ChoiceType.DESTROY_PRODUCT, None): destroy_product,

    # Specific
    (ChoiceType.DESTROY_PRODUCT, "fast_pivot_destroy"): fast_pivot_destroy,
    (ChoiceType.CHOOSE_OPTION, "incubator_resources_choice"): incubator_resources,
    (ChoiceType.CHOOSE_OPTION, "serial_founder_double_down"): double_down,
    (ChoiceType.CHOOSE_OPTION, "brand_builder_engage"): engage,
    (ChoiceType.CHOOSE_CARD, "add_inventory_to_product"): _restock(2, "Bulk Order Deal"),
    (ChoiceType.CHOOSE_CARD, "add_inventory_if_empty"): _restock(3, "Reorder Notification"),
    (ChoiceType.CHOOSE_CARD, "simple_inventory_boost"): _restock(1, "Last-Minute Restock"),
    (ChoiceType.CHOOSE_CARD, "draw_and_inventory"): _restock(1, "Inventory Forecast Tool"),
    (ChoiceType.CHOOSE_CARD, "brand_builder_engage_add_inventory"): _restock(2, "Engage"),
    (ChoiceType.CHOOSE_CARD, "inventory_boost_plus_revenue"): supplier_collab,
    (ChoiceType.CHOOSE_CARD, "inventory_and_sale_boost"): viral_unboxing,
    (ChoiceType.CHOOSE_CARD, "merch_drop_add_inventory"): merch_drop,
    (ChoiceType.CHOOSE_CARD, "black_friday_blitz_sell_product"): black_friday_blitz,
    (ChoiceType.CHOOSE_CARD, "community_leader_viral"): go_viral,
    (ChoiceType.CHOOSE_CARD, "multi_product_inventory_boost"): warehouse_expansion,
}
