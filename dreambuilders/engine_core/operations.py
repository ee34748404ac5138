"""
Resource operations shared by every effect: drawing, capital and revenue.

All functions mutate the given GameState in place and never raise for
game-state reasons (an empty deck simply draws nothing).
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .constants import MAX_CAPITAL
from .context import ensure_context

if TYPE_CHECKING:
    from .state import GameState, Card

logger = logging.getLogger(__name__)


def draw_cards(state: GameState, player_id: str, count: int, reason: str | None = None) -> list[Card]:
    """Draw up to count cards from the end of the deck into the hand."""
    player = state.players[player_id]
    drawn = []
    for _ in range(max(0, count)):
        if not player.deck:
            break
        card = player.deck.pop()
        player.hand.append(card)
        drawn.append(card)
    if reason and drawn:
        state.log(f"{reason}: drew {len(drawn)} card{'s' if len(drawn) != 1 else ''}")
    return drawn


def gain_capital(state: GameState, player_id: str, amount: int) -> int:
    """
    Add capital, clamped to [0, MAX_CAPITAL].

    A pending "double capital gain" doubles the next positive gain and
    is consumed by it. Returns the capital actually added.
    """
    player = state.players[player_id]
    ctx = ensure_context(state, player_id)
    if amount > 0 and ctx.double_capital_gain:
        amount *= 2
        ctx.double_capital_gain = False
        state.log(f"Investor Buzz: capital gain doubled to {amount}")
    before = player.capital
    player.capital = max(0, min(MAX_CAPITAL, player.capital + amount))
    return player.capital - before


def spend_capital(state: GameState, player_id: str, amount: int) -> bool:
    player = state.players[player_id]
    if player.capital >= amount:
        player.capital -= amount
        return True
    return False


def gain_revenue(state: GameState, player_id: str, amount: int) -> int:
    """
    Add revenue. Revenue never decreases, so non-positive amounts are ignored.

    A pending revenue multiplier (Social Proof) is applied once and reset.
    """
    if amount <= 0:
        return 0
    player = state.players[player_id]
    ctx = ensure_context(state, player_id)
    final_amount = amount
    if ctx.next_revenue_gain_multiplier != 1.0:
        final_amount = int(amount * ctx.next_revenue_gain_multiplier)
        percent = round((ctx.next_revenue_gain_multiplier - 1) * 100)
        state.log(f"Revenue boosted by {percent}%: ${amount:,} -> ${final_amount:,}")
        ctx.next_revenue_gain_multiplier = 1.0
    player.revenue += final_amount
    return final_amount


def add_inventory(state: GameState, player_id: str, product: Card, amount: int) -> None:
    """Restock a product and remember it for highlighting."""
    if product.inventory is None:
        return
    product.inventory += amount
    ensure_context(state, player_id).recently_affected_card_ids.append(product.instance_id)


def discard_from_hand(state: GameState, player_id: str, instance_id: str) -> Card | None:
    """Remove a specific card instance from the hand."""
    player = state.players[player_id]
    for i, card in enumerate(player.hand):
        if card.instance_id == instance_id:
            return player.hand.pop(i)
    logger.debug("Card %s not in hand of player %s", instance_id, player_id)
    return None
