"""
Card cost reductions.

get_card_discount is read-only so it can be used for affordability
checks and previews; consume_card_discounts clears the one-shot sources
once a card has actually been paid for.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .state import CardType
from .context import ensure_context

if TYPE_CHECKING:
    from .state import GameState, Card


SERIAL_OPERATOR_MAX = 3


def get_card_discount(state: GameState, player_id: str, card: Card) -> int:
    """
    Total discount for playing card now.

    May be negative when a source raises the cost (Quality Materials).
    Never exceeds the card's cost.
    """
    player = state.players[player_id]
    board = player.board
    ctx = ensure_context(state, player_id)
    discount = 0

    # One-shot sources
    discount += ctx.next_card_discount
    if card.card_type == CardType.PRODUCT:
        discount += ctx.next_product_discount
        if ctx.solo_hustler_discounted_card == card.card_id:
            discount += 1

    if card.card_type == CardType.ACTION:
        if board.has_effect("brand_ambassador", CardType.EMPLOYEE):
            discount += 1
        if board.has_effect("customer_support_team", CardType.EMPLOYEE):
            discount += 1

    if card.card_type in (CardType.ACTION, CardType.TOOL):
        if board.has_effect("community_manager", CardType.EMPLOYEE):
            discount += 1

    if card.card_type == CardType.TOOL:
        if board.has_effect("technical_cofounder", CardType.EMPLOYEE):
            discount += 1

    if card.card_type == CardType.PRODUCT:
        product_count = len(board.products)
        if board.has_effect("diy_assembly", CardType.TOOL):
            discount += 1
        visual_identity = board.find_effect("visual_identity", CardType.TOOL)
        if visual_identity and any(t is not visual_identity for t in board.tools):
            discount += 1
        if board.has_effect("serial_operator", CardType.EMPLOYEE):
            discount += min(product_count, SERIAL_OPERATOR_MAX)
        if card.effect == "spin_off":
            discount += product_count
        if board.has_effect("quality_materials", CardType.TOOL):
            discount -= 1

    if card.effect == "meme_magic" and ctx.cards_played_this_turn >= 2:
        discount = card.cost

    if board.has_effect("shoestring_budget", CardType.TOOL) and ctx.cards_played_this_turn == 0:
        discount += 1

    return min(discount, card.cost)


def get_card_cost(state: GameState, player_id: str, card: Card) -> int:
    """Final cost after discounts."""
    return max(0, card.cost - get_card_discount(state, player_id, card))


def consume_card_discounts(state: GameState, player_id: str, card: Card) -> None:
    """Clear the one-shot discount sources used by this play."""
    ctx = ensure_context(state, player_id)
    ctx.next_card_discount = 0
    if card.card_type == CardType.PRODUCT:
        ctx.next_product_discount = 0
        if ctx.solo_hustler_discounted_card == card.card_id:
            ctx.solo_hustler_discounted_card = None
