"""
Sale Resolution - Converts product inventory into revenue.

The pipeline runs in a fixed order because later steps apply to the
running total:

1. base = revenue_per_sale * quantity
2. one-shot per-unit bonuses (flash sale, next product bonus,
   this product's revenue boost)
3. flat per-unit tool bonuses
4. doubling from Scaling Algorithm
5. product appeal
6. global appeal boost from the hero power
7. inventory and revenue update, then the win check
8. the product's own on-sale effect
9. per-sale triggers from board Tools and Employees
10. sale bookkeeping in the effect context

sell_product is re-entrant: every call reads inventory from the product
itself, so an effect that sells again sees the current stock.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .constants import APPEAL_REVENUE, FLASH_SALE_BONUS
from .context import ensure_context
from .operations import add_inventory, draw_cards, gain_capital, gain_revenue
from .state import CardType

if TYPE_CHECKING:
    from .state import Card, GameState

logger = logging.getLogger(__name__)

# Step 3: flat per-unit bonuses by tool effect id
TOOL_SALE_BONUSES = {
    "optimize_checkout": 1000,
    "quality_materials": 2000,
}

AFFILIATE_PROGRAM_REVENUE = 2000


def compute_sale_revenue(state: GameState, player_id: str, product: Card, quantity: int) -> int:
    """Steps 1-6 without consuming anything. Used for previews."""
    return _revenue_total(state, player_id, product, quantity, consume=False)


def _revenue_total(
    state: GameState,
    player_id: str,
    product: Card,
    quantity: int,
    consume: bool,
) -> int:
    board = state.players[player_id].board
    ctx = ensure_context(state, player_id)

    total = (product.revenue_per_sale or 0) * quantity

    if ctx.flash_sale_active:
        total += FLASH_SALE_BONUS * quantity
    if ctx.next_product_bonus:
        total += ctx.next_product_bonus * quantity
        if consume:
            ctx.next_product_bonus = 0
    boost = ctx.product_revenue_boosts.get(product.instance_id, 0)
    if boost:
        total += boost * quantity
        if consume:
            del ctx.product_revenue_boosts[product.instance_id]

    for effect, bonus in TOOL_SALE_BONUSES.items():
        if board.has_effect(effect, CardType.TOOL):
            total += bonus * quantity

    if board.has_effect("scaling_algorithm", CardType.TOOL):
        total *= 2

    if product.appeal > 0:
        total += product.appeal * APPEAL_REVENUE * quantity

    if ctx.global_appeal_boost > 0:
        total += ctx.global_appeal_boost * APPEAL_REVENUE * quantity

    return total


def sell_product(state: GameState, player_id: str, product: Card, quantity: int = 1) -> int:
    """
    Sell quantity units of product.

    Returns the revenue realized, or 0 (with no state change) when the
    product does not hold enough inventory.
    """
    if quantity <= 0 or product.inventory is None or product.inventory < quantity:
        logger.debug(
            "Cannot sell %s of %s: only %s available",
            quantity, product.name, product.inventory or 0,
        )
        return 0

    ctx = ensure_context(state, player_id)
    total = _revenue_total(state, player_id, product, quantity, consume=True)

    product.inventory -= quantity
    realized = gain_revenue(state, player_id, total)
    state.log(f"Sold {quantity} {product.name} for ${realized:,}")

    # A sale can end the game on its own
    from .turns import check_game_end
    check_game_end(state)

    from ..effects import resolve_sale_effect
    resolve_sale_effect(state, player_id, product)

    _run_sale_triggers(state, player_id, product)

    ctx.sold_product_this_turn = True
    ctx.items_sold_this_turn += quantity
    return realized


def _run_sale_triggers(state: GameState, player_id: str, product: Card) -> None:
    """Step 9: fixed per-sale behavior of board Tools and Employees."""
    board = state.players[player_id].board

    if board.has_effect("email_automation", CardType.TOOL):
        gain_capital(state, player_id, 1)
        state.log("Email Automation: +1 capital")

    if board.has_effect("hype_train", CardType.TOOL):
        others = [p for p in board.active_products() if p is not product]
        if others:
            add_inventory(state, player_id, others[0], 1)
            state.log(f"Hype Train: +1 inventory to {others[0].name}")

    if board.has_effect("affiliate_program", CardType.TOOL):
        gain_revenue(state, player_id, AFFILIATE_PROGRAM_REVENUE)
        state.log(f"Affiliate Program: +${AFFILIATE_PROGRAM_REVENUE:,}")

    if board.has_effect("sales_associate", CardType.EMPLOYEE):
        draw_cards(state, player_id, 1, "Sales Associate")

    if board.has_effect("social_media_manager", CardType.EMPLOYEE):
        for other in board.active_products():
            if other is not product:
                other.appeal += 1
        state.log("Social Media Manager: other Products gain +1 appeal")


def sell_first_available(state: GameState, player_id: str) -> int:
    """Sell one unit from the first active product that has stock."""
    for product in state.players[player_id].board.active_products():
        if product.inventory > 0:
            return sell_product(state, player_id, product, 1)
    return 0
