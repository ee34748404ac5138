"""
Expansion effects: sale modifiers and combo finishers.

Expansion Tools and Employees act through board presence (sales,
discounts, turn begin) and have no on-play effect.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.context import ensure_context
from ..engine_core.operations import draw_cards
from ..engine_core.sales import sell_product

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState

LAUNCH_HYPE_BONUS = 40_000


def flash_sale(state: GameState, player_id: str, card: Card) -> None:
    ensure_context(state, player_id).flash_sale_active = True
    state.log(f"{card.name}: sales earn +$20,000 per unit this turn")


def launch_hype(state: GameState, player_id: str, card: Card) -> None:
    ensure_context(state, player_id).next_product_bonus += LAUNCH_HYPE_BONUS
    state.log(f"{card.name}: next sale earns +${LAUNCH_HYPE_BONUS:,} per unit")


def global_launch_event(state: GameState, player_id: str, card: Card) -> None:
    total = 0
    for product in list(state.players[player_id].board.active_products()):
        if product.inventory > 0:
            total += sell_product(state, player_id, product, 1)
    state.log(f"{card.name}: earned ${total:,}")


def meme_magic(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 2, card.name)


EFFECTS = {
    "flash_sale": flash_sale,
    "launch_hype": launch_hype,
    "global_launch_event": global_launch_event,
    "meme_magic": meme_magic,
}

PASSIVES = {
    "scaling_algorithm",
    "automate_checkout",
    "delivery_drone_fleet",
    "load_balancer",
    "patent_portfolio",
    "security_patch",
    "visionary_conference",
    "innovation_lab",
    "ad_budget_boost",
    "inventory_forecast",
    "quality_materials",
    "affiliate_program",
    "basic_script",
    "ml_model",
    "growth_hacking",
    "ai_salesbot",
    "brand_ambassador",
    "customer_support_team",
    "beta_tester_squad",
    "venture_capitalist",
    "influencer_partnership",
    "warehouse_manager",
    "business_development",
    "sales_associate",
    "social_media_manager",
    "popup_shop",
    "server_farm",
    "premium_subscription",
}
