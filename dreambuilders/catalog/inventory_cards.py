"""
Inventory support Actions, available to every hero.
"""

from ..engine_core.state import Card, CardType


def _action(card_id: str, name: str, cost: int, effect: str, text: str, flavor: str) -> Card:
    return Card(
        card_id=card_id,
        name=name,
        cost=cost,
        card_type=CardType.ACTION,
        keywords=["Inventory"],
        text=text,
        effect=effect,
        flavor=flavor,
    )


INVENTORY_SUPPORT_CARDS: list[Card] = [
    _action("bulk_order_deal", "Bulk Order Deal", 2, "add_inventory_to_product",
            "Choose a Product. Add +2 inventory.",
            "Buy low, sell a lot."),
    _action("reorder_notification", "Reorder Notification", 1, "add_inventory_if_empty",
            "Choose a Product with 0 inventory. Add +3 inventory.",
            "Running out? Not on our watch."),
    _action("dropship_restock", "Dropship Restock", 2, "add_inventory_to_low_stock",
            "All Products with less than 2 inventory gain +1.",
            "Your virtual shelves just got fuller."),
    _action("warehouse_expansion", "Warehouse Expansion", 3, "multi_product_inventory_boost",
            "Choose up to 3 Products. Add +1 inventory to each.",
            "More room, more boom."),
    _action("viral_unboxing", "Viral Unboxing Video", 3, "inventory_and_sale_boost",
            "Choose a Product. Add +1 inventory and +1 sale this turn.",
            "Inventory's flying, and so are the views."),
    _action("supplier_collab", "Supplier Collab", 2, "inventory_boost_plus_revenue",
            "Choose a Product. Add +2 inventory. Its next sale earns +1000.",
            "We go further when we go together."),
    _action("fulfillment_integration", "Fulfillment App Integration", 2, "delayed_inventory_boost",
            "At the start of your next 2 turns, add +1 inventory to a random Product.",
            "Bots don't sleep."),
    _action("inventory_forecast_tool", "Inventory Forecast Tool", 1, "draw_and_inventory",
            "Draw 1. Then choose a Product to gain +1 inventory.",
            "Guessing is out. Planning is in."),
    _action("last_minute_restock", "Last-Minute Restock", 1, "simple_inventory_boost",
            "Choose any Product. Add +1 inventory.",
            "Ran out? Not today."),
]
