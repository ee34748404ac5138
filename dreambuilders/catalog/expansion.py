"""
Expansion cards.

Not part of any starter deck. They carry the remaining board triggers,
automatic sellers and overhead mechanics, and can be mixed into custom
decks passed to setup_game.
"""

from ..engine_core.state import Card, CardType
from .decks import make_card

ACTION = CardType.ACTION
TOOL = CardType.TOOL
PRODUCT = CardType.PRODUCT
EMPLOYEE = CardType.EMPLOYEE


# ============================================================================
# Tools
# ============================================================================

EXPANSION_TOOLS: list[Card] = [
    make_card("scaling_algorithm", "Scaling Algorithm", 5, TOOL, "scaling_algorithm",
              "Product sales earn double revenue.", ["Synergy"]),
    make_card("automate_checkout", "Automate Checkout", 3, TOOL, "automate_checkout",
              "At the start of your turn, sell 1 unit of a Product."),
    make_card("delivery_drone_fleet", "Delivery Drone Fleet", 4, TOOL, "delivery_drone_fleet",
              "At the start of your turn, sell 1 unit of a Product."),
    make_card("load_balancer", "Load Balancer", 2, TOOL, "load_balancer",
              "Overhead costs are reduced by 1."),
    make_card("patent_portfolio", "Patent Portfolio", 3, TOOL, "patent_portfolio",
              "Overhead costs are reduced by 1."),
    make_card("security_patch", "Security Patch", 1, TOOL, "security_patch",
              "Products are never shut down by unpaid overhead."),
    make_card("visionary_conference", "Visionary Conference", 4, TOOL, "visionary_conference",
              "Whenever you play an Action, gain $25,000 revenue."),
    make_card("innovation_lab", "Innovation Lab", 3, TOOL, "innovation_lab",
              "Whenever you play an Action, draw 1 card.", ["Draw"]),
    make_card("ad_budget_boost", "Ad Budget Boost", 2, TOOL, "ad_budget_boost",
              "Recurring: Gain 1 capital.", ["Recurring", "Capital"]),
    make_card("inventory_forecast", "Inventory Forecast", 2, TOOL, "inventory_forecast",
              "Recurring: Gain 1 capital for each Product you control.", ["Recurring", "Capital"]),
    make_card("quality_materials", "Quality Materials", 2, TOOL, "quality_materials",
              "Products cost 1 more. Each sale earns +2000.", ["Synergy"]),
    make_card("affiliate_program", "Affiliate Program", 2, TOOL, "affiliate_program",
              "Whenever you sell a Product, gain $2,000 revenue."),
    make_card("basic_script", "Basic Script", 1, TOOL, "basic_script",
              "Recurring: Gain 1 capital.", ["Recurring", "Capital"]),
    make_card("ml_model", "ML Model", 4, TOOL, "ml_model",
              "Recurring: Gain 1 capital for each Tool you control.", ["Recurring", "Capital"]),
    make_card("growth_hacking", "Growth Hacking", 3, TOOL, "growth_hacking",
              "Recurring: Rotates between 1 capital, 1 card and $20,000 revenue.", ["Recurring"]),
]

# ============================================================================
# Employees
# ============================================================================

EXPANSION_EMPLOYEES: list[Card] = [
    make_card("ai_salesbot", "AI Salesbot", 3, EMPLOYEE, "ai_salesbot",
              "At the start of your turn, sell 1 unit of a Product."),
    make_card("brand_ambassador", "Brand Ambassador", 2, EMPLOYEE, "brand_ambassador",
              "Your Actions cost 1 less."),
    make_card("customer_support_team", "Customer Support Team", 3, EMPLOYEE, "customer_support_team",
              "Your Actions cost 1 less."),
    make_card("beta_tester_squad", "Beta Tester Squad", 2, EMPLOYEE, "beta_tester_squad",
              "Recurring: If you sold a Product last turn, gain 1 capital.", ["Recurring"]),
    make_card("venture_capitalist", "Venture Capitalist", 5, EMPLOYEE, "venture_capitalist",
              "Recurring: Gain 2 capital.", ["Recurring", "Capital"]),
    make_card("influencer_partnership", "Influencer Partnership", 3, EMPLOYEE, "influencer_partnership",
              "Recurring: Add 1 inventory to your first Product.", ["Recurring", "Inventory"]),
    make_card("warehouse_manager", "Warehouse Manager", 4, EMPLOYEE, "warehouse_manager",
              "Recurring: Add 1 inventory to each Product.", ["Recurring", "Inventory"]),
    make_card("business_development", "Business Development", 3, EMPLOYEE, "business_development",
              "Recurring: Rotates between 1 capital, 1 card and $25,000 revenue.", ["Recurring"]),
    make_card("sales_associate", "Sales Associate", 2, EMPLOYEE, "sales_associate",
              "Whenever you sell a Product, draw 1 card.", ["Draw"]),
    make_card("social_media_manager", "Social Media Manager", 3, EMPLOYEE, "social_media_manager",
              "Whenever you sell a Product, your other Products gain +1 appeal."),
]

# ============================================================================
# Products
# ============================================================================

EXPANSION_PRODUCTS: list[Card] = [
    make_card("popup_shop", "Popup Shop", 2, PRODUCT, "popup_shop",
              "At the start of your turn, sells 1 unit of itself.",
              revenue_per_sale=3000, inventory=3),
    make_card("server_farm", "Server Farm", 4, PRODUCT, "server_farm",
              "Overhead 1. Recurring: gain $10,000 revenue.", ["Overhead", "Recurring"],
              revenue_per_sale=5000, inventory=2, overhead_cost=1),
    make_card("premium_subscription", "Premium Subscription", 3, PRODUCT, "premium_subscription",
              "Overhead 1.", ["Overhead"],
              revenue_per_sale=8000, inventory=4, overhead_cost=1),
]

# ============================================================================
# Actions
# ============================================================================

EXPANSION_ACTIONS: list[Card] = [
    make_card("flash_sale", "Flash Sale", 2, ACTION, "flash_sale",
              "This turn, each Product sale earns +$20,000.", ["Combo"]),
    make_card("launch_hype", "Launch Hype", 2, ACTION, "launch_hype",
              "Your next Product sale earns +$40,000 per unit.", ["Synergy"]),
    make_card("global_launch_event", "Global Launch Event", 4, ACTION, "global_launch_event",
              "Play only if you played 2 or more Actions this turn. Sell 1 unit of each Product.",
              ["Combo"]),
    make_card("meme_magic", "Meme Magic", 3, ACTION, "meme_magic",
              "Costs 0 if you played 2 or more cards this turn. Draw 2 cards.", ["Draw", "Combo"]),
]

EXPANSION_CARDS: list[Card] = [
    *EXPANSION_TOOLS,
    *EXPANSION_EMPLOYEES,
    *EXPANSION_PRODUCTS,
    *EXPANSION_ACTIONS,
]
