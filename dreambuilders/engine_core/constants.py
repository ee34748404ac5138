"""
Game constants shared by the engine, the catalog and the collaborators.
"""

REVENUE_GOAL = 1_000_000
MAX_CAPITAL = 10
STARTING_HAND_SIZE = 3
CARDS_DRAWN_PER_TURN = 1

HERO_ABILITY_COSTS = {
    "solo_hustler": 1,
    "brand_builder": 2,
    "automation_architect": 2,
    "community_leader": 1,
    "serial_founder": 2,
}

# Per-unit revenue modifiers used by the sale pipeline
FLASH_SALE_BONUS = 20_000
APPEAL_REVENUE = 5_000

# Deck building
DECK_SIZE = 30
COPIES_PER_CARD = 2
MAX_COPIES_PER_CARD = 4

# Sentinel choice index: finish a multi-select choice early
FINISH_CHOICE = -1

KEYWORDS = (
    "Recurring",
    "Overhead",
    "Combo",
    "Synergy",
    "Draw",
    "Inventory",
    "Capital",
)
