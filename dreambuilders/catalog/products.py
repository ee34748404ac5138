"""
Shared Product pool.

Every hero can stock these. Their "*_sale" effect ids are flavor only
and have no on-sale behavior.
"""

from ..engine_core.state import Card, CardType


def _product(card_id: str, name: str, cost: int, revenue: int, inventory: int,
             effect: str, text: str) -> Card:
    return Card(
        card_id=card_id,
        name=name,
        cost=cost,
        card_type=CardType.PRODUCT,
        text=text,
        effect=effect,
        revenue_per_sale=revenue,
        inventory=inventory,
    )


# ============================================================================
# Shared Products
# ============================================================================

SHARED_PRODUCTS: list[Card] = [
    _product("custom_dog_portrait", "Custom Dog Portrait", 3, 3000, 2,
             "custom_dog_portrait_sale", "Every pup deserves a masterpiece."),
    _product("holiday_mug_set", "Holiday Mug Set", 2, 2000, 4,
             "holiday_mug_sale", "Hot cocoa not included, but recommended."),
    _product("minimalist_planner_pdf", "Minimalist Planner PDF", 1, 1000, 5,
             "minimalist_planner_sale", "Declutter your day, digitally."),
    _product("handmade_soy_candle", "Handmade Soy Candle", 2, 3000, 3,
             "soy_candle_sale", "Smells like success."),
    _product("cozy_sweater_bundle", "Cozy Sweater Bundle", 4, 6000, 2,
             "sweater_bundle_sale", "Ugly? Never. Iconic? Always."),
    _product("online_yoga_course", "Online Yoga Course", 3, 4000, 3,
             "yoga_course_sale", "Namaste and hustle."),
    _product("ai_logo_generator", "AI Logo Generator", 3, 4000, 3,
             "ai_logo_sale", "Because your brand deserves a glow-up."),
    _product("name_necklace", "Name Necklace", 2, 3000, 4,
             "name_necklace_sale", "Say my name, say my name."),
    _product("pet_enrichment_box", "Pet Enrichment Box", 3, 5000, 2,
             "pet_box_sale", "For the goodest customers."),
    _product("black_friday_bundle", "Black Friday Bundle", 1, 1000, 5,
             "black_friday_sale", "Cha-ching season is open."),
    _product("self_care_kit", "Self-Care Kit", 2, 3000, 3,
             "self_care_sale", "Recharge your customers and yourself."),
    _product("sticker_pack", "Sticker Pack", 1, 1000, 5,
             "sticker_pack_sale", "Small, sticky joy."),
    _product("custom_tshirt_drop", "Custom T-Shirt Drop", 2, 2000, 4,
             "tshirt_drop_sale", "Wear your hustle."),
    _product("vintage_desk_clock", "Vintage Desk Clock", 3, 4000, 2,
             "desk_clock_sale", "Old-school charm, right on time."),
    _product("coffee_sampler_pack", "Coffee Sampler Pack", 2, 3000, 3,
             "coffee_sampler_sale", "Taste the grind."),
    _product("digital_wedding_invite", "Digital Wedding Invite", 1, 2000, 4,
             "wedding_invite_sale", "Say 'I do' to better design."),
    _product("enamel_pin_collection", "Enamel Pin Collection", 2, 3000, 4,
             "enamel_pin_sale", "Tiny art, major charm."),
    _product("eco_friendly_tote", "Eco-Friendly Tote", 2, 3000, 3,
             "eco_tote_sale", "Save the planet, one checkout at a time."),
    _product("freelancing_ebook", "E-book on Freelancing", 1, 1000, 5,
             "freelancing_ebook_sale", "You're the boss now."),
    _product("custom_phone_case", "Custom Phone Case", 2, 3000, 3,
             "phone_case_sale", "Style that sells itself."),
    _product("digital_art_print", "Digital Art Print", 1, 1000, 4,
             "art_print_sale", "Pixels never looked so pretty."),
    _product("planner_stickers", "Planner Stickers", 1, 1000, 5,
             "planner_stickers_sale", "Organized and adorable."),
    _product("pop_culture_hoodie", "Pop Culture Print Hoodie", 3, 5000, 2,
             "pop_hoodie_sale", "Bold, warm, and way too relatable."),
    _product("reusable_water_bottle", "Reusable Water Bottle", 2, 3000, 4,
             "water_bottle_sale", "Hydration hustle."),
    _product("makeup_brush_set", "Makeup Brush Set", 2, 3000, 3,
             "makeup_brush_sale", "Brush up on your beauty game."),
    _product("subscription_box_trial", "Subscription Box Trial", 2, 3000, 3,
             "subscription_trial_sale", "A surprise in every sale."),
    _product("budget_tracker_printable", "Printable Budget Tracker", 1, 2000, 4,
             "budget_tracker_sale", "Track it, stack it."),
    _product("kids_dinosaur_tee", "Kids' Dinosaur Tee", 2, 3000, 4,
             "dinosaur_tee_sale", "RAWR means 'thank you for your order!'"),
    _product("luxury_bath_bomb_set", "Luxury Bath Bomb Set", 3, 5000, 2,
             "bath_bomb_sale", "Fizz the biz."),
    _product("handwritten_greeting_cards", "Handwritten Greeting Cards", 1, 2000, 4,
             "greeting_cards_sale", "Snail mail never felt so good."),
]

# Products shuffled into every default deck, by hero
FEATURED_PRODUCTS: dict[str, list[str]] = {
    "solo_hustler": [
        "minimalist_planner_pdf", "sticker_pack", "holiday_mug_set",
        "handmade_soy_candle", "custom_dog_portrait",
    ],
    "brand_builder": [
        "name_necklace", "enamel_pin_collection", "self_care_kit",
        "online_yoga_course", "cozy_sweater_bundle",
    ],
    "automation_architect": [
        "ai_logo_generator", "digital_art_print", "freelancing_ebook",
        "custom_phone_case", "online_yoga_course",
    ],
    "community_leader": [
        "custom_tshirt_drop", "kids_dinosaur_tee", "coffee_sampler_pack",
        "eco_friendly_tote", "pet_enrichment_box",
    ],
    "serial_founder": [
        "black_friday_bundle", "subscription_box_trial", "reusable_water_bottle",
        "vintage_desk_clock", "luxury_bath_bomb_set",
    ],
}
