"""
Hero starter decks.

Each hero has ten signature cards. setup builds the playable deck from
these plus the hero's featured Products (see catalog.default_deck_templates).
"""

from ..engine_core.state import Card, CardType

ACTION = CardType.ACTION
TOOL = CardType.TOOL
PRODUCT = CardType.PRODUCT
EMPLOYEE = CardType.EMPLOYEE


def make_card(card_id: str, name: str, cost: int, card_type: CardType, effect: str,
               text: str, keywords: list[str] | None = None, flavor: str = "", **product) -> Card:
    return Card(
        card_id=card_id,
        name=name,
        cost=cost,
        card_type=card_type,
        text=text,
        keywords=keywords or [],
        effect=effect,
        flavor=flavor,
        **product,
    )


# ============================================================================
# The Solo Hustler
# ============================================================================

SOLO_HUSTLER_DECK: list[Card] = [
    make_card("sh1", "Hustle Hard", 2, ACTION, "hustle_hard",
              "Draw 2 cards and gain 1 capital.", ["Draw", "Capital"],
              "Sleep is for after the launch."),
    make_card("sh2", "Bootstrap", 1, ACTION, "bootstrap_capital",
              "Gain 2 capital.", ["Capital"],
              "No investors, no problem."),
    make_card("sh3", "DIY Assembly", 2, TOOL, "diy_assembly",
              "Your Products cost 1 less.", ["Synergy"],
              "Glue gun, meet business plan."),
    make_card("sh4", "Fast Pivot", 0, ACTION, "fast_pivot",
              "Destroy one of your Products. Draw 2 cards and your next Product costs 2 less.",
              ["Combo"], "Fail fast. Sell faster."),
    make_card("sh5", "Freelancer Network", 2, EMPLOYEE, "freelancer_network",
              "When played, draw 2 cards.", ["Draw"],
              "A contact for every crisis."),
    make_card("sh6", "Resourceful Solutions", 1, ACTION, "resourceful_solutions",
              "Your next card this turn costs 2 less.", ["Combo"],
              "Duct tape is a business strategy."),
    make_card("sh7", "Scrappy Marketing", 1, ACTION, "scrappy_marketing",
              "If you control a Product, draw 2 cards.", ["Draw", "Synergy"],
              "Guerrilla tactics, real results."),
    make_card("sh8", "Midnight Oil", 1, ACTION, "midnight_oil",
              "Draw 3 cards, then discard 1.", ["Draw"],
              "The best ideas come at 2am."),
    make_card("sh9", "Quick Learner", 0, ACTION, "quick_learner",
              "Play only if you played another Action this turn. Copy its effect.",
              ["Combo"], "Watch once, do forever."),
    make_card("sh10", "Shoestring Budget", 1, TOOL, "shoestring_budget",
              "The first card you play each turn costs 1 less.", ["Capital"],
              "Every penny has a purpose."),
]

# ============================================================================
# The Brand Builder
# ============================================================================

BRAND_BUILDER_DECK: list[Card] = [
    make_card("bb1", "Brand Vision", 1, ACTION, "brand_vision",
              "Draw 1 card. If you control a Product, draw 2 instead.", ["Draw"],
              "Clarity inspires confidence and conversions."),
    make_card("bb2", "Influencer Collab", 3, ACTION, "influencer_collab",
              "If you control a Product, gain 3 capital.", ["Capital", "Synergy"],
              "They post. You profit."),
    make_card("bb3", "Content Calendar", 2, TOOL, "content_calendar",
              "Recurring: Add 1 inventory to your lowest-inventory Product.", ["Recurring"],
              "Schedule it. Forget it. Grow."),
    make_card("bb4", "Viral Post", 2, ACTION, "viral_post",
              "If you played another Action this turn, gain 2 capital. Otherwise, draw 1 card.",
              ["Combo", "Capital"], "One share away from breakout."),
    make_card("bb5", "Email List", 1, TOOL, "email_list",
              "Recurring: If you control 2 or more Products, gain 1 capital.",
              ["Recurring", "Capital"], "The most valuable pixel is the inbox."),
    make_card("bb6", "Visual Identity", 2, TOOL, "visual_identity",
              "Your Products cost 1 less if you control another Tool.", ["Synergy"],
              "Consistency breeds trust."),
    make_card("bb7", "Founder Story", 2, ACTION, "founder_story",
              "Draw 2 cards. If you control an Employee, draw 3 instead.", ["Draw"],
              "People don't just buy what you do. They buy why you do it."),
    make_card("bb8", "Social Proof", 1, ACTION, "social_proof",
              "Next time you gain revenue, gain +25% extra.", ["Synergy"],
              "If others love it, maybe they will too."),
    make_card("bb9", "UGC Explosion", 3, ACTION, "ugc_explosion",
              "Add 3 inventory to each Product you control.", ["Combo", "Inventory"],
              "Your fans become your funnel."),
    make_card("bb10", "Personal Branding", 2, TOOL, "personal_branding",
              "Recurring: Draw 1 card if you played an Action last turn.",
              ["Recurring", "Draw"], "Be your own best marketing channel."),
]

# ============================================================================
# The Automation Architect
# ============================================================================

AUTOMATION_ARCHITECT_DECK: list[Card] = [
    make_card("aa1", "Auto-Fulfill Script", 2, TOOL, "auto_fulfill",
              "The first Product you play each turn gains +1 inventory.", ["Inventory"],
              "Orders ship while you sleep."),
    make_card("aa2", "Optimize Checkout", 2, TOOL, "optimize_checkout",
              "Each Product sale earns +1000.", ["Synergy"],
              "One less click, one more sale."),
    make_card("aa3", "Analytics Dashboard", 3, TOOL, "analytics_dashboard",
              "Recurring: If you sold a Product last turn, look at the top 3 cards of your deck "
              "and discard 1.", ["Recurring"],
              "Numbers don't lie. Mostly."),
    make_card("aa4", "Email Automation", 1, TOOL, "email_automation",
              "Whenever you sell a Product, gain 1 capital.", ["Capital"],
              "Drip campaigns, steady gains."),
    make_card("aa5", "A/B Test", 1, ACTION, "ab_test",
              "Draw 2 cards, then discard 1 of them.", ["Draw"],
              "Variant B wins again."),
    make_card("aa6", "Scale Systems", 3, TOOL, "scale_systems",
              "Recurring: Gain 1 capital for each Tool you control.", ["Recurring", "Capital"],
              "Build once, profit forever."),
    make_card("aa7", "Optimize Workflow", 1, ACTION, "optimize_workflow",
              "Your next card this turn costs 2 less.", ["Combo"],
              "Automate the boring stuff."),
    make_card("aa8", "Custom App", 2, TOOL, "custom_app",
              "When played and at the start of each turn, draw 1 card.", ["Recurring", "Draw"],
              "There's an app for that. You made it."),
    make_card("aa9", "Zap Everything", 1, ACTION, "zap_everything",
              "Gain 2 capital. If you control 3 or more Tools, gain 1 more.", ["Capital", "Synergy"],
              "If this, then profit."),
    make_card("aa10", "Technical Cofounder", 3, EMPLOYEE, "technical_cofounder",
              "Your Tools cost 1 less.", ["Synergy"],
              "Finally, someone who reads the docs."),
]

# ============================================================================
# The Community Leader
# ============================================================================

COMMUNITY_LEADER_DECK: list[Card] = [
    make_card("cl1", "Town Hall", 1, ACTION, "town_hall",
              "Draw 1 card for each Employee you control.", ["Draw", "Synergy"],
              "Everyone gets a voice."),
    make_card("cl2", "Mutual Aid", 1, ACTION, "mutual_aid",
              "Gain 2 capital.", ["Capital"],
              "We rise together."),
    make_card("cl3", "Hype Train", 2, TOOL, "hype_train",
              "Whenever you sell a Product, add 1 inventory to another Product.", ["Inventory"],
              "All aboard."),
    make_card("cl4", "Mentorship Circle", 2, TOOL, "mentorship_circle",
              "Recurring: Gain 1 capital for each Employee you control.", ["Recurring", "Capital"],
              "Lift as you climb."),
    make_card("cl5", "Steady Fans", 1, TOOL, "steady_fans",
              "Recurring: If you played a card last turn, gain 1 capital.", ["Recurring", "Capital"],
              "They show up every time."),
    make_card("cl6", "Shared Spotlight", 2, ACTION, "shared_spotlight",
              "Draw 2 cards. If you played 2 or more cards this turn, your next card costs 1 less.",
              ["Draw", "Combo"], "There's room on stage for everyone."),
    make_card("cl7", "Community Manager", 3, EMPLOYEE, "community_manager",
              "Your Actions and Tools cost 1 less. Recurring: gain revenue from Product appeal.",
              ["Recurring", "Synergy"], "Moderator, cheerleader, therapist."),
    make_card("cl8", "Live AMA", 2, ACTION, "live_ama",
              "Draw 2 cards and gain 1 capital.", ["Draw", "Capital"],
              "Ask me anything. Buy something."),
    make_card("cl9", "Merch Drop", 2, ACTION, "merch_drop",
              "Choose a Product. Add +3 inventory. Your next Product costs 1 less.",
              ["Inventory"], "Limited edition, unlimited hype."),
    make_card("cl10", "Grassroots Launch", 3, ACTION, "grassroots_launch",
              "Add 2 inventory to each Product you control.", ["Inventory", "Combo"],
              "Started from the group chat."),
]

# ============================================================================
# The Serial Founder
# ============================================================================

SERIAL_FOUNDER_DECK: list[Card] = [
    make_card("sf1", "Legacy Playbook", 2, TOOL, "legacy_playbook",
              "Recurring: If you control 2 or more Products, gain 1 capital.",
              ["Recurring", "Capital"], "Same moves, new market."),
    make_card("sf2", "Advisory Board", 2, TOOL, "advisory_board",
              "Whenever you play a Product, draw 1 card.", ["Draw"],
              "Wisdom on retainer."),
    make_card("sf3", "Spin-Off", 3, PRODUCT, "spin_off",
              "Costs 1 less for each Product you control.", ["Synergy"],
              "The side project that ate the company.",
              revenue_per_sale=4000, inventory=3),
    make_card("sf4", "High-Profile Exit", 2, ACTION, "high_profile_exit",
              "Sell all inventory of each Product. Gain 2 capital for each Product sold.",
              ["Capital", "Combo"], "Ring the bell."),
    make_card("sf5", "Market Surge", 1, ACTION, "market_surge",
              "If you control a Product, gain 3 capital. Otherwise, draw 2 cards.",
              ["Capital", "Draw"], "Timing is everything."),
    make_card("sf6", "Serial Operator", 3, EMPLOYEE, "serial_operator",
              "Your Products cost 1 less for each Product you control (max 3).", ["Synergy"],
              "Done this five times before breakfast."),
    make_card("sf7", "Investor Buzz", 2, ACTION, "investor_buzz",
              "The next time you gain capital this turn, double it.", ["Capital"],
              "Everyone wants in."),
    make_card("sf8", "Incubator Resources", 2, TOOL, "incubator_resources",
              "Recurring: Choose one: gain 1 capital or draw 1 card.", ["Recurring"],
              "Free coffee and a whiteboard."),
    make_card("sf9", "Board of Directors", 4, EMPLOYEE, "board_of_directors",
              "Recurring: Gain 2 capital.", ["Recurring", "Capital"],
              "Quarterly meetings, yearly miracles."),
    make_card("sf10", "Black Friday Blitz", 1, ACTION, "black_friday_blitz",
              "Choose a Product. Sell up to 3 of it.", ["Combo"],
              "Doors open at midnight."),
]

HERO_DECKS: dict[str, list[Card]] = {
    "solo_hustler": SOLO_HUSTLER_DECK,
    "brand_builder": BRAND_BUILDER_DECK,
    "automation_architect": AUTOMATION_ARCHITECT_DECK,
    "community_leader": COMMUNITY_LEADER_DECK,
    "serial_founder": SERIAL_FOUNDER_DECK,
}
