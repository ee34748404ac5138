"""
Hero roster.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.constants import HERO_ABILITY_COSTS


@dataclass(frozen=True)
class HeroPower:
    name: str
    description: str
    cost: int
    effect: str


@dataclass(frozen=True)
class Hero:
    hero_id: str
    name: str
    color: str
    power: HeroPower
    flavor_text: str
    playstyle: str


def _power(hero_id: str, name: str, description: str, effect: str) -> HeroPower:
    return HeroPower(name, description, HERO_ABILITY_COSTS[hero_id], effect)


SOLO_HUSTLER = Hero(
    hero_id="solo_hustler",
    name="The Solo Hustler",
    color="Red",
    power=_power(
        "solo_hustler", "Grind",
        "Draw 1 card. If it's a Product, reduce its cost by 1 this turn.",
        "solo_hustler_grind",
    ),
    flavor_text="A first-time merchant juggling everything from design to fulfillment.",
    playstyle="Fast and scrappy, focused on card draw and early tempo.",
)

BRAND_BUILDER = Hero(
    hero_id="brand_builder",
    name="The Brand Builder",
    color="White",
    power=_power(
        "brand_builder", "Engage",
        "Choose one: add 2 inventory to a Product, or all Products gain +1 Appeal this turn.",
        "brand_builder_engage",
    ),
    flavor_text="Believes in design, storytelling, and long-term community.",
    playstyle="Synergy-focused, slow burn with strong product support.",
)

AUTOMATION_ARCHITECT = Hero(
    hero_id="automation_architect",
    name="The Automation Architect",
    color="Blue",
    power=_power(
        "automation_architect", "Deploy Script",
        "Gain 1 recurring Capital next turn.",
        "automation_architect_deploy",
    ),
    flavor_text="A technical founder building tools that run the business for them.",
    playstyle="Builds an engine of passive income over time.",
)

COMMUNITY_LEADER = Hero(
    hero_id="community_leader",
    name="The Community Leader",
    color="Green",
    power=_power(
        "community_leader", "Go Viral",
        "If you played 2+ cards this turn, put a fresh copy of a Product in play "
        "on top of your deck.",
        "community_leader_viral",
    ),
    flavor_text="Uses social media and content creation to drive engagement.",
    playstyle="High variance, explosive combo turns with viral momentum.",
)

SERIAL_FOUNDER = Hero(
    hero_id="serial_founder",
    name="The Serial Founder",
    color="Black",
    power=_power(
        "serial_founder", "Double Down",
        "Choose one: draw 2 cards, or add 1 inventory to every Product.",
        "serial_founder_double_down",
    ),
    flavor_text="Veteran merchant running multiple stores and growth strategies.",
    playstyle="Balanced and flexible with a powerful mid-game.",
)

ALL_HEROES: list[Hero] = [
    SOLO_HUSTLER,
    BRAND_BUILDER,
    AUTOMATION_ARCHITECT,
    COMMUNITY_LEADER,
    SERIAL_FOUNDER,
]

HEROES_BY_ID: dict[str, Hero] = {hero.hero_id: hero for hero in ALL_HEROES}


def get_hero(hero_id: str) -> Hero:
    """Look up a hero. Raises KeyError for unknown ids."""
    return HEROES_BY_ID[hero_id]
