"""
Effect Registry - Card behavior keyed by effect id.

Categories and where they run:
- On-play: CARD_EFFECTS, called by the reducer when a card is played
- On-sale: the product's own effect id, called by sell_product
- Passive: board presence only, see passives.py (turn begin),
  engine_core.discounts and engine_core.sales
- Hero powers: hero_powers.HERO_POWER_EFFECTS

Unknown effect ids are a no-op at runtime. validate_effect_ids reports
them when a deck is loaded.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, Iterable

from . import (
    automation_architect,
    brand_builder,
    community_leader,
    expansion,
    inventory_support,
    serial_founder,
    solo_hustler,
)

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState

logger = logging.getLogger(__name__)

CardEffect = Callable[["GameState", str, "Card"], None]

CARD_EFFECTS: dict[str, CardEffect] = {
    **solo_hustler.EFFECTS,
    **brand_builder.EFFECTS,
    **automation_architect.EFFECTS,
    **community_leader.EFFECTS,
    **serial_founder.EFFECTS,
    **inventory_support.EFFECTS,
    **expansion.EFFECTS,
}

# On-sale behavior keyed by the product's own effect id. The shared
# pool's "*_sale" ids are flavor only and have no entry.
SALE_EFFECTS: dict[str, CardEffect] = {}

PASSIVE_EFFECT_IDS: frozenset[str] = frozenset().union(
    solo_hustler.PASSIVES,
    brand_builder.PASSIVES,
    automation_architect.PASSIVES,
    community_leader.PASSIVES,
    serial_founder.PASSIVES,
    expansion.PASSIVES,
) - set(CARD_EFFECTS)


def _is_sale_effect(effect: str) -> bool:
    return effect.endswith("_sale")


def is_known_effect(effect: str | None) -> bool:
    """Whether an effect id means something to the engine."""
    if effect is None:
        return True
    return (
        effect in CARD_EFFECTS
        or effect in SALE_EFFECTS
        or effect in PASSIVE_EFFECT_IDS
        or _is_sale_effect(effect)
    )


def validate_effect_ids(cards: Iterable[Card]) -> list[str]:
    """Card ids whose effect is unknown. Meant for deck loading."""
    return sorted({card.card_id for card in cards if not is_known_effect(card.effect)})


def resolve_card_effect(state: GameState, player_id: str, card: Card) -> None:
    """Run a card's on-play effect. Unknown or passive ids do nothing."""
    effect = CARD_EFFECTS.get(card.effect) if card.effect else None
    if effect is None:
        logger.debug("No on-play effect for %s (%s)", card.name, card.effect)
        return
    effect(state, player_id, card)


def resolve_sale_effect(state: GameState, player_id: str, product: Card) -> None:
    """Run a product's on-sale effect, if it has one."""
    effect = SALE_EFFECTS.get(product.effect) if product.effect else None
    if effect is None:
        return
    effect(state, player_id, product)


__all__ = [
    "CARD_EFFECTS",
    "PASSIVE_EFFECT_IDS",
    "SALE_EFFECTS",
    "is_known_effect",
    "validate_effect_ids",
    "resolve_card_effect",
    "resolve_sale_effect",
]
