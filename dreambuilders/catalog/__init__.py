"""
Catalog - Card and hero data.

Templates here are never mutated; setup instantiates copies with their
own instance ids.
"""

from __future__ import annotations

from ..engine_core.constants import COPIES_PER_CARD, DECK_SIZE, MAX_COPIES_PER_CARD
from ..engine_core.state import Card
from .decks import HERO_DECKS, make_card
from .expansion import EXPANSION_CARDS
from .heroes import ALL_HEROES, HEROES_BY_ID, Hero, HeroPower, get_hero
from .inventory_cards import INVENTORY_SUPPORT_CARDS
from .products import FEATURED_PRODUCTS, SHARED_PRODUCTS

ALL_CARDS: dict[str, Card] = {
    card.card_id: card
    for card in [
        *(card for deck in HERO_DECKS.values() for card in deck),
        *SHARED_PRODUCTS,
        *INVENTORY_SUPPORT_CARDS,
        *EXPANSION_CARDS,
    ]
}


def get_card_template(card_id: str) -> Card | None:
    """Look up a card template by id."""
    return ALL_CARDS.get(card_id)


def default_deck_templates(hero_id: str) -> list[Card]:
    """The hero's ten cards plus its featured shared Products."""
    if hero_id not in HERO_DECKS:
        raise KeyError(hero_id)
    featured = [ALL_CARDS[card_id] for card_id in FEATURED_PRODUCTS[hero_id]]
    return [*HERO_DECKS[hero_id], *featured]


def build_full_deck(
    templates: list[Card],
    copies: int = COPIES_PER_CARD,
    target_size: int = DECK_SIZE,
    max_copies: int = MAX_COPIES_PER_CARD,
) -> list[Card]:
    """
    Expand templates into a deck list.

    Takes `copies` of each template, then tops up round-robin until
    target_size is reached or every template hits max_copies.
    Returned cards are still templates; instantiate before use.
    """
    deck: list[Card] = []
    counts: dict[str, int] = {}
    for template in templates:
        for _ in range(copies):
            deck.append(template)
        counts[template.card_id] = counts.get(template.card_id, 0) + copies

    while len(deck) < target_size:
        added = False
        for template in templates:
            if len(deck) >= target_size:
                break
            if counts[template.card_id] < max_copies:
                deck.append(template)
                counts[template.card_id] += 1
                added = True
        if not added:
            break

    return deck


__all__ = [
    "ALL_CARDS",
    "ALL_HEROES",
    "HEROES_BY_ID",
    "HERO_DECKS",
    "Hero",
    "HeroPower",
    "SHARED_PRODUCTS",
    "INVENTORY_SUPPORT_CARDS",
    "EXPANSION_CARDS",
    "build_full_deck",
    "default_deck_templates",
    "get_card_template",
    "get_hero",
    "make_card",
]
