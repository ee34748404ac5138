"""
Game Setup - Creates initial game state.

This module handles:
- Building each seat's deck from its hero (or a supplied deck list)
- Unique instance ids per card copy
- Shuffling with an injected random source for determinism
- The starting hand and the first turn begin
"""

from __future__ import annotations
import logging
import random
import uuid

from .constants import STARTING_HAND_SIZE
from .operations import draw_cards
from .state import Card, GameState, PlayerState
from .turns import begin_turn

logger = logging.getLogger(__name__)


def setup_game(
    hero_ids: list[str],
    decks: list[list[Card]] | None = None,
    random_seed: int | None = None,
    rng: random.Random | None = None,
    game_id: str | None = None,
    begin_first_turn: bool = True,
) -> GameState:
    """
    Set up a new game.

    Args:
        hero_ids: One hero per seat; seats are numbered "0", "1", ...
        decks: Card templates per seat (defaults to each hero's deck)
        random_seed: Seed for deterministic shuffling
        rng: Random source; takes precedence over random_seed
        game_id: Identifier (generated when omitted)
        begin_first_turn: Run TurnBegin for seat "0"

    Returns:
        Initial GameState ready for play
    """
    from ..catalog import HERO_DECKS, build_full_deck, default_deck_templates
    from ..effects import validate_effect_ids

    if not hero_ids:
        raise ValueError("At least one hero is required")
    unknown = [h for h in hero_ids if h not in HERO_DECKS]
    if unknown:
        raise ValueError(f"Unknown hero(s): {', '.join(unknown)}")
    if decks is not None and len(decks) != len(hero_ids):
        raise ValueError("Provide exactly one deck per hero")

    rng = rng or random.Random(random_seed)
    state = GameState(
        game_id=game_id or f"dreambuilders_{uuid.uuid4().hex[:8]}",
        random_seed=random_seed,
        rng=rng,
    )

    for seat, hero_id in enumerate(hero_ids):
        player_id = str(seat)
        if decks is None:
            templates = build_full_deck(default_deck_templates(hero_id))
        else:
            templates = decks[seat]

        for card_id in validate_effect_ids(templates):
            logger.warning("Deck for %s references unknown effect on %s", hero_id, card_id)

        deck = instantiate_deck(player_id, templates)
        rng.shuffle(deck)

        state.players[player_id] = PlayerState(player_id=player_id, hero=hero_id, deck=deck)
        state.play_order.append(player_id)
        draw_cards(state, player_id, STARTING_HAND_SIZE)

    state.current_player = state.play_order[0]
    state.log(f"Game started with {', '.join(hero_ids)}")
    logger.info("Created game %s for %d player(s)", state.game_id, len(hero_ids))

    if begin_first_turn:
        begin_turn(state, state.current_player)
    return state


def instantiate_deck(player_id: str, templates: list[Card]) -> list[Card]:
    """Fresh copies of templates with ids like "0-bb1-2"."""
    counts: dict[str, int] = {}
    deck = []
    for template in templates:
        n = counts.get(template.card_id, 0) + 1
        counts[template.card_id] = n
        deck.append(template.instantiate(f"{player_id}-{template.card_id}-{n}"))
    return deck
