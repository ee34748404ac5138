"""
Pytest fixtures for Dream Builders tests.

Most tests build a small hand-made state instead of a shuffled deck so
that every card is known. The card helpers are plain functions so test
modules can import them directly.
"""

import itertools
import random

import pytest

from ..engine_core.state import Card, CardType, GameState, PlayerState

_ids = itertools.count(1)


def _card(card_id, card_type, cost=0, effect=None, name=None, **fields) -> Card:
    return Card(
        card_id=card_id,
        name=name or card_id.replace("_", " ").title(),
        cost=cost,
        card_type=card_type,
        effect=effect,
        instance_id=f"t-{card_id}-{next(_ids)}",
        **fields,
    )


def action_card(card_id="action", cost=0, effect=None, **fields) -> Card:
    return _card(card_id, CardType.ACTION, cost, effect, **fields)


def tool_card(effect, cost=0, **fields) -> Card:
    return _card(effect, CardType.TOOL, cost, effect, **fields)


def employee_card(effect, cost=0, **fields) -> Card:
    return _card(effect, CardType.EMPLOYEE, cost, effect, **fields)


def product_card(card_id="product", cost=0, revenue=1000, inventory=2, effect=None, **fields) -> Card:
    return _card(
        card_id, CardType.PRODUCT, cost, effect,
        revenue_per_sale=revenue, inventory=inventory, **fields,
    )


def filler_deck(size=5) -> list[Card]:
    """Unplayable cards that keep the deck non-empty (no accidental loss)."""
    return [action_card(f"filler_{i}", cost=9) for i in range(size)]


def build_state(
    hero="solo_hustler",
    hand=(),
    deck=None,
    capital=0,
    tools=(),
    products=(),
    employees=(),
    turn=1,
    seed=42,
    players=1,
) -> GameState:
    """
    A state whose seat "0" holds exactly the given cards.

    Extra seats get the same hero with a filler deck and nothing else.
    No turn begin is run.
    """
    state = GameState(game_id="test_game", turn=turn, random_seed=seed, rng=random.Random(seed))
    for seat in range(players):
        player_id = str(seat)
        player = PlayerState(
            player_id=player_id,
            hero=hero,
            deck=filler_deck() if deck is None or seat else list(deck),
        )
        if seat == 0:
            player.hand = list(hand)
            player.capital = capital
            player.board.tools = list(tools)
            player.board.products = list(products)
            player.board.employees = list(employees)
        state.players[player_id] = player
        state.play_order.append(player_id)
    state.current_player = "0"
    return state


@pytest.fixture
def empty_state() -> GameState:
    """Single seat, filler deck, nothing else."""
    return build_state()


@pytest.fixture
def seller_state() -> GameState:
    """Single seat with one Product in play (3000 per sale, 2 in stock)."""
    return build_state(products=[product_card("mug", revenue=3000, inventory=2)])
