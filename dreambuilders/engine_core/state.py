"""
Game State - Cards, boards, players and the game container.

Design principles:
- Single writer: the engine mutates one GameState in place
- Serializable: plain dataclasses, deep-copyable for replays
- Observable: every rules event is appended to game_log
- Deterministic: all randomness comes from the injected rng
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
from copy import deepcopy
from enum import Enum
import random


class CardType(Enum):
    """Card types. The value doubles as the board zone's singular name."""
    ACTION = "Action"
    TOOL = "Tool"
    PRODUCT = "Product"
    EMPLOYEE = "Employee"

    @property
    def zone_name(self) -> str:
        """Pluralized board zone name (Tools, Products, Employees)."""
        return f"{self.value}s"


@dataclass
class Card:
    """
    A card instance.

    card_id identifies the template and is shared by every copy;
    instance_id is unique per copy and is how snapshots find their
    live counterpart on the board.
    """
    card_id: str
    name: str
    cost: int
    card_type: CardType
    text: str = ""
    keywords: list[str] = field(default_factory=list)
    effect: str | None = None
    flavor: str = ""
    instance_id: str = ""

    # Product-shaped fields
    inventory: int | None = None
    revenue_per_sale: int | None = None
    appeal: int = 0
    is_active: bool = True
    overhead_cost: int | None = None

    @property
    def is_product(self) -> bool:
        return self.card_type == CardType.PRODUCT

    def has_keyword(self, keyword: str) -> bool:
        return keyword in self.keywords

    def snapshot(self) -> Card:
        """Detached copy for pending choices and read-only projections."""
        return deepcopy(self)

    def instantiate(self, instance_id: str) -> Card:
        """Fresh copy of this template with its own instance id."""
        card = deepcopy(self)
        card.instance_id = instance_id
        return card


@dataclass
class Board:
    """The three persistent zones. Actions never land here."""
    tools: list[Card] = field(default_factory=list)
    products: list[Card] = field(default_factory=list)
    employees: list[Card] = field(default_factory=list)

    def zone_for(self, card_type: CardType) -> list[Card] | None:
        """Zone matching a card type, None for Actions."""
        return {
            CardType.TOOL: self.tools,
            CardType.PRODUCT: self.products,
            CardType.EMPLOYEE: self.employees,
        }.get(card_type)

    def all_cards(self) -> list[Card]:
        return [*self.tools, *self.products, *self.employees]

    def has_effect(self, effect: str, card_type: CardType | None = None) -> bool:
        """Whether any board card (optionally of one type) carries an effect id."""
        return self.find_effect(effect, card_type) is not None

    def find_effect(self, effect: str, card_type: CardType | None = None) -> Card | None:
        """First board card carrying an effect id."""
        cards = self.zone_for(card_type) if card_type else self.all_cards()
        for card in cards or []:
            if card.effect == effect:
                return card
        return None

    def find_instance(self, instance_id: str) -> Card | None:
        for card in self.all_cards():
            if card.instance_id == instance_id:
                return card
        return None

    def active_products(self) -> list[Card]:
        """Products that can be targeted, restocked and sold."""
        return [p for p in self.products if p.is_active and p.inventory is not None]


@dataclass
class PlayerState:
    """
    State for a single seat.

    hand keeps draw order; deck draws from its last element.
    """
    player_id: str
    hero: str
    hand: list[Card] = field(default_factory=list)
    deck: list[Card] = field(default_factory=list)
    board: Board = field(default_factory=Board)
    capital: int = 0
    revenue: int = 0
    hero_ability_used: bool = False
    pending_choices: list[Any] = field(default_factory=list)  # PendingChoice FIFO


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    Moves go through the reducer; turn phases through the
    turn lifecycle functions.
    """
    game_id: str
    players: dict[str, PlayerState] = field(default_factory=dict)
    play_order: list[str] = field(default_factory=list)
    current_player: str = "0"
    turn: int = 1

    # Termination
    game_over: bool = False
    winner: bool = False

    # Per-player transient modifiers, created lazily
    effect_context: dict[str, Any] = field(default_factory=dict)

    # Append-only, human readable
    game_log: list[str] = field(default_factory=list)

    # History (for replay)
    action_history: list[Any] = field(default_factory=list)

    # Random source for determinism
    random_seed: int | None = None
    rng: random.Random = field(default_factory=random.Random)

    @property
    def active_player(self) -> PlayerState:
        """The player whose turn it is."""
        return self.players[self.current_player]

    @property
    def num_players(self) -> int:
        return len(self.players)

    def get_player(self, player_id: str) -> PlayerState | None:
        """Get player by ID."""
        return self.players.get(player_id)

    def log(self, message: str) -> None:
        """Append an entry to the game log."""
        self.game_log.append(message)

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
