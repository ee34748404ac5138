"""
Pending Choices - Deferred interactive decisions.

States:
    Idle            the queue is empty
    AwaitingChoice  the front item is exposed to the caller

Effects enqueue choices at the tail. Only the front item can be
resolved; resolution is driven by the transition table in
effects.choice_handlers, where every handler ends in exactly one of
POP or REPLACE so a choice is never applied twice.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .constants import FINISH_CHOICE

if TYPE_CHECKING:
    from .state import Card, PlayerState


class ChoiceType(Enum):
    """Pending choice variants."""
    DISCARD = "discard"
    DESTROY_PRODUCT = "destroy_product"
    CHOOSE_FROM_DRAWN_TO_DISCARD = "choose_from_drawn_to_discard"
    VIEW_DECK_AND_DISCARD = "view_deck_and_discard"
    CHOOSE_OPTION = "choose_option"
    CHOOSE_CARD = "choose_card"


class QueueState(Enum):
    IDLE = "idle"
    AWAITING_CHOICE = "awaiting_choice"


@dataclass
class PendingChoice:
    """
    A choice waiting for player input.

    cards holds snapshots, not live board cards, so indices stay stable
    while the board changes underneath.
    """
    choice_type: ChoiceType
    effect: str
    cards: list[Card] = field(default_factory=list)
    options: list[str] = field(default_factory=list)
    prompt: str = ""
    allow_finish: bool = False  # multi-select may end early with FINISH_CHOICE
    source_card: Card | None = None

    def option_count(self, player: PlayerState) -> int:
        """Number of valid indices for this variant."""
        if self.choice_type == ChoiceType.DISCARD:
            return len(player.hand)
        if self.choice_type == ChoiceType.CHOOSE_OPTION:
            return len(self.options)
        return len(self.cards)

    def is_valid_index(self, player: PlayerState, index: int) -> bool:
        if index == FINISH_CHOICE:
            return self.allow_finish
        return 0 <= index < self.option_count(player)


class Transition(Enum):
    """What happens to the front choice after its handler ran."""
    POP = "pop"
    REPLACE = "replace"


@dataclass
class ChoiceOutcome:
    """Handler result: the transition plus the replacement, if any."""
    transition: Transition = Transition.POP
    replacement: PendingChoice | None = None

    @classmethod
    def pop(cls) -> ChoiceOutcome:
        return cls(Transition.POP)

    @classmethod
    def replace(cls, choice: PendingChoice) -> ChoiceOutcome:
        return cls(Transition.REPLACE, choice)


def queue_state(player: PlayerState) -> QueueState:
    return QueueState.AWAITING_CHOICE if player.pending_choices else QueueState.IDLE


def enqueue(player: PlayerState, choice: PendingChoice) -> None:
    """Append to the tail; never interrupts the choice in progress."""
    player.pending_choices.append(choice)


def peek_current(player: PlayerState) -> PendingChoice | None:
    """Front of the queue, for presentation."""
    return player.pending_choices[0] if player.pending_choices else None


def apply_outcome(player: PlayerState, outcome: ChoiceOutcome) -> None:
    """Pop the front item, then put the replacement (if any) in its place."""
    player.pending_choices.pop(0)
    if outcome.transition == Transition.REPLACE and outcome.replacement is not None:
        player.pending_choices.insert(0, outcome.replacement)


def product_choice(
    player: PlayerState,
    effect: str,
    predicate=None,
    prompt: str = "Choose a Product",
) -> PendingChoice | None:
    """
    Enqueue a choose_card over the player's active products.

    Returns None (and enqueues nothing) when no product qualifies.
    """
    products = [
        p for p in player.board.active_products()
        if predicate is None or predicate(p)
    ]
    if not products:
        return None
    choice = PendingChoice(
        choice_type=ChoiceType.CHOOSE_CARD,
        effect=effect,
        cards=[p.snapshot() for p in products],
        prompt=prompt,
    )
    enqueue(player, choice)
    return choice
