"""
Automation Architect card effects: tools, discounts and deck filtering.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from ..engine_core.choices import ChoiceType, PendingChoice, enqueue
from ..engine_core.context import ensure_context
from ..engine_core.operations import draw_cards, gain_capital

if TYPE_CHECKING:
    from ..engine_core.state import Card, GameState


def ab_test(state: GameState, player_id: str, card: Card) -> None:
    """Draw 2, then discard one of the cards just drawn."""
    drawn = draw_cards(state, player_id, 2, card.name)
    if not drawn:
        return
    enqueue(state.players[player_id], PendingChoice(
        choice_type=ChoiceType.CHOOSE_FROM_DRAWN_TO_DISCARD,
        effect="ab_test_discard",
        cards=[c.snapshot() for c in drawn],
        prompt=f"{card.name}: choose a drawn card to discard",
        source_card=card.snapshot(),
    ))


def optimize_workflow(state: GameState, player_id: str, card: Card) -> None:
    ensure_context(state, player_id).next_card_discount += 2
    state.log(f"{card.name}: next card costs 2 less")


def custom_app(state: GameState, player_id: str, card: Card) -> None:
    draw_cards(state, player_id, 1, card.name)


def zap_everything(state: GameState, player_id: str, card: Card) -> None:
    amount = 2
    if len(state.players[player_id].board.tools) >= 3:
        amount += 1
    gain_capital(state, player_id, amount)
    state.log(f"{card.name}: +{amount} capital")


EFFECTS = {
    "ab_test": ab_test,
    "optimize_workflow": optimize_workflow,
    "custom_app": custom_app,
    "zap_everything": zap_everything,
}

PASSIVES = {
    "auto_fulfill",
    "optimize_checkout",
    "analytics_dashboard",
    "email_automation",
    "scale_systems",
    "technical_cofounder",
}
