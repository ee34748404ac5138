"""
Action Generator - Generates all legal moves from a game state.

The action generator is used by:
1. Bots to enumerate possible moves
2. UI to show available actions
3. Tests (every generated move must be accepted by the reducer)
"""

from __future__ import annotations

from .action import Action
from .choices import peek_current
from .constants import FINISH_CHOICE, HERO_ABILITY_COSTS
from .context import ensure_context
from .discounts import get_card_cost
from .reducer import play_restriction
from .state import GameState


def legal_actions(state: GameState, player_id: str | None = None) -> list[Action]:
    """
    Generate every move the reducer would accept for player_id.

    Defaults to the current player. Other seats have no legal moves.
    """
    player_id = player_id or state.current_player
    if state.game_over or player_id != state.current_player:
        return []

    player = state.players[player_id]

    # A pending choice blocks everything else
    choice = peek_current(player)
    if choice is not None:
        actions = [
            Action.make_choice(player_id, i)
            for i in range(choice.option_count(player))
        ]
        if choice.allow_finish:
            actions.append(Action.make_choice(player_id, FINISH_CHOICE))
        return actions

    actions: list[Action] = []
    ctx = ensure_context(state, player_id)

    if ctx.midnight_oil_discard_pending:
        actions.append(Action.trigger_midnight_oil_discard(player_id))
    if ctx.fast_pivot_product_destroy_pending:
        actions.append(Action.trigger_fast_pivot_destroy(player_id))

    for i, card in enumerate(player.hand):
        if play_restriction(state, player_id, card):
            continue
        if get_card_cost(state, player_id, card) <= player.capital:
            actions.append(Action.play_card(player_id, i))

    if can_use_hero_ability(state, player_id):
        actions.append(Action.use_hero_ability(player_id))

    for i, product in enumerate(player.board.products):
        if product.is_active and product.inventory:
            actions.append(Action.sell_product(player_id, i))

    actions.append(Action.end_turn(player_id))
    return actions


def can_use_hero_ability(state: GameState, player_id: str) -> bool:
    from ..effects.hero_powers import HERO_POWER_EFFECTS, hero_power_requirement

    player = state.players[player_id]
    cost = HERO_ABILITY_COSTS.get(player.hero)
    if player.hero_ability_used or cost is None or player.hero not in HERO_POWER_EFFECTS:
        return False
    if player.capital < cost:
        return False
    return hero_power_requirement(state, player_id) is None
