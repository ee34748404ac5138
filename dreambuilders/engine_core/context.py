"""
Effect Context - Per-player transient modifiers.

Every modifier is a typed field whose scope is declared in the field
metadata:
- turn: reset by clear_temporary at end of turn
- memory: cross-turn values copied from this turn at end of turn
- timer: counted down at turn begin, never reset by clear_temporary
- persistent: one-shot bonuses that wait for their trigger across turns

One-shot bonuses are zeroed by whoever consumes them.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GameState

TURN = "turn"
MEMORY = "memory"
TIMER = "timer"
PERSISTENT = "persistent"


def _scoped(scope: str, default=None, factory=None):
    if factory is not None:
        return field(default_factory=factory, metadata={"scope": scope})
    return field(default=default, metadata={"scope": scope})


def _turn(default=None, factory=None):
    return _scoped(TURN, default, factory)


@dataclass
class EffectContext:
    """Typed bag of modifiers for one player."""

    # One-shot bonuses for this turn
    flash_sale_active: bool = _turn(False)
    next_product_bonus: int = _turn(0)
    next_card_discount: int = _turn(0)
    next_product_discount: int = _turn(0)
    extra_card_plays: int = _turn(0)
    double_capital_gain: bool = _turn(False)
    global_appeal_boost: int = _turn(0)
    solo_hustler_discounted_card: str | None = _turn(None)

    # Turn counters and flags
    first_product_played: bool = _turn(False)
    played_action_this_turn: bool = _turn(False)
    played_tool_this_turn: bool = _turn(False)
    played_actions_this_turn: int = _turn(0)
    cards_played_this_turn: int = _turn(0)
    sold_product_this_turn: bool = _turn(False)
    items_sold_this_turn: int = _turn(0)
    warehouse_expansion_count: int = _turn(0)
    recently_affected_card_ids: list[str] = _turn(factory=list)

    # Deferred choices materialized by trigger moves
    midnight_oil_discard_pending: bool = _turn(False)
    fast_pivot_product_destroy_pending: bool = _turn(False)

    # Cross-turn memory
    sold_product_last_turn: bool = _scoped(MEMORY, False)
    cards_played_last_turn: int = _scoped(MEMORY, 0)
    played_action_last_turn: bool = _scoped(MEMORY, False)
    last_action_effect: str | None = _scoped(MEMORY, None)

    # Multi-turn timers
    delayed_inventory_boost_turns: int = _scoped(TIMER, 0)
    recurring_capital_next_turn: int = _scoped(TIMER, 0)

    # Bonuses that survive until used
    next_revenue_gain_multiplier: float = _scoped(PERSISTENT, 1.0)
    product_revenue_boosts: dict[str, int] = _scoped(PERSISTENT, factory=dict)


def scope_of(name: str) -> str:
    """Scope declared for a context field."""
    for f in fields(EffectContext):
        if f.name == name:
            return f.metadata["scope"]
    raise KeyError(name)


_TURN_DEFAULTS = EffectContext()


def ensure_context(state: GameState, player_id: str) -> EffectContext:
    """
    Return the player's context, creating a zero-valued one on first access.

    Idempotent: repeat calls return the same object untouched.
    """
    ctx = state.effect_context.get(player_id)
    if ctx is None:
        ctx = EffectContext()
        state.effect_context[player_id] = ctx
    return ctx


def clear_temporary(state: GameState, player_id: str) -> None:
    """
    End-of-turn reset.

    Records what happened this turn into the memory fields, then
    resets every turn-scoped field. Timers and persistent bonuses
    are left alone.
    """
    ctx = ensure_context(state, player_id)

    ctx.sold_product_last_turn = ctx.sold_product_this_turn
    ctx.cards_played_last_turn = ctx.cards_played_this_turn
    ctx.played_action_last_turn = ctx.played_action_this_turn

    for f in fields(EffectContext):
        if f.metadata["scope"] != TURN:
            continue
        default = getattr(_TURN_DEFAULTS, f.name)
        if isinstance(default, (list, dict)):
            default = type(default)()
        setattr(ctx, f.name, default)
