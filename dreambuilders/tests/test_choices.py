"""
Tests for the pending-choice queue and its transition table.

Tests:
- FIFO order and queue state
- Index validation per variant
- Chained and multi-select choices
- Diagnostics when a chosen card has left play
"""

from ..engine_core.action import Action
from ..engine_core.choices import (
    ChoiceType,
    PendingChoice,
    QueueState,
    enqueue,
    peek_current,
    product_choice,
    queue_state,
)
from ..engine_core.constants import FINISH_CHOICE
from ..engine_core.context import ensure_context
from ..engine_core.reducer import apply_action
from ..effects.choice_handlers import get_choice_handler, resolve_choice
from .conftest import action_card, build_state, product_card


def option_choice(effect, options=("A", "B")) -> PendingChoice:
    return PendingChoice(choice_type=ChoiceType.CHOOSE_OPTION, effect=effect, options=list(options))


class TestQueue:
    """Tests for queue mechanics."""

    def test_idle_until_enqueued(self, empty_state):
        player = empty_state.players["0"]
        assert queue_state(player) == QueueState.IDLE
        assert peek_current(player) is None

        enqueue(player, option_choice("incubator_resources_choice"))

        assert queue_state(player) == QueueState.AWAITING_CHOICE

    def test_fifo_order(self, empty_state):
        player = empty_state.players["0"]
        first = option_choice("incubator_resources_choice")
        second = option_choice("serial_founder_double_down")
        enqueue(player, first)
        enqueue(player, second)

        assert peek_current(player) is first

        result = resolve_choice(empty_state, "0", 0)

        assert result.success
        assert player.pending_choices == [second]

    def test_product_choice_skips_when_nothing_qualifies(self):
        state = build_state(products=[product_card(inventory=3)])
        player = state.players["0"]

        choice = product_choice(player, "add_inventory_if_empty", lambda p: p.inventory == 0)

        assert choice is None
        assert player.pending_choices == []

    def test_product_choice_uses_snapshots(self):
        product = product_card(inventory=1)
        state = build_state(products=[product])

        choice = product_choice(state.players["0"], "simple_inventory_boost")
        product.inventory = 5

        assert choice.cards[0].inventory == 1
        assert choice.cards[0] is not product


class TestValidation:
    """Index validation per variant."""

    def test_option_bounds(self, empty_state):
        enqueue(empty_state.players["0"], option_choice("incubator_resources_choice"))

        assert not resolve_choice(empty_state, "0", 2).success
        assert not resolve_choice(empty_state, "0", -1).success
        assert empty_state.players["0"].pending_choices

    def test_discard_bounds_follow_hand(self):
        state = build_state(hand=[action_card()])
        player = state.players["0"]
        enqueue(player, PendingChoice(choice_type=ChoiceType.DISCARD, effect="midnight_oil_discard"))

        assert not resolve_choice(state, "0", 1).success
        assert resolve_choice(state, "0", 0).success
        assert player.hand == []

    def test_finish_only_when_allowed(self, empty_state):
        enqueue(empty_state.players["0"], option_choice("incubator_resources_choice"))
        result = resolve_choice(empty_state, "0", FINISH_CHOICE)
        assert result.error_code == "INVALID_CHOICE"

    def test_invalid_index_through_reducer_is_atomic(self, empty_state):
        enqueue(empty_state.players["0"], option_choice("incubator_resources_choice"))

        result = apply_action(empty_state, Action.make_choice("0", 5))

        assert not result.success
        assert result.error_code == "INVALID_CHOICE"
        assert len(empty_state.players["0"].pending_choices) == 1


class TestOptionHandlers:

    def test_incubator_capital(self, empty_state):
        enqueue(empty_state.players["0"], option_choice("incubator_resources_choice"))
        resolve_choice(empty_state, "0", 0)
        assert empty_state.players["0"].capital == 1

    def test_incubator_draw(self, empty_state):
        enqueue(empty_state.players["0"], option_choice("incubator_resources_choice"))
        resolve_choice(empty_state, "0", 1)
        assert len(empty_state.players["0"].hand) == 1

    def test_unknown_pair_pops_with_diagnostic(self, empty_state):
        enqueue(empty_state.players["0"], option_choice("mystery"))

        result = resolve_choice(empty_state, "0", 0)

        assert result.success
        assert empty_state.players["0"].pending_choices == []
        assert any(entry.startswith("[diagnostic]") for entry in empty_state.game_log)

    def test_generic_handler_fallback(self):
        choice = PendingChoice(choice_type=ChoiceType.DISCARD, effect="anything")
        assert get_choice_handler(choice) is not None


class TestCardHandlers:

    def test_restock(self):
        product = product_card(inventory=0)
        state = build_state(products=[product])
        product_choice(state.players["0"], "add_inventory_if_empty")

        resolve_choice(state, "0", 0)

        assert product.inventory == 3

    def test_missing_card_gives_diagnostic(self):
        """The chosen Product left play before the choice resolved."""
        product = product_card(inventory=1)
        state = build_state(products=[product])
        product_choice(state.players["0"], "add_inventory_to_product")
        state.players["0"].board.products.clear()

        result = resolve_choice(state, "0", 0)

        assert result.success
        assert state.players["0"].pending_choices == []
        assert any("[diagnostic]" in entry for entry in state.game_log)
        assert product.inventory == 1

    def test_supplier_collab_boosts_next_sale(self):
        product = product_card(inventory=0)
        state = build_state(products=[product])
        product_choice(state.players["0"], "inventory_boost_plus_revenue")

        resolve_choice(state, "0", 0)

        assert product.inventory == 2
        assert ensure_context(state, "0").product_revenue_boosts[product.instance_id] == 1000

    def test_viral_unboxing_restocks_then_sells(self):
        product = product_card(revenue=2000, inventory=0)
        state = build_state(products=[product])
        product_choice(state.players["0"], "inventory_and_sale_boost")

        resolve_choice(state, "0", 0)

        assert product.inventory == 0
        assert state.players["0"].revenue == 2000

    def test_black_friday_sells_up_to_three(self):
        product = product_card(revenue=1000, inventory=5)
        state = build_state(products=[product])
        product_choice(state.players["0"], "black_friday_blitz_sell_product")

        resolve_choice(state, "0", 0)

        assert product.inventory == 2
        assert state.players["0"].revenue == 3000

    def test_drawn_card_discard_by_instance(self):
        keep, toss = action_card("keep"), action_card("toss")
        state = build_state(hand=[keep, toss])
        enqueue(state.players["0"], PendingChoice(
            choice_type=ChoiceType.CHOOSE_FROM_DRAWN_TO_DISCARD,
            effect="ab_test_discard",
            cards=[toss.snapshot(), keep.snapshot()],
        ))

        resolve_choice(state, "0", 0)

        assert state.players["0"].hand == [keep]

    def test_view_deck_discard(self):
        top = action_card("top")
        state = build_state(deck=[action_card("bottom"), top])
        enqueue(state.players["0"], PendingChoice(
            choice_type=ChoiceType.VIEW_DECK_AND_DISCARD,
            effect="analytics_dashboard",
            cards=[top.snapshot()],
        ))

        resolve_choice(state, "0", 0)

        assert [c.card_id for c in state.players["0"].deck] == ["bottom"]


class TestMultiSelect:
    """Warehouse Expansion: up to three picks, may finish early."""

    def play_warehouse(self, products):
        state = build_state(
            hand=[action_card("warehouse", effect="multi_product_inventory_boost")],
            products=products,
        )
        result = apply_action(state, Action.play_card("0", 0))
        assert result.pending_choice.allow_finish
        return result.new_state

    def test_finish_early(self):
        state = self.play_warehouse([product_card("a", inventory=0), product_card("b", inventory=0)])

        state = apply_action(state, Action.make_choice("0", 0)).new_state
        choice = peek_current(state.players["0"])
        assert [c.card_id for c in choice.cards] == ["b"]

        state = apply_action(state, Action.make_choice("0", FINISH_CHOICE)).new_state

        a, b = state.players["0"].board.products
        assert (a.inventory, b.inventory) == (1, 0)
        assert state.players["0"].pending_choices == []

    def test_stops_after_three_picks(self):
        state = self.play_warehouse([product_card(f"p{i}", inventory=0) for i in range(4)])

        for _ in range(3):
            state = apply_action(state, Action.make_choice("0", 0)).new_state

        assert state.players["0"].pending_choices == []
        inventories = [p.inventory for p in state.players["0"].board.products]
        assert inventories == [1, 1, 1, 0]

    def test_stops_when_candidates_run_out(self):
        state = self.play_warehouse([product_card("only", inventory=0)])

        state = apply_action(state, Action.make_choice("0", 0)).new_state

        assert state.players["0"].pending_choices == []
        assert state.players["0"].board.products[0].inventory == 1


class TestChainedChoice:

    def test_engage_chains_into_card_choice(self):
        product = product_card(inventory=0)
        state = build_state(products=[product])
        enqueue(state.players["0"], option_choice("brand_builder_engage"))
        enqueue(state.players["0"], option_choice("incubator_resources_choice"))

        resolve_choice(state, "0", 0)

        front = peek_current(state.players["0"])
        assert front.choice_type == ChoiceType.CHOOSE_CARD
        assert front.effect == "brand_builder_engage_add_inventory"
        assert len(state.players["0"].pending_choices) == 2

        resolve_choice(state, "0", 0)

        assert product.inventory == 2
        assert peek_current(state.players["0"]).effect == "incubator_resources_choice"
