"""
Tests for the turn lifecycle.

Tests:
- Turn begin capital, overhead and draws
- Automatic sales
- Turn end reset and seat rotation
- Win/loss evaluation
"""

from ..engine_core.constants import MAX_CAPITAL, REVENUE_GOAL
from ..engine_core.context import ensure_context
from ..engine_core.turns import begin_turn, check_game_end, end_turn
from .conftest import action_card, build_state, employee_card, product_card, tool_card


class TestBeginTurn:
    """Tests for TurnBegin."""

    def test_base_capital_follows_turn(self):
        state = build_state(turn=4)
        begin_turn(state, "0")
        assert state.players["0"].capital == 4

    def test_base_capital_capped(self):
        state = build_state(turn=12)
        begin_turn(state, "0")
        assert state.players["0"].capital == MAX_CAPITAL

    def test_double_capital(self):
        state = build_state(turn=3)
        ensure_context(state, "0").double_capital_gain = True

        begin_turn(state, "0")

        assert state.players["0"].capital == 6
        assert not ensure_context(state, "0").double_capital_gain

    def test_double_capital_clamped(self):
        state = build_state(turn=7)
        ensure_context(state, "0").double_capital_gain = True
        begin_turn(state, "0")
        assert state.players["0"].capital == MAX_CAPITAL

    def test_recurring_capital_granted_once(self):
        state = build_state(turn=2)
        ensure_context(state, "0").recurring_capital_next_turn = 1

        begin_turn(state, "0")

        assert state.players["0"].capital == 3
        assert ensure_context(state, "0").recurring_capital_next_turn == 0

    def test_draws_one_card(self):
        state = build_state()
        begin_turn(state, "0")
        assert len(state.players["0"].hand) == 1
        assert len(state.players["0"].deck) == 4

    def test_hero_ability_reset(self):
        state = build_state()
        state.players["0"].hero_ability_used = True
        begin_turn(state, "0")
        assert not state.players["0"].hero_ability_used


class TestOverhead:
    """Tests for overhead drains at turn begin."""

    def test_overhead_paid(self):
        server = product_card("rack", keywords=["Overhead"], overhead_cost=1)
        state = build_state(turn=3, products=[server])

        begin_turn(state, "0")

        assert state.players["0"].capital == 2
        assert server.is_active

    def test_unpaid_overhead_deactivates_product(self):
        server = product_card("rack", keywords=["Overhead"], overhead_cost=2)
        state = build_state(turn=1, products=[server])

        begin_turn(state, "0")

        assert not server.is_active
        assert state.players["0"].capital == 1

    def test_security_patch_keeps_product(self):
        server = product_card("rack", keywords=["Overhead"], overhead_cost=2)
        state = build_state(turn=1, products=[server], tools=[tool_card("security_patch")])

        begin_turn(state, "0")

        assert server.is_active
        assert state.players["0"].capital == 0

    def test_load_balancer_reduces_cost(self):
        server = product_card("rack", keywords=["Overhead"], overhead_cost=2)
        state = build_state(turn=3, products=[server], tools=[tool_card("load_balancer")])

        begin_turn(state, "0")

        assert state.players["0"].capital == 2


class TestAutomaticSales:
    """Standing auto-sell behavior."""

    def test_popup_shop_sells_itself(self):
        shop = product_card("popup_shop", revenue=3000, inventory=3, effect="popup_shop")
        state = build_state(products=[shop])

        begin_turn(state, "0")

        assert shop.inventory == 2
        assert state.players["0"].revenue == 3000

    def test_ai_salesbot(self):
        product = product_card(revenue=2000, inventory=1)
        state = build_state(products=[product], employees=[employee_card("ai_salesbot")])

        begin_turn(state, "0")

        assert product.inventory == 0
        assert state.players["0"].revenue == 2000

    def test_auto_sale_can_win(self):
        product = product_card(revenue=5000, inventory=1)
        state = build_state(products=[product], tools=[tool_card("automate_checkout")])
        state.players["0"].revenue = REVENUE_GOAL - 5000

        begin_turn(state, "0")

        assert state.game_over
        assert state.winner
        # Nothing else ran
        assert state.players["0"].hand == []


class TestEndTurn:
    """Tests for TurnEnd and rotation."""

    def test_single_player_advances_turn(self):
        state = build_state()

        end_turn(state)

        assert state.turn == 2
        assert state.current_player == "0"
        assert state.players["0"].capital == 2

    def test_turn_counter_on_wrap_only(self):
        state = build_state(players=2)

        end_turn(state)
        assert state.current_player == "1"
        assert state.turn == 1

        end_turn(state)
        assert state.current_player == "0"
        assert state.turn == 2

    def test_turn_fields_cleared(self):
        state = build_state()
        ctx = ensure_context(state, "0")
        ctx.flash_sale_active = True
        ctx.sold_product_this_turn = True

        end_turn(state)

        assert not ctx.flash_sale_active
        assert ctx.sold_product_last_turn

    def test_no_turn_begin_after_game_over(self):
        state = build_state()
        state.players["0"].revenue = REVENUE_GOAL

        end_turn(state)

        assert state.game_over
        assert state.players["0"].hand == []


class TestGameEnd:
    """Tests for win and loss evaluation."""

    def test_win_at_goal(self):
        state = build_state()
        state.players["0"].revenue = REVENUE_GOAL

        check_game_end(state)

        assert state.game_over
        assert state.winner

    def test_win_check_idempotent(self):
        state = build_state()
        state.players["0"].revenue = REVENUE_GOAL

        check_game_end(state)
        check_game_end(state)

        assert sum("reached" in entry for entry in state.game_log) == 1

    def test_loss_when_stuck(self):
        """Empty deck and a cost-5 card at capital 2."""
        state = build_state(deck=[], hand=[action_card(cost=5)], capital=2)

        check_game_end(state)

        assert state.game_over
        assert not state.winner

    def test_not_lost_with_affordable_card(self):
        state = build_state(deck=[], hand=[action_card(cost=2)], capital=2)
        check_game_end(state)
        assert not state.game_over

    def test_not_lost_with_cards_in_deck(self):
        state = build_state(hand=[action_card(cost=5)], capital=2)
        check_game_end(state)
        assert not state.game_over

    def test_loss_needs_every_player_stuck(self):
        state = build_state(deck=[], hand=[action_card(cost=5)], capital=2, players=2)
        check_game_end(state)
        assert not state.game_over
