"""
Tests for sale resolution.

Tests:
- Preconditions and return values
- The revenue pipeline order
- One-shot bonuses
- Win on sale
- Per-sale triggers
"""

from ..engine_core.constants import REVENUE_GOAL
from ..engine_core.context import ensure_context
from ..engine_core.sales import compute_sale_revenue, sell_first_available, sell_product
from ..engine_core.turns import check_game_end
from .conftest import build_state, employee_card, product_card, tool_card


class TestSellProduct:
    """Tests for the basic sale contract."""

    def test_sale_from_stock(self, seller_state):
        """A 3000 Product with 2 in stock sells one unit for 3000."""
        product = seller_state.players["0"].board.products[0]

        revenue = sell_product(seller_state, "0", product, 1)

        assert revenue == 3000
        assert product.inventory == 1
        assert seller_state.players["0"].revenue == 3000
        ctx = ensure_context(seller_state, "0")
        assert ctx.sold_product_this_turn
        assert ctx.items_sold_this_turn == 1

    def test_empty_product_sells_nothing(self):
        product = product_card(inventory=0)
        state = build_state(products=[product])

        revenue = sell_product(state, "0", product, 1)

        assert revenue == 0
        assert product.inventory == 0
        assert state.players["0"].revenue == 0
        assert state.game_log == []
        assert not ensure_context(state, "0").sold_product_this_turn

    def test_quantity_above_stock_sells_nothing(self, seller_state):
        product = seller_state.players["0"].board.products[0]

        assert sell_product(seller_state, "0", product, 3) == 0
        assert product.inventory == 2

    def test_multiple_units(self, seller_state):
        product = seller_state.players["0"].board.products[0]

        assert sell_product(seller_state, "0", product, 2) == 6000
        assert product.inventory == 0

    def test_sell_first_available_skips_empty(self):
        empty = product_card("empty", inventory=0)
        stocked = product_card("stocked", revenue=2000, inventory=1)
        state = build_state(products=[empty, stocked])

        assert sell_first_available(state, "0") == 2000
        assert stocked.inventory == 0


class TestRevenuePipeline:
    """Tests for the ordered revenue computation."""

    def test_full_pipeline_order(self):
        """
        1000 base, +20000 flash, +1000 checkout = 22000,
        doubled = 44000, +5000 appeal, +5000 global appeal = 54000.
        """
        product = product_card(revenue=1000, inventory=1, appeal=1)
        state = build_state(
            products=[product],
            tools=[tool_card("optimize_checkout"), tool_card("scaling_algorithm")],
        )
        ctx = ensure_context(state, "0")
        ctx.flash_sale_active = True
        ctx.global_appeal_boost = 1

        assert sell_product(state, "0", product, 1) == 54_000

    def test_tool_bonuses_stack(self):
        product = product_card(revenue=1000, inventory=2)
        state = build_state(
            products=[product],
            tools=[tool_card("optimize_checkout"), tool_card("quality_materials")],
        )

        assert sell_product(state, "0", product, 2) == 2 * (1000 + 1000 + 2000)

    def test_preview_does_not_consume(self):
        product = product_card(revenue=1000, inventory=1)
        state = build_state(products=[product])
        ensure_context(state, "0").next_product_bonus = 40_000

        assert compute_sale_revenue(state, "0", product, 1) == 41_000
        assert ensure_context(state, "0").next_product_bonus == 40_000
        assert product.inventory == 1


class TestOneShotBonuses:
    """One-shot bonuses apply to exactly one sale."""

    def test_next_product_bonus_consumed(self):
        product = product_card(revenue=1000, inventory=2)
        state = build_state(products=[product])
        ensure_context(state, "0").next_product_bonus = 40_000

        first = sell_product(state, "0", product, 1)
        second = sell_product(state, "0", product, 1)

        assert first == 41_000
        assert second == 1000

    def test_product_revenue_boost_is_per_product(self):
        boosted = product_card("boosted", revenue=1000, inventory=2)
        other = product_card("other", revenue=1000, inventory=1)
        state = build_state(products=[boosted, other])
        ensure_context(state, "0").product_revenue_boosts[boosted.instance_id] = 1000

        assert sell_product(state, "0", other, 1) == 1000
        assert sell_product(state, "0", boosted, 1) == 2000
        assert sell_product(state, "0", boosted, 1) == 1000

    def test_social_proof_multiplies_sale(self):
        product = product_card(revenue=4000, inventory=1)
        state = build_state(products=[product])
        ensure_context(state, "0").next_revenue_gain_multiplier = 1.25

        assert sell_product(state, "0", product, 1) == 5000
        assert state.players["0"].revenue == 5000


class TestWinOnSale:
    """A sale can end the game."""

    def test_sale_reaching_goal_wins(self, seller_state):
        seller_state.players["0"].revenue = REVENUE_GOAL - 1000
        product = seller_state.players["0"].board.products[0]

        sell_product(seller_state, "0", product, 1)

        assert seller_state.game_over
        assert seller_state.winner

    def test_win_is_not_undone(self, seller_state):
        """Once won, later checks keep the result."""
        seller_state.players["0"].revenue = REVENUE_GOAL
        check_game_end(seller_state)
        seller_state.players["0"].deck.clear()
        seller_state.players["0"].hand.clear()

        check_game_end(seller_state)

        assert seller_state.game_over
        assert seller_state.winner


class TestSaleTriggers:
    """Per-sale triggers from board cards."""

    def test_affiliate_program(self, seller_state):
        seller_state.players["0"].board.tools.append(tool_card("affiliate_program"))
        product = seller_state.players["0"].board.products[0]

        sell_product(seller_state, "0", product, 1)

        assert seller_state.players["0"].revenue == 3000 + 2000

    def test_email_automation(self, seller_state):
        seller_state.players["0"].board.tools.append(tool_card("email_automation"))
        sell_product(seller_state, "0", seller_state.players["0"].board.products[0], 1)
        assert seller_state.players["0"].capital == 1

    def test_hype_train_restocks_another_product(self):
        sold = product_card("sold", inventory=1)
        other = product_card("other", inventory=0)
        state = build_state(products=[sold, other], tools=[tool_card("hype_train")])

        sell_product(state, "0", sold, 1)

        assert sold.inventory == 0
        assert other.inventory == 1

    def test_social_media_manager(self):
        sold = product_card("sold", inventory=1)
        other = product_card("other", inventory=1)
        state = build_state(products=[sold, other], employees=[employee_card("social_media_manager")])

        sell_product(state, "0", sold, 1)

        assert other.appeal == 1
        assert sold.appeal == 0

    def test_sales_associate_draws(self, seller_state):
        seller_state.players["0"].board.employees.append(employee_card("sales_associate"))
        deck_size = len(seller_state.players["0"].deck)

        sell_product(seller_state, "0", seller_state.players["0"].board.products[0], 1)

        assert len(seller_state.players["0"].hand) == 1
        assert len(seller_state.players["0"].deck) == deck_size - 1
