"""
Tests for the card effect registry and passive sweeps.

Tests:
- Registry lookups and unknown ids
- Representative on-play effects per hero
- Turn-begin passives
"""

from ..catalog import ALL_CARDS
from ..effects import CARD_EFFECTS, is_known_effect, resolve_card_effect, validate_effect_ids
from ..effects.passives import process_passive_effects
from ..engine_core.action import Action
from ..engine_core.choices import ChoiceType, peek_current
from ..engine_core.constants import FINISH_CHOICE
from ..engine_core.context import ensure_context
from ..engine_core.reducer import apply_action
from ..engine_core.turns import begin_turn
from .conftest import action_card, build_state, employee_card, product_card, tool_card


def play(state, index=0):
    result = apply_action(state, Action.play_card("0", index))
    assert result.success, result.error
    return result.new_state


class TestRegistry:
    """Registry lookups."""

    def test_unknown_effect_is_noop(self, empty_state):
        card = action_card(effect="does_not_exist")
        resolve_card_effect(empty_state, "0", card)
        assert empty_state.game_log == []

    def test_flavor_and_passive_ids_known(self):
        assert is_known_effect(None)
        assert is_known_effect("sticker_pack_sale")
        assert is_known_effect("content_calendar")
        assert not is_known_effect("does_not_exist")

    def test_catalog_effects_all_known(self):
        assert validate_effect_ids(ALL_CARDS.values()) == []

    def test_validate_reports_unknown(self):
        assert validate_effect_ids([action_card("odd", effect="mystery")]) == ["odd"]

    def test_every_registered_effect_is_callable(self):
        assert all(callable(fn) for fn in CARD_EFFECTS.values())


class TestOneShotEffects:
    """Bonuses granted by Actions."""

    def test_launch_hype_applies_once(self):
        product = product_card(revenue=1000, inventory=3)
        state = build_state(hand=[action_card("hype", effect="launch_hype")], products=[product])
        state = play(state)

        state = apply_action(state, Action.sell_product("0", 0)).new_state
        state = apply_action(state, Action.sell_product("0", 0)).new_state

        assert state.players["0"].revenue == 41_000 + 1000

    def test_flash_sale_lasts_the_turn(self):
        product = product_card(revenue=1000, inventory=3)
        state = build_state(hand=[action_card("flash", effect="flash_sale")], products=[product])
        state = play(state)

        state = apply_action(state, Action.sell_product("0", 0)).new_state
        state = apply_action(state, Action.sell_product("0", 0)).new_state
        assert state.players["0"].revenue == 2 * 21_000

        state = apply_action(state, Action.end_turn("0")).new_state
        assert not ensure_context(state, "0").flash_sale_active

    def test_investor_buzz_doubles_next_gain(self):
        state = build_state(hand=[
            action_card("buzz", effect="investor_buzz"),
            action_card("aid", effect="mutual_aid"),
        ])
        state = play(state)
        state = play(state)
        assert state.players["0"].capital == 4

    def test_social_proof(self):
        product = product_card(revenue=4000, inventory=1)
        state = build_state(hand=[action_card("proof", effect="social_proof")], products=[product])
        state = play(state)

        state = apply_action(state, Action.sell_product("0", 0)).new_state

        assert state.players["0"].revenue == 5000


class TestHeroCardEffects:

    def test_hustle_hard(self):
        state = play(build_state(hand=[action_card("hh", effect="hustle_hard")]))
        player = state.players["0"]
        assert len(player.hand) == 2
        assert player.capital == 1

    def test_scrappy_marketing_needs_product(self):
        state = play(build_state(hand=[action_card("sm", effect="scrappy_marketing")]))
        assert state.players["0"].hand == []

        state = play(build_state(
            hand=[action_card("sm", effect="scrappy_marketing")],
            products=[product_card()],
        ))
        assert len(state.players["0"].hand) == 2

    def test_viral_post_second_action(self):
        state = build_state(hand=[
            action_card("boot", effect="bootstrap_capital"),
            action_card("vp", effect="viral_post"),
        ])
        state = play(state)
        state = play(state)
        assert state.players["0"].capital == 4

    def test_ugc_explosion(self):
        products = [product_card("a", inventory=0), product_card("b", inventory=1)]
        state = play(build_state(hand=[action_card("ugc", effect="ugc_explosion")], products=products))
        assert [p.inventory for p in state.players["0"].board.products] == [3, 4]

    def test_ab_test_discards_drawn(self):
        state = play(build_state(hand=[action_card("ab", effect="ab_test")]))
        choice = peek_current(state.players["0"])
        assert choice.choice_type == ChoiceType.CHOOSE_FROM_DRAWN_TO_DISCARD
        assert len(choice.cards) == 2

        state = apply_action(state, Action.make_choice("0", 1)).new_state

        assert [c.instance_id for c in state.players["0"].hand] == [choice.cards[0].instance_id]

    def test_zap_everything_with_three_tools(self):
        tools = [tool_card(f"t{i}") for i in range(3)]
        state = play(build_state(hand=[action_card("zap", effect="zap_everything")], tools=tools))
        assert state.players["0"].capital == 3

    def test_town_hall_draws_per_employee(self):
        employees = [employee_card("e1"), employee_card("e2")]
        state = play(build_state(hand=[action_card("th", effect="town_hall")], employees=employees))
        assert len(state.players["0"].hand) == 2

    def test_merch_drop(self):
        product = product_card(inventory=0)
        state = play(build_state(hand=[action_card("md", effect="merch_drop")], products=[product]))

        state = apply_action(state, Action.make_choice("0", 0)).new_state

        assert state.players["0"].board.products[0].inventory == 3
        assert ensure_context(state, "0").next_product_discount == 1

    def test_high_profile_exit(self):
        products = [product_card("a", revenue=1000, inventory=2), product_card("b", revenue=2000, inventory=1)]
        state = play(build_state(hand=[action_card("exit", effect="high_profile_exit")], products=products))

        player = state.players["0"]
        assert player.revenue == 2000 + 2000
        assert [p.inventory for p in player.board.products] == [0, 0]
        assert player.capital == 4

    def test_black_friday_skips_empty_products(self):
        products = [product_card("empty", inventory=0), product_card("full", inventory=2)]
        state = play(build_state(hand=[action_card("bf", effect="black_friday_blitz")], products=products))

        choice = peek_current(state.players["0"])

        assert [c.card_id for c in choice.cards] == ["full"]

    def test_spin_off_lands_as_product(self):
        spin = product_card("sf3", cost=3, revenue=4000, inventory=3, effect="spin_off")
        state = play(build_state(hand=[spin], capital=3))
        assert state.players["0"].board.products[0].card_id == "sf3"

    def test_global_launch_event_sells_each_product(self):
        products = [product_card("a", revenue=1000, inventory=1), product_card("b", revenue=2000, inventory=0)]
        state = build_state(hand=[action_card("gle", effect="global_launch_event")], products=products)
        ensure_context(state, "0").played_actions_this_turn = 2

        state = play(state)

        assert state.players["0"].revenue == 1000


class TestVisionaryConference:

    def test_action_play_grants_revenue(self):
        state = build_state(hand=[action_card()], tools=[tool_card("visionary_conference")])
        state = play(state)
        assert state.players["0"].revenue == 25_000


class TestPassives:
    """Turn-begin sweeps."""

    def test_content_calendar_restocks_lowest(self):
        low, high = product_card("low", inventory=0), product_card("high", inventory=4)
        state = build_state(tools=[tool_card("content_calendar")], products=[high, low])

        process_passive_effects(state, "0")

        assert low.inventory == 1
        assert high.inventory == 4

    def test_analytics_dashboard_needs_last_turn_sale(self):
        state = build_state(tools=[tool_card("analytics_dashboard")])
        process_passive_effects(state, "0")
        assert state.players["0"].pending_choices == []

        ensure_context(state, "0").sold_product_last_turn = True
        process_passive_effects(state, "0")

        choice = peek_current(state.players["0"])
        assert choice.choice_type == ChoiceType.VIEW_DECK_AND_DISCARD
        assert len(choice.cards) == 3
        assert choice.cards[0].instance_id == state.players["0"].deck[-1].instance_id
        assert choice.allow_finish

    def test_analytics_dashboard_shows_deck_after_draws(self):
        state = build_state(tools=[tool_card("analytics_dashboard"), tool_card("custom_app")])
        ensure_context(state, "0").sold_product_last_turn = True

        process_passive_effects(state, "0")

        player = state.players["0"]
        shown = [c.instance_id for c in peek_current(player).cards]
        assert len(player.hand) == 1
        assert shown == [c.instance_id for c in reversed(player.deck[-3:])]

        state = apply_action(state, Action.make_choice("0", 0)).new_state

        deck = [c.instance_id for c in state.players["0"].deck]
        assert shown[0] not in deck
        assert len(deck) == 3

    def test_analytics_dashboard_keep_all(self):
        state = build_state(tools=[tool_card("analytics_dashboard")])
        ensure_context(state, "0").sold_product_last_turn = True
        process_passive_effects(state, "0")
        deck = [c.instance_id for c in state.players["0"].deck]

        result = apply_action(state, Action.make_choice("0", FINISH_CHOICE))

        assert result.success
        player = result.new_state.players["0"]
        assert [c.instance_id for c in player.deck] == deck
        assert player.pending_choices == []
        assert "Kept all cards on top of the deck" in result.new_state.game_log

    def test_incubator_offers_options(self):
        state = build_state(tools=[tool_card("incubator_resources")])
        process_passive_effects(state, "0")
        assert peek_current(state.players["0"]).options == ["Gain 1 Capital", "Draw 1 Card"]

    def test_growth_hacking_rotation(self):
        state = build_state(turn=2, tools=[tool_card("growth_hacking")])
        process_passive_effects(state, "0")
        assert state.players["0"].revenue == 20_000

    def test_server_farm_revenue(self):
        farm = product_card("server_farm", effect="server_farm", keywords=["Overhead"], overhead_cost=1)
        state = build_state(turn=2, products=[farm])

        begin_turn(state, "0")

        assert state.players["0"].revenue == 10_000
        assert state.players["0"].capital == 1

    def test_fulfillment_timer_counts_down(self):
        product = product_card(inventory=0)
        state = build_state(products=[product])
        ensure_context(state, "0").delayed_inventory_boost_turns = 2

        process_passive_effects(state, "0")
        process_passive_effects(state, "0")
        process_passive_effects(state, "0")

        assert product.inventory == 2
        assert ensure_context(state, "0").delayed_inventory_boost_turns == 0

    def test_community_manager_appeal_revenue(self):
        products = [product_card("a", appeal=1), product_card("b", appeal=2)]
        state = build_state(products=products, employees=[employee_card("community_manager")])

        process_passive_effects(state, "0")

        assert state.players["0"].revenue == 15_000
