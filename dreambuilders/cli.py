"""
Dream Builders CLI - Command-line interface for the engine.

Usage:
    dreambuilders heroes                          List playable heroes
    dreambuilders simulate --hero H --seed N      Let the greedy bot play a game
    dreambuilders play --hero H --seed N          Play interactively
    dreambuilders serve --host H --port P         Run the HTTP API
"""

import argparse
import logging
import os
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Dream Builders - Deck-building business simulation engine",
        prog="dreambuilders",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("DREAMBUILDERS_LOG_LEVEL", "WARNING"),
        help="Logging level (default from DREAMBUILDERS_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Heroes command
    subparsers.add_parser("heroes", help="List playable heroes")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Let the greedy bot play a game")
    simulate_parser.add_argument("--hero", action="append", dest="heroes", help="Hero id (repeat for more seats)")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    simulate_parser.add_argument("--max-turns", type=int, default=30, help="Stop after this many rounds")
    simulate_parser.add_argument("--log", action="store_true", help="Print the full game log")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument("--hero", default="solo_hustler", help="Hero id")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.command == "heroes":
        cmd_heroes(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_heroes(args):
    """List playable heroes."""
    from .catalog import ALL_HEROES

    for hero in ALL_HEROES:
        print(f"{hero.hero_id:<22} {hero.name} ({hero.color})")
        print(f"{'':<22} {hero.power.name} [{hero.power.cost}]: {hero.power.description}")


def cmd_simulate(args):
    """Run a bot game and print the outcome."""
    from .bots import GreedyPolicy
    from .session import GameLoop, SessionManager

    heroes = args.heroes or ["solo_hustler"]
    manager = SessionManager()
    try:
        session = manager.create_session(heroes, random_seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    loop = GameLoop(session)
    loop.run_until_over(GreedyPolicy(), max_turns=args.max_turns)
    state = session.game_state

    if args.log:
        for entry in state.game_log:
            print(entry)
        print()

    print(f"Turns played: {state.turn}")
    for player_id in state.play_order:
        player = state.players[player_id]
        print(f"  Player {player_id} ({player.hero}): ${player.revenue:,} revenue")
    if state.game_over:
        print("Result: " + ("WIN" if state.winner else "LOSS"))
    else:
        print("Result: unfinished")


def cmd_play(args):
    """Line-oriented interactive game."""
    from .engine_core import apply_action, legal_actions, setup_game
    from .engine_core.choices import peek_current

    try:
        state = setup_game([args.hero], random_seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    log_cursor = 0
    while not state.game_over:
        for entry in state.game_log[log_cursor:]:
            print(f"  {entry}")
        log_cursor = len(state.game_log)

        player = state.active_player
        print()
        print(f"Turn {state.turn} | Capital {player.capital} | Revenue ${player.revenue:,} | Deck {len(player.deck)}")
        for product in player.board.products:
            status = "" if product.is_active else " (inactive)"
            print(f"  [Product] {product.name}: {product.inventory} left, ${product.revenue_per_sale:,}/sale{status}")

        choice = peek_current(player)
        if choice:
            print(f"CHOICE: {choice.prompt or choice.choice_type.value}")

        moves = legal_actions(state)
        for number, action in enumerate(moves):
            print(f"  {number:>2}. {_describe_move(state, action)}")

        answer = input("> ").strip()
        if answer in {"q", "quit"}:
            return
        if not answer.isdigit() or int(answer) >= len(moves):
            print("Pick a number from the list")
            continue

        result = apply_action(state, moves[int(answer)])
        if not result.success:
            print(f"Rejected: {result.error}")
            continue
        state = result.new_state

    for entry in state.game_log[log_cursor:]:
        print(f"  {entry}")
    print("You WIN!" if state.winner else "Game over - out of moves.")


def _describe_move(state, action):
    """Human readable label for a legal move."""
    from .engine_core import ActionType
    from .engine_core.choices import peek_current

    player = state.players[action.player_id]
    if action.action_type == ActionType.PLAY_CARD:
        card = player.hand[action.index]
        return f"Play {card.name} ({card.cost})"
    if action.action_type == ActionType.SELL_PRODUCT:
        return f"Sell {player.board.products[action.index].name}"
    if action.action_type == ActionType.MAKE_CHOICE:
        choice = peek_current(player)
        if action.index < 0:
            return "Finish"
        if choice.options:
            return choice.options[action.index]
        cards = player.hand if not choice.cards else choice.cards
        return cards[action.index].name
    return action.action_type.value.replace("_", " ").capitalize()


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("dreambuilders.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
