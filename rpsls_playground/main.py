"""CLI entry point for the RPSLS Playground."""

import argparse
import json
import logging

from .algorithms import ALL_OPPONENT_CLASSES, ROSTER
from .console import parse_move, prompt_name, select_opponent, run
from .game import Session, WINNING_SCORE
from .simulation import DEFAULT_GAMES, RandomHuman, ScriptedHuman, run_simulation
from .stats import print_simulation_summary
from .web import DEFAULT_PORT, main as serve_api


def list_opponents():
    """Print all available strategies and characters."""
    print("\nAvailable Strategies:")
    print("-" * 40)
    for i, cls in enumerate(ALL_OPPONENT_CLASSES, 1):
        print(f"  {i:>2d}. {cls.name}")
    print("\nCharacters:")
    print("-" * 40)
    for character, strategy in ROSTER.items():
        print(f"  {character:<10s} plays {strategy}")
    print()


def cmd_play(args):
    """Run an interactive session in the terminal."""
    name = args.name or prompt_name()
    opponent = args.opponent or select_opponent()
    session = Session(name, opponent, seed=args.seed, winning_score=args.winning_score)
    run(session)


def cmd_simulate(args):
    """Run automated games against an opponent."""
    if args.pattern:
        human = ScriptedHuman([parse_move(p) for p in args.pattern.split(",")])
    else:
        human = RandomHuman(seed=args.seed)

    result = run_simulation(
        args.opponent,
        human,
        games=args.games,
        seed=args.seed,
        winning_score=args.winning_score,
    )
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_simulation_summary(result)


def cmd_serve(args):
    """Run the JSON API server."""
    serve_api(port=args.port, debug=args.debug, seed=args.seed)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="rpsls_playground",
        description="🎮 Rock-Paper-Scissors-Lizard-Spock Playground",
    )
    parser.add_argument("--list", action="store_true", help="List all available opponents")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # play
    ply = subparsers.add_parser("play", help="Play interactively in the terminal")
    ply.add_argument("--name", help="Your name (prompted if omitted)")
    ply.add_argument("--opponent", help="Strategy or character name (prompted if omitted)")
    ply.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    ply.add_argument("--winning-score", type=int, default=WINNING_SCORE,
                     help=f"Points needed to win a game (default: {WINNING_SCORE})")

    # simulate
    sim = subparsers.add_parser("simulate", help="Play automated games against an opponent")
    sim.add_argument("--opponent", required=True, help="Strategy or character name")
    sim.add_argument("--pattern", help="Comma-separated moves the human cycles through "
                                       "(e.g. 'rock,r,sp'); random if omitted")
    sim.add_argument("--games", type=int, default=DEFAULT_GAMES,
                     help=f"Number of games (default: {DEFAULT_GAMES})")
    sim.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    sim.add_argument("--winning-score", type=int, default=WINNING_SCORE,
                     help=f"Points needed to win a game (default: {WINNING_SCORE})")
    sim.add_argument("--json", action="store_true", help="Print the result as JSON")

    # serve
    srv = subparsers.add_parser("serve", help="Run the JSON API server")
    srv.add_argument("--port", type=int, default=DEFAULT_PORT,
                     help=f"Port to listen on (default: {DEFAULT_PORT})")
    srv.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    srv.add_argument("--debug", action="store_true", help="Run Flask in debug mode")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.list:
        list_opponents()
        return

    try:
        if args.command == "play":
            cmd_play(args)
        elif args.command == "simulate":
            cmd_simulate(args)
        elif args.command == "serve":
            cmd_serve(args)
        else:
            parser.print_help()
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
