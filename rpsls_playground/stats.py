"""Pretty-printing for simulations and the history aggregate."""

from typing import Mapping

from .engine import Move, MOVES
from .simulation import SimulationResult


def format_aggregate(aggregate: Mapping[Move, int]) -> list[str]:
    """Render the aggregate as table rows, one per move, in move order."""
    total = sum(aggregate.values())
    rows = []
    for move in MOVES:
        count = aggregate.get(move, 0)
        share = (count / total * 100) if total else 0.0
        rows.append(f"  {move.value:<10s} {count:>6d} {share:>6.1f}%")
    return rows


def print_aggregate(aggregate: Mapping[Move, int]):
    """Print how often each move would have beaten the human."""
    print("-" * 28)
    print(f"  {'Move':<10s} {'Count':>6s} {'Share':>7s}")
    print("-" * 28)
    for row in format_aggregate(aggregate):
        print(row)
    print("-" * 28)


def print_simulation_summary(result: SimulationResult):
    """Print a detailed summary of a simulation run."""
    d = result.to_dict()
    print("=" * 60)
    print(f"  {result.human_name}  vs  {result.opponent_name} ({result.strategy})")
    print(f"  Games: {len(result.games)}  |  Rounds: {result.rounds}"
          + (f"  |  seed={result.seed}" if result.seed is not None else ""))
    print("=" * 60)
    print(f"  {'':20s} {'Human':>10s} {'Computer':>10s}")
    print(f"  {'Games won':20s} {result.human_game_wins:>10d} {result.opponent_game_wins:>10d}")
    print(f"  {'Rounds won':20s} {d['human_round_wins']:>10d} {d['opponent_round_wins']:>10d}")
    print(f"  {'Ties':20s} {d['ties']:>10d}")
    print(f"  {'Computer round win %':20s} {'':>10s} {result.opponent_round_win_pct:>9.1f}%")
    print()
    print(f"  Human move distribution:    {d['human_move_distribution']}")
    print(f"  Computer move distribution: {d['opponent_move_distribution']}")
    print()
    for i, g in enumerate(result.games, 1):
        print(f"  Game {i:>3d}: {g.human_score}-{g.computer_score} in {g.rounds:>3d} rounds"
              f"  →  {g.winner or 'unfinished'}")
    print()
    print("  Moves that would have beaten the human:")
    print_aggregate(result.aggregate)
    print("=" * 60)
