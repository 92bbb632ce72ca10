"""Automated play: scripted humans against the computer opponents."""

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field
from itertools import cycle
from typing import Optional, Sequence

from .engine import Move, MOVES, Outcome
from .game import Session, WINNING_SCORE
from .sampling import RandomSource

DEFAULT_GAMES = 10
# Stops a game that can never finish (e.g. a tie-only pattern)
MAX_ROUNDS_PER_GAME = 1000


class HumanPolicy(ABC):
    """Stand-in for the human player."""

    name = "human"

    @abstractmethod
    def next_move(self) -> Move:
        ...


class ScriptedHuman(HumanPolicy):
    """Cycles through a fixed list of moves forever."""

    def __init__(self, pattern: Sequence[Move]):
        if not pattern:
            raise ValueError("pattern must contain at least one move")
        self.pattern = list(pattern)
        self.name = "scripted(" + ",".join(m.value for m in self.pattern) + ")"
        self._moves = cycle(self.pattern)

    def next_move(self):
        return next(self._moves)


class RandomHuman(HumanPolicy):
    """Plays uniformly at random."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = RandomSource(seed)

    def next_move(self):
        return self.rng.uniform(MOVES)


@dataclass
class GameSummary:
    winner: Optional[str]
    human_score: int
    computer_score: int
    rounds: int
    ties: int


@dataclass
class SimulationResult:
    """Result of a run of complete games."""
    human_name: str
    opponent_name: str
    strategy: str
    seed: Optional[int]
    games: list[GameSummary] = field(default_factory=list)
    human_moves: Counter = field(default_factory=Counter)
    opponent_moves: Counter = field(default_factory=Counter)
    outcomes: Counter = field(default_factory=Counter)
    aggregate: dict = field(default_factory=dict)

    @property
    def rounds(self) -> int:
        return sum(g.rounds for g in self.games)

    @property
    def human_game_wins(self) -> int:
        return sum(1 for g in self.games if g.winner == self.human_name)

    @property
    def opponent_game_wins(self) -> int:
        return sum(1 for g in self.games if g.winner == self.opponent_name)

    @property
    def opponent_round_win_pct(self) -> float:
        wins = self.outcomes[Outcome.OPPONENT_WINS]
        return (wins / self.rounds * 100) if self.rounds else 0.0

    def to_dict(self) -> dict:
        return {
            "human": self.human_name,
            "opponent": self.opponent_name,
            "strategy": self.strategy,
            "seed": self.seed,
            "rounds": self.rounds,
            "human_game_wins": self.human_game_wins,
            "opponent_game_wins": self.opponent_game_wins,
            "human_round_wins": self.outcomes[Outcome.HUMAN_WINS],
            "opponent_round_wins": self.outcomes[Outcome.OPPONENT_WINS],
            "ties": self.outcomes[Outcome.TIE],
            "opponent_round_win_pct": round(self.opponent_round_win_pct, 2),
            "human_move_distribution": {m.value: c for m, c in self.human_moves.items()},
            "opponent_move_distribution": {m.value: c for m, c in self.opponent_moves.items()},
            "aggregate": {m.value: c for m, c in self.aggregate.items()},
            "games": [
                {
                    "winner": g.winner,
                    "human_score": g.human_score,
                    "computer_score": g.computer_score,
                    "rounds": g.rounds,
                    "ties": g.ties,
                }
                for g in self.games
            ],
        }


def run_simulation(
    opponent_name: str,
    human: HumanPolicy,
    games: int = DEFAULT_GAMES,
    seed: Optional[int] = None,
    winning_score: int = WINNING_SCORE,
) -> SimulationResult:
    """Play `games` complete games between `human` and the named opponent.

    All games share one session, so the adaptive opponent carries what it
    learned from earlier games into later ones.
    """
    session = Session(human.name, opponent_name, seed=seed, winning_score=winning_score)
    result = SimulationResult(
        human_name=session.human.name,
        opponent_name=session.computer.name,
        strategy=session.opponent.name,
        seed=seed,
    )

    for _ in range(games):
        game = session.new_game()
        ties = 0
        while not game.is_over and len(game.results) < MAX_ROUNDS_PER_GAME:
            round_result = game.play_round(human.next_move())
            result.human_moves[round_result.human_move] += 1
            result.opponent_moves[round_result.opponent_move] += 1
            result.outcomes[round_result.outcome] += 1
            if round_result.outcome is Outcome.TIE:
                ties += 1

        result.games.append(GameSummary(
            winner=game.winner.name if game.winner else None,
            human_score=game.human.score,
            computer_score=game.computer.score,
            rounds=len(game.results),
            ties=ties,
        ))

    result.aggregate = dict(session.history.aggregate_snapshot())
    return result
