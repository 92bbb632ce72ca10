"""Game and session orchestration.

A `Game` is first to `WINNING_SCORE` points. A `Session` pairs one human
with one opponent for the life of the process and owns the
`HistoryTracker`, so the adaptive opponent keeps learning across every
game the session plays.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .algorithms import Opponent, get_opponent_by_name, resolve_character
from .engine import Move, Outcome, Round, evaluate
from .history import HistoryTracker
from .sampling import RandomSource

logger = logging.getLogger(__name__)

WINNING_SCORE = 3


class GameOverError(RuntimeError):
    """A round was played after the game already had a winner."""


@dataclass
class Player:
    name: str
    score: int = 0

    def reset_score(self):
        self.score = 0


@dataclass(frozen=True)
class RoundResult:
    """A played round together with the score it left behind."""
    round: Round
    outcome: Outcome
    human_score: int
    computer_score: int

    @property
    def human_move(self) -> Move:
        return self.round.human_move

    @property
    def opponent_move(self) -> Move:
        return self.round.opponent_move

    def to_dict(self) -> dict:
        return {
            **self.round.to_dict(),
            "human_score": self.human_score,
            "computer_score": self.computer_score,
        }


class Game:
    """One first-to-N game between a human and a computer opponent."""

    def __init__(
        self,
        human: Player,
        computer: Player,
        opponent: Opponent,
        history: HistoryTracker,
        winning_score: int = WINNING_SCORE,
    ):
        if winning_score < 1:
            raise ValueError(f"winning_score must be at least 1, got {winning_score}")
        self.human = human
        self.computer = computer
        self.opponent = opponent
        self.history = history
        self.winning_score = winning_score
        self.results: list[RoundResult] = []

        self.human.reset_score()
        self.computer.reset_score()
        history.start_new_game()

    def play_round(self, human_move: Move) -> RoundResult:
        """Resolve one round against the opponent and record it."""
        if self.is_over:
            raise GameOverError(f"{self.winner.name} already won this game")

        opponent_move = self.opponent.choose(self.history.aggregate_snapshot())
        outcome = evaluate(human_move, opponent_move)
        if outcome is Outcome.HUMAN_WINS:
            self.human.score += 1
        elif outcome is Outcome.OPPONENT_WINS:
            self.computer.score += 1
        self.history.record_round(human_move, opponent_move)

        result = RoundResult(
            round=Round(human_move, opponent_move),
            outcome=outcome,
            human_score=self.human.score,
            computer_score=self.computer.score,
        )
        self.results.append(result)
        return result

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def winner(self) -> Optional[Player]:
        if self.human.score >= self.winning_score:
            return self.human
        if self.computer.score >= self.winning_score:
            return self.computer
        return None

    @property
    def rounds(self) -> list[Round]:
        return [r.round for r in self.results]


class Session:
    """A human and one opponent playing any number of games.

    The opponent is picked once, by strategy or character name, and kept
    for the whole session. The history, and with it the aggregate, is
    created here and never reset.
    """

    def __init__(
        self,
        human_name: str,
        opponent_name: str,
        seed: Optional[int] = None,
        winning_score: int = WINNING_SCORE,
    ):
        master_rng = RandomSource(seed)
        self.seed = seed
        self.opponent = get_opponent_by_name(
            opponent_name, rng=RandomSource(master_rng.spawn_seed())
        )
        self.human = Player(human_name)
        self.computer = Player(resolve_character(opponent_name) or opponent_name.strip())
        self.history = HistoryTracker()
        self.winning_score = winning_score
        self.games: list[Game] = []
        logger.info(
            "Session: %s vs %s (%s strategy, seed=%s)",
            self.human.name, self.computer.name, self.opponent.name, seed,
        )

    def new_game(self) -> Game:
        game = Game(
            self.human,
            self.computer,
            self.opponent,
            self.history,
            winning_score=self.winning_score,
        )
        self.games.append(game)
        logger.info("Game %d started", len(self.games))
        return game

    @property
    def current_game(self) -> Optional[Game]:
        return self.games[-1] if self.games else None

    def play_round(self, human_move: Move) -> RoundResult:
        """Play a round in the current game, starting one if needed."""
        game = self.current_game
        if game is None:
            game = self.new_game()
        result = game.play_round(human_move)
        if game.is_over:
            logger.info("Game %d won by %s", len(self.games), game.winner.name)
        return result
