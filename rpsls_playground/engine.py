"""Core game model for Rock-Paper-Scissors-Lizard-Spock rounds."""

from enum import Enum
from dataclasses import dataclass


class Move(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"
    LIZARD = "lizard"
    SPOCK = "spock"


MOVES = list(Move)

# What each move beats
BEATS = {
    Move.ROCK: frozenset({Move.SCISSORS, Move.LIZARD}),
    Move.PAPER: frozenset({Move.ROCK, Move.SPOCK}),
    Move.SCISSORS: frozenset({Move.PAPER, Move.LIZARD}),
    Move.LIZARD: frozenset({Move.PAPER, Move.SPOCK}),
    Move.SPOCK: frozenset({Move.ROCK, Move.SCISSORS}),
}

# What beats each move
BEATEN_BY = {
    target: frozenset(m for m in MOVES if target in BEATS[m])
    for target in MOVES
}


class Outcome(Enum):
    HUMAN_WINS = "human"
    OPPONENT_WINS = "opponent"
    TIE = "tie"


def beats(move_a: Move, move_b: Move) -> bool:
    """Return True if move_a defeats move_b."""
    return move_b in BEATS[move_a]


def defeating_moves(target: Move) -> frozenset[Move]:
    """Return the two moves that would have won against `target`."""
    return BEATEN_BY[target]


def _outcome(human_move: Move, opponent_move: Move) -> Outcome:
    if beats(human_move, opponent_move):
        return Outcome.HUMAN_WINS
    if beats(opponent_move, human_move):
        return Outcome.OPPONENT_WINS
    return Outcome.TIE


# Pre-computed outcome table: (human_move, opponent_move) → outcome
_OUTCOME_TABLE = {
    (h, o): _outcome(h, o) for h in MOVES for o in MOVES
}


def evaluate(human_move: Move, opponent_move: Move) -> Outcome:
    """Return the outcome of a round from the human's point of view."""
    return _OUTCOME_TABLE[human_move, opponent_move]


@dataclass(frozen=True)
class Round:
    """One exchange of moves."""
    human_move: Move
    opponent_move: Move

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.human_move, self.opponent_move)

    def to_dict(self) -> dict:
        return {
            "human": self.human_move.value,
            "opponent": self.opponent_move.value,
            "outcome": self.outcome.value,
        }
