"""Computer opponents for Rock-Paper-Scissors-Lizard-Spock."""

import logging
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from .engine import Move, MOVES
from .sampling import RandomSource

logger = logging.getLogger(__name__)


class Opponent(ABC):
    """Base class for computer opponents.

    An opponent is a single `choose` capability. It is handed a read-only
    snapshot of the history aggregate and returns its move; it never
    mutates anything but its own random source.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng: RandomSource = rng if rng is not None else RandomSource()

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def choose(self, aggregate: Mapping[Move, int]) -> Move:
        ...

    def __repr__(self):
        return f"<{self.name}>"


# ---------------------------------------------------------------------------
# Uniform
# ---------------------------------------------------------------------------

class UniformOpponent(Opponent):
    """Chooses a move completely at random.

    Each of the five moves has an equal probability (20%). This is the
    baseline opponent and the fallback for the adaptive one.

    **Type**: Baseline
    """
    name = "uniform"

    def choose(self, aggregate):
        return self.rng.uniform(MOVES)


# ---------------------------------------------------------------------------
# Biased
# ---------------------------------------------------------------------------

class BiasedOpponent(Opponent):
    """Heavily favours Rock and never plays Scissors.

    Samples from a fixed pool: Rock 5, Paper 1, Scissors 0, Lizard 1,
    Spock 1. Rock therefore comes up 62.5% of the time.

    **Type**: Baseline
    """
    name = "biased"
    WEIGHTS = (
        (Move.ROCK, 5),
        (Move.PAPER, 1),
        (Move.SCISSORS, 0),
        (Move.LIZARD, 1),
        (Move.SPOCK, 1),
    )

    def choose(self, aggregate):
        return self.rng.weighted(self.WEIGHTS)


# ---------------------------------------------------------------------------
# Adaptive
# ---------------------------------------------------------------------------

_ENUM_ORDER = {m: i for i, m in enumerate(MOVES)}


class AdaptiveOpponent(Opponent):
    """Counter-strategy learner.

    The aggregate counts, for every move, how many past rounds it would
    have won against the human. The three moves with the highest counts are
    kept and one of them is drawn with probability proportional to its
    count. With no history yet it plays uniformly at random.

    Among equal counts the move earlier in enumeration order ranks higher,
    so ties at the top-3 cutoff resolve the same way every time.

    **Type**: Adaptive
    """
    name = "adaptive"
    TOP_N = 3

    def choose(self, aggregate):
        if not aggregate:
            return self.rng.uniform(MOVES)
        candidates = self.top_candidates(aggregate)
        move = self.rng.weighted(candidates)
        logger.debug(
            "Adaptive pick %s from %s",
            move.value,
            {m.value: c for m, c in candidates},
        )
        return move

    @classmethod
    def top_candidates(cls, aggregate: Mapping[Move, int]) -> list[tuple[Move, int]]:
        """Return the (move, count) pairs with the highest counts, ascending."""
        ranked = sorted(
            ((m, c) for m, c in aggregate.items() if c > 0),
            key=lambda item: (item[1], -_ENUM_ORDER[item[0]]),
        )
        return ranked[-cls.TOP_N:]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ALL_OPPONENT_CLASSES = [UniformOpponent, BiasedOpponent, AdaptiveOpponent]

# Named characters and the strategy each one plays
ROSTER = {
    "R2D2": BiasedOpponent.name,
    "Hal": UniformOpponent.name,
    "Chappie": UniformOpponent.name,
    "Sony": UniformOpponent.name,
    "Watson": AdaptiveOpponent.name,
}


def get_all_opponents() -> list[Opponent]:
    """Return fresh instances of every strategy."""
    return [cls() for cls in ALL_OPPONENT_CLASSES]


def resolve_character(name: str) -> Optional[str]:
    """Return the roster spelling of a character name, or None."""
    name_lower = name.strip().lower()
    for character in ROSTER:
        if character.lower() == name_lower:
            return character
    return None


def get_opponent_by_name(name: str, rng: Optional[RandomSource] = None) -> Opponent:
    """Get an opponent by strategy or character name (case-insensitive)."""
    name_lower = name.strip().lower()
    character = resolve_character(name_lower)
    if character is not None:
        name_lower = ROSTER[character]
    for cls in ALL_OPPONENT_CLASSES:
        if cls.name == name_lower:
            return cls(rng)
    available = ", ".join([cls.name for cls in ALL_OPPONENT_CLASSES] + list(ROSTER))
    raise ValueError(f"Unknown opponent: '{name}'. Available: {available}")
