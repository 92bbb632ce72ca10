"""Random draws used by the opponents.

All randomness flows through a `RandomSource` so that a match can be
replayed exactly from its seed.
"""

import random
from typing import Hashable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)


class RandomSource:
    """Thin wrapper around a single `random.Random` instance."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform(self, choices: Sequence[T]) -> T:
        """Draw one item, each with equal probability."""
        return self._rng.choice(choices)

    def weighted(self, pairs: Iterable[tuple[T, int]]) -> T:
        """Draw one item with probability proportional to its weight.

        Walks `pairs` in the given order keeping a running total and
        returns the first item whose running total reaches a number drawn
        uniformly from ``[1, total]``. Items with weight 0 are never
        returned.
        """
        pairs = list(pairs)
        total = sum(weight for _, weight in pairs)
        assert total > 0, f"weighted draw needs a positive total, got {pairs!r}"

        r = self._rng.randint(1, total)
        running_total = 0
        for item, weight in pairs:
            running_total += weight
            if running_total >= r:
                return item
        raise AssertionError("unreachable: running total never reached draw")

    def spawn_seed(self) -> int:
        """Derive a fresh seed for a child source."""
        return self._rng.randint(0, 2**31)

    def __repr__(self):
        return f"RandomSource(seed={self.seed!r})"
