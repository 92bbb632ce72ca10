"""Pytest configuration and fixtures for RPSLS Playground tests."""

import pytest

from rpsls_playground.algorithms import Opponent
from rpsls_playground.engine import Move
from rpsls_playground.history import HistoryTracker
from rpsls_playground.sampling import RandomSource


class FixedOpponent(Opponent):
    """Always plays the same move; records every aggregate it is shown."""

    name = "fixed"

    def __init__(self, move: Move):
        super().__init__()
        self.move = move
        self.seen = []

    def choose(self, aggregate):
        self.seen.append(dict(aggregate))
        return self.move


@pytest.fixture
def rng():
    """A seeded random source."""
    return RandomSource(1234)


@pytest.fixture
def history():
    """A tracker with one game already started."""
    tracker = HistoryTracker()
    tracker.start_new_game()
    return tracker


@pytest.fixture
def fixed_opponent():
    """Factory for opponents that always play one move."""
    return FixedOpponent
