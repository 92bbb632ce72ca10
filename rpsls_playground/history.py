"""Cross-game record of every round played in this process.

Besides the plain list of games, the tracker keeps a running count of the
moves that *would have beaten* the human each round, regardless of who
actually won. The adaptive opponent reads those counts to bias its play.

The aggregate lives as long as the tracker does. Starting a new game only
opens a new round list; it never clears the counts.
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Mapping, Optional

from .engine import Move, Round, defeating_moves

logger = logging.getLogger(__name__)


class GameNotStartedError(RuntimeError):
    """A round was recorded before any game was started."""


class HistoryTracker:
    def __init__(self):
        self._games: list[list[Round]] = []
        self._current_game: Optional[list[Round]] = None
        self._aggregate: Counter = Counter()

    def start_new_game(self):
        """Open a new, empty game and make it the current one."""
        self._current_game = []
        self._games.append(self._current_game)
        logger.debug("Started game #%d", len(self._games))

    def record_round(self, human_move: Move, opponent_move: Move) -> None:
        """Append a round to the current game and update the aggregate."""
        if self._current_game is None:
            raise GameNotStartedError(
                "record_round() called before start_new_game()"
            )
        self._current_game.append(Round(human_move, opponent_move))
        winning_moves = defeating_moves(human_move)
        self._aggregate.update(winning_moves)
        logger.debug(
            "Recorded %s vs %s; credited %s",
            human_move.value,
            opponent_move.value,
            ", ".join(sorted(m.value for m in winning_moves)),
        )

    def aggregate_snapshot(self) -> Mapping[Move, int]:
        """Read-only copy of the counts (empty until a round is recorded)."""
        return MappingProxyType(dict(self._aggregate))

    @property
    def games(self) -> tuple[tuple[Round, ...], ...]:
        return tuple(tuple(game) for game in self._games)

    @property
    def current_game(self) -> tuple[Round, ...]:
        if self._current_game is None:
            return ()
        return tuple(self._current_game)

    @property
    def rounds_played(self) -> int:
        return sum(len(game) for game in self._games)

    def __repr__(self):
        return (f"HistoryTracker(games={len(self._games)}, "
                f"rounds={self.rounds_played})")
