"""Tests for the cross-game history tracker."""

import pytest

from rpsls_playground.engine import MOVES, Move, Round, defeating_moves
from rpsls_playground.history import GameNotStartedError, HistoryTracker


class TestRecordRound:
    """Tests for record_round and the aggregate."""

    def test_empty_before_any_round(self, history):
        assert dict(history.aggregate_snapshot()) == {}

    def test_credits_the_two_winning_moves(self, history):
        for human_move in MOVES:
            before = dict(history.aggregate_snapshot())
            history.record_round(human_move, Move.ROCK)
            after = history.aggregate_snapshot()
            for move in MOVES:
                expected = before.get(move, 0)
                if move in defeating_moves(human_move):
                    expected += 1
                assert after.get(move, 0) == expected

    def test_rock_three_times(self, history):
        for opponent_move in (Move.ROCK, Move.PAPER, Move.LIZARD):
            history.record_round(Move.ROCK, opponent_move)
        assert dict(history.aggregate_snapshot()) == {Move.PAPER: 3, Move.SPOCK: 3}

    def test_opponent_move_and_outcome_do_not_matter(self, history):
        history.record_round(Move.SCISSORS, Move.ROCK)
        history.record_round(Move.SCISSORS, Move.PAPER)
        assert dict(history.aggregate_snapshot()) == {Move.ROCK: 2, Move.SPOCK: 2}

    def test_records_round_in_current_game(self, history):
        history.record_round(Move.LIZARD, Move.SPOCK)
        assert history.current_game == (Round(Move.LIZARD, Move.SPOCK),)
        assert history.rounds_played == 1

    def test_requires_a_started_game(self):
        tracker = HistoryTracker()
        with pytest.raises(GameNotStartedError):
            tracker.record_round(Move.ROCK, Move.PAPER)
        assert dict(tracker.aggregate_snapshot()) == {}


class TestGames:
    """Tests for game boundaries."""

    def test_new_game_keeps_aggregate(self, history):
        history.record_round(Move.ROCK, Move.ROCK)
        history.start_new_game()
        history.record_round(Move.ROCK, Move.PAPER)
        assert history.aggregate_snapshot()[Move.PAPER] == 2
        assert len(history.games) == 2
        assert history.current_game == (Round(Move.ROCK, Move.PAPER),)

    def test_prior_games_are_retained(self, history):
        history.record_round(Move.PAPER, Move.ROCK)
        history.start_new_game()
        assert history.games[0] == (Round(Move.PAPER, Move.ROCK),)
        assert history.games[1] == ()


class TestSnapshot:
    """Tests for the read-only snapshot."""

    def test_snapshot_is_read_only(self, history):
        history.record_round(Move.ROCK, Move.ROCK)
        snapshot = history.aggregate_snapshot()
        with pytest.raises(TypeError):
            snapshot[Move.PAPER] = 100

    def test_snapshot_does_not_follow_later_rounds(self, history):
        history.record_round(Move.ROCK, Move.ROCK)
        snapshot = history.aggregate_snapshot()
        history.record_round(Move.ROCK, Move.ROCK)
        assert snapshot[Move.PAPER] == 1
        assert history.aggregate_snapshot()[Move.PAPER] == 2
