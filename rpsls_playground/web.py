"""Flask JSON API for playing against the computer opponents.

The app holds a single in-process session. Its history lives as long as
the server process; nothing is written to disk.
"""

import logging
import threading
from typing import Optional

from flask import Flask, request, jsonify

from .algorithms import ALL_OPPONENT_CLASSES, ROSTER
from .console import parse_move
from .game import GameOverError, Session, WINNING_SCORE

logger = logging.getLogger(__name__)

DEFAULT_PORT = 5000


def _game_state(session: Session) -> dict:
    game = session.current_game
    return {
        "game_number": len(session.games),
        "human": {"name": game.human.name, "score": game.human.score},
        "computer": {"name": game.computer.name, "score": game.computer.score},
        "winning_score": game.winning_score,
        "game_over": game.is_over,
        "winner": game.winner.name if game.winner else None,
    }


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def create_app(seed: Optional[int] = None) -> Flask:
    app = Flask(__name__)
    lock = threading.Lock()
    state = {"session": None}

    @app.route("/api/opponents")
    def api_opponents():
        return jsonify({
            "strategies": [cls.name for cls in ALL_OPPONENT_CLASSES],
            "roster": ROSTER,
        })

    @app.route("/api/session", methods=["POST"])
    def api_session():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return _error("Expected a JSON object.", 400)
        name = str(data.get("name", "")).strip()
        opponent = str(data.get("opponent", "")).strip()
        if not name:
            return _error("A name is required.", 400)
        try:
            winning_score = int(data.get("winning_score", WINNING_SCORE))
            session = Session(name, opponent, seed=seed, winning_score=winning_score)
            session.new_game()
        except (TypeError, ValueError) as e:
            return _error(str(e), 400)
        with lock:
            state["session"] = session
            return jsonify({
                "strategy": session.opponent.name,
                **_game_state(session),
            })

    @app.route("/api/round", methods=["POST"])
    def api_round():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return _error("Expected a JSON object.", 400)
        try:
            move = parse_move(str(data.get("move", "")))
        except ValueError as e:
            return _error(str(e), 400)
        with lock:
            session = state["session"]
            if session is None:
                return _error("No session. POST /api/session first.", 409)
            try:
                result = session.play_round(move)
            except GameOverError as e:
                return _error(str(e), 409)
            logger.debug("Round: %s", result.to_dict())
            return jsonify({
                "round": result.to_dict(),
                **_game_state(session),
            })

    @app.route("/api/game", methods=["POST"])
    def api_game():
        with lock:
            session = state["session"]
            if session is None:
                return _error("No session. POST /api/session first.", 409)
            session.new_game()
            return jsonify(_game_state(session))

    @app.route("/api/history")
    def api_history():
        with lock:
            session = state["session"]
            if session is None:
                return _error("No session. POST /api/session first.", 409)
            aggregate = session.history.aggregate_snapshot()
            return jsonify({
                "aggregate": {m.value: c for m, c in aggregate.items()},
                "rounds_played": session.history.rounds_played,
                "games": [
                    [r.to_dict() for r in game]
                    for game in session.history.games
                ],
            })

    return app


def main(port: int = DEFAULT_PORT, debug: bool = False, seed: Optional[int] = None):
    print("\n🎮 RPSLS Playground API")
    print(f"  → http://localhost:{port}/api/opponents\n")
    create_app(seed=seed).run(debug=debug, port=port)


if __name__ == "__main__":
    main()
