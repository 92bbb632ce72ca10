"""Tests for the Flask JSON API."""

import pytest

from rpsls_playground.web import create_app


@pytest.fixture
def client():
    app = create_app(seed=21)
    app.config["TESTING"] = True
    return app.test_client()


def _start(client, opponent="Watson", **extra):
    return client.post("/api/session", json={"name": "Ann", "opponent": opponent, **extra})


def _play_until_over(client, move="rock"):
    for _ in range(200):
        data = client.post("/api/round", json={"move": move}).get_json()
        if data["game_over"]:
            return data
    raise AssertionError("game never finished")


class TestOpponents:
    def test_lists_strategies_and_roster(self, client):
        data = client.get("/api/opponents").get_json()
        assert data["strategies"] == ["uniform", "biased", "adaptive"]
        assert data["roster"]["Watson"] == "adaptive"
        assert data["roster"]["R2D2"] == "biased"


class TestSession:
    def test_start(self, client):
        resp = _start(client)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["strategy"] == "adaptive"
        assert data["game_number"] == 1
        assert data["computer"] == {"name": "Watson", "score": 0}
        assert data["game_over"] is False

    def test_unknown_opponent(self, client):
        resp = _start(client, opponent="Deep Blue")
        assert resp.status_code == 400
        assert "Unknown opponent" in resp.get_json()["error"]

    def test_name_required(self, client):
        resp = client.post("/api/session", json={"opponent": "hal"})
        assert resp.status_code == 400

    def test_bad_winning_score(self, client):
        assert _start(client, winning_score=0).status_code == 400
        assert _start(client, winning_score="lots").status_code == 400


class TestRounds:
    def test_round_without_session(self, client):
        resp = client.post("/api/round", json={"move": "rock"})
        assert resp.status_code == 409

    def test_invalid_move(self, client):
        _start(client)
        resp = client.post("/api/round", json={"move": "s"})
        assert resp.status_code == 400
        assert "'sc' for scissors" in resp.get_json()["error"]

    def test_round(self, client):
        _start(client)
        data = client.post("/api/round", json={"move": "sp"}).get_json()
        assert data["round"]["human"] == "spock"
        assert data["round"]["outcome"] in ("human", "opponent", "tie")

    def test_round_after_game_over(self, client):
        _start(client, winning_score=1)
        data = _play_until_over(client)
        assert data["winner"] in ("Ann", "Watson")
        resp = client.post("/api/round", json={"move": "rock"})
        assert resp.status_code == 409

    def test_next_game_keeps_history(self, client):
        _start(client, winning_score=1)
        _play_until_over(client)
        data = client.post("/api/game").get_json()
        assert data["game_number"] == 2
        assert data["human"]["score"] == 0
        _play_until_over(client)

        history = client.get("/api/history").get_json()
        rounds = history["rounds_played"]
        assert len(history["games"]) == 2
        assert sum(len(g) for g in history["games"]) == rounds
        assert history["aggregate"] == {"paper": rounds, "spock": rounds}

    def test_history_without_session(self, client):
        assert client.get("/api/history").status_code == 409
        assert client.post("/api/game").status_code == 409


class TestMalformedBodies:
    @pytest.mark.parametrize("url,body", [
        ("/api/session", "hal"),
        ("/api/session", ["Ann", "hal"]),
        ("/api/round", ["rock"]),
        ("/api/round", "rock"),
    ])
    def test_non_object_json_is_rejected(self, client, url, body):
        _start(client)
        resp = client.post(url, json=body)
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Expected a JSON object."}
