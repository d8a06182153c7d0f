"""
Tests for services/ - the scoreboard client and the in-memory score store.
"""

import os
import random
import sys
from unittest.mock import Mock, patch

import pytest
import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import LEFT, GameLoop  # noqa: E402
from services.score_store import ScoreStore  # noqa: E402
from services.scoreboard import (  # noqa: E402
    fetch_scores,
    get_scores_url,
    make_score_reporter,
    submit_score,
)


@pytest.fixture(autouse=True)
def no_backend_env(monkeypatch):
    monkeypatch.delenv("SNAKE_BACKEND_URL", raising=False)


class TestScoresUrl:

    def test_explicit_base_url(self):
        assert get_scores_url("http://scores.local") == "http://scores.local/api/scores"

    def test_trailing_slash_stripped(self):
        assert get_scores_url("http://scores.local/") == "http://scores.local/api/scores"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BACKEND_URL", "https://snake.example")
        assert get_scores_url() == "https://snake.example/api/scores"

    def test_not_configured(self):
        assert get_scores_url() is None


class TestSubmitScore:

    def test_posts_player_name_and_score(self):
        with patch("services.scoreboard.requests.post") as mock_post:
            mock_post.return_value = Mock(status_code=201)

            assert submit_score("alice", 7, base_url="http://scores.local") is True

        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args[0] == "http://scores.local/api/scores"
        assert kwargs["json"] == {"player_name": "alice", "score": 7}
        assert kwargs["timeout"] == 10

    def test_blank_name_falls_back_to_default(self):
        with patch("services.scoreboard.requests.post") as mock_post:
            submit_score("", 3, base_url="http://scores.local")

        assert mock_post.call_args.kwargs["json"]["player_name"] == "Player"

    def test_network_error_returns_false(self):
        with patch("services.scoreboard.requests.post") as mock_post:
            mock_post.side_effect = requests.exceptions.ConnectionError("down")

            assert submit_score("alice", 7, base_url="http://scores.local") is False

    def test_http_error_returns_false(self):
        response = Mock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("500")
        with patch("services.scoreboard.requests.post", return_value=response):
            assert submit_score("alice", 7, base_url="http://scores.local") is False

    def test_skipped_without_url(self):
        with patch("services.scoreboard.requests.post") as mock_post:
            assert submit_score("alice", 7) is False
        mock_post.assert_not_called()


class TestFetchScores:

    def test_returns_list(self):
        scores = [{"player_name": "alice", "score": 9, "timestamp": "2026-01-01T00:00:00+00:00"}]
        response = Mock()
        response.json.return_value = scores
        with patch("services.scoreboard.requests.get", return_value=response) as mock_get:
            assert fetch_scores("http://scores.local") == scores
        assert mock_get.call_args.args[0] == "http://scores.local/api/scores"

    def test_network_error_returns_empty(self):
        with patch("services.scoreboard.requests.get", side_effect=requests.exceptions.Timeout("slow")):
            assert fetch_scores("http://scores.local") == []

    def test_invalid_json_returns_empty(self):
        response = Mock()
        response.json.side_effect = ValueError("not json")
        with patch("services.scoreboard.requests.get", return_value=response):
            assert fetch_scores("http://scores.local") == []

    def test_unexpected_payload_returns_empty(self):
        response = Mock()
        response.json.return_value = {"error": "nope"}
        with patch("services.scoreboard.requests.get", return_value=response):
            assert fetch_scores("http://scores.local") == []

    def test_skipped_without_url(self):
        with patch("services.scoreboard.requests.get") as mock_get:
            assert fetch_scores() == []
        mock_get.assert_not_called()


class TestScoreReporter:

    def test_reporter_submits_final_score_once(self):
        loop = GameLoop(rng=random.Random(0))
        loop.add_game_over_listener(make_score_reporter("bob", base_url="http://scores.local"))
        state = loop.start(initial_snake=[(0, 5)], initial_direction=LEFT)
        state.food = (10, 10)
        state.score = 12

        with patch("services.scoreboard.requests.post") as mock_post:
            loop.tick(state)
            loop.tick(state)

        mock_post.assert_called_once()
        assert mock_post.call_args.kwargs["json"] == {"player_name": "bob", "score": 12}

    def test_reporter_failure_does_not_break_game(self):
        loop = GameLoop(rng=random.Random(0))
        loop.add_game_over_listener(make_score_reporter("bob", base_url="http://scores.local"))
        state = loop.start(initial_snake=[(0, 5)], initial_direction=LEFT)

        with patch("services.scoreboard.requests.post", side_effect=requests.exceptions.ConnectionError("down")):
            loop.tick(state)

        assert state.alive is False


class TestScoreStore:

    def test_add_returns_entry(self):
        store = ScoreStore()
        entry = store.add("alice", 5)
        assert entry["player_name"] == "alice"
        assert entry["score"] == 5
        assert "timestamp" in entry
        assert len(store) == 1

    def test_top_is_sorted_with_stable_ties(self):
        store = ScoreStore()
        store.add("a", 3)
        store.add("b", 9)
        store.add("c", 3)
        store.add("d", 1)

        names = [entry["player_name"] for entry in store.top()]
        assert names == ["b", "a", "c", "d"]

    def test_top_limit(self):
        store = ScoreStore()
        for score in range(20):
            store.add("p", score)
        top = store.top(limit=3)
        assert [entry["score"] for entry in top] == [19, 18, 17]
        assert store.top(limit=0) == []

    def test_name_is_trimmed(self):
        store = ScoreStore()
        entry = store.add("  " + "x" * 50 + "  ", 1)
        assert entry["player_name"] == "x" * 32

    @pytest.mark.parametrize("name, score", [
        ("", 1),
        ("   ", 1),
        (None, 1),
        ("alice", -1),
        ("alice", "10"),
        ("alice", 1.5),
        ("alice", True),
        ("alice", None),
    ])
    def test_invalid_entries(self, name, score):
        with pytest.raises(ValueError):
            ScoreStore().add(name, score)

    def test_returned_entries_are_copies(self):
        store = ScoreStore()
        store.add("alice", 5)
        store.top()[0]["score"] = 100
        assert store.top()[0]["score"] == 5

    def test_clear(self):
        store = ScoreStore()
        store.add("alice", 5)
        store.clear()
        assert store.top() == []
