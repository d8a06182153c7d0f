import os
import logging
import threading
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from domain.constants import GRID_SIZE
from main import SnakeGame
from services.score_store import ScoreStore
from services.scoreboard import DEFAULT_PLAYER_NAME

load_dotenv()

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)

# Enable CORS for API routes so the browser front end (different origin) can call Flask
# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

CORS(app, resources={r"/api/*": {"origins": allowed_origins}})

MAX_GRID_SIZE = 100
MAX_GAMES = int(os.getenv("SNAKE_MAX_GAMES", "1000"))
DEFAULT_SCORE_LIMIT = 10

score_store = ScoreStore()

# game_id -> (SnakeGame, lock); each session is ticked by one browser tab
games = {}
games_lock = threading.Lock()


def _get_session(game_id):
    with games_lock:
        return games.get(game_id)


def _evict_sessions():
    """Make room for one more game. Finished games go first, then the longest idle. Caller holds games_lock."""
    while games and len(games) >= MAX_GAMES:
        finished = [gid for gid, (game, _) in games.items() if game.game_over]
        if finished:
            victim = finished[0]
        else:
            victim = min(games, key=lambda gid: games[gid][0].last_active)
        games.pop(victim)
        logging.info(f"Evicted game {victim}")


def _score_recorder(game):
    """Game-over listener that puts the final score on the board."""
    def record(score):
        entry = score_store.add(game.player_name, score)
        logging.info(f"Recorded score {entry['score']} for {entry['player_name']} (game {game.game_id})")

    return record


def _game_response(game, status_code=200):
    return jsonify({
        "game_id": game.game_id,
        "player_name": game.player_name,
        "state": game.snapshot().to_dict()
    }), status_code


# Scoreboard endpoints

@app.route("/api/scores", methods=["GET"])
def get_scores():
    """
    Get the top scores, highest first.

    Query parameters:
    - limit: Maximum number of entries to return (default: 10)
    """
    limit = request.args.get("limit", default=DEFAULT_SCORE_LIMIT, type=int)
    return jsonify(score_store.top(limit))


@app.route("/api/scores", methods=["POST"])
def post_score():
    """
    Submit a score.

    Body: {"player_name": str, "score": int}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    try:
        entry = score_store.add(data.get("player_name"), data.get("score"))
    except ValueError as error:
        return jsonify({"error": str(error)}), 400

    logging.info(f"Score posted: {entry['player_name']} - {entry['score']}")
    return jsonify(entry), 201


# Game session endpoints

@app.route("/api/games", methods=["POST"])
def create_game():
    """
    Start a new game.

    Body (optional): {"grid_size": int, "player_name": str}
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    grid_size = data.get("grid_size", GRID_SIZE)
    player_name = data.get("player_name") or DEFAULT_PLAYER_NAME

    if not isinstance(grid_size, int) or isinstance(grid_size, bool) or not 2 <= grid_size <= MAX_GRID_SIZE:
        return jsonify({"error": f"grid_size must be an integer between 2 and {MAX_GRID_SIZE}"}), 400
    if not isinstance(player_name, str) or not player_name.strip():
        return jsonify({"error": "player_name must be a non-empty string"}), 400

    game = SnakeGame(grid_size=grid_size, player_name=player_name)
    game.loop.add_game_over_listener(_score_recorder(game))
    with games_lock:
        _evict_sessions()
        games[game.game_id] = (game, threading.Lock())

    logging.info(f"Created game {game.game_id} ({grid_size}x{grid_size}) for {player_name}")
    return _game_response(game, 201)


@app.route("/api/games/<game_id>", methods=["GET"])
def get_game(game_id):
    session = _get_session(game_id)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    game, lock = session
    with lock:
        return _game_response(game)


@app.route("/api/games/<game_id>/direction", methods=["POST"])
def set_direction(game_id):
    """
    Buffer a direction for the next tick.

    Body: {"direction": "UP" | "DOWN" | "LEFT" | "RIGHT"}
    Ignored requests (reversal, unknown value, finished game) still return
    200 with "accepted": false.
    """
    session = _get_session(game_id)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    game, lock = session

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    with lock:
        accepted = game.request_direction(data.get("direction"))
        response = {
            "game_id": game.game_id,
            "accepted": accepted,
            "state": game.snapshot().to_dict()
        }
    return jsonify(response)


@app.route("/api/games/<game_id>/tick", methods=["POST"])
def tick_game(game_id):
    """
    Advance the game by one step. The caller schedules the next call after
    state.speed_ms milliseconds.
    """
    session = _get_session(game_id)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    game, lock = session

    try:
        with lock:
            game.tick()
            return _game_response(game)
    except Exception as error:
        logging.error(f"Error ticking game {game_id}: {error}")
        return jsonify({"error": "Internal server error"}), 500


@app.route("/api/games/<game_id>/restart", methods=["POST"])
def restart_game(game_id):
    session = _get_session(game_id)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    game, lock = session

    with lock:
        game.restart()
        return _game_response(game)


@app.route("/api/games/<game_id>", methods=["DELETE"])
def delete_game(game_id):
    with games_lock:
        session = games.pop(game_id, None)
    if session is None:
        return jsonify({"error": "Game not found"}), 404
    return jsonify({"deleted": game_id})


if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port)
