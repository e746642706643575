"""Flask API application."""

import logging
import math
import os
import uuid
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from platypor.config import (
    DEFAULT_DEATH_EXIT_CODE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STATE_DIR,
    DEFAULT_TICK_INTERVAL_MS,
)
from ..content.dialogue import DialogueBook
from ..content.loader import load_balance, load_catalog, load_dialogues
from ..engine.avatar import sprite_layers
from ..engine.equipment import EquipmentSlot
from ..engine.game_engine import GameEngine
from ..engine.rng import RandomSource
from ..models.player import PlayerState
from ..models.results import EngineResult
from ..persistence.literacy_marker import LiteracyMarker

logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='[%(name)-19s - %(levelname)5s] %(message)s')

app = Flask("flask.platypor")


@app.before_request
def log_request_info():
    app.logger.debug('Access to: %s from %s (%s)',
        request.url,
        request.headers.get('X-Forwarded-For', request.remote_addr),
        request.headers.get('User-Agent'))


# Error handlers for API routes
@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """Return JSON instead of HTML for HTTP errors in API routes."""
    if request.path.startswith("/api/"):
        response = e.get_response()
        response.data = jsonify(
            {
                "error": e.name,
                "code": e.code,
                "description": e.description,
            }
        ).data
        response.content_type = "application/json"
        return response
    return e


@app.errorhandler(500)
def handle_internal_error(e: Exception):
    """Handle 500 errors."""
    if request.path.startswith("/api/"):
        app.logger.error(f"Internal server error: {e}", exc_info=True)
        return jsonify({"error": "Internal Server Error", "message": "An unexpected error occurred"}), 500
    return "Internal Server Error", 500


# Content is loaded once; a missing or broken file stops the application here
_catalog = load_catalog()
_balance = load_balance()
_dialogue_book = DialogueBook(load_dialogues())

# Global game storage: game_id -> GameEngine
_games: dict[str, GameEngine] = {}
# Exit status of sessions that ended: game_id -> exit code
_ended_games: dict[str, int] = {}
_state_dir = DEFAULT_STATE_DIR


def _get_game_engine(game_id: Optional[str] = None) -> Optional[GameEngine]:
    """Get game engine by game_id, or return None if not found."""
    if game_id is None:
        return None
    return _games.get(game_id)


def _create_game(seed: Optional[int] = None, money: Optional[float] = None) -> str:
    """Create a new session and return its id."""
    game_id = str(uuid.uuid4())

    def end_session(exit_code: int) -> None:
        _ended_games[game_id] = exit_code
        app.logger.warning(f"Game {game_id} ended with status {exit_code}")

    initial_state = PlayerState() if money is None else PlayerState(money=money)
    rng = RandomSource.seeded(seed) if seed is not None else RandomSource()
    _games[game_id] = GameEngine(
        catalog=_catalog,
        balance=_balance,
        initial_state=initial_state,
        rng=rng,
        literacy_hook=LiteracyMarker(os.path.join(_state_dir, game_id)),
        on_death=end_session,
        death_exit_code=DEFAULT_DEATH_EXIT_CODE,
    )
    app.logger.info(f"Created game {game_id}")
    return game_id


def _serialize_game(game_id: str, engine: GameEngine) -> dict[str, Any]:
    """Serialize a session for the renderer."""
    state = engine.snapshot()
    avatar_key = engine.avatar_key()
    return {
        "game_id": game_id,
        "player": state.model_dump(mode="json"),
        "avatar": {"key": int(avatar_key), "layers": sprite_layers(avatar_key)},
        "controls": engine.control_states(),
        "ended": game_id in _ended_games,
        "exit_code": _ended_games.get(game_id),
    }


def _serialize_result(game_id: str, engine: GameEngine, result: EngineResult) -> dict[str, Any]:
    return {
        "accepted": result.accepted,
        "rejection": result.rejection.value if result.rejection else None,
        "dialogue": _dialogue_book.render(result.events),
        "state": _serialize_game(game_id, engine),
    }


@app.route("/api/config", methods=["GET"])
def get_config():
    """Get balance values and the expected tick cadence."""
    return jsonify({"balance": _balance.model_dump(), "tick_interval_ms": DEFAULT_TICK_INTERVAL_MS})


@app.route("/api/catalog", methods=["GET"])
def get_catalog():
    """Get action and product definitions."""
    return jsonify(_catalog.model_dump(by_alias=True))


@app.route("/api/games", methods=["GET"])
def list_games():
    """List all sessions."""
    games = [
        {"game_id": game_id, "ended": game_id in _ended_games, "level": engine.snapshot().level}
        for game_id, engine in _games.items()
    ]
    return jsonify({"games": games})


@app.route("/api/games", methods=["POST"])
def create_game():
    """Create a new session."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    seed = data.get("seed")
    money = data.get("money")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        return jsonify({"error": "seed must be an integer"}), 400
    if money is not None and (
        not isinstance(money, (int, float)) or isinstance(money, bool) or not math.isfinite(money)
    ):
        return jsonify({"error": "money must be a finite number"}), 400

    game_id = _create_game(seed=seed, money=money)
    return jsonify({"success": True, "game_id": game_id, "state": _serialize_game(game_id, _games[game_id])}), 201


@app.route("/api/games/<game_id>", methods=["DELETE"])
def delete_game(game_id: str):
    """Delete a session."""
    if game_id not in _games:
        return jsonify({"error": "Game not found"}), 404
    del _games[game_id]
    _ended_games.pop(game_id, None)
    app.logger.info(f"Removed game {game_id} from memory")
    return jsonify({"success": True})


@app.route("/api/games/<game_id>/state", methods=["GET"])
def get_state(game_id: str):
    """Get the current player state."""
    engine = _get_game_engine(game_id)
    if not engine:
        return jsonify({"error": "Game not found"}), 404
    return jsonify({"state": _serialize_game(game_id, engine)})


@app.route("/api/games/<game_id>/tick", methods=["POST"])
def tick(game_id: str):
    """Advance the session by one frame."""
    if not request.is_json:
        return jsonify({"error": "Content-Type must be application/json"}), 400

    data = request.get_json()
    if not data:
        return jsonify({"error": "No data provided"}), 400
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    delta = data.get("delta")
    if not isinstance(delta, (int, float)) or isinstance(delta, bool):
        return jsonify({"error": "delta must be a number of seconds"}), 400

    engine = _get_game_engine(game_id)
    if not engine:
        return jsonify({"error": "Game not found"}), 404

    try:
        result = engine.tick(float(delta))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(
        {
            "died": result.died,
            "dialogue": _dialogue_book.render(result.events),
            "state": _serialize_game(game_id, engine),
        }
    )


@app.route("/api/games/<game_id>/actions/<action_id>", methods=["POST"])
def perform_action(game_id: str, action_id: str):
    """Perform an action."""
    engine = _get_game_engine(game_id)
    if not engine:
        return jsonify({"error": "Game not found"}), 404
    result = engine.perform_action(action_id)
    return jsonify(_serialize_result(game_id, engine, result))


@app.route("/api/games/<game_id>/purchases/<product_id>", methods=["POST"])
def purchase(game_id: str, product_id: str):
    """Buy a product."""
    engine = _get_game_engine(game_id)
    if not engine:
        return jsonify({"error": "Game not found"}), 404
    result = engine.purchase(product_id)
    return jsonify(_serialize_result(game_id, engine, result))


@app.route("/api/games/<game_id>/equipment/<slot>/toggle", methods=["POST"])
def toggle_equipment(game_id: str, slot: str):
    """Switch a piece of gear on or off."""
    try:
        equipment_slot = EquipmentSlot(slot)
    except ValueError:
        return jsonify({"error": f"Invalid equipment slot: {slot}"}), 400

    engine = _get_game_engine(game_id)
    if not engine:
        return jsonify({"error": "Game not found"}), 404
    result = engine.toggle_equipment(equipment_slot)
    return jsonify(_serialize_result(game_id, engine, result))


if __name__ == "__main__":
    app.run(debug=True, port=5000)
