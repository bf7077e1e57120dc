"""
Tic-Tac-Toe - browser game with move history and time travel.
The game lives in the Flask session; each API call runs one game operation.
"""

import logging

from flask import Blueprint, jsonify, render_template, request, session

from app.projects.tic_tac_toe.core.constants import SESSION_KEY
from app.projects.tic_tac_toe.core.game import Game
from app.utils.logging import log_game_result, log_project_visit

logger = logging.getLogger(__name__)

tic_tac_toe_bp = Blueprint('tic_tac_toe', __name__,
                          template_folder='templates')


def _load_game():
    """Load the session game, starting a fresh one if missing or corrupt."""
    data = session.get(SESSION_KEY)
    if data is None:
        return Game()
    try:
        return Game.from_dict(data)
    except ValueError as e:
        logger.warning(f"Discarding invalid session game: {e}")
        return Game()


def _save_game(game):
    session[SESSION_KEY] = game.to_dict()


def _get_int_field(name):
    """Read an integer field from the JSON body. Returns (value, error_message)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return None, 'No data provided'
    value = data.get(name)
    # bool is an int subclass; true/false is not a square
    if isinstance(value, bool) or not isinstance(value, int):
        return None, f"'{name}' must be an integer"
    return value, None


@tic_tac_toe_bp.route('/')
def index():
    """Display the Tic-Tac-Toe game"""
    log_project_visit('tic_tac_toe', 'Tic-Tac-Toe')
    game = _load_game()
    return render_template('tic_tac_toe.html', state=game.snapshot())


@tic_tac_toe_bp.route('/api/state')
def api_state():
    return jsonify(_load_game().snapshot())


@tic_tac_toe_bp.route('/api/move', methods=['POST'])
def api_move():
    """Play the current player's mark on a square. Body: {"square": 0-8}"""
    square, err = _get_int_field('square')
    if err:
        return jsonify({'error': err}), 400

    game = _load_game()
    accepted = game.apply_move(square)
    if accepted:
        _save_game(game)
        logger.info(f"Move #{game.current_move}: square {square}, status '{game.status}'")
        if game.is_over:
            log_game_result(game.status, game.current_move)
    else:
        logger.debug(f"Rejected move on square {square}")

    return jsonify({'accepted': accepted, **game.snapshot()})


@tic_tac_toe_bp.route('/api/jump', methods=['POST'])
def api_jump():
    """Show an earlier move without discarding history. Body: {"move": n}"""
    move, err = _get_int_field('move')
    if err:
        return jsonify({'error': err}), 400

    game = _load_game()
    accepted = game.jump_to(move)
    if accepted:
        _save_game(game)
    else:
        logger.debug(f"Ignored jump to move {move}; history has {len(game.history)} entries")

    return jsonify({'accepted': accepted, **game.snapshot()})


@tic_tac_toe_bp.route('/api/toggle-order', methods=['POST'])
def api_toggle_order():
    game = _load_game()
    game.toggle_order()
    _save_game(game)
    return jsonify(game.snapshot())


@tic_tac_toe_bp.route('/api/new-game', methods=['POST'])
def api_new_game():
    game = Game()
    _save_game(game)
    return jsonify(game.snapshot())
