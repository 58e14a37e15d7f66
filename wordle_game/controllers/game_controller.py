"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _internal_error(e, action, game_id=None):
    game_logger.log_error(request, e, action, game_id)
    error_response = {
        'success': False,
        'error': str(e)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error(e, 'new_game')


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_attempt=state.current_attempt, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error(e, 'get_state', game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        if game_service.get_engine(game_id) is None:
            return _game_not_found('submit_guess', game_id)

        # Rejected guesses never consume an attempt
        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        result = game_service.make_guess(game_id, guess)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'result': {
                'guess': result.normalized_guess,
                'marks': [mark.value for mark in result.marks],
                'feedback': result.encode()
            },
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.normalized_guess, attempt=state.current_attempt, game_over=state.game_over
        )

        if state.game_over:
            if state.won:
                game_logger.log_game_event(
                    game_id, 'game_won', request.remote_addr,
                    attempts_used=state.current_attempt, target_word=state.answer
                )
            else:
                game_logger.log_game_event(
                    game_id, 'game_lost', request.remote_addr,
                    attempts_used=state.current_attempt, target_word=state.answer,
                    final_guess=result.normalized_guess
                )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error(e, 'submit_guess', game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Restart a game session, by default with a new secret word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if data is None:
            data = {}
        new_word = data.get('new_word', True) if isinstance(data, dict) else None
        if not isinstance(new_word, bool):
            error_response = {
                'success': False,
                'error': "Body must be a JSON object with a boolean 'new_word'"
            }
            game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'reset_game', game_id, new_word=new_word)

        state = game_service.reset_game(game_id, new_word=new_word)
        if state is None:
            return _game_not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr, new_word=new_word)

        return jsonify(response_data)

    except Exception as e:
        return _internal_error(e, 'reset_game', game_id)


@game_bp.route('/game/<game_id>/word_check', methods=['GET'])
def word_check(game_id):
    """Check whether a word belongs to the game's word list."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        word = request.args.get('word', '')

        game_logger.log_user_action(request, 'word_check', game_id, word=word)

        in_word_list = game_service.is_in_word_list(game_id, word)
        if in_word_list is None:
            return _game_not_found('word_check', game_id)

        response_data = {
            'success': True,
            'word': word.upper(),
            'in_word_list': in_word_list
        }

        game_logger.log_server_response(request, 'word_check', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        return _internal_error(e, 'word_check', game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        return _internal_error(e, 'delete_game', game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        return _internal_error(e, 'health_check')
