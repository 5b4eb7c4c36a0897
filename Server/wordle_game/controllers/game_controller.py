"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.game_service import describe_result, get_game_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _submission_response(game_service, game_id, result):
    """Build the JSON body and status code for a submission."""
    state = game_service.get_game_state(game_id)
    message = describe_result(result)

    if not result.accepted:
        return {
            'success': False,
            'reason': result.reason.value,
            'error': message,
            'state': asdict(state)
        }, 400

    return {
        'success': True,
        'judgments': [judgment.value for judgment in result.judgments],
        'status': result.status.value,
        'guess_count': result.guess_count,
        'answer': result.secret_if_lost,
        'message': message,
        'state': asdict(state)
    }, 200


def _respond_to_submission(game_service, game_id, result, action):
    response_data, status_code = _submission_response(game_service, game_id, result)
    game_logger.log_server_response(
        request, action, result.accepted, response_data, game_id,
        reason=result.reason.value if result.reason else None
    )
    if result.accepted:
        game_logger.log_round_end(game_id, game_service.get_game_state(game_id), request.remote_addr)
    return jsonify(response_data), status_code


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
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
            max_guesses=state.max_guesses
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempts=state.attempts, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game_service
def press_key(game_id, game_service):
    """Feed one on-screen or physical keyboard key into the round."""
    try:
        data = request.get_json(silent=True) or {}
        key = data.get('key')
        if not isinstance(key, str) or not key:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'key', game_id, key=key)

        result = game_service.press_key(game_id, key)
        if result is not None:
            return _respond_to_submission(game_service, game_id, result, 'key')

        response_data = {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        }
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game_service
def stage_letter(game_id, game_service):
    """Stage one letter of the current attempt."""
    try:
        data = request.get_json(silent=True) or {}
        letter = data.get('letter', '')

        game_logger.log_user_action(request, 'stage_letter', game_id, letter=letter)

        state = game_service.stage_letter(game_id, letter)
        return jsonify({'success': True, 'state': asdict(state)})

    except Exception as e:
        game_logger.log_error(request, e, 'stage_letter', game_id)
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/game/<game_id>/letter', methods=['DELETE'])
@require_game_service
def unstage_letter(game_id, game_service):
    """Remove the last staged letter."""
    try:
        game_logger.log_user_action(request, 'unstage_letter', game_id)

        state = game_service.unstage_letter(game_id)
        return jsonify({'success': True, 'state': asdict(state)})

    except Exception as e:
        game_logger.log_error(request, e, 'unstage_letter', game_id)
        return jsonify({'success': False, 'error': str(e)}), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """Submit the staged letters, or a whole word, for evaluation."""
    try:
        data = request.get_json(silent=True) or {}
        guess = data.get('guess')
        if guess is not None and not isinstance(guess, str):
            error_response = {
                'success': False,
                'error': 'Guess must be a string'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        result = game_service.submit_guess(game_id, guess)
        return _respond_to_submission(game_service, game_id, result, 'submit_guess')

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/new_word', methods=['POST'])
@require_game_service
def new_word(game_id, game_service):
    """Start a fresh round in the same session."""
    try:
        game_logger.log_user_action(request, 'new_word', game_id)

        state = game_service.start_new_round(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'new_word', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'new_word', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_word', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_word', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'game_service_available': game_service is not None,
            'log_stats': game_logger.get_log_stats()
        }
        if game_service:
            response_data.update(game_service.get_statistics())

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
