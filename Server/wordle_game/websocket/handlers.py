"""
WebSocket Event Handlers

Keystroke channel: each connected socket owns exactly one round,
keyed by its session id.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..services.game_service import describe_result, get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _emit_state(game_service):
    emit('round_state', asdict(game_service.get_game_state(request.sid)))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket client connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Drop the round owned by the disconnecting socket."""
        game_service = get_game_service()
        if game_service and game_service.delete_game(request.sid):
            game_logger.log_game_event(request.sid, 'game_deleted', request.remote_addr, reason='disconnect')

    @socketio.on('start_round')
    def handle_start_round(data=None):
        """Create (or replace) the round bound to this socket."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_logger.log_user_action(request, 'start_round', request.sid)
        game_service.create_new_game(request.sid)
        _emit_state(game_service)

    @socketio.on('new_word')
    @websocket_game_required
    def handle_new_word(data=None, game_service=None):
        game_logger.log_user_action(request, 'new_word', request.sid)
        game_service.start_new_round(request.sid)
        game_logger.log_game_event(request.sid, 'new_word', request.remote_addr)
        _emit_state(game_service)

    @socketio.on('key')
    @websocket_game_required
    def handle_key(data=None, game_service=None):
        """Feed one key (a letter, Enter or Backspace) into the round."""
        key = data.get('key') if isinstance(data, dict) else None
        if not isinstance(key, str) or not key:
            emit('error', {'error': 'Key is required'})
            return

        game_logger.log_user_action(request, 'key', request.sid, key=key)
        result = game_service.press_key(request.sid, key)

        if result is not None:
            message = describe_result(result)
            if result.accepted:
                emit('guess_result', {
                    'judgments': [judgment.value for judgment in result.judgments],
                    'status': result.status.value,
                    'guess_count': result.guess_count,
                    'answer': result.secret_if_lost,
                    'message': message
                })
                game_logger.log_round_end(request.sid, game_service.get_game_state(request.sid),
                                          request.remote_addr)
            else:
                emit('guess_rejected', {'reason': result.reason.value, 'error': message})

        _emit_state(game_service)
