"""
Service Decorators

Contains decorators guarding HTTP endpoints and WebSocket handlers that
need the game service and an existing session.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that use the game service.

    Answers 500 when the service is unavailable and 404 when the route's
    ``game_id`` does not name a live session. The service is passed to the
    view as the ``game_service`` keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_id = kwargs.get('game_id')
        if game_id is not None and game_service.get_round(game_id) is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket handlers that act on the socket's round."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service or game_service.get_round(request.sid) is None:
            emit('error', {'error': 'No active round, send start_round first'})
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
