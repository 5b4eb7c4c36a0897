"""
Word Guessing Game Server Package

This package contains the round engine of the word guessing game and the
Flask / Flask-SocketIO layer that exposes it to a single player per session.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Apply the logging settings of this configuration
    from .utils.game_logger import game_logger
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)

    # Initialize the game service before any route can ask for a secret
    from .services.game_service import initialize_game_service
    initialize_game_service(
        config_class.WORD_LIST_PATH,
        fallback=config_class.FALLBACK_SECRET,
        seed=config_class.RANDOM_SEED
    )

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
