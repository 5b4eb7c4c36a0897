"""
Word Guessing Game Server - Main Entry Point

This is the main entry point for the game server.
It loads the configuration and starts the Flask-SocketIO application.
"""

import os
from wordle_game import create_app
from wordle_game.config import config
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    app_env = os.getenv('APP_ENV', 'default')
    config_class = config.get(app_env)
    if config_class is None:
        print(f"Unknown APP_ENV '{app_env}', using default configuration")
        game_logger.logger.warning(f"Unknown APP_ENV '{app_env}', using default configuration")
        config_class = config['default']
    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Game Server Starting")

        print(f"\nStarting Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Word list: {config_class.WORD_LIST_PATH}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
