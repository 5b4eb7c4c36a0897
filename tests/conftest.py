# tests/conftest.py
import os
import random
import tempfile

# Keep test logs out of the working tree; must happen before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_game_logs_'))

import pytest

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.services import round_engine
from wordle_game.services.game_service import GameService, get_game_service
from wordle_game.services.word_source import load_vocabulary

WORDS = """
crane
trace
allot
lolly
slate
stare
hello
world
pilot
llama
"""


@pytest.fixture
def vocabulary():
    return load_vocabulary(WORDS)


@pytest.fixture
def service(vocabulary):
    """A game service with a small vocabulary and a seeded RNG."""
    return GameService(vocabulary, rng=random.Random(0))


@pytest.fixture
def app_and_socketio():
    app, socketio = create_app(TestingConfig)
    return app, socketio


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


@pytest.fixture
def force_secret():
    """Replace the secret of a live session with a known word."""
    def _force(game_id, secret):
        game_service = get_game_service()
        round_engine.start_new_round(game_service.get_round(game_id), secret)
    return _force
