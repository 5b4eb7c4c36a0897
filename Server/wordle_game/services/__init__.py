"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .word_source import Vocabulary, load_vocabulary, load_vocabulary_file, pick_secret
from . import round_engine

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'Vocabulary', 'load_vocabulary', 'load_vocabulary_file', 'pick_secret',
    'round_engine',
]
