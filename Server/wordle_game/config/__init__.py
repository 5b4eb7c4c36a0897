"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_GUESSES, FALLBACK_SECRET, ALPHABET,
    ENTER_KEY, BACKSPACE_KEY, KEYBOARD_ROWS, keyboard_layout,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'FALLBACK_SECRET', 'ALPHABET',
    'ENTER_KEY', 'BACKSPACE_KEY', 'KEYBOARD_ROWS', 'keyboard_layout',
]
