"""
Game Configuration Constants Module

This module defines all game configuration constants for a single round.
All game parameters are centralized here to enable easy modification.
"""

import os
import string
from typing import Final, List, Tuple

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

FALLBACK_SECRET: Final[str] = "crane"
"""
Secret used when the vocabulary could not be loaded or is empty.
Must itself be a WORD_LENGTH word.
"""

ALPHABET: Final[str] = string.ascii_lowercase

# On-screen keyboard rows, including the two action keys
ENTER_KEY: Final[str] = "Enter"
BACKSPACE_KEY: Final[str] = "Backspace"

KEYBOARD_ROWS: Final[Tuple[Tuple[str, ...], ...]] = (
    ('q', 'w', 'e', 'r', 't', 'y', 'u', 'i', 'o', 'p'),
    ('a', 's', 'd', 'f', 'g', 'h', 'j', 'k', 'l'),
    (ENTER_KEY, 'z', 'x', 'c', 'v', 'b', 'n', 'm', BACKSPACE_KEY),
)

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'dictionary.txt'
)


def keyboard_layout() -> List[List[str]]:
    """Keyboard rows as plain lists for JSON serialization."""
    return [list(row) for row in KEYBOARD_ROWS]


def is_valid_word_shape(word: str) -> bool:
    """True if ``word`` has WORD_LENGTH alphabetic ASCII characters."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and all(char in ALPHABET for char in word.lower())
    )
