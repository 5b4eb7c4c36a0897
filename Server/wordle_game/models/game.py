"""
Game Data Models

Contains the JSON-ready snapshot of a session handed to clients.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    attempts: int
    max_guesses: int
    status: str  # "ongoing", "won" or "lost"
    staged: str
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter judgment as string for JSON serialization
    letter_status: Dict[str, str]
    keyboard: List[List[str]]
    score: str
    answer: Optional[str] = None  # Only included when the round is over
