"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState
from .round import JudgedGuess, LetterJudgment, RejectReason, Round, RoundStatus, SubmitResult

__all__ = [
    'GameState',
    'JudgedGuess', 'LetterJudgment', 'RejectReason', 'Round', 'RoundStatus', 'SubmitResult',
]
