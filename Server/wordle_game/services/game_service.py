"""
Game Service

Keeps one live round per session and turns round results into
client-facing snapshots and messages.
"""

import random
import uuid
from typing import Dict, Optional

from ..config.game_settings import ALPHABET, FALLBACK_SECRET, MAX_GUESSES, WORD_LENGTH, keyboard_layout
from ..models.game import GameState
from ..models.round import RejectReason, Round, RoundStatus, SubmitResult
from . import round_engine
from .word_source import Vocabulary, get_vocabulary_statistics, load_vocabulary_file, pick_secret

REJECTION_MESSAGES = {
    RejectReason.INCOMPLETE_GUESS: "Not enough letters",
    RejectReason.UNKNOWN_WORD: "Not in word list",
    RejectReason.ROUND_OVER: "Round is already over",
}

UNUSED = "unused"


def describe_result(result: SubmitResult) -> Optional[str]:
    """Human readable message for a submission, None for an ordinary guess."""
    if not result.accepted:
        return REJECTION_MESSAGES[result.reason]
    if result.status is RoundStatus.WON:
        return f"Nice! You got it in {result.guess_count}/{MAX_GUESSES} guesses."
    if result.status is RoundStatus.LOST:
        return f"Out of guesses — the word was: {result.secret_if_lost.upper()}"
    return None


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - Secret selection from the loaded vocabulary
    - Keystroke staging and guess submission
    - Snapshots that never expose the secret of a running round
    """

    def __init__(self, vocabulary: Vocabulary, fallback: str = FALLBACK_SECRET,
                 rng: Optional[random.Random] = None):
        self.games: Dict[str, Round] = {}  # Store active rounds by game_id
        self.vocabulary = vocabulary
        self.fallback = fallback
        self.rng = rng if rng is not None else random.Random()

    def _pick_secret(self) -> str:
        return pick_secret(self.vocabulary, self.fallback, self.rng)

    def create_new_game(self, game_id: Optional[str] = None) -> str:
        """
        Creates a new session with a randomly selected secret.

        Args:
            game_id: Session identifier to use; a fresh UUID when omitted

        Returns:
            str: Game ID for this session
        """
        game_id = game_id or str(uuid.uuid4())
        self.games[game_id] = round_engine.new_round(self._pick_secret())
        return game_id

    def start_new_round(self, game_id: str) -> Optional[GameState]:
        """Replace the round of an existing session with a fresh one."""
        if game_id not in self.games:
            return None
        round_engine.start_new_round(self.games[game_id], self._pick_secret())
        return self.get_game_state(game_id)

    def get_round(self, game_id: str) -> Optional[Round]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        round_ = self.games.get(game_id)
        if round_ is None:
            return None

        letter_status = {letter: UNUSED for letter in ALPHABET}
        letter_status.update({letter: judgment.value for letter, judgment in round_.key_states.items()})

        return GameState(
            game_id=game_id,
            attempts=round_.attempts,
            max_guesses=MAX_GUESSES,
            status=round_.status.value,
            staged=round_.staged_word,
            guesses=[guess.word for guess in round_.guesses],
            guess_results=[guess.pairs() for guess in round_.guesses],
            letter_status=letter_status,
            keyboard=keyboard_layout(),
            score=f"{round_.attempts}/{MAX_GUESSES}",
            answer=round_.secret if round_.is_over else None,
        )

    def stage_letter(self, game_id: str, letter: str) -> Optional[GameState]:
        if game_id not in self.games:
            return None
        round_engine.stage_letter(self.games[game_id], letter)
        return self.get_game_state(game_id)

    def unstage_letter(self, game_id: str) -> Optional[GameState]:
        if game_id not in self.games:
            return None
        round_engine.unstage_letter(self.games[game_id])
        return self.get_game_state(game_id)

    def press_key(self, game_id: str, key: str) -> Optional[SubmitResult]:
        """
        Feed one key into a session.

        Returns:
            The submission result for Enter, None for other keys.

        Raises:
            KeyError: If the game does not exist
        """
        round_ = self.games[game_id]
        return round_engine.handle_key(round_, key, self.vocabulary)

    def submit_guess(self, game_id: str, guess: Optional[str] = None) -> Optional[SubmitResult]:
        """
        Submits the staged letters, or ``guess`` when given.

        A supplied guess replaces the staged letters first; characters that
        are not letters are dropped while staging, and a guess with more
        than WORD_LENGTH letters is refused as an unknown word without
        touching the round. On rejection the staged letters are kept so the
        player can edit them.

        Args:
            game_id: Unique game identifier
            guess: Whole word to stage before submitting

        Returns:
            SubmitResult or None if game not found
        """
        round_ = self.games.get(game_id)
        if round_ is None:
            return None

        if guess is not None and not round_.is_over:
            letters = [char for char in guess.lower() if char in ALPHABET]
            if len(letters) > WORD_LENGTH:
                return SubmitResult(accepted=False, status=round_.status,
                                    reason=RejectReason.UNKNOWN_WORD)
            round_.staged = []
            for letter in letters:
                round_engine.stage_letter(round_, letter)

        return round_engine.submit(round_, self.vocabulary)

    def get_statistics(self) -> dict:
        return {
            "active_games": len(self.games),
            "vocabulary": get_vocabulary_statistics(self.vocabulary),
        }

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_list_path: str, fallback: str = FALLBACK_SECRET,
                            seed: Optional[int] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    vocabulary = load_vocabulary_file(word_list_path)
    _game_service = GameService(vocabulary, fallback=fallback, rng=random.Random(seed))
    return _game_service
