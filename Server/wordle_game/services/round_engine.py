"""
Round Engine

Contains the guess evaluation algorithm and the round state machine.
Every operation works on an explicit Round and completes synchronously.
"""

from typing import Dict, Iterable, List, Optional

from ..config.game_settings import ALPHABET, BACKSPACE_KEY, ENTER_KEY, MAX_GUESSES, WORD_LENGTH
from ..models.round import (
    JudgedGuess, LetterJudgment, RejectReason, Round, RoundStatus, SubmitResult,
)
from .word_source import Vocabulary


def evaluate_guess(guess: str, secret: str) -> List[LetterJudgment]:
    """
    Judge every letter of ``guess`` against ``secret``.

    Exact position matches are claimed first. Remaining letters then claim
    the lowest unclaimed secret position holding the same letter, scanning
    the guess left to right. Each secret position is claimed at most once.
    """
    guess = guess.lower()
    secret = secret.lower()
    if len(guess) != len(secret):
        raise ValueError("Guess and secret must have the same length")

    result = [LetterJudgment.ABSENT] * len(guess)
    consumed = [False] * len(secret)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            result[i] = LetterJudgment.CORRECT
            consumed[i] = True

    # Second pass: displaced matches
    for i, letter in enumerate(guess):
        if result[i] is not LetterJudgment.ABSENT:
            continue
        for j, secret_letter in enumerate(secret):
            if not consumed[j] and secret_letter == letter:
                result[i] = LetterJudgment.PRESENT
                consumed[j] = True
                break

    return result


def merge_key_state(current: Optional[LetterJudgment], new: LetterJudgment) -> LetterJudgment:
    """Keep the better of two judgments (correct > present > absent)."""
    if current is None or new.priority > current.priority:
        return new
    return current


def _fold_judgments(key_states: Dict[str, LetterJudgment], guess: JudgedGuess) -> None:
    for letter, judgment in zip(guess.word, guess.judgments):
        key_states[letter] = merge_key_state(key_states.get(letter), judgment)


def aggregate_key_states(history: Iterable[JudgedGuess]) -> Dict[str, LetterJudgment]:
    """Rebuild the per-letter keyboard hints from the full guess history."""
    key_states: Dict[str, LetterJudgment] = {}
    for guess in history:
        _fold_judgments(key_states, guess)
    return key_states


def new_round(secret: str) -> Round:
    if len(secret) != WORD_LENGTH:
        raise ValueError(f"Secret must be {WORD_LENGTH} letters long")
    return Round(secret=secret.lower())


def start_new_round(round_: Round, secret: str) -> Round:
    """Reset every field of an existing round, as if freshly constructed."""
    fresh = new_round(secret)
    round_.secret = fresh.secret
    round_.guesses = fresh.guesses
    round_.staged = fresh.staged
    round_.status = fresh.status
    round_.key_states = fresh.key_states
    return round_


def stage_letter(round_: Round, letter: str) -> Round:
    """Append one letter to the current attempt. Anything invalid is ignored."""
    if round_.is_over or len(round_.staged) >= WORD_LENGTH:
        return round_
    if not isinstance(letter, str) or len(letter) != 1:
        return round_

    normalized = letter.lower()
    if normalized in ALPHABET:
        round_.staged.append(normalized)
    return round_


def unstage_letter(round_: Round) -> Round:
    if round_.staged and not round_.is_over:
        round_.staged.pop()
    return round_


def submit(round_: Round, vocabulary: Vocabulary) -> SubmitResult:
    """
    Submit the staged letters as a guess.

    Rejections leave the round untouched, including the staged letters.
    """
    if round_.is_over:
        return SubmitResult(accepted=False, status=round_.status, reason=RejectReason.ROUND_OVER)

    if len(round_.staged) != WORD_LENGTH:
        return SubmitResult(accepted=False, status=round_.status, reason=RejectReason.INCOMPLETE_GUESS)

    guess = round_.staged_word
    if guess not in vocabulary:
        return SubmitResult(accepted=False, status=round_.status, reason=RejectReason.UNKNOWN_WORD)

    judged = JudgedGuess(word=guess, judgments=tuple(evaluate_guess(guess, round_.secret)))
    round_.guesses.append(judged)
    round_.staged = []
    _fold_judgments(round_.key_states, judged)

    if guess == round_.secret:
        round_.status = RoundStatus.WON
    elif round_.attempts >= MAX_GUESSES:
        round_.status = RoundStatus.LOST

    return SubmitResult(
        accepted=True,
        status=round_.status,
        judgments=judged.judgments,
        guess_count=round_.attempts if round_.status is RoundStatus.WON else None,
        secret_if_lost=round_.secret if round_.status is RoundStatus.LOST else None,
    )


def handle_key(round_: Round, key: str, vocabulary: Vocabulary) -> Optional[SubmitResult]:
    """
    Dispatch one keyboard key.

    Returns the submission result for the Enter key and None otherwise.
    """
    if key == ENTER_KEY:
        return submit(round_, vocabulary)
    if key == BACKSPACE_KEY:
        unstage_letter(round_)
        return None
    stage_letter(round_, key)
    return None
