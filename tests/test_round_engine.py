# tests/test_round_engine.py
import pytest

from wordle_game.config import MAX_GUESSES
from wordle_game.models import JudgedGuess, LetterJudgment, RejectReason, Round, RoundStatus
from wordle_game.services import round_engine
from wordle_game.services.round_engine import (
    aggregate_key_states, evaluate_guess, handle_key, merge_key_state, new_round,
    stage_letter, start_new_round, submit, unstage_letter,
)

C = LetterJudgment.CORRECT
P = LetterJudgment.PRESENT
A = LetterJudgment.ABSENT


def _stage_word(round_, word):
    for letter in word:
        stage_letter(round_, letter)
    return round_


def _play(round_, vocabulary, word):
    _stage_word(round_, word)
    return submit(round_, vocabulary)


# --- evaluation ---------------------------------------------------------

def test_guess_equal_to_secret_is_all_correct():
    assert evaluate_guess("crane", "crane") == [C] * 5


def test_guess_sharing_no_letters_is_all_absent():
    assert evaluate_guess("pilot", "crane") == [A] * 5


def test_evaluation_is_case_insensitive():
    assert evaluate_guess("CRANE", "crane") == [C] * 5


def test_trace_against_crane():
    assert evaluate_guess("trace", "crane") == [A, C, C, P, C]


def test_excess_duplicates_are_absent():
    # secret allot has two l's: one claimed exactly at index 2, one displaced
    assert evaluate_guess("lolly", "allot") == [P, P, C, A, A]


def test_exact_match_beats_earlier_displaced_match():
    # the l at index 2 is claimed exactly before the l at index 1 looks for a slot
    assert evaluate_guess("allot", "lolly") == [A, P, C, P, A]


def test_displaced_matches_claim_each_secret_letter_once():
    assert evaluate_guess("llama", "hello") == [P, P, A, A, A]


def test_evaluate_rejects_length_mismatch():
    with pytest.raises(ValueError):
        evaluate_guess("cranes", "crane")


# --- key aggregation ----------------------------------------------------

@pytest.mark.parametrize("current,new,expected", [
    (None, A, A),
    (A, P, P),
    (P, C, C),
    (C, P, C),
    (C, A, C),
    (P, A, P),
])
def test_merge_key_state_never_downgrades(current, new, expected):
    assert merge_key_state(current, new) is expected


def test_aggregate_key_states_from_history():
    history = [
        JudgedGuess("trace", (A, C, C, P, C)),
        JudgedGuess("stare", (A, A, C, P, C)),
    ]
    states = aggregate_key_states(history)
    assert states["r"] is C
    assert states["t"] is A
    assert states["c"] is P
    assert states["s"] is A
    assert "z" not in states


def test_correct_key_state_survives_later_present(vocabulary):
    round_ = new_round("crane")
    _play(round_, vocabulary, "trace")
    assert round_.key_states["r"] is C

    result = _play(round_, vocabulary, "stare")
    assert result.judgments[3] is P
    assert round_.key_states["r"] is C
    assert round_.key_states == aggregate_key_states(round_.guesses)


# --- staging ------------------------------------------------------------

def test_new_round_normalizes_secret():
    round_ = new_round("CRANE")
    assert round_.secret == "crane"
    assert round_.status is RoundStatus.ONGOING
    assert round_.attempts == 0


def test_new_round_rejects_wrong_length():
    with pytest.raises(ValueError):
        new_round("cranes")


def test_stage_letter_normalizes_and_filters():
    round_ = new_round("crane")
    stage_letter(round_, "C")
    stage_letter(round_, "1")
    stage_letter(round_, "ab")
    stage_letter(round_, "")
    stage_letter(round_, "é")
    assert round_.staged == ["c"]


def test_stage_letter_stops_at_word_length():
    round_ = _stage_word(new_round("crane"), "trains")
    assert round_.staged_word == "train"


def test_unstage_letter():
    round_ = _stage_word(new_round("crane"), "tr")
    unstage_letter(round_)
    assert round_.staged == ["t"]
    unstage_letter(round_)
    unstage_letter(round_)
    assert round_.staged == []


# --- submission ---------------------------------------------------------

def test_incomplete_guess_does_not_change_round(vocabulary):
    round_ = _stage_word(new_round("crane"), "tra")
    result = submit(round_, vocabulary)
    assert not result.accepted
    assert result.reason is RejectReason.INCOMPLETE_GUESS
    assert result.status is RoundStatus.ONGOING
    assert round_.attempts == 0
    assert round_.guesses == []
    assert round_.staged_word == "tra"


def test_unknown_word_keeps_staged_letters(vocabulary):
    round_ = new_round("crane")
    result = _play(round_, vocabulary, "zzzzz")
    assert not result.accepted
    assert result.reason is RejectReason.UNKNOWN_WORD
    assert round_.attempts == 0
    assert round_.guesses == []
    assert round_.staged_word == "zzzzz"
    assert round_.key_states == {}


def test_trace_then_crane_wins_in_two(vocabulary):
    round_ = new_round("crane")

    first = _play(round_, vocabulary, "trace")
    assert first.accepted
    assert list(first.judgments) == [A, C, C, P, C]
    assert first.status is RoundStatus.ONGOING
    assert first.guess_count is None
    assert round_.staged == []

    second = _play(round_, vocabulary, "crane")
    assert list(second.judgments) == [C] * 5
    assert second.status is RoundStatus.WON
    assert second.guess_count == 2
    assert second.secret_if_lost is None
    assert round_.is_over


def test_six_misses_lose_and_reveal_secret(vocabulary):
    round_ = new_round("crane")
    misses = ["trace", "slate", "stare", "hello", "world", "allot"]

    for word in misses[:-1]:
        assert _play(round_, vocabulary, word).status is RoundStatus.ONGOING

    result = _play(round_, vocabulary, misses[-1])
    assert result.status is RoundStatus.LOST
    assert result.secret_if_lost == "crane"
    assert result.guess_count is None
    assert round_.attempts == MAX_GUESSES


def test_win_on_last_guess_is_not_a_loss(vocabulary):
    round_ = new_round("crane")
    for word in ["trace", "slate", "stare", "hello", "world"]:
        _play(round_, vocabulary, word)

    result = _play(round_, vocabulary, "crane")
    assert result.status is RoundStatus.WON
    assert result.guess_count == MAX_GUESSES


def test_terminal_round_ignores_input(vocabulary):
    round_ = new_round("crane")
    _play(round_, vocabulary, "crane")

    stage_letter(round_, "a")
    assert round_.staged == []

    result = submit(round_, vocabulary)
    assert not result.accepted
    assert result.reason is RejectReason.ROUND_OVER
    assert result.status is RoundStatus.WON
    assert round_.attempts == 1


def test_terminal_round_ignores_unstage():
    round_ = Round(secret="crane", staged=["a"], status=RoundStatus.WON)
    unstage_letter(round_)
    assert round_.staged == ["a"]


def test_start_new_round_resets_everything(vocabulary):
    round_ = new_round("crane")
    _play(round_, vocabulary, "trace")
    _stage_word(round_, "sl")

    same = start_new_round(round_, "slate")
    assert same is round_
    assert round_.secret == "slate"
    assert round_.guesses == []
    assert round_.staged == []
    assert round_.key_states == {}
    assert round_.status is RoundStatus.ONGOING


# --- key dispatch -------------------------------------------------------

def test_handle_key_dispatch(vocabulary):
    round_ = new_round("crane")
    for key in ["t", "r", "a", "x", "Backspace", "c", "e"]:
        assert handle_key(round_, key, vocabulary) is None
    assert round_.staged_word == "trace"

    result = handle_key(round_, "Enter", vocabulary)
    assert result.accepted
    assert round_.attempts == 1


def test_handle_key_ignores_unknown_keys(vocabulary):
    round_ = new_round("crane")
    assert round_engine.handle_key(round_, "Shift", vocabulary) is None
    assert round_.staged == []
