# tests/test_word_source.py
import logging
import random

import pytest

from wordle_game.services.word_source import (
    Vocabulary, get_vocabulary_statistics, load_vocabulary, load_vocabulary_file, pick_secret,
)


def test_load_trims_lowercases_and_filters_length():
    vocabulary = load_vocabulary("  Crane \r\nTRACE\nab\ntoolong\n\n\tslate\t")
    assert vocabulary.words == ["crane", "trace", "slate"]
    assert vocabulary.lookup == frozenset({"crane", "trace", "slate"})


def test_load_keeps_duplicates_for_indexing():
    vocabulary = load_vocabulary("crane\nCRANE\ntrace")
    assert vocabulary.words == ["crane", "crane", "trace"]
    assert len(vocabulary.lookup) == 2


def test_membership_is_case_insensitive(vocabulary):
    assert "CRANE" in vocabulary
    assert "crane" in vocabulary
    assert "zzzzz" not in vocabulary
    assert 12345 not in vocabulary


def test_empty_vocabulary_is_not_an_error(caplog):
    with caplog.at_level(logging.WARNING, logger="wordle_game.word_source"):
        vocabulary = load_vocabulary("ab\nabcdefg\n")
    assert vocabulary.is_empty
    assert len(vocabulary) == 0
    assert "empty" in caplog.text


def test_pick_secret_falls_back_when_empty():
    assert pick_secret(Vocabulary()) == "crane"
    assert pick_secret(Vocabulary(), fallback="SLATE") == "slate"


def test_pick_secret_rejects_bad_fallback():
    with pytest.raises(ValueError):
        pick_secret(Vocabulary(), fallback="toolong")
    with pytest.raises(ValueError):
        pick_secret(Vocabulary(), fallback="cr4ne")


def test_pick_secret_is_deterministic_with_seeded_rng(vocabulary):
    first = pick_secret(vocabulary, rng=random.Random(7))
    second = pick_secret(vocabulary, rng=random.Random(7))
    assert first == second
    assert first in vocabulary


def test_pick_secret_uses_the_whole_pool(vocabulary):
    rng = random.Random(3)
    picks = {pick_secret(vocabulary, rng=rng) for _ in range(500)}
    assert picks == set(vocabulary.lookup)


def test_load_vocabulary_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("crane\nTrace\nnope\n", encoding="utf-8")
    vocabulary = load_vocabulary_file(str(path))
    assert vocabulary.words == ["crane", "trace"]


def test_missing_word_list_yields_empty_vocabulary(tmp_path):
    vocabulary = load_vocabulary_file(str(tmp_path / "missing.txt"))
    assert vocabulary.is_empty
    assert pick_secret(vocabulary) == "crane"


def test_vocabulary_statistics(vocabulary):
    stats = get_vocabulary_statistics(vocabulary)
    assert stats["total_words"] == len(vocabulary.words)
    assert stats["distinct_words"] == len(vocabulary.lookup)
    assert len(stats["most_common_letters"]) == 5
    assert get_vocabulary_statistics(Vocabulary())["total_words"] == 0


def test_entries_that_cannot_be_typed_are_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="wordle_game.word_source"):
        vocabulary = load_vocabulary("cafés\nABCDİ\n12345\nab cd\nCrane")
    assert vocabulary.words == ["crane"]
    assert vocabulary.lookup == frozenset({"crane"})
    assert "Dropped 4" in caplog.text


def test_untypeable_only_list_falls_back_to_default_secret():
    vocabulary = load_vocabulary("ABCDİ\n")
    assert vocabulary.is_empty
    assert pick_secret(vocabulary) == "crane"
