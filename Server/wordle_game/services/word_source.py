"""
Word Source

Loads the vocabulary of accepted words and selects the secret for a round.
"""

import logging
import random
import re
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from ..config.game_settings import FALLBACK_SECRET, WORD_LENGTH, is_valid_word_shape

logger = logging.getLogger('wordle_game.word_source')

_LINE_SPLIT = re.compile(r'\r?\n')


@dataclass(frozen=True)
class Vocabulary:
    """
    Accepted words.

    ``words`` keeps source order (and duplicates) for random indexing,
    ``lookup`` is used for membership tests.
    """
    words: List[str] = field(default_factory=list)
    lookup: FrozenSet[str] = frozenset()

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and word.lower() in self.lookup

    def __len__(self) -> int:
        return len(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words


def load_vocabulary(raw_text: str) -> Vocabulary:
    """
    Parse newline separated entries into a vocabulary.

    Entries are trimmed and lowercased; anything that is not then exactly
    WORD_LENGTH ASCII letters is dropped, so every entry can be typed. An
    empty result is returned as-is; callers detect it through
    ``Vocabulary.is_empty``.
    """
    entries = [line.strip() for line in _LINE_SPLIT.split(raw_text or '')]
    words = [entry.lower() for entry in entries if is_valid_word_shape(entry.lower())]

    # Only entries of the right length count as dropped; other lengths are expected noise
    dropped = sum(1 for entry in entries if len(entry) == WORD_LENGTH) - len(words)
    if dropped > 0:
        logger.warning(f"Dropped {dropped} word list entries that are not {WORD_LENGTH} ASCII letters")
    if not words:
        logger.warning("Vocabulary loaded empty")
    return Vocabulary(words=words, lookup=frozenset(words))


def load_vocabulary_file(path: str) -> Vocabulary:
    """
    Read a UTF-8 word list from disk.

    A missing or unreadable file yields an empty vocabulary so that the
    fallback secret applies.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw_text = f.read()
    except OSError as e:
        logger.error(f"Failed to load word list {path}: {e}")
        return Vocabulary()

    vocabulary = load_vocabulary(raw_text)
    logger.info(f"Loaded {len(vocabulary)} words from {path}")
    return vocabulary


def pick_secret(vocabulary: Vocabulary,
                fallback: str = FALLBACK_SECRET,
                rng: Optional[random.Random] = None) -> str:
    """
    Select the secret word for a new round.

    Args:
        vocabulary: Loaded vocabulary, possibly empty
        fallback: Word used when the vocabulary is empty
        rng: Randomness source; the module-level generator when omitted

    Returns:
        str: Lowercase secret word

    Raises:
        ValueError: If the fallback is not a valid WORD_LENGTH word
    """
    if not is_valid_word_shape(fallback):
        raise ValueError(f"Fallback word '{fallback}' is not a {WORD_LENGTH}-letter word")

    if vocabulary.is_empty:
        return fallback.lower()

    chooser = rng if rng is not None else random
    return chooser.choice(vocabulary.words)


def get_vocabulary_statistics(vocabulary: Vocabulary) -> dict:
    """
    Summarize a vocabulary for monitoring.

    Returns:
        dict: total_words, distinct_words, most_common_letters
    """
    if vocabulary.is_empty:
        return {"total_words": 0, "distinct_words": 0, "most_common_letters": []}

    letter_frequency = {}
    for word in sorted(vocabulary.lookup):
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(vocabulary.words),
        "distinct_words": len(vocabulary.lookup),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
