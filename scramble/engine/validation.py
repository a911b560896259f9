"""
Candidate validation.

This module answers the question: "Should this submission be accepted?"
Checks run in a fixed order and the first failure wins:

  1. non-empty      : empty input is silently ignored (not an error)
  2. original       : not already among the accepted words
  3. possible       : spelled from the root word's letters (multiset subset)
  4. real           : recognized by the dictionary oracle for the language
  5. long enough    : at least MIN_WORD_LENGTH letters

A word equal to the root word itself is allowed; nothing here rejects it.

The dictionary is any object exposing `is_real_word(word, language) -> bool`
(see scramble.dictionary).
"""

from typing import Iterable

from scramble.config import DEFAULT_LANGUAGE, MIN_WORD_LENGTH
from .composability import is_possible
from .outcomes import Accepted, Ignored, Outcome, Rejected, RejectionReason
from .scoring import word_points


def normalize_candidate(word: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return word.strip().lower()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    w = normalize_candidate(word)
    return all(w != normalize_candidate(u) for u in used_words)


def is_real(word: str, dictionary, language: str = DEFAULT_LANGUAGE) -> bool:
    return bool(dictionary.is_real_word(word, language))


def is_long_enough(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH


def validate(
        candidate: str,
        root_word: str,
        used_words: Iterable[str],
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
) -> Outcome:
    """
    Decide whether `candidate` is accepted for `root_word`.

    Args:
      candidate  : raw player input (normalized here)
      root_word  : the word every candidate must be spelled from
      used_words : words accepted so far in this game
      dictionary : real-word oracle
      language   : language tag passed to the oracle

    Returns:
      Ignored(), Accepted(word, points) or Rejected(word, reason, root_word).
    """
    word = normalize_candidate(candidate)

    if not word:
        return Ignored()

    if not is_original(word, used_words):
        return Rejected(word, RejectionReason.ALREADY_USED, root_word)

    if not is_possible(word, root_word):
        return Rejected(word, RejectionReason.NOT_COMPOSABLE, root_word)

    if not is_real(word, dictionary, language):
        return Rejected(word, RejectionReason.NOT_A_REAL_WORD, root_word)

    if not is_long_enough(word):
        return Rejected(word, RejectionReason.TOO_SHORT, root_word)

    return Accepted(word, word_points(word))
