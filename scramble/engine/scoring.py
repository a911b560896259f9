"""
Score accumulation.

An accepted word is worth one point per character. There is no length bonus
and no weighting for repeated letters: the running score is the plain sum of
the accepted words' lengths.
"""

from typing import Iterable


def word_points(word: str) -> int:
    """Points awarded for a single accepted word."""
    return len(word)


def total_score(words: Iterable[str]) -> int:
    """Score of a whole history of accepted words."""
    return sum(word_points(w) for w in words)
