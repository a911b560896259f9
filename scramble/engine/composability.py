"""
Letter-availability check for a candidate against the root word.

A candidate is "possible" iff its letters form a multiset subset of the root
word's letters: every letter of the candidate consumes one matching, still
unused letter of the root. Matching is case-insensitive.

Examples:
  is_possible("silent", "listen") -> True   (anagram)
  is_possible("tin", "listen")    -> True
  is_possible("sells", "listen")  -> False  (only one 's', one 'l')
"""

from collections import Counter
from typing import Optional


def remaining_letters(word: str, root_word: str) -> Optional[Counter]:
    """
    Consume the letters of `word` from `root_word`, one at a time.

    Returns:
      Counter of root letters left over after the match, or None as soon as a
      letter of `word` has no remaining occurrence in the root.
    """
    remaining = Counter(root_word.strip().lower())

    for ch in word.strip().lower():
        if remaining[ch] <= 0:
            return None  # no unused copy of this letter left
        remaining[ch] -= 1  # consume one instance

    return +remaining  # drop zero counts


def is_possible(word: str, root_word: str) -> bool:
    """Return True if `word` can be spelled from the letters of `root_word`."""
    return remaining_letters(word, root_word) is not None
