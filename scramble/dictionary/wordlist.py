"""
Local word-list dictionary.

Words are held in one set per language tag. A list can be supplied directly
(handy for tests and small bundled lists) or loaded from a newline-separated
file such as the system dictionary at /usr/share/dict/words.

Lookups are case-insensitive; a language that was never loaded recognizes
nothing.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, List, Set

from scramble.config import DEFAULT_LANGUAGE, DEFAULT_WORD_LIST, WORD_LIST_ENV
from .base import BaseDictionary, DictionaryUnavailable, register


def get_word_list_path(path: Path | str | None = None) -> Path:
    """
    Resolve the dictionary file: explicit path, then $SCRAMBLE_WORD_LIST,
    then the system word list.
    """
    if path:
        return Path(path)
    env = os.environ.get(WORD_LIST_ENV)
    if env:
        return Path(env)
    if DEFAULT_WORD_LIST.exists():
        return DEFAULT_WORD_LIST
    raise DictionaryUnavailable(
        f"No word list found. Set {WORD_LIST_ENV} to a path or install a system "
        f"dictionary (e.g. {DEFAULT_WORD_LIST})."
    )


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list"

    def __init__(self, words: Iterable[str] | None = None, *,
                 path: Path | str | None = None, language: str = DEFAULT_LANGUAGE):
        self._words: Dict[str, Set[str]] = {}
        if words is not None:
            self.add_words(words, language=language)
        else:
            # No inline words: fall back to a file (explicit, env, or system)
            self.load(path, language=language)

    @classmethod
    def from_file(cls, path: Path | str | None = None, *,
                  language: str = DEFAULT_LANGUAGE) -> "WordListDictionary":
        """Load a dictionary file (explicit path, $SCRAMBLE_WORD_LIST, or system list)."""
        return cls(path=path, language=language)

    def add_words(self, words: Iterable[str], *, language: str = DEFAULT_LANGUAGE) -> int:
        """Add words for `language`; returns how many were new."""
        bucket = self._words.setdefault(language, set())
        before = len(bucket)
        bucket.update(w.strip().lower() for w in words if w.strip())
        return len(bucket) - before

    def load(self, path: Path | str | None = None, *, language: str = DEFAULT_LANGUAGE) -> int:
        p = get_word_list_path(path)
        if not p.exists():
            raise DictionaryUnavailable(f"word list not found: {p}")
        with p.open("r", encoding="utf-8", errors="ignore") as f:
            return self.add_words(f, language=language)

    def languages(self) -> List[str]:
        return sorted(self._words)

    def __len__(self) -> int:
        return sum(len(ws) for ws in self._words.values())

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        w = word.strip().lower()
        return bool(w) and w in self._words.get(language, ())
