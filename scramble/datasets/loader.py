"""
Root-word candidates.

The game cannot start without a root word, so failing to read the start-word
list is fatal: RootWordsUnavailable is raised and callers are expected to stop
rather than recover.
"""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import List, Sequence

from scramble.config import DEFAULT_START_WORDS, START_WORDS_ENV
from .io import read_lines


class RootWordsUnavailable(RuntimeError):
    """The start-word list is missing or holds no usable words."""


def get_start_words_path(path: Path | str | None = None) -> Path:
    """Explicit path, then $SCRAMBLE_START_WORDS, then the bundled list."""
    if path:
        return Path(path)
    env = os.environ.get(START_WORDS_ENV)
    if env:
        return Path(env)
    return DEFAULT_START_WORDS


def load_root_word_candidates(path: Path | str | None = None) -> List[str]:
    """
    Read the newline-delimited start-word list (trimmed, lowercased, blanks
    dropped, file order kept).
    """
    p = get_start_words_path(path)
    try:
        words = read_lines(p, normalize=True)
    except (OSError, UnicodeDecodeError) as e:
        raise RootWordsUnavailable(f"Could not load start words from {p}") from e
    if not words:
        raise RootWordsUnavailable(f"Start word list is empty: {p}")
    return words


def choose_root_word(candidates: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one candidate uniformly at random."""
    if not candidates:
        raise RootWordsUnavailable("No root word candidates to choose from")
    return (rng or random).choice(list(candidates))
