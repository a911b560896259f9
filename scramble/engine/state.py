"""
Immutable game state and the reducer that advances it.

    state = new_game("listen")
    state, outcome = submit(state, "silent", dictionary)
    # state.used_words == ("silent",), state.score == 6

`submit` is pure with respect to the state: a rejected or ignored submission
returns the very same GameState object, and an accepted one returns a new
GameState with the word prepended (most recent first) and the score raised.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

from scramble.config import DEFAULT_LANGUAGE
from .outcomes import Accepted, Outcome
from .validation import validate


@dataclass(frozen=True)
class GameState:
    root_word: str
    used_words: Tuple[str, ...] = ()  # most recent first
    score: int = 0

    @property
    def word_count(self) -> int:
        return len(self.used_words)

    def entries(self) -> List[Tuple[str, int]]:
        """Accepted words paired with their letter counts, newest first."""
        return [(w, len(w)) for w in self.used_words]


def new_game(root_word: str) -> GameState:
    """Fresh state for `root_word`: no accepted words, score 0."""
    root = root_word.strip().lower()
    if not root:
        raise ValueError("root word must be a non-empty string")
    return GameState(root_word=root)


def submit(
        state: GameState,
        candidate: str,
        dictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
) -> Tuple[GameState, Outcome]:
    """
    Validate `candidate` against `state` and return (next_state, outcome).
    """
    outcome = validate(candidate, state.root_word, state.used_words, dictionary,
                       language=language)

    if isinstance(outcome, Accepted):
        state = replace(
            state,
            used_words=(outcome.word,) + state.used_words,
            score=state.score + outcome.points,
        )

    return state, outcome
