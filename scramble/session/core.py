"""
Interactive session primitives.

A GameSession owns the single current GameState for one player and wires the
two collaborators the rules need:
  - the start-word list (root-word candidates, read once and cached)
  - the dictionary oracle

It is UI-agnostic so the terminal app, the replay tool and tests all drive the
game the same way: restart() to pick a new root word, submit() once per input
line. Every submission is appended to `transcript` as a flat dict.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, List, Sequence

from scramble.config import DEFAULT_LANGUAGE
from scramble.datasets.loader import choose_root_word, load_root_word_candidates
from scramble.engine import GameState, Outcome, new_game, submit

logger = logging.getLogger(__name__)


class GameSession:
    """
    Single-player session. Construction starts the first game, so a missing
    start-word list fails here (RootWordsUnavailable) before any input is read.
    """

    def __init__(
            self,
            dictionary,
            *,
            candidates: Sequence[str] | None = None,
            start_words_path: Path | str | None = None,
            language: str = DEFAULT_LANGUAGE,
            seed: int | None = None,
            root_word: str | None = None,
    ):
        self.dictionary = dictionary
        self.language = language
        self.rng = random.Random(seed)
        self._start_words_path = start_words_path
        self._candidates: List[str] | None = list(candidates) if candidates is not None else None

        self.game = 0
        self.turn = 0
        self.transcript: List[Dict] = []
        self.state: GameState = self.restart(root_word)

    @property
    def candidates(self) -> List[str]:
        """Root-word candidates, loaded on first use."""
        if self._candidates is None:
            self._candidates = load_root_word_candidates(self._start_words_path)
        return self._candidates

    def restart(self, root_word: str | None = None) -> GameState:
        """
        Replace the state with a fresh game. Without `root_word`, one is drawn
        uniformly from the candidates.
        """
        root = root_word if root_word else choose_root_word(self.candidates, self.rng)
        self.state = new_game(root)
        self.game += 1
        self.turn = 0
        logger.debug("game %d started with root word %r", self.game, self.state.root_word)
        return self.state

    def submit(self, candidate: str) -> Outcome:
        """
        Validate one submission and advance the state if it is accepted.
        Oracle failures (DictionaryUnavailable) propagate with the state untouched.
        """
        self.state, outcome = submit(self.state, candidate, self.dictionary,
                                     language=self.language)
        self.turn += 1

        record = {
            "game": self.game,
            "turn": self.turn,
            "root_word": self.state.root_word,
            "candidate": candidate,
            **outcome.to_dict(),
            "score": self.state.score,
        }
        self.transcript.append(record)
        logger.debug("turn %d: %r -> %s %s", self.turn, candidate, record["status"], record["reason"])
        return outcome
