"""
Result values produced by validating one submission.

Exactly one of:
  - Ignored  : the submission was empty after normalization (not an error)
  - Accepted : the word passed every rule; carries the points it earned
  - Rejected : the first rule that failed, with a title/message pair ready to
               show to the player

Rejections are plain values, never exceptions: the player simply tries again.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class RejectionReason(Enum):
    """Why a candidate was refused, with its user-facing title and message."""

    ALREADY_USED = ("Word used already", "Be more original")
    NOT_COMPOSABLE = ("Word not possible", "You can't spell that word from '{root}'!")
    NOT_A_REAL_WORD = ("Word not recognized", "You can't just make them up, you know!")
    TOO_SHORT = ("Word is not enough", "Try at least 3 letters!")

    def __init__(self, title: str, template: str):
        self.title = title
        self.template = template

    def message_for(self, root_word: str) -> str:
        return self.template.format(root=root_word)


@dataclass(frozen=True)
class Ignored:
    status = "ignored"

    def to_dict(self) -> Dict:
        return {"status": self.status, "word": "", "reason": "", "points": 0}


@dataclass(frozen=True)
class Accepted:
    word: str
    points: int
    status = "accepted"

    def to_dict(self) -> Dict:
        return {"status": self.status, "word": self.word, "reason": "", "points": self.points}


@dataclass(frozen=True)
class Rejected:
    word: str
    reason: RejectionReason
    root_word: str
    status = "rejected"

    @property
    def title(self) -> str:
        return self.reason.title

    @property
    def message(self) -> str:
        return self.reason.message_for(self.root_word)

    def to_dict(self) -> Dict:
        return {"status": self.status, "word": self.word, "reason": self.reason.name, "points": 0}


Outcome = Union[Ignored, Accepted, Rejected]
