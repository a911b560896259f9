from .composability import is_possible, remaining_letters
from .outcomes import Accepted, Ignored, Outcome, Rejected, RejectionReason
from .scoring import total_score, word_points
from .state import GameState, new_game, submit
from .validation import is_long_enough, is_original, is_real, normalize_candidate, validate

__all__ = [
    "is_possible", "remaining_letters",
    "Accepted", "Ignored", "Outcome", "Rejected", "RejectionReason",
    "total_score", "word_points",
    "GameState", "new_game", "submit",
    "is_long_enough", "is_original", "is_real", "normalize_candidate", "validate",
]
