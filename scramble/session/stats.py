# scramble/session/stats.py
from __future__ import annotations
from typing import Dict, List

import numpy as np

from scramble.engine import RejectionReason


def length_histogram(lengths: np.ndarray) -> Dict[int, int]:
    """Word length -> count, only for lengths that occur."""
    if lengths.size == 0:
        return {}
    counts = np.bincount(lengths)
    return {int(n): int(c) for n, c in enumerate(counts) if c > 0}


def summarize(transcript: List[Dict]) -> Dict:
    """
    Aggregate a session transcript (see GameSession.transcript).

    `score` is the running score of the last game played; `total_points`
    sums accepted points across every game in the transcript.
    """
    accepted = [r for r in transcript if r["status"] == "accepted"]
    rejected = [r for r in transcript if r["status"] == "rejected"]

    lengths = np.array([len(r["word"]) for r in accepted], dtype=np.int64)
    points = np.array([r["points"] for r in accepted], dtype=np.int64)

    return {
        "games": len({r["game"] for r in transcript}),
        "submissions": len(transcript),
        "accepted": len(accepted),
        "ignored": sum(1 for r in transcript if r["status"] == "ignored"),
        "rejected": {reason.name: sum(1 for r in rejected if r["reason"] == reason.name)
                     for reason in RejectionReason},
        "score": int(transcript[-1]["score"]) if transcript else 0,
        "total_points": int(points.sum()),
        "mean_word_length": float(lengths.mean()) if lengths.size else 0.0,
        "length_histogram": length_histogram(lengths),
    }
