"""
I/O utilities for session transcripts.

Responsibilities:
- write_csv:      flatten a transcript into a tidy CSV (one row per submission).
- write_manifest: dump a JSON manifest with config, hashes, stats and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["game", "turn", "root_word", "candidate", "status", "word", "reason", "points", "score"]


def write_csv(transcript: List[Dict], path: str) -> str:
    """
    Serialize a session transcript to CSV.

    Schema (columns):
      game, turn, root_word, candidate, status, word, reason, points, score

    `candidate` is the raw input, `word` its normalized form; `reason` is the
    RejectionReason name for rejected rows and empty otherwise.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS, extrasaction="ignore")
        w.writeheader()
        for r in transcript:
            w.writerow(r)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a replay run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (root, dictionary, paths, seed, language, outdir)
      - wordlists: output of datasets.validate_wordlists(...) when available
      - stats: output of session.stats.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not installed or this is not a checkout.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
