"""
Word-list validator for wordscramble.

What this module does:
- Validate a pair of word lists: start.txt (root-word pool) and the dictionary
  list the local oracle loads (e.g. /usr/share/dict/words).
- Enforce formatting rules on start words (lowercase, a–z only, at least
  `min_length` letters, one per line) and flag duplicates.
- Count dictionary lines the oracle cannot use (blank or non a–z); these are
  reported but do not fail the check, since system lists carry such entries.
- Check that every start word is itself a dictionary word.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from scramble.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("scramble/datasets/data/start.txt",
                             "/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from scramble.config import MIN_WORD_LENGTH


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (start, dictionary) pair."""
    min_length: int
    start: FileReport
    dictionary: FileReport
    start_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_start_words(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Start words must already be lowercase a–z with at least `min_length`
    letters. Empty lines count as invalid.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and w.isascii() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _load_dictionary_words(path: Path) -> Tuple[List[str], int]:
    """
    Dictionary entries are lowercased the way the oracle does; anything that
    is not a–z afterwards (apostrophes, hyphens, blanks) is counted as unusable.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for raw in f:
            w = raw.strip().lower()
            if w and w.isalpha() and w.isascii():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _missing_report(path: str, exists: bool) -> FileReport:
    return FileReport(path, exists, 0, "", 0, 0)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(start_path: str, dictionary_path: str,
                       min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate the start/dictionary word lists.

    Parameters
    ----------
    start_path : str
        Path to the root-word list (one word per line).
    dictionary_path : str
        Path to the dictionary list used by the local oracle.
    min_length : int
        Shortest acceptable start word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - start ⊆ dictionary check
          - `passed` boolean (non-empty start list, no invalid or duplicate
            start lines, non-empty dictionary, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    start_p = Path(start_path)
    dict_p = Path(dictionary_path)

    start_exists = start_p.is_file()
    dict_exists = dict_p.is_file()

    if not start_exists or not dict_exists:
        if not start_exists:
            issues.append(f"start file not found: {start_path}")
        if not dict_exists:
            issues.append(f"dictionary file not found: {dictionary_path}")
        rep = ValidationReport(
            min_length=min_length,
            start=_missing_report(start_path, start_exists),
            dictionary=_missing_report(dictionary_path, dict_exists),
            start_subset_dictionary=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    start, start_invalid = _load_start_words(start_p, min_length)
    words, dict_invalid = _load_dictionary_words(dict_p)

    start_set = set(start)
    dict_set = set(words)

    start_report = FileReport(
        path=str(start_p),
        exists=True,
        count=len(start),
        sha256=_sha256_file(start_p),
        unique_count=len(start_set),
        invalid_lines=start_invalid,
    )
    dict_report = FileReport(
        path=str(dict_p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(dict_p),
        unique_count=len(dict_set),
        invalid_lines=dict_invalid,
    )

    subset_ok = start_set.issubset(dict_set)
    if not subset_ok:
        # Show a few for quick debugging
        missing = sorted(start_set - dict_set)[:5]
        issues.append(f"start words not subset of dictionary (e.g., {missing})")

    if start_report.count == 0:
        issues.append("start file contains 0 valid words")
    if dict_report.count == 0:
        issues.append("dictionary file contains 0 valid words")

    if start_invalid:
        issues.append(f"start has {start_invalid} invalid line(s)")
    if dict_invalid:
        issues.append(f"dictionary has {dict_invalid} unusable line(s) (skipped)")

    if start_report.count != start_report.unique_count:
        issues.append("start contains duplicate lines")

    passed = (
            subset_ok
            and start_invalid == 0
            and start_report.count > 0
            and start_report.count == start_report.unique_count
            and dict_report.count > 0
    )

    rep = ValidationReport(
        min_length=min_length,
        start=start_report,
        dictionary=dict_report,
        start_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        start=171 (uniq=171, sha=abc123...) | dictionary=234371 (uniq=234371, sha=def456...) | start⊆dictionary=True | OK
    """
    a = report["start"]
    b = report["dictionary"]
    subset = report["start_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start⊆dictionary={subset} | {status}"
    )
