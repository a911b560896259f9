# scramble_apps/cli/replay.py
"""
Replay a file of submissions through a game session.

This script:
  1) Optionally validates the word lists (prints counts + SHA, start ⊆ dictionary).
  2) Builds the dictionary oracle and a session (fixed --root or seeded random).
  3) Feeds every line of --submissions to the session with a progress bar.
     A line ":restart" starts a new random game, ":restart <word>" a new game
     on that root word.
  4) Writes:
       - CSV:  one row per submission (outcome, reason, points, running score)
       - JSON: manifest with config, word-list report, stats, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from scramble.config import DEFAULT_LANGUAGE
from scramble.datasets import (
    RootWordsUnavailable, get_start_words_path, pretty_summary, read_lines, validate_wordlists,
)
from scramble.dictionary import DictionaryUnavailable, create_dictionary, get_dictionary_ids
from scramble.session import GameSession, summarize, write_csv, write_manifest
from scramble.session.io import git_commit_or_unknown, timestamp_id

RESTART = ":restart"


def replay(session: GameSession, lines: List[str], *, progress: bool = False) -> List[Dict]:
    """
    Drive `session` with `lines` and return its transcript.
    """
    iterator = tqdm(lines, ncols=80, desc="Replaying", unit="word") if progress else lines
    for line in iterator:
        head, _, rest = line.strip().partition(" ")
        if head.lower() == RESTART:
            session.restart(rest.strip() or None)
            continue
        session.submit(line)
    return session.transcript


def main(argv: List[str] | None = None) -> int:
    dictionary_choices = ", ".join(get_dictionary_ids())

    ap = argparse.ArgumentParser(description="wordscramble — replay submissions from a file")
    ap.add_argument("--submissions", required=True, help="file with one submission per line")
    ap.add_argument("--root", help="root word for the first game (default: random)")
    ap.add_argument("--start-words", help="root-word list (default: bundled start.txt)")
    ap.add_argument("--dictionary", default="wordlist",
                    help=f"dictionary id (one of: {dictionary_choices})")
    ap.add_argument("--word-list", help="dictionary file for the wordlist oracle")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE)
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--validate", action="store_true",
                    help="validate start/dictionary lists before replaying")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    rep = None
    if args.validate and args.word_list:
        rep = validate_wordlists(str(get_start_words_path(args.start_words)), args.word_list)
        print(pretty_summary(rep))

    try:
        lines = read_lines(args.submissions)
    except FileNotFoundError:
        sys.stderr.write(f"submissions file not found: {args.submissions}\n")
        return 2

    try:
        if args.dictionary == "wordlist":
            dictionary = create_dictionary("wordlist", path=args.word_list, language=args.language)
        else:
            dictionary = create_dictionary(args.dictionary)
        session = GameSession(dictionary, start_words_path=args.start_words,
                              language=args.language, seed=args.seed, root_word=args.root)
    except (RootWordsUnavailable, DictionaryUnavailable, ValueError) as e:
        sys.stderr.write(f"fatal: {e}\n")
        return 2

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    try:
        transcript = replay(session, lines, progress=(args.progress == "bar"))
    except (RootWordsUnavailable, DictionaryUnavailable, ValueError) as e:
        # Keep what was played before the failure
        sys.stderr.write(f"fatal: {e}\n")
        sys.stderr.write(f"Wrote partial transcript: {write_csv(session.transcript, str(csv_path))}\n")
        return 2

    stats = summarize(transcript)

    write_csv(transcript, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "stats": stats,
    }, str(manifest_path))

    print(f"score={stats['score']} accepted={stats['accepted']}/{stats['submissions']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
