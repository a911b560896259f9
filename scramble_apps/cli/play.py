# scramble_apps/cli/play.py
"""
Interactive terminal front end for wordscramble.

Each turn shows the root word, the score and the accepted words (with their
letter counts), then reads one line:
  - a word          -> submitted for validation
  - :restart        -> new root word, empty history, score 0
  - :quit / Ctrl-D  -> leave (optionally writing a transcript CSV)

Rejections are shown as "<title>: <message>". A missing start-word list is
fatal (exit status 2); a dictionary lookup failure is reported and the turn is
simply not counted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from scramble.config import DEFAULT_LANGUAGE
from scramble.datasets import RootWordsUnavailable
from scramble.dictionary import DictionaryUnavailable, create_dictionary, get_dictionary_ids
from scramble.engine import Accepted, GameState, Ignored, Rejected
from scramble.session import GameSession, write_csv

RESTART_COMMANDS = {":restart", ":r"}
QUIT_COMMANDS = {":quit", ":q"}


def render(state: GameState) -> str:
    lines: List[str] = [
        "",
        f"=== {state.root_word} ===",
        f"Score: {state.score}",
    ]
    for word, n in state.entries():
        lines.append(f"  ({n}) {word}")
    return "\n".join(lines)


def build_dictionary(args):
    """Instantiate the oracle chosen on the command line."""
    if args.dictionary == "wordlist":
        return create_dictionary("wordlist", path=args.word_list, language=args.language)
    return create_dictionary(args.dictionary)


def build_parser() -> argparse.ArgumentParser:
    dictionary_choices = get_dictionary_ids()

    ap = argparse.ArgumentParser(description="wordscramble — spell words from a root word")
    ap.add_argument("--start-words", help="path to the root-word list (default: bundled start.txt)")
    ap.add_argument("--dictionary", choices=dictionary_choices, default="wordlist",
                    help="real-word oracle")
    ap.add_argument("--word-list", help="dictionary file for the wordlist oracle "
                                        "(default: $SCRAMBLE_WORD_LIST or /usr/share/dict/words)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="language tag for the oracle")
    ap.add_argument("--root", help="play this root word instead of a random one")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word selection")
    ap.add_argument("--transcript", help="write the session transcript CSV here on exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        dictionary = build_dictionary(args)
        session = GameSession(
            dictionary,
            start_words_path=args.start_words,
            language=args.language,
            seed=args.seed,
            root_word=args.root,
        )
    except (RootWordsUnavailable, DictionaryUnavailable) as e:
        sys.stderr.write(f"fatal: {e}\n")
        return 2

    print(render(session.state))
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break

        cmd = line.strip().lower()
        if cmd in QUIT_COMMANDS:
            break
        if cmd in RESTART_COMMANDS:
            # Candidates are only read here when --root skipped them at startup
            try:
                session.restart()
            except RootWordsUnavailable as e:
                sys.stderr.write(f"fatal: {e}\n")
                return 2
            print(render(session.state))
            continue

        try:
            outcome = session.submit(line)
        except DictionaryUnavailable as e:
            sys.stderr.write(f"dictionary unavailable: {e}\n")
            continue

        if isinstance(outcome, Ignored):
            continue
        if isinstance(outcome, Rejected):
            print(f"{outcome.title}: {outcome.message}")
        elif isinstance(outcome, Accepted):
            print(render(session.state))

    if args.transcript:
        print(f"Wrote: {write_csv(session.transcript, args.transcript)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
