# scramble_apps/cli/check_lists.py
"""
Validate the start-word list against the dictionary list and print a summary.
Exit status is 1 when the report does not pass.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

from scramble.config import MIN_WORD_LENGTH
from scramble.datasets import get_start_words_path, pretty_summary, validate_wordlists
from scramble.dictionary import DictionaryUnavailable, get_word_list_path


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Validate wordscramble word lists.")
    ap.add_argument("--start-words", help="root-word list (default: bundled start.txt)")
    ap.add_argument("--word-list", help="dictionary list (default: $SCRAMBLE_WORD_LIST "
                                        "or /usr/share/dict/words)")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH)
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    args = ap.parse_args(argv)

    try:
        word_list = get_word_list_path(args.word_list)
    except DictionaryUnavailable as e:
        sys.stderr.write(f"{e}\n")
        return 1

    rep = validate_wordlists(str(get_start_words_path(args.start_words)), str(word_list),
                             min_length=args.min_length)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    if args.json:
        print(json.dumps(rep, indent=2))
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
