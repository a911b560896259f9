"""
Build a start-word list (root words) from a dictionary source.

What it does:
- Reads a newline-separated word list from a local file or downloads it
  from a URL.
- Keeps lowercase a–z words of exactly --length letters (proper nouns,
  apostrophes and hyphenated entries are dropped).
- De-duplicates while preserving source order; optionally samples or sorts.
- Writes one word per line.

Usage:
    python -m script.build_start_words --source /usr/share/dict/words \
        --out scramble/datasets/data/start.txt
    # from a URL, 500 random eight-letter words, alphabetical:
    python -m script.build_start_words --source https://example.org/words.txt \
        --sample 500 --sort
"""

import argparse
import random
import re

import requests

from scramble.datasets.io import read_lines, unique_preserve_order, write_lines

WORD_RE = re.compile(r"^[a-z]+$")


def fetch_words(source: str) -> list[str]:
    if source.startswith(("http://", "https://")):
        r = requests.get(source, timeout=30)
        r.raise_for_status()
        return r.text.splitlines()
    return read_lines(source)


def select_words(lines: list[str], length: int) -> list[str]:
    # Keep entries exactly as lowercase words; capitalized ones are proper nouns
    words = [ln.strip() for ln in lines if WORD_RE.match(ln.strip()) and len(ln.strip()) == length]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list")
    ap.add_argument("--source", default="/usr/share/dict/words", help="file path or URL")
    ap.add_argument("--out", default="scramble/datasets/data/start.txt")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--sample", type=int, help="keep only K words (random, seeded)")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of "
                                                        "keeping source order")
    args = ap.parse_args()

    words = select_words(fetch_words(args.source), args.length)
    if args.sample and args.sample < len(words):
        words = random.Random(args.seed).sample(words, args.sample)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} start words -> {args.out}")


if __name__ == "__main__":
    main()
