import random
from pathlib import Path

import pytest

from scramble.datasets import RootWordsUnavailable, choose_root_word, load_root_word_candidates


def test_bundled_start_words_load():
    words = load_root_word_candidates()
    assert "silkworm" in words
    assert all(w == w.strip().lower() and w for w in words)


def test_loader_normalizes_and_drops_blanks(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n  listen  \n", encoding="utf-8")
    assert load_root_word_candidates(p) == ["silkworm", "listen"]


def test_loader_env_override(tmp_path: Path, monkeypatch):
    p = tmp_path / "start.txt"
    p.write_text("listen\n", encoding="utf-8")
    monkeypatch.setenv("SCRAMBLE_START_WORDS", str(p))
    assert load_root_word_candidates() == ["listen"]


def test_missing_start_words_is_fatal(tmp_path: Path):
    with pytest.raises(RootWordsUnavailable):
        load_root_word_candidates(tmp_path / "missing.txt")


def test_empty_start_words_is_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n \n", encoding="utf-8")
    with pytest.raises(RootWordsUnavailable):
        load_root_word_candidates(p)


def test_choose_root_word_is_seeded():
    pool = ["listen", "silkworm", "elephant"]
    a = choose_root_word(pool, random.Random(7))
    b = choose_root_word(pool, random.Random(7))
    assert a == b and a in pool
    with pytest.raises(RootWordsUnavailable):
        choose_root_word([])
