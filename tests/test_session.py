import csv
from pathlib import Path

import pytest

from scramble.datasets import RootWordsUnavailable
from scramble.dictionary import DictionaryUnavailable
from scramble.engine import Accepted, Rejected, RejectionReason, new_game, submit
from scramble.session import GameSession, summarize, write_csv


def test_session_plays_and_restarts(dictionary):
    s = GameSession(dictionary, candidates=["silkworm"], root_word="listen")
    assert s.state.root_word == "listen"

    assert isinstance(s.submit("silent"), Accepted)
    assert isinstance(s.submit("silent"), Rejected)
    s.submit("")
    s.submit("tin")
    assert s.state.score == 9
    assert s.state.used_words == ("tin", "silent")

    s.restart()
    assert s.state.root_word == "silkworm"
    assert s.state.used_words == () and s.state.score == 0
    assert isinstance(s.submit("milk"), Accepted)
    assert [r["game"] for r in s.transcript] == [1, 1, 1, 1, 2]


def test_session_requires_start_words(tmp_path: Path, dictionary):
    with pytest.raises(RootWordsUnavailable):
        GameSession(dictionary, start_words_path=tmp_path / "missing.txt")


def test_session_random_root_is_seeded(dictionary):
    pool = ["listen", "silkworm", "elephant", "pizzazz"]
    a = GameSession(dictionary, candidates=pool, seed=3)
    b = GameSession(dictionary, candidates=pool, seed=3)
    assert a.state.root_word == b.state.root_word


def test_summarize_transcript(dictionary):
    s = GameSession(dictionary, candidates=["listen"], root_word="listen")
    for w in ["silent", "tin", "it", "elephant", "silent", "  ", "lens"]:
        s.submit(w)

    st = summarize(s.transcript)
    assert st["submissions"] == 7
    assert st["accepted"] == 3
    assert st["ignored"] == 1
    assert st["rejected"][RejectionReason.TOO_SHORT.name] == 1
    assert st["rejected"][RejectionReason.NOT_COMPOSABLE.name] == 1
    assert st["rejected"][RejectionReason.ALREADY_USED.name] == 1
    assert st["rejected"][RejectionReason.NOT_A_REAL_WORD.name] == 0
    assert st["score"] == st["total_points"] == 13
    assert st["length_histogram"] == {3: 1, 4: 1, 6: 1}
    assert st["mean_word_length"] == pytest.approx(13 / 3)


def test_summarize_empty_transcript():
    st = summarize([])
    assert st["submissions"] == 0 and st["score"] == 0
    assert st["length_histogram"] == {}


def test_write_csv(tmp_path: Path, dictionary):
    s = GameSession(dictionary, candidates=["listen"], root_word="listen")
    s.submit("Silent")
    s.submit("elephant")
    out = write_csv(s.transcript, str(tmp_path / "t" / "run.csv"))

    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["status"] for r in rows] == ["accepted", "rejected"]
    assert rows[0]["candidate"] == "Silent" and rows[0]["word"] == "silent"
    assert rows[1]["reason"] == "NOT_COMPOSABLE"
    assert rows[1]["score"] == "6"


class FlakyDictionary:
    """Knows 'silent'; any other lookup fails."""

    def is_real_word(self, word, language="en"):
        if word == "silent":
            return True
        raise DictionaryUnavailable("lookup failed")


def test_dictionary_failure_leaves_session_untouched():
    s = GameSession(FlakyDictionary(), candidates=["listen"], root_word="listen")
    s.submit("silent")
    before = s.state

    with pytest.raises(DictionaryUnavailable):
        s.submit("tinsel")

    assert s.state is before
    assert s.state.used_words == ("silent",) and s.state.score == 6
    assert s.turn == 1
    assert len(s.transcript) == 1


def test_engine_submit_propagates_dictionary_failure():
    state = new_game("listen")
    with pytest.raises(DictionaryUnavailable):
        submit(state, "tinsel", FlakyDictionary())
    assert state == new_game("listen")
