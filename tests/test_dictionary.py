from pathlib import Path

import pytest
import requests

from scramble.dictionary import (
    DictionaryUnavailable, RemoteDictionary, WordListDictionary,
    create_dictionary, get_dictionary_ids, get_word_list_path,
)


def test_registry_lists_builtin_oracles():
    assert get_dictionary_ids() == ["remote", "wordlist"]
    with pytest.raises(ValueError):
        create_dictionary("nope")


def test_wordlist_is_case_insensitive_and_per_language():
    d = WordListDictionary(["Listen", "silent", "  "])
    d.add_words(["écouter"], language="fr")
    assert d.is_real_word("LISTEN", "en")
    assert "silent" in d
    assert not d.is_real_word("", "en")
    assert not d.is_real_word("silent", "fr")
    assert d.languages() == ["en", "fr"]
    assert len(d) == 3


def test_wordlist_from_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Aaron\nlisten\n\nsilent's\n", encoding="utf-8")
    d = create_dictionary("wordlist", path=str(p))
    assert d.is_real_word("aaron") and d.is_real_word("listen")


def test_wordlist_env_override(tmp_path: Path, monkeypatch):
    p = tmp_path / "words.txt"
    p.write_text("listen\n", encoding="utf-8")
    monkeypatch.setenv("SCRAMBLE_WORD_LIST", str(p))
    assert get_word_list_path() == p
    assert WordListDictionary().is_real_word("listen")


def test_wordlist_missing_file_is_unavailable(tmp_path: Path):
    with pytest.raises(DictionaryUnavailable):
        WordListDictionary(path=tmp_path / "missing.txt")


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    def __init__(self, statuses):
        self.statuses = statuses
        self.calls = []

    def get(self, url, timeout=None, headers=None):
        self.calls.append(url)
        status = self.statuses.get(url.rsplit("/", 1)[-1], 404)
        if isinstance(status, Exception):
            raise status
        return FakeResponse(status)


def test_remote_maps_status_codes_and_caches():
    session = FakeSession({"silent": 200})
    d = RemoteDictionary(base_url="https://dict.test/api/", session=session)
    assert d.is_real_word("Silent", "en") is True
    assert d.is_real_word("silent", "en") is True
    assert d.is_real_word("zzzz", "en") is False
    assert session.calls == [
        "https://dict.test/api/en/silent",
        "https://dict.test/api/en/zzzz",
    ]


def test_remote_empty_word_skips_network():
    session = FakeSession({})
    assert RemoteDictionary(session=session).is_real_word("  ") is False
    assert session.calls == []


@pytest.mark.parametrize("status", [500, requests.ConnectionError("offline")])
def test_remote_failures_raise_unavailable(status):
    d = RemoteDictionary(session=FakeSession({"silent": status}))
    with pytest.raises(DictionaryUnavailable):
        d.is_real_word("silent")


def test_wordlist_from_file_classmethod(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("listen\nsilent\n", encoding="utf-8")
    d = WordListDictionary.from_file(p, language="en")
    assert isinstance(d, WordListDictionary)
    assert d.is_real_word("silent") and len(d) == 2
    with pytest.raises(DictionaryUnavailable):
        WordListDictionary.from_file(tmp_path / "missing.txt")
