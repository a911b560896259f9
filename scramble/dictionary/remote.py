"""
Remote dictionary oracle backed by the Free Dictionary API.

    GET <DICTIONARY_API>/<language>/<word>
      200 -> the word has at least one entry   -> real
      404 -> no definitions found              -> not real
      any other status / network error         -> DictionaryUnavailable

Answers are memoized per (word, language) for the lifetime of the instance,
so resubmitting a word never goes back to the network.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple
from urllib.parse import quote

import requests

from scramble.config import DEFAULT_LANGUAGE, DICTIONARY_API, HTTP_TIMEOUT
from .base import BaseDictionary, DictionaryUnavailable, register

logger = logging.getLogger(__name__)

USER_AGENT = "wordscramble/1.0"


@register
class RemoteDictionary(BaseDictionary):
    id = "remote"
    name = "Free Dictionary API"

    def __init__(self, *, base_url: str = DICTIONARY_API, timeout: float = HTTP_TIMEOUT,
                 session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self._cache: Dict[Tuple[str, str], bool] = {}

    def url_for(self, word: str, language: str) -> str:
        return f"{self.base_url}/{quote(language, safe='')}/{quote(word, safe='')}"

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        w = word.strip().lower()
        if not w:
            return False

        key = (w, language)
        if key in self._cache:
            return self._cache[key]

        url = self.url_for(w, language)
        try:
            r = self.session.get(url, timeout=self.timeout, headers={"User-Agent": USER_AGENT})
        except requests.RequestException as e:
            raise DictionaryUnavailable(f"lookup failed for {w!r}: {e}") from e

        if r.status_code == 404:
            found = False
        else:
            try:
                r.raise_for_status()
            except requests.HTTPError as e:
                raise DictionaryUnavailable(f"lookup failed for {w!r}: {e}") from e
            found = True

        logger.debug("remote lookup %s [%s] -> %s", w, language, found)
        self._cache[key] = found
        return found
