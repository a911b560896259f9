from __future__ import annotations
from typing import List
from .base import BaseDictionary, DictionaryUnavailable, REGISTRY, register

from . import wordlist  # noqa: F401
from . import remote  # noqa: F401

from .wordlist import WordListDictionary, get_word_list_path
from .remote import RemoteDictionary


def create_dictionary(dictionary_id: str, **kwargs) -> BaseDictionary:
    """
    Factory: instantiate a registered dictionary oracle by id.
    """
    try:
        cls = REGISTRY[dictionary_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown dictionary id: {dictionary_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_dictionary_ids() -> List[str]:
    """
    Return all registered dictionary ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseDictionary", "DictionaryUnavailable", "REGISTRY", "register",
    "WordListDictionary", "RemoteDictionary", "get_word_list_path",
    "create_dictionary", "get_dictionary_ids",
]
