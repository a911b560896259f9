from __future__ import annotations
from typing import Dict, Type

from scramble.config import DEFAULT_LANGUAGE

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


class DictionaryUnavailable(RuntimeError):
    """The oracle could not answer (missing word list, network failure, ...)."""


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionary oracles inherit ----
class BaseDictionary:
    id = "base"
    name = "Base"

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")

    def __contains__(self, word: str) -> bool:
        return self.is_real_word(word, DEFAULT_LANGUAGE)
