import pytest

from scramble.dictionary import WordListDictionary

WORDS = [
    "listen", "silent", "enlist", "inlets", "tinsel",
    "tin", "ten", "net", "nit", "lie", "lit", "sit", "its", "lens", "lent", "tile", "tiles",
    "it", "is", "in",
    "elephant", "pizzazz", "silkworm", "silk", "worm", "milk", "skim",
]


@pytest.fixture
def dictionary():
    return WordListDictionary(WORDS)
