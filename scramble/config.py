# Configuration module for game-wide constants and defaults.

from pathlib import Path

# Candidates must be strictly longer than two letters.
MIN_WORD_LENGTH = 3

# Language tag handed to the dictionary oracle.
DEFAULT_LANGUAGE = "en"

# Bundled newline-separated list of root words (override with SCRAMBLE_START_WORDS).
DEFAULT_START_WORDS = Path(__file__).parent / "datasets" / "data" / "start.txt"
START_WORDS_ENV = "SCRAMBLE_START_WORDS"

# System word list used by the local dictionary (override with SCRAMBLE_WORD_LIST).
DEFAULT_WORD_LIST = Path("/usr/share/dict/words")
WORD_LIST_ENV = "SCRAMBLE_WORD_LIST"

# Free dictionary API used by the remote oracle: <base>/<language>/<word>
DICTIONARY_API = "https://api.dictionaryapi.dev/api/v2/entries"

# Seconds before a remote lookup gives up.
HTTP_TIMEOUT = 6.0
