from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, unique_preserve_order
from .loader import RootWordsUnavailable, choose_root_word, get_start_words_path, load_root_word_candidates

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines", "unique_preserve_order",
    "RootWordsUnavailable", "choose_root_word", "get_start_words_path", "load_root_word_candidates",
]
