from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORDS_PATH, load_dictionary, read_lines, write_lines

__all__ = ["validate_wordlist", "pretty_summary", "DEFAULT_WORDS_PATH", "load_dictionary",
           "read_lines", "write_lines"]
