from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from wordg.engine import DictionaryError, WORD_LENGTH
from wordg.engine.words import is_word_shape, normalize_word

log = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).parent / "data" / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str = DEFAULT_WORDS_PATH) -> List[str]:
    """
    Load the session dictionary: one word per line, normalized to lowercase.

    Blank lines, words of the wrong length and non a-z tokens are skipped;
    duplicates are dropped keeping the first occurrence, so file order is
    the dictionary order.

    Raises DictionaryError if the file is missing, unreadable, or yields no
    usable word.
    """
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"cannot read word list {p}: {e}", value=str(p)) from e

    seen = set()
    words: List[str] = []
    skipped = 0
    for ln in lines:
        w = normalize_word(ln)
        if not w:
            continue
        if not is_word_shape(w, WORD_LENGTH):
            skipped += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)

    if not words:
        raise DictionaryError(f"word list {p} contains no {WORD_LENGTH}-letter words", value=str(p))
    if skipped:
        log.warning("skipped %d malformed line(s) in %s", skipped, p)
    log.debug("loaded %d words from %s", len(words), p)
    return words
