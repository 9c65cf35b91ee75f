"""
Word shape helpers shared by the engine.

A word is a string of exactly WORD_LENGTH lowercase letters a-z. Inputs from
the outside world (files, console) are normalized with `normalize_word`
before anything else looks at them.
"""

from __future__ import annotations

from .errors import InvalidLength

WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def normalize_word(word: str) -> str:
    """Strip surrounding whitespace and lowercase."""
    return word.strip().lower()


def is_word_shape(word: str, N: int = WORD_LENGTH) -> bool:
    """True if `word` is exactly N ASCII letters (already normalized)."""
    return len(word) == N and word.isascii() and word.isalpha()


def require_word(word: str, N: int = WORD_LENGTH) -> str:
    """
    Normalize `word` and check its shape.

    Raises InvalidLength if the result is not N letters a-z.
    """
    w = normalize_word(word)
    if not is_word_shape(w, N):
        raise InvalidLength(f"{word!r} is not a {N}-letter word", value=word)
    return w
