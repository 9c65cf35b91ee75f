"""
Guess validation.

A guess is acceptable iff it is a five-letter a-z word (after normalization)
that exists in the session's dictionary.
"""

from __future__ import annotations

from typing import Collection

from .errors import InvalidLength, UnknownWord
from .words import require_word


def validate_guess(word: str, dictionary: Collection[str]) -> str:
    """
    Return the normalized guess, or raise.

    Raises:
      InvalidLength : not exactly five letters a-z
      UnknownWord   : well-formed but absent from `dictionary`

    Notes:
      - Membership uses `in` on `dictionary`; pass a set (or frozenset) when
        validating many guesses against a large list.
    """
    w = require_word(word)
    if w not in dictionary:
        raise UnknownWord(f"{w} is not a valid word", value=w)
    return w


def is_valid_guess(word: str, dictionary: Collection[str]) -> bool:
    try:
        validate_guess(word, dictionary)
    except (InvalidLength, UnknownWord):
        return False
    return True
