"""
Error kinds raised by the engine and the sessions built on it.

All of them are ValueErrors: they describe bad input (a guess, a verdict
token, a word list) rather than a bug. Session loops catch InvalidLength,
UnknownWord, MalformedVerdict and NoCandidate and report them; a
DictionaryError is fatal at setup time.
"""

from __future__ import annotations


class WordgError(ValueError):
    """Base class; `value` keeps the offending input when there is one."""

    def __init__(self, message: str, *, value: object = None):
        super().__init__(message)
        self.value = value


class InvalidLength(WordgError):
    """A guess or secret is not exactly WORD_LENGTH letters."""


class UnknownWord(WordgError):
    """A guess is well-formed but not in the dictionary."""


class MalformedVerdict(WordgError):
    """A verdict token/sequence has the wrong length or an unknown symbol."""


class NoCandidate(WordgError):
    """Every dictionary word has been eliminated by the constraints."""


class DictionaryError(WordgError):
    """The word list is missing, unreadable or contains no usable words."""
