"""
Per-letter verdicts and their textual wire format.

Encoding (one character per position, concatenated):
  - 'y' : EXACT   = green,  letter in the word and in this spot
  - 'p' : PRESENT = yellow, letter in the word but in another spot
  - 'n' : ABSENT  = gray,   letter not in the word (or already accounted for)

Example: "ynnpn"
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from .errors import MalformedVerdict
from .words import WORD_LENGTH


class Verdict(Enum):
    EXACT = "y"
    PRESENT = "p"
    ABSENT = "n"


VerdictSequence = Tuple[Verdict, ...]

SOLVED_TOKEN = Verdict.EXACT.value * WORD_LENGTH

_BY_CHAR = {v.value: v for v in Verdict}


def parse_verdicts(token: str, N: int = WORD_LENGTH) -> VerdictSequence:
    """
    Decode a token such as "ynnpn" into a VerdictSequence.

    Raises MalformedVerdict on wrong length or any character outside {y,p,n}.
    """
    t = token.strip().lower()
    if len(t) != N:
        raise MalformedVerdict(f"verdict must be {N} characters, got {len(t)}", value=token)
    try:
        return tuple(_BY_CHAR[ch] for ch in t)
    except KeyError as e:
        raise MalformedVerdict(f"unexpected verdict character {e.args[0]!r}", value=token) from e


def format_verdicts(verdicts: Iterable[Verdict]) -> str:
    return "".join(v.value for v in verdicts)


def is_solved(verdicts: Iterable[Verdict]) -> bool:
    vs = tuple(verdicts)
    return len(vs) == WORD_LENGTH and all(v is Verdict.EXACT for v in vs)
