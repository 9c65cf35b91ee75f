"""
Wordle-style scoring (feedback) for a single (secret, guess) pair.

This implementation is:
  - duplicate-safe (respects true letter multiplicities in the secret)
  - deterministic (same inputs -> same outputs)
  - pure (no state, no I/O)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and counts the remaining
     (unconsumed) letters of the secret.
  2) Second pass marks PRESENT only while the letter still has an unconsumed
     occurrence, consuming it; everything else is ABSENT.

So if the secret holds one 'l' and the guess two, at most one of the guessed
'l's is EXACT/PRESENT and the other is ABSENT.
"""

from __future__ import annotations

from collections import Counter
from typing import List

from .verdicts import Verdict, VerdictSequence
from .words import require_word


def score(secret: str, guess: str) -> VerdictSequence:
    """
    Compute the verdict sequence for `guess` against `secret`.

    Both words are normalized; InvalidLength is raised if either is not a
    five-letter word. Dictionary membership of `guess` is not checked here.

    Examples:
      score("level", "belle") -> n y p p p
      score("allot", "lolly") -> p p y n n
    """
    secret = require_word(secret)
    guess = require_word(guess)

    verdicts: List[Verdict] = [Verdict.ABSENT] * len(guess)

    # Pass 1: exact matches; unmatched secret letters stay available for pass 2.
    remaining: Counter[str] = Counter()
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            verdicts[i] = Verdict.EXACT
        else:
            remaining[s] += 1

    # Pass 2: present only while an unconsumed occurrence is left.
    for i, g in enumerate(guess):
        if verdicts[i] is Verdict.EXACT:
            continue
        if remaining[g] > 0:
            verdicts[i] = Verdict.PRESENT
            remaining[g] -= 1

    return tuple(verdicts)
