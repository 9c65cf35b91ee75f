"""
Constraint tracking for the solver role.

Everything learned from verdict sequences during one guessing session lives
in a SolverState:
  - positions : one 26-bit mask per position; bit k set means letter
                ALPHABET[k] is still possible there
  - required  : letter -> minimum number of occurrences in the secret
  - exact     : letter locked at each position by an EXACT verdict (or None)

`ingest` folds one (guess, verdicts) pair into the state. Masks only ever
lose bits, required counts only ever grow, and a locked position is never
touched again. `is_consistent` is the predicate the candidate selector uses
to decide whether a dictionary word still fits everything seen so far.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import MalformedVerdict
from .verdicts import Verdict, format_verdicts, is_solved
from .words import ALPHABET, WORD_LENGTH, require_word

log = logging.getLogger(__name__)

FULL_MASK = (1 << len(ALPHABET)) - 1


def letter_bit(ch: str) -> int:
    return 1 << (ord(ch) - ord("a"))


def mask_letters(mask: int) -> str:
    """Letters whose bit is set in `mask`, alphabetical."""
    return "".join(ch for ch in ALPHABET if mask & letter_bit(ch))


class Outcome(Enum):
    SOLVED = "solved"
    CONTINUE = "continue"


@dataclass
class SolverState:
    positions: List[int] = field(default_factory=lambda: [FULL_MASK] * WORD_LENGTH)
    required: Dict[str, int] = field(default_factory=dict)
    exact: List[Optional[str]] = field(default_factory=lambda: [None] * WORD_LENGTH)

    def allows(self, i: int, ch: str) -> bool:
        return bool(self.positions[i] & letter_bit(ch))


def new_state() -> SolverState:
    """Fully open state: every letter possible everywhere, nothing required."""
    return SolverState()


def _check_verdicts(verdicts: Iterable[Verdict]) -> tuple:
    vs = tuple(verdicts)
    if len(vs) != WORD_LENGTH:
        raise MalformedVerdict(f"expected {WORD_LENGTH} verdicts, got {len(vs)}", value=vs)
    for v in vs:
        if not isinstance(v, Verdict):
            raise MalformedVerdict(f"not a verdict: {v!r}", value=vs)
    return vs


def ingest(state: SolverState, guess: str, verdicts: Iterable[Verdict]) -> Outcome:
    """
    Apply the feedback for one guess to `state` (in place).

    Per position i with letter L = guess[i]:
      - EXACT   : position i is locked to {L}
      - PRESENT : L is removed from position i only
      - ABSENT  : L is removed from every unlocked position, unless the same
                  guess also scored L as EXACT/PRESENT elsewhere; then the
                  secret does hold L and only position i loses it

    Afterwards required[L] = max(required[L], number of EXACT/PRESENT
    verdicts for L in this guess).

    Inputs are validated before anything is changed, so a rejected call
    (InvalidLength, MalformedVerdict) leaves `state` as it was.

    Returns Outcome.SOLVED when all verdicts are EXACT.
    """
    guess = require_word(guess)
    vs = _check_verdicts(verdicts)

    # Letters this guess proved to be in the secret, with multiplicity.
    tally: Counter[str] = Counter(
        ch for ch, v in zip(guess, vs) if v is not Verdict.ABSENT
    )

    for i, (ch, v) in enumerate(zip(guess, vs)):
        bit = letter_bit(ch)
        if v is Verdict.EXACT:
            if state.exact[i] is None:
                state.exact[i] = ch
                state.positions[i] &= bit
        elif v is Verdict.PRESENT:
            if state.exact[i] is None:
                state.positions[i] &= ~bit
        elif tally[ch]:
            # Duplicate letter: this copy is surplus, the others are real.
            if state.exact[i] is None:
                state.positions[i] &= ~bit
        else:
            for j in range(WORD_LENGTH):
                if state.exact[j] is None:
                    state.positions[j] &= ~bit

    for ch, n in tally.items():
        if n > state.required.get(ch, 0):
            state.required[ch] = n

    if log.isEnabledFor(logging.DEBUG):
        log.debug("ingested %s %s\n%s", guess, format_verdicts(vs), describe(state))

    return Outcome.SOLVED if is_solved(vs) else Outcome.CONTINUE


def is_consistent(word: str, state: SolverState) -> bool:
    """
    True if `word` fits every position mask and contains each required
    letter at least as many times as required. `word` must already be a
    normalized five-letter word.
    """
    for i, ch in enumerate(word):
        if not state.positions[i] & letter_bit(ch):
            return False
    if state.required:
        counts = Counter(word)
        for ch, n in state.required.items():
            if counts[ch] < n:
                return False
    return True


def filter_candidates(words: Sequence[str], state: SolverState) -> List[str]:
    """Words still consistent with `state` (order preserved)."""
    return [w for w in words if is_consistent(w, state)]


def describe(state: SolverState) -> str:
    """
    Human-readable dump, one line per position, e.g.

      0 abcdefhijklmnopqrstuvwxyz
      1 r
      ...
      required: a=1 e=2
    """
    lines = [f"{i} {mask_letters(m)}" for i, m in enumerate(state.positions)]
    req = " ".join(f"{ch}={n}" for ch, n in sorted(state.required.items()))
    lines.append(f"required: {req or '-'}")
    return "\n".join(lines)
