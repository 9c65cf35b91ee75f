"""
First-match candidate selection.

Strategy:
  - Walk the dictionary in order and return the first word consistent with
    every constraint learned so far (position masks and required counts).
  - Return None when nothing survives; the session reports that as
    NoCandidate.

Deterministic: the same dictionary and the same feedback always give the
same guess. Every non-winning guess rules itself out (some position scored
PRESENT or ABSENT, which removes that letter from that position), so a
session never proposes the same word twice and always terminates.
"""

from __future__ import annotations

from typing import Iterable, Optional

from wordg.engine import SolverState, is_consistent
from .base import BaseSolver, register


def select_next(dictionary: Iterable[str], state: SolverState) -> Optional[str]:
    for w in dictionary:
        if is_consistent(w, state):
            return w
    return None


@register
class FirstMatchSolver(BaseSolver):
    id = "first_match"
    name = "First Match (dictionary order)"
    version = "1.0.0"

    def next_guess(self, state: SolverState) -> Optional[str]:
        return select_next(self.dictionary, state)
