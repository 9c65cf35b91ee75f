"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the words still consistent with all
    feedback so far.
  - Return None if nothing is consistent.

Notes:
  - Reproducible across runs with the same seed (via BaseSolver.rng).
  - A baseline for simulation runs; interactive play uses first_match.
"""

from __future__ import annotations

from typing import List, Optional

from wordg.engine import SolverState, filter_candidates
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: SolverState) -> Optional[str]:
        pool: List[str] = filter_candidates(self.dictionary, state)
        if not pool:
            return None
        i = self.rng.randrange(len(pool))
        return pool[i]
