"""
Simulation primitives: the solver role played against the scorer.

- run_case:  solve one secret with a given solver.
- run_batch: solve many secrets in sequence (optionally a sample prefix).

These functions are UI-agnostic so they can be reused by the CLI, tests or
a notebook.
"""

from __future__ import annotations
import time
from typing import Dict, List, Sequence
from wordg.engine import NoCandidate, Outcome, score
from wordg.harness.session import SolverSession


def run_case(
        solver,
        secret: str,
        *,
        dictionary: Sequence[str],
        max_turns: int | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the solver wins, runs out of candidates, or uses up
    `max_turns` (None = no limit).

    Args:
        solver:        a BaseSolver instance (reset here)
        secret:        the hidden word for this case
        dictionary:    ordered guess universe
        max_turns:     optional turn budget
        seed:          RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            success (bool), exhausted (bool), guesses (int), time_ms (float),
            history (list[(guess, token)]), answer (str)
    """
    if max_turns is not None and max_turns < 1:
        raise ValueError(f"max_turns must be positive; got {max_turns}")

    session = SolverSession(dictionary, solver=solver, seed=seed)
    success = exhausted = False

    t0 = time.perf_counter()
    while max_turns is None or len(session.history) < max_turns:
        try:
            guess = session.propose()
        except NoCandidate:
            exhausted = True
            break
        if session.feedback(score(secret, guess)) is Outcome.SOLVED:
            success = True
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": success, "exhausted": exhausted, "guesses": len(session.history),
        "time_ms": dt, "history": list(session.history), "answer": secret,
    }


def run_batch(
        solver,
        secrets: Sequence[str],
        *,
        dictionary: Sequence[str],
        max_turns: int | None = None,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, secret, dictionary=dictionary, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
