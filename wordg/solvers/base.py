from __future__ import annotations
import random
from typing import Dict, List, Optional, Sequence, Type

from wordg.engine import SolverState

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.dictionary: List[str] = []
        self.rng = random.Random()

    def reset(self, *, dictionary: Sequence[str], seed: int | None = None) -> None:
        self.dictionary = list(dictionary)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: SolverState) -> Optional[str]:
        """Return the next guess, or None when no dictionary word fits `state`."""
        raise NotImplementedError("Override in subclass")
