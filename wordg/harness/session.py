"""
Session state machines for the two roles.

OracleSession (program holds the secret, a human guesses):
    AWAITING_GUESS --valid guess--> AWAITING_GUESS | WON
    invalid guesses (InvalidLength / UnknownWord) are rejected without a
    state change.

SolverSession (program guesses, someone else holds the secret):
    PROPOSING --propose()--> AWAITING_VERDICT | EXHAUSTED
    AWAITING_VERDICT --feedback()--> PROPOSING | WON
    a malformed verdict is rejected without a state change.

Quitting is not a state: the caller simply stops driving the session.
Sessions own all of their mutable state; nothing is shared between them.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from wordg.engine import (
    NoCandidate, Outcome, SolverState, Verdict, VerdictSequence, format_verdicts, ingest,
    is_solved, new_state, parse_verdicts, require_word, score, validate_guess,
)
from wordg.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)


class Mode(Enum):
    ORACLE = "run"
    SOLVER = "guess"


class OracleState(Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"


class SolverPhase(Enum):
    PROPOSING = "proposing"
    AWAITING_VERDICT = "awaiting_verdict"
    WON = "won"
    EXHAUSTED = "exhausted"


class OracleSession:
    """
    Holds the secret word and scores guesses against it.

    Args:
      dictionary : ordered word list; guesses must be members
      secret     : the word to guess; picked uniformly from `dictionary`
                   when omitted
      rng        : random source for that pick (seed it for reproducibility)
    """

    def __init__(self, dictionary: Sequence[str], *, secret: str | None = None,
                 rng: random.Random | None = None):
        if not dictionary:
            raise ValueError("dictionary must not be empty")
        self._dictionary = frozenset(dictionary)
        if secret:
            self.secret = require_word(secret)
        else:
            rng = rng or random.Random()
            self.secret = dictionary[rng.randrange(len(dictionary))]
        self.state = OracleState.AWAITING_GUESS
        self.history: List[Tuple[str, str]] = []

    @property
    def won(self) -> bool:
        return self.state is OracleState.WON

    def guess(self, word: str) -> VerdictSequence:
        """
        Score one guess.

        Raises InvalidLength / UnknownWord for unacceptable guesses (state
        unchanged), RuntimeError if the game is already won.
        """
        if self.state is not OracleState.AWAITING_GUESS:
            raise RuntimeError(f"cannot guess in state {self.state.name}")
        w = validate_guess(word, self._dictionary)
        verdicts = score(self.secret, w)
        self.history.append((w, format_verdicts(verdicts)))
        if is_solved(verdicts):
            self.state = OracleState.WON
            log.info("secret found after %d guess(es)", len(self.history))
        return verdicts


class SolverSession:
    """
    Proposes guesses and narrows its constraints from the verdicts it is fed.

    Args:
      dictionary : ordered word list the guesses are drawn from
      solver     : a BaseSolver (default: first_match)
      seed       : forwarded to solver.reset for solvers that use the RNG
    """

    def __init__(self, dictionary: Sequence[str], *, solver: BaseSolver | None = None,
                 seed: int | None = None):
        self.solver = solver or create_solver()
        self.solver.reset(dictionary=dictionary, seed=seed)
        self.state: SolverState = new_state()
        self.phase = SolverPhase.PROPOSING
        self.current: Optional[str] = None
        self.history: List[Tuple[str, str]] = []

    @property
    def done(self) -> bool:
        return self.phase in (SolverPhase.WON, SolverPhase.EXHAUSTED)

    def propose(self) -> str:
        """
        Pick the next guess.

        Raises NoCandidate (and moves to EXHAUSTED) when no dictionary word is
        consistent with the feedback so far.
        """
        self._expect(SolverPhase.PROPOSING)
        guess = self.solver.next_guess(self.state)
        if guess is None:
            self.phase = SolverPhase.EXHAUSTED
            log.info("no candidates left after %d guess(es)", len(self.history))
            raise NoCandidate("I could not find a matching word")
        self.current = guess
        self.phase = SolverPhase.AWAITING_VERDICT
        return guess

    def feedback(self, verdicts: Union[str, Iterable[Verdict]]) -> Outcome:
        """
        Apply the verdicts for the current guess.

        `verdicts` is either a wire token ("ynnpn") or a sequence of Verdict.
        MalformedVerdict leaves the session waiting for a corrected verdict.
        """
        self._expect(SolverPhase.AWAITING_VERDICT)
        vs = parse_verdicts(verdicts) if isinstance(verdicts, str) else tuple(verdicts)
        outcome = ingest(self.state, self.current, vs)
        self.history.append((self.current, format_verdicts(vs)))
        self.phase = SolverPhase.WON if outcome is Outcome.SOLVED else SolverPhase.PROPOSING
        return outcome

    def _expect(self, phase: SolverPhase) -> None:
        if self.phase is not phase:
            raise RuntimeError(f"expected phase {phase.name}, session is {self.phase.name}")
