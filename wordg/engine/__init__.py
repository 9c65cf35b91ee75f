from .errors import (
    WordgError, InvalidLength, UnknownWord, MalformedVerdict, NoCandidate, DictionaryError,
)
from .words import WORD_LENGTH, ALPHABET, normalize_word, require_word
from .verdicts import (
    Verdict, VerdictSequence, SOLVED_TOKEN, parse_verdicts, format_verdicts, is_solved,
)
from .scoring import score
from .validation import validate_guess, is_valid_guess
from .constraints import (
    SolverState, Outcome, new_state, ingest, is_consistent, filter_candidates, describe,
)

__all__ = [
    "WordgError", "InvalidLength", "UnknownWord", "MalformedVerdict", "NoCandidate",
    "DictionaryError",
    "WORD_LENGTH", "ALPHABET", "normalize_word", "require_word",
    "Verdict", "VerdictSequence", "SOLVED_TOKEN", "parse_verdicts", "format_verdicts", "is_solved",
    "score", "validate_guess", "is_valid_guess",
    "SolverState", "Outcome", "new_state", "ingest", "is_consistent", "filter_candidates",
    "describe",
]
