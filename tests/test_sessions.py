import random

import pytest
from wordg.engine import (
    InvalidLength, MalformedVerdict, NoCandidate, Outcome, UnknownWord, Verdict, format_verdicts,
    parse_verdicts, score,
)
from wordg.harness import Mode, OracleSession, OracleState, SolverPhase, SolverSession

DICTIONARY = ["apple", "beach", "candy", "crate", "grate", "allot", "lolly", "stare"]


def test_mode_has_exactly_two_values():
    assert {m.name for m in Mode} == {"ORACLE", "SOLVER"}


# --- oracle ---

def test_oracle_scores_until_won():
    s = OracleSession(DICTIONARY, secret="crate")
    assert s.state is OracleState.AWAITING_GUESS
    assert s.guess("grate") == parse_verdicts("nyyyy")
    assert not s.won
    assert s.guess("CRATE") == (Verdict.EXACT,) * 5
    assert s.won and s.state is OracleState.WON
    assert s.history == [("grate", "nyyyy"), ("crate", "yyyyy")]
    with pytest.raises(RuntimeError):
        s.guess("apple")


def test_oracle_rejects_invalid_guesses_without_state_change():
    s = OracleSession(DICTIONARY, secret="crate")
    with pytest.raises(InvalidLength):
        s.guess("crates")
    with pytest.raises(UnknownWord):
        s.guess("zebra")
    assert s.state is OracleState.AWAITING_GUESS
    assert s.history == []


def test_oracle_random_secret_is_seeded_dictionary_pick():
    a = OracleSession(DICTIONARY, rng=random.Random(5))
    b = OracleSession(DICTIONARY, rng=random.Random(5))
    assert a.secret == b.secret
    assert a.secret in DICTIONARY
    assert a.secret == DICTIONARY[random.Random(5).randrange(len(DICTIONARY))]


def test_oracle_explicit_secret_is_validated():
    with pytest.raises(InvalidLength):
        OracleSession(DICTIONARY, secret="cat")


# --- solver ---

def test_solver_session_reaches_secret():
    s = SolverSession(DICTIONARY)
    assert s.phase is SolverPhase.PROPOSING
    guess = s.propose()
    assert guess == "apple"
    assert s.phase is SolverPhase.AWAITING_VERDICT
    assert s.feedback(score("allot", guess)) is Outcome.CONTINUE
    assert s.phase is SolverPhase.PROPOSING

    guess = s.propose()
    assert guess == "allot"
    assert s.feedback(format_verdicts(score("allot", guess))) is Outcome.SOLVED
    assert s.phase is SolverPhase.WON and s.done
    assert s.history == [("apple", "ynnpn"), ("allot", "yyyyy")]


def test_solver_session_exhausted():
    s = SolverSession(["apple"])
    s.propose()
    s.feedback("nnnnn")
    with pytest.raises(NoCandidate) as exc:
        s.propose()
    assert str(exc.value) == "I could not find a matching word"
    assert s.phase is SolverPhase.EXHAUSTED and s.done


def test_solver_session_malformed_verdict_can_be_retried():
    s = SolverSession(DICTIONARY)
    s.propose()
    with pytest.raises(MalformedVerdict):
        s.feedback("yyxnn")
    with pytest.raises(MalformedVerdict):
        s.feedback("yyy")
    assert s.phase is SolverPhase.AWAITING_VERDICT
    assert s.history == []
    assert s.feedback("yyyyy") is Outcome.SOLVED


def test_solver_session_rejects_out_of_phase_calls():
    s = SolverSession(DICTIONARY)
    with pytest.raises(RuntimeError):
        s.feedback("nnnnn")
    s.propose()
    with pytest.raises(RuntimeError):
        s.propose()


def test_sessions_do_not_share_state():
    a = SolverSession(DICTIONARY)
    b = SolverSession(DICTIONARY)
    a.propose()
    a.feedback("nnnnn")
    assert b.state.required == {}
    assert b.propose() == "apple"
