from collections import Counter

import pytest
from wordg.engine import (
    InvalidLength, MalformedVerdict, UnknownWord, Verdict, format_verdicts, is_solved,
    is_valid_guess, parse_verdicts, score, validate_guess,
)

# --- golden tests (duplicates + placements); score(secret, guess) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("crate", "grate", "nyyyy"),
    ("allot", "lolly", "ppynn"),
    ("level", "belle", "nyppp"),
    ("level", "level", "yyyyy"),
    ("level", "lemon", "yynnn"),
    ("scoop", "cools", "ppynp"),
    ("crane", "raise", "ppnny"),
    ("crane", "stare", "nnypy"),
    ("abbey", "babes", "ppyyn"),
    ("alert", "llama", "nypnn"),
])
def test_score_golden(secret, guess, expected):
    assert format_verdicts(score(secret, guess)) == expected


def test_score_normalizes_case_and_whitespace():
    assert format_verdicts(score(" CRATE ", "Grate")) == "nyyyy"


@pytest.mark.parametrize("secret,guess", [("crate", "grates"), ("cat", "crate"), ("crat3", "crate")])
def test_score_rejects_bad_shapes(secret, guess):
    with pytest.raises(InvalidLength):
        score(secret, guess)


@pytest.mark.parametrize("secret,guess", [
    ("allot", "lolly"), ("level", "belle"), ("geese", "eerie"), ("sassy", "asses"),
    ("crane", "nacre"), ("mamma", "madam"),
])
def test_score_counts_respect_multiplicity(secret, guess):
    verdicts = score(secret, guess)
    exact = [i for i, v in enumerate(verdicts) if v is Verdict.EXACT]
    assert exact == [i for i in range(5) if secret[i] == guess[i]]

    # PRESENT for L never exceeds occurrences of L in secret minus its exact matches
    present = Counter(g for g, v in zip(guess, verdicts) if v is Verdict.PRESENT)
    exact_letters = Counter(guess[i] for i in exact)
    for ch, n in present.items():
        assert n <= Counter(secret)[ch] - exact_letters[ch]


def test_parse_and_format_verdicts():
    vs = parse_verdicts("ynnpn")
    assert vs == (Verdict.EXACT, Verdict.ABSENT, Verdict.ABSENT, Verdict.PRESENT, Verdict.ABSENT)
    assert format_verdicts(vs) == "ynnpn"
    assert parse_verdicts(" YYYYY\n") == (Verdict.EXACT,) * 5
    assert is_solved(parse_verdicts("yyyyy"))
    assert not is_solved(vs)


@pytest.mark.parametrize("token", ["", "yyyy", "yyyyyy", "yxnpn", "gy-yy"])
def test_parse_verdicts_rejects_malformed(token):
    with pytest.raises(MalformedVerdict):
        parse_verdicts(token)


def test_validate_guess():
    dictionary = {"crane", "raise", "stare"}
    assert validate_guess("CRANE", dictionary) == "crane"
    with pytest.raises(InvalidLength):
        validate_guess("cranes", dictionary)
    with pytest.raises(InvalidLength):
        validate_guess("???", dictionary)
    with pytest.raises(UnknownWord) as exc:
        validate_guess("grate", dictionary)
    assert str(exc.value) == "grate is not a valid word"
    assert is_valid_guess("raise", dictionary) is True
    assert is_valid_guess("grate", dictionary) is False
