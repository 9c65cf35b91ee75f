from pathlib import Path

import pytest
from wordg.datasets import DEFAULT_WORDS_PATH, load_dictionary, pretty_summary, validate_wordlist
from wordg.engine import DictionaryError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["words"]["count"] == 3
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'cranes' too long, '???' invalid chars, 'Crane' not lowercase, blank line
    words = tmp_path / "words_5.txt"
    words.write_text("crane\ncranes\n???\nCrane\n\nstare\nstare\n", encoding="utf-8")

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is False
    assert rep["words"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["words"]["exists"] is False
    assert pretty_summary(rep).endswith("FAIL")


def test_load_dictionary_normalizes_and_keeps_order(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("Stare\ncrane\n\n  RAISE  \ncranes\ncrane\n", encoding="utf-8")
    assert load_dictionary(words) == ["stare", "crane", "raise"]


def test_load_dictionary_fatal_conditions(tmp_path: Path):
    with pytest.raises(DictionaryError):
        load_dictionary(tmp_path / "missing.txt")
    empty = tmp_path / "empty.txt"
    empty.write_text("\ncat\ncranes\n", encoding="utf-8")
    with pytest.raises(DictionaryError):
        load_dictionary(empty)


def test_bundled_wordlist_is_clean():
    rep = validate_wordlist(5, str(DEFAULT_WORDS_PATH))
    assert rep["passed"] is True, rep["issues"]
    assert load_dictionary()[0] == "about"
