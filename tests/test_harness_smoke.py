import csv
import json
from pathlib import Path

from wordg.datasets import load_dictionary
from wordg.harness import run_batch, run_case, write_csv, write_manifest
from wordg.solvers import create_solver


def test_run_case_smoke():
    dictionary = ["crane", "raise", "stare", "trace", "cared"]
    solver = create_solver("first_match")
    r = run_case(solver, "cared", dictionary=dictionary)
    assert r["success"] is True and r["exhausted"] is False
    assert r["history"][-1] == ("cared", "yyyyy")
    assert r["guesses"] == len(r["history"])


def test_run_case_secret_outside_dictionary_exhausts():
    solver = create_solver("first_match")
    r = run_case(solver, "zesty", dictionary=["crane", "raise", "stare"])
    assert r["success"] is False
    assert r["exhausted"] is True


def test_run_case_respects_max_turns():
    dictionary = ["aaaab", "aaaac", "aaaad", "aaaae"]
    solver = create_solver("first_match")
    r = run_case(solver, "aaaae", dictionary=dictionary, max_turns=2)
    assert r["success"] is False and r["exhausted"] is False
    assert r["guesses"] == 2


def test_first_match_solves_every_bundled_word():
    dictionary = load_dictionary()
    solver = create_solver("first_match")
    results = run_batch(solver, dictionary, dictionary=dictionary, sample=60)
    assert len(results) == 60
    assert all(r["success"] for r in results)
    assert all(r["solver_id"] == "first_match" for r in results)


def test_random_consistent_batch_is_reproducible():
    dictionary = ["crane", "raise", "stare", "trace", "cared", "crate", "grate"]
    solver = create_solver("random_consistent")
    a = run_batch(solver, dictionary, dictionary=dictionary, seed=42)
    b = run_batch(solver, dictionary, dictionary=dictionary, seed=42)
    assert [r["history"] for r in a] == [r["history"] for r in b]
    assert all(r["success"] for r in a)


def test_write_csv_and_manifest(tmp_path: Path):
    dictionary = ["crane", "raise", "stare"]
    results = run_batch(create_solver(), dictionary, dictionary=dictionary)
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["answer"] for row in rows] == dictionary
    assert rows[0]["guess_1"] == "crane" and rows[0]["verdict_1"] == "yyyyy"

    m_path = write_manifest({"num_cases": len(results)}, str(tmp_path / "m.json"))
    assert json.loads(Path(m_path).read_text(encoding="utf-8")) == {"num_cases": 3}
