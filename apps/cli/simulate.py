# apps/cli/simulate.py
"""
CLI entry point for batch simulations of the solver role.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the dictionary and instantiates the requested solver.
  3) Plays one game per secret (solver vs. scorer) with a live progress
     indicator and writes:
       - CSV:  per-case results + guess/verdict history columns
       - JSON: manifest with config, word list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordg.datasets import DEFAULT_WORDS_PATH, load_dictionary, pretty_summary, validate_wordlist
from wordg.engine import DictionaryError, WORD_LENGTH
from wordg.harness import run_case
from wordg.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordg.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordg — run solver simulations")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="dictionary file (guess universe, also the default secret pool)")
    ap.add_argument("--secrets",
                    help="optional file of secrets to play (default: every dictionary word)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, help="turn budget per game (default: unlimited)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(WORD_LENGTH, args.words)
    print(pretty_summary(rep))

    # 2) Load the dictionary (fatal if unusable)
    try:
        dictionary = load_dictionary(args.words)
        secrets = load_dictionary(args.secrets) if args.secrets else list(dictionary)
    except DictionaryError as e:
        print(f"wordg-simulate: {e}", file=sys.stderr)
        return 1

    # 3) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        ap.error(str(e))

    # 4) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(secrets):
        pool = list(secrets)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = secrets

    total = len(cases)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 6) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223
        r = run_case(solver, secret, dictionary=dictionary, max_turns=args.max_turns,
                     seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    solved = [r for r in results if r["success"]]
    exhausted = sum(1 for r in results if r["exhausted"])
    mean_guesses = sum(r["guesses"] for r in solved) / len(solved) if solved else 0.0
    print(f"Solved {len(solved)}/{total} | exhausted {exhausted} | mean guesses {mean_guesses:.2f}")

    # 7) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solved": len(solved),
        "exhausted": exhausted,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
