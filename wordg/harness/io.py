"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import logging
import subprocess
import datetime as dt

log = logging.getLogger(__name__)


def write_csv(results: List[Dict], path: str, max_turns: int | None = None) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, exhausted, guesses, time_ms,
      guess_1, verdict_1, guess_2, verdict_2, ..., guess_T, verdict_T

    Args:
      results  : list of dicts returned by the harness per game.
      path     : output CSV path.
      max_turns: number of guess/verdict column pairs; defaults to the
                 longest history in `results`.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if max_turns is None:
        max_turns = max((len(r.get("history", [])) for r in results), default=0)

    fields = ["solver", "answer", "success", "exhausted", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"verdict_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "exhausted": r.get("exhausted", False),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns; longer histories are cut.
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, token = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"verdict_{i}"] = token
                else:
                    row[f"guess_{i}"] = ""
                    row[f"verdict_{i}"] = ""

            w.writerow(row)

    log.info("wrote %d result row(s) to %s", len(results), p)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, words path, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_cases, solved, exhausted
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        log.debug("git commit unavailable", exc_info=True)
        return "unknown"
