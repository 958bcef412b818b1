"""
I/O utilities for game runs.

Responsibilities:
- write_csv:       one row per game, history expanded into guess/pattern columns.
- summarize:       aggregate stats over a batch (solve rate, guess distribution).
- write_manifest:  JSON manifest with config, word-list report and summary.
- timestamp_id:    stable UTC run ID string.
- git_commit_or_unknown: short commit hash for reproducibility.

Patterns are prefixed with an apostrophe so spreadsheet apps don't read
strings like "-GYY-" as formulas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

import numpy as np


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Serialize a batch of game results to CSV.

    Columns:
      solver, N, answer, success, guesses, time_ms,
      guess_1, patt_1, ..., guess_<max_turns>, patt_<max_turns>

    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "N", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                g, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = _excel_safe_pattern(patt)
            w.writerow(row)

    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Batch statistics; guess counts are taken over solved games only.

    Keys: num_cases, solved, solve_rate, mean_guesses, max_guesses,
          guess_histogram ({guesses: games}), mean_time_ms
    """
    if not results:
        return {"num_cases": 0, "solved": 0, "solve_rate": 0.0, "mean_guesses": None,
                "max_guesses": None, "guess_histogram": {}, "mean_time_ms": None}

    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=np.int64)
    times = np.array([float(r["time_ms"]) for r in results])
    counts = np.bincount(solved) if solved.size else np.zeros(0, dtype=np.int64)
    return {
        "num_cases": len(results),
        "solved": int(solved.size),
        "solve_rate": solved.size / len(results),
        "mean_guesses": float(solved.mean()) if solved.size else None,
        "max_guesses": int(solved.max()) if solved.size else None,
        "guess_histogram": {int(g): int(c) for g, c in enumerate(counts) if c},
        "mean_time_ms": float(times.mean()),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys: run_id, git_commit, config (CLI args), wordlist (validator
    report), summary (see `summarize`), solver_id.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp for filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Short git hash of the current checkout, or 'unknown' when git is missing
    or this is not a repository.
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
        return "unknown"
