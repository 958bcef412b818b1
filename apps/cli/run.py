# apps/cli/run.py
"""
CLI entry point for running matchle games.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads it into a Corpus and instantiates the requested solver.
  3) Plays every key (or a seeded sample) with a progress indicator and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word-list hash, git commit and summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from matchle.datasets import load_corpus, pretty_summary, validate_wordlist
from matchle.harness import WORDLE_MAX_TURNS, run_case, summarize, write_csv, write_manifest
from matchle.harness.io import git_commit_or_unknown, timestamp_id
from matchle.solvers import DEFAULT_SOLVER_ID, create_solver, get_solver_ids

logger = logging.getLogger("matchle.cli")


def build_parser() -> argparse.ArgumentParser:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="matchle — play and score guessing strategies")
    ap.add_argument("--words", required=True, help="path to word list (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length (other lengths are skipped)")
    ap.add_argument("--solver", default=DEFAULT_SOLVER_ID,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS, help="turn budget per game")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of keys (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="show run progress (auto=bar on a terminal, else plain text)",
    )
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse args, validate the list, run the games and write outputs.
    Returns a process exit code.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.max_turns < 1:
        ap.error(f"--max-turns must be positive; got {args.max_turns}")
    if args.sample is not None and args.sample < 1:
        ap.error(f"--sample must be positive; got {args.sample}")
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate word list and print a one-liner summary
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))

    # 2) Load into a corpus; a failed build is fatal
    result = load_corpus(args.words, N=args.N)
    if not result.ok:
        print(f"Cannot build corpus: {result.describe()}", file=sys.stderr)
        return 1
    corpus = result.corpus

    # 3) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    # 4) Choose keys (deterministic sample by seed)
    keys = list(corpus)
    if args.sample and args.sample < len(keys):
        random.Random(args.seed).shuffle(keys)
        keys = keys[: args.sample]
    total = len(keys)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    iterator = tqdm(keys, ncols=80, desc="Running", unit="game") if mode == "bar" else keys

    results = []
    start = time.time()
    last_print = 0.0
    for idx, key in enumerate(iterator, 1):
        r = run_case(solver, key, corpus=corpus, max_turns=args.max_turns, seed=args.seed + idx)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=corpus.word_size)
    summary = summarize(results)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
        "solver_id": solver.id,
    }, str(manifest_path))

    print(f"Solved {summary['solved']}/{summary['num_cases']} "
          f"(mean guesses: {summary['mean_guesses']})")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
