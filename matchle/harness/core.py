"""
Game harness primitives.

- run_case:  play one hidden key to completion with a given solver.
- run_batch: play many keys in sequence (optionally a sample prefix).

Each turn the solver proposes a guess from the current candidate corpus, the
guess is scored against the key, and the candidates are narrowed with the
Matcher filter for (key, guess). These functions are UI-agnostic so they can
be reused by the CLI, a notebook or tests.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Tuple

from matchle.corpus import Builder, Corpus
from matchle.engine import Filter, Matcher, Token

logger = logging.getLogger(__name__)

# Default turn budget (Wordle rules).
WORDLE_MAX_TURNS = 6


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be positive; got {max_turns}")


def run_case(
        solver,
        key,
        *,
        corpus: Corpus,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver hits the key or the turn budget runs out.

    Args:
        solver:    a BaseSolver with next_guess(state)
        key:       the hidden token (or string)
        corpus:    candidate universe; also the solver's guess pool
        max_turns: turn budget
        seed:      RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str)
    """
    _check_turns(max_turns)
    key = Token.of(key)

    solver.reset(corpus=corpus, seed=seed)

    history: List[Tuple[str, str]] = []
    candidates = corpus
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "corpus": corpus,
        }
        guess = Token.of(solver.next_guess(state))

        classification = Matcher.of(key, guess).classify()
        history.append((str(guess), classification.pattern))

        if classification.solved:
            success = True
            break

        # Narrow candidates with the feedback. A missed guess is dropped too:
        # "contains" constraints alone can keep an anagram of the key alive.
        # An empty survivor set means the key was never in the corpus.
        feedback = Matcher.of(key, guess).match().and_(Filter(lambda t, g=guess: t != g))
        result = Builder.of(candidates).filter(feedback).build()
        if not result.ok:
            logger.info("no candidates left for %s after %d turn(s)", key, turn)
            break
        candidates = result.corpus

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": success, "guesses": len(history), "time_ms": dt,
        "history": history, "answer": str(key),
    }


def run_batch(
        solver,
        corpus: Corpus,
        *,
        keys=None,
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. Keys default to every corpus member in
    iteration order; if `sample` is given only the first K are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    _check_turns(max_turns)

    pool = list(corpus) if keys is None else [Token.of(k) for k in keys]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, key in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, key, corpus=corpus, max_turns=max_turns, seed=case_seed))
    logger.info("batch done: %d case(s), %d solved",
                len(out), sum(1 for r in out if r["success"]))
    return out
