"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate corpus (tokens
    still consistent with all feedback so far).

Deterministic across runs with the same seed (via BaseSolver.rng). A
baseline to compare the minimax solvers against.
"""

from __future__ import annotations

from matchle.corpus import Corpus
from matchle.engine import Token
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Token:
        candidates: Corpus = state["candidates"]
        # candidates iterate in lexicographic order, so the seeded pick is stable
        pool = list(candidates)
        return pool[self.rng.randrange(len(pool))]
