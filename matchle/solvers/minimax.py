"""
Survivor-minimising solvers.

For each candidate guess g, every member of the CURRENT candidate corpus is
taken in turn as the hidden key; the survivors left by the feedback are
counted and aggregated:
  - worst_case   : max over keys  (adversary picks the least helpful key)
  - average_case : sum over keys  (same argmin as the mean)
The guess with the smallest aggregate wins; ties go to the lexicographically
smallest token.

Both are quadratic-times-filter in the candidate count, so they are meant for
small corpora or late turns.
"""

from __future__ import annotations

import logging

from matchle.corpus import Corpus
from matchle.engine import Token
from .base import BaseSolver, register

logger = logging.getLogger(__name__)


@register
class WorstCaseSolver(BaseSolver):
    id = "worst_case"
    name = "Minimax (worst-case survivors)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Token:
        candidates: Corpus = state["candidates"]
        guess = candidates.best_worst_case_guess()
        logger.debug("turn %s: %s over %d candidates", state.get("turn"), guess, len(candidates))
        return guess


@register
class AverageCaseSolver(BaseSolver):
    id = "average_case"
    name = "Minimum total survivors"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Token:
        candidates: Corpus = state["candidates"]
        guess = candidates.best_average_case_guess()
        logger.debug("turn %s: %s over %d candidates", state.get("turn"), guess, len(candidates))
        return guess
