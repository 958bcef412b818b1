"""
Candidate filtering given game history.

Given:
  - a corpus (or builder) of candidate tokens
  - a history of (guess, pattern) pairs, patterns as produced by `score`

Return:
  - a Builder holding only the tokens consistent with ALL feedback so far.

A pattern carries the same information the Matcher uses, so the filter
built from (guess, pattern) equals Matcher.of(key, guess).match() for any
key that yields that pattern. Solvers and the harness use this when only
the pattern, not the key, is known.
"""

from __future__ import annotations

from typing import Iterable, Tuple, Union

from .filters import Filter
from .matcher import ABSENT, EXACT, MISPLACED
from .token import IndexedCharacter, Token

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[Union[str, Token], str]]


def filter_from_feedback(guess, pattern: str) -> Filter:
    """
    Filter equivalent to the matcher's for any key producing `pattern`.

    Raises:
      ValueError on a length mismatch or an unknown pattern character.
    """
    g = Token.of(guess)
    if len(pattern) != len(g):
        raise ValueError(f"pattern {pattern!r} does not fit guess {str(g)!r}")

    # letters credited somewhere in the pattern must not be ruled out elsewhere
    credited = {g.at(i) for i, m in enumerate(pattern) if m in (EXACT, MISPLACED)}

    filters = []
    for ic, mark in zip(g, pattern):
        if mark == EXACT:
            filters.append(Filter(lambda t, ic=ic: t.matches_at(ic)))
        elif mark == MISPLACED:
            filters.append(Filter(lambda t, ch=ic.character: t.contains(ch)))
        elif mark == ABSENT:
            if ic.character not in credited:
                filters.append(Filter(lambda t, ch=ic.character: not t.contains(ch)))
        else:
            raise ValueError(f"unknown pattern mark {mark!r} at index {ic.index}")
    return Filter.all_of(filters)


def filter_candidates(candidates, history: History):
    """
    Keep only tokens consistent with every (guess, pattern) in `history`.

    Args:
      candidates : Corpus or Builder
      history    : iterable of (guess, pattern) seen so far

    Returns:
      Builder of survivors (the input is left untouched).
    """
    # local import: corpus depends on the engine package
    from matchle.corpus import Builder, Corpus

    builder = Builder.of(candidates) if isinstance(candidates, Corpus) else candidates
    return builder.filter(feedback_history_filter(history))


def feedback_history_filter(history: History) -> Filter:
    """The conjunction of every feedback filter in `history`."""
    return Filter.all_of(filter_from_feedback(g, patt) for g, patt in history)
