"""
Key/guess classification and the consistency filter derived from it.

Matcher.of(key, guess).match() returns the Filter accepting exactly the
tokens consistent with the feedback `guess` would receive against `key`.

Classification is two passes over the guess after the exact pass, all
folded left to right with an immutable remaining-frequency map:

  1) exact:     guess[i] == key[i]                 -> token has guess[i] at i
  2) misplaced: unclaimed i, budget[guess[i]] > 0   -> token contains guess[i]
  3) absent:    still unclaimed i                   -> token lacks guess[i],
                                                       only if key lacks it too

Each exact/misplaced claim spends one unit of the key's budget for that
character, so a guess with repeated letters can only claim as many of them
as the key holds. An unclaimed position whose character the key does hold
(budget spent elsewhere) adds no predicate: "lacks c" would contradict the
claim already granted for c.

Examples (key, guess -> exact / misplaced / absent):
  ("aabb", "abab")   -> {0, 3} / {1, 2} / {}
  ("hello", "hella") -> {0, 1, 2, 3} / {} / {4}
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType
from typing import FrozenSet, Mapping, NamedTuple, Tuple

from .errors import require
from .filters import Filter
from .token import IndexedCharacter, Token

EXACT = "G"
MISPLACED = "Y"
ABSENT = "-"


@dataclass(frozen=True)
class Classification:
    """Per-position verdicts of one guess against one key."""
    length: int
    exact: FrozenSet[int]
    misplaced: FrozenSet[int]
    absent: FrozenSet[int]
    comparable: bool = True   # False when key and guess lengths differ

    @property
    def pattern(self) -> str:
        """Feedback string, e.g. 'GY--G'."""
        marks = []
        for i in range(self.length):
            if i in self.exact:
                marks.append(EXACT)
            elif i in self.misplaced:
                marks.append(MISPLACED)
            else:
                marks.append(ABSENT)
        return "".join(marks)

    @property
    def solved(self) -> bool:
        return self.comparable and len(self.exact) == self.length


class _Fold(NamedTuple):
    remaining: Mapping[str, int]
    exact: FrozenSet[int]
    misplaced: FrozenSet[int]
    predicates: Tuple[Filter, ...]

    @property
    def claimed(self) -> FrozenSet[int]:
        return self.exact | self.misplaced


def _spend(remaining: Mapping[str, int], ch: str) -> Mapping[str, int]:
    return MappingProxyType({**remaining, ch: remaining[ch] - 1})


def _has_at(ic: IndexedCharacter) -> Filter:
    return Filter(lambda token: token.matches_at(ic))


def _has(ch: str) -> Filter:
    return Filter(lambda token: token.contains(ch))


def _lacks(ch: str) -> Filter:
    return Filter(lambda token: not token.contains(ch))


class Matcher:
    """Scoped to one (key, guess) pair; holds no state beyond the two tokens."""

    __slots__ = ("key", "guess")

    def __init__(self, key: Token, guess: Token):
        self.key = require(key, "key")
        self.guess = require(guess, "guess")

    @classmethod
    def of(cls, key: Token, guess: Token) -> "Matcher":
        return cls(key, guess)

    # ---- folds ----

    def _exact_step(self, state: _Fold, ic: IndexedCharacter) -> _Fold:
        if not self.key.matches_at(ic):
            return state
        return state._replace(
            remaining=_spend(state.remaining, ic.character),
            exact=state.exact | {ic.index},
            predicates=state.predicates + (_has_at(ic),),
        )

    def _misplaced_step(self, state: _Fold, ic: IndexedCharacter) -> _Fold:
        if ic.index in state.exact or state.remaining.get(ic.character, 0) <= 0:
            return state
        return state._replace(
            remaining=_spend(state.remaining, ic.character),
            misplaced=state.misplaced | {ic.index},
            predicates=state.predicates + (_has(ic.character),),
        )

    def _absent_step(self, state: _Fold, ic: IndexedCharacter) -> _Fold:
        if ic.index in state.claimed or self.key.contains(ic.character):
            return state
        return state._replace(predicates=state.predicates + (_lacks(ic.character),))

    def _fold(self) -> _Fold:
        start = _Fold(
            remaining=MappingProxyType(dict(Counter(self.key.chars))),
            exact=frozenset(),
            misplaced=frozenset(),
            predicates=(),
        )
        state = reduce(self._exact_step, self.guess, start)
        state = reduce(self._misplaced_step, self.guess, state)
        return reduce(self._absent_step, self.guess, state)

    # ---- public ----

    def match(self) -> Filter:
        """Filter of tokens consistent with the feedback of guess vs key."""
        if len(self.key) != len(self.guess):
            return Filter.FALSE
        return Filter.all_of(self._fold().predicates)

    def classify(self) -> Classification:
        """Exact / misplaced / absent guess positions."""
        n = len(self.guess)
        if len(self.key) != n:
            return Classification(n, frozenset(), frozenset(), frozenset(range(n)), comparable=False)
        state = self._fold()
        absent = frozenset(range(n)) - state.claimed
        return Classification(n, state.exact, state.misplaced, absent)

    def __repr__(self) -> str:
        return f"Matcher(key={str(self.key)!r}, guess={str(self.guess)!r})"
