"""
Filter: an immutable, composable boolean predicate over Tokens.

Filters only ever combine by conjunction. `a.and_(None)` returns `a`
unchanged, so "no extra constraint" composes cleanly. FALSE rejects every
token (the absorbing element); TRUE accepts every token (the vacuous filter
produced for zero-length matches).

A filter holds a flat tuple of predicates, so conjunction depth never grows
with the number of constraints.
"""

from __future__ import annotations

from itertools import chain
from typing import Callable, Iterable, Optional

from .errors import require
from .token import Token

Predicate = Callable[[Token], bool]


class Filter:
    __slots__ = ("_predicates",)

    def __init__(self, *predicates: Predicate):
        object.__setattr__(self, "_predicates", tuple(predicates))

    def __setattr__(self, name, value):
        raise AttributeError("Filter is immutable")

    @classmethod
    def from_predicate(cls, predicate: Predicate) -> "Filter":
        """Wrap a Token -> bool callable."""
        require(predicate, "predicate")
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
        return cls(predicate)

    def test(self, token: Token) -> bool:
        return all(p(token) for p in self._predicates)

    __call__ = test

    def and_(self, other: Optional["Filter"]) -> "Filter":
        if other is None:
            return self
        return Filter(*self._predicates, *other._predicates)

    def __and__(self, other: "Filter") -> "Filter":
        if not isinstance(other, Filter):
            return NotImplemented
        return self.and_(other)

    @staticmethod
    def all_of(filters: Iterable["Filter"]) -> "Filter":
        """Conjunction of every filter; TRUE for an empty iterable."""
        return Filter(*chain.from_iterable(f._predicates for f in filters))

    TRUE: "Filter"
    FALSE: "Filter"


Filter.TRUE = Filter()
Filter.FALSE = Filter(lambda token: False)
