"""
Corpus: an immutable, length-uniform set of Tokens, and its Builder.

Scoring model:
  - score(key, guess)          survivors of Matcher.of(key, guess).match()
  - score_worst_case(guess)    max over every member taken as the key
  - score_average_case(guess)  SUM over every member taken as the key
                               (a total, not a mean; see score_mean_case)
  - best_guess(criterion)      member minimising criterion; ties go to the
                               lexicographically smallest member

Members are held in lexicographic order, so iteration and tie-breaks are
reproducible across runs and interpreters.

Typical use:
    corpus = Corpus.from_words(["crane", "raise", "stare"]).unwrap()
    corpus.best_worst_case_guess()   # -> Token('crane')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Iterator, Optional, Set, Tuple, Union

import numpy as np

from matchle.engine.errors import BuildFailure, BuildReason, InvalidStateError, require
from matchle.engine.filters import Filter
from matchle.engine.matcher import Matcher
from matchle.engine.token import Token

logger = logging.getLogger(__name__)

Criterion = Callable[[Token], float]


@dataclass(frozen=True)
class Built:
    """Successful build outcome."""
    corpus: "Corpus"

    ok = True

    def unwrap(self) -> "Corpus":
        return self.corpus


BuildResult = Union[Built, BuildFailure]


class Corpus:
    __slots__ = ("_members", "_index", "_word_size")

    def __init__(self, members: Iterable[Token], word_size: int):
        ordered = tuple(sorted(set(members)))
        if any(len(t) != word_size for t in ordered):
            raise ValueError(f"every token must have length {word_size}")
        self._members: Tuple[Token, ...] = ordered
        self._index: FrozenSet[Token] = frozenset(ordered)
        self._word_size = word_size

    @classmethod
    def empty(cls, word_size: int = 0) -> "Corpus":
        """A corpus with no members; scoring and best-guess calls fail on it."""
        return cls((), word_size)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> BuildResult:
        """Build from plain strings, one token per word."""
        require(words, "words")
        return Builder.empty().add_all(Token.from_string(w) for w in words).build()

    # ---- read-only views ----

    @property
    def word_size(self) -> int:
        return self._word_size

    def members(self) -> Set[Token]:
        """A copy of the member set; mutating it never affects the corpus."""
        return set(self._members)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, token) -> bool:
        return token in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, Corpus):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash(self._index)

    def __repr__(self) -> str:
        return f"Corpus(size={len(self)}, word_size={self._word_size})"

    # ---- filtering / scoring ----

    def size(self, filter: Optional[Filter] = None) -> int:
        """Number of members satisfying `filter` (all members when None)."""
        if filter is None:
            return len(self._members)
        return sum(1 for t in self._members if filter.test(t))

    def _require_members(self) -> None:
        if not self._members:
            raise InvalidStateError("Corpus is empty")

    def score(self, key: Token, guess: Token) -> int:
        """Members still consistent after `guess` is scored against `key`."""
        require(key, "key")
        require(guess, "guess")
        self._require_members()
        return self.size(Matcher.of(key, guess).match())

    def _key_scores(self, guess: Token) -> np.ndarray:
        require(guess, "guess")
        self._require_members()
        return np.fromiter(
            (self.score(key, guess) for key in self._members),
            dtype=np.int64,
            count=len(self._members),
        )

    def score_worst_case(self, guess: Token) -> int:
        """Largest survivor count over every member taken as the key."""
        return int(self._key_scores(guess).max())

    def score_average_case(self, guess: Token) -> int:
        """
        Total survivor count over every member taken as the key.

        Not divided by the corpus size; minimising the total picks the same
        guess as minimising the mean. Use score_mean_case for the mean.
        """
        return int(self._key_scores(guess).sum())

    def score_mean_case(self, guess: Token) -> float:
        return float(self._key_scores(guess).mean())

    def scores(self, criterion: Criterion) -> np.ndarray:
        """Criterion values for every member, in iteration order."""
        require(criterion, "criterion")
        return np.asarray([criterion(t) for t in self._members])

    def best_guess(self, criterion: Criterion) -> Token:
        """Member with the smallest criterion value (lexicographic tie-break)."""
        self._require_members()
        values = self.scores(criterion)
        # argmin returns the first minimum, i.e. the lexicographically smallest
        best = self._members[int(np.argmin(values))]
        logger.debug("best guess %s (score=%s) over %d members", best, values.min(), len(self))
        return best

    def best_worst_case_guess(self) -> Token:
        return self.best_guess(self.score_worst_case)

    def best_average_case_guess(self) -> Token:
        return self.best_guess(self.score_average_case)


class Builder:
    """Mutable, single-owner staging area for a Corpus."""

    __slots__ = ("_tokens",)

    def __init__(self):
        self._tokens: Set[Token] = set()

    @classmethod
    def empty(cls) -> "Builder":
        return cls()

    @classmethod
    def of(cls, corpus: Corpus) -> "Builder":
        """Seed a builder with every member of an existing corpus."""
        require(corpus, "corpus")
        return cls().add_all(corpus)

    def add(self, token: Token) -> "Builder":
        require(token, "token")
        self._tokens.add(token)
        return self

    def add_all(self, tokens: Iterable[Optional[Token]]) -> "Builder":
        """Add every token; None entries are skipped."""
        require(tokens, "tokens")
        for token in tokens:
            if token is not None:
                self.add(token)
        return self

    def __len__(self) -> int:
        return len(self._tokens)

    def tokens(self) -> Set[Token]:
        return set(self._tokens)

    def is_consistent(self, length: int) -> bool:
        """True iff every accumulated token has `length` characters."""
        return all(len(t) == length for t in self._tokens)

    def filter(self, filter: Filter) -> "Builder":
        """A new builder with only the tokens satisfying `filter`."""
        require(filter, "filter")
        out = Builder()
        out._tokens = {t for t in self._tokens if filter.test(t)}
        return out

    def build(self) -> BuildResult:
        """
        Freeze into a Corpus.

        Returns:
          Built(corpus), or BuildFailure(EMPTY | INCONSISTENT_LENGTHS).
        """
        if not self._tokens:
            return BuildFailure(BuildReason.EMPTY)
        lengths = {len(t) for t in self._tokens}
        if len(lengths) > 1:
            logger.debug("build rejected: lengths %s", sorted(lengths))
            return BuildFailure(BuildReason.INCONSISTENT_LENGTHS, tuple(sorted(lengths)))
        return Built(Corpus(self._tokens, lengths.pop()))
