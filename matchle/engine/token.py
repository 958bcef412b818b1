"""
Token: an immutable fixed-length sequence of characters (an "n-gram").

A Token keeps the ordered characters plus a frozenset of the distinct ones,
so "does this word contain c" is O(1). Equality, hashing and ordering only
look at the ordered characters; ordering is lexicographic and is what the
corpus uses to break ties deterministically.

Examples:
  Token.from_string("hello").at(1)          -> "e"
  "l" in Token.from_string("hello")         -> True
  Token.from_string("world").contains_elsewhere(IndexedCharacter(1, "w")) -> True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple

from .errors import MalformedInputError, require


class IndexedCharacter(NamedTuple):
    """A (position, character) pair; produced on demand, never stored."""
    index: int
    character: str


def _validate(chars: Sequence[Optional[str]]) -> Tuple[str, ...]:
    """Return `chars` as a tuple, rejecting the first absent/invalid element."""
    out = []
    for i, c in enumerate(chars):
        if not isinstance(c, str) or len(c) != 1:
            raise MalformedInputError(i)
        out.append(c)
    return tuple(out)


@dataclass(frozen=True, order=True)
class Token:
    chars: Tuple[str, ...]
    charset: FrozenSet[str] = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        # every construction path, including Token(...), goes through here
        chars = _validate(require(self.chars, "characters"))
        object.__setattr__(self, "chars", chars)
        object.__setattr__(self, "charset", frozenset(chars))

    # ---- construction ----

    @classmethod
    def from_chars(cls, chars: Iterable[Optional[str]]) -> "Token":
        """
        Build from an explicit character sequence.

        Raises:
          NullArgumentError   : `chars` is None
          MalformedInputError : an element is None (or not a single character);
                                `.index` names the position
        """
        require(chars, "characters")
        return cls(tuple(chars))

    @classmethod
    def from_string(cls, text: str) -> "Token":
        """Build from a string, one character per position; TypeError for non-str."""
        require(text, "text")
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        return cls(tuple(text))

    @classmethod
    def of(cls, value) -> "Token":
        """Accept a Token, a string or a character sequence."""
        if isinstance(value, Token):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_chars(value)

    # ---- queries ----

    def length(self) -> int:
        return len(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def at(self, index: int) -> str:
        """Character at a 0-based index; IndexError when out of range."""
        if not 0 <= index < len(self.chars):
            raise IndexError(f"index {index} out of range for length {len(self.chars)}")
        return self.chars[index]

    __getitem__ = at

    def contains(self, character: str) -> bool:
        return character in self.charset

    __contains__ = contains

    def matches_at(self, c: IndexedCharacter) -> bool:
        """True iff this token has `c.character` at `c.index`."""
        require(c, "indexed character")
        return 0 <= c.index < len(self.chars) and self.chars[c.index] == c.character

    def contains_elsewhere(self, c: IndexedCharacter) -> bool:
        """True iff the character occurs in this token, but not at `c.index`."""
        require(c, "indexed character")
        return c.character in self.charset and not self.matches_at(c)

    def __iter__(self) -> Iterator[IndexedCharacter]:
        # a fresh generator each call, so iteration is restartable
        return (IndexedCharacter(i, ch) for i, ch in enumerate(self.chars))

    def __str__(self) -> str:
        return "".join(self.chars)
