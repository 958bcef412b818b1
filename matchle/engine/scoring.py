"""
Wordle-style feedback pattern for a single (guess, answer) pair.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

The pattern is read off Matcher.classify(), so it always agrees with the
filter the matcher derives for the same pair.
"""

from __future__ import annotations

from .matcher import Matcher
from .token import Token


def _normalize(word) -> Token:
    if isinstance(word, Token):
        return word
    return Token.from_string(word.strip().lower())


def score(guess, answer) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Accepts strings (normalized to stripped lowercase) or Tokens.

    Raises:
      ValueError if the lengths differ.

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    g = _normalize(guess)
    a = _normalize(answer)
    if len(g) != len(a):
        raise ValueError(f"Guess and answer must be the same length ({len(g)} != {len(a)})")
    return Matcher.of(a, g).classify().pattern
