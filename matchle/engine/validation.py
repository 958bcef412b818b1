"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has the corpus word size
  - it is a member of the corpus

In a UI, you'd also check "already guessed", but the harness handles
repetition implicitly (a repeated guess is filtered out of the candidates
once it is known not to be the key).
"""

from __future__ import annotations

from .token import Token


def validate_guess(word, corpus) -> bool:
    """
    Return True if `word` is a valid guess against `corpus` per the rules above.

    Args:
      word   : proposed guess
      corpus : Corpus of allowed tokens (membership is O(1))
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != corpus.word_size or not w.isalpha():
        return False

    return Token.from_string(w) in corpus
