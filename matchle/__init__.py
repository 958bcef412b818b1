from .engine import (
    Token, IndexedCharacter, Filter, Matcher, Classification, score,
    MatchleError, NullArgumentError, MalformedInputError, InvalidStateError, BuildError,
    BuildReason, Success, NullArgument, MalformedInput, InvalidState, BuildFailure, attempt,
)
from .corpus import Corpus, Builder, Built

__all__ = [
    "Token", "IndexedCharacter", "Filter", "Matcher", "Classification", "score",
    "Corpus", "Builder", "Built",
    "MatchleError", "NullArgumentError", "MalformedInputError", "InvalidStateError",
    "BuildError", "BuildReason", "Success", "NullArgument", "MalformedInput",
    "InvalidState", "BuildFailure", "attempt",
]
