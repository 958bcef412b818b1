from .errors import (
    MatchleError, NullArgumentError, MalformedInputError, InvalidStateError, BuildError,
    BuildReason, Success, NullArgument, MalformedInput, InvalidState, BuildFailure, attempt,
)
from .token import Token, IndexedCharacter
from .filters import Filter
from .matcher import Matcher, Classification
from .scoring import score
from .constraints import filter_candidates, filter_from_feedback
from .validation import validate_guess

__all__ = [
    "Token", "IndexedCharacter", "Filter", "Matcher", "Classification",
    "score", "filter_candidates", "filter_from_feedback", "validate_guess",
    "MatchleError", "NullArgumentError", "MalformedInputError", "InvalidStateError",
    "BuildError", "BuildReason", "Success", "NullArgument", "MalformedInput",
    "InvalidState", "BuildFailure", "attempt",
]
