"""
Error taxonomy and result variants for the matching engine.

Two ways to consume a failure:
  - catch the exception (every engine error derives from MatchleError and
    from the matching builtin, so `except ValueError` keeps working), or
  - wrap the call in `attempt(...)` and branch on the returned variant:
        Success(value) | NullArgument | MalformedInput(index)
        | InvalidState | BuildFailure(reason)

Builder.build() returns a variant directly (Built / BuildFailure) since a
failed build is an ordinary outcome, not a programming error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")


# -----------------------------
# Exceptions
# -----------------------------

class MatchleError(Exception):
    """Base class for every error raised by the engine."""


class NullArgumentError(MatchleError, TypeError):
    """A required argument was None."""

    def __init__(self, name: str):
        super().__init__(f"{name} cannot be None")
        self.name = name


class MalformedInputError(MatchleError, ValueError):
    """A character sequence holds an absent (or non-character) element."""

    def __init__(self, index: int):
        super().__init__(f"Null character found at index: {index}")
        self.index = index


class InvalidStateError(MatchleError, RuntimeError):
    """Operation is undefined in the current state (e.g. empty corpus)."""


class BuildReason(str, Enum):
    EMPTY = "empty"
    INCONSISTENT_LENGTHS = "inconsistent_lengths"


class BuildError(MatchleError, ValueError):
    """Raised by BuildResult.unwrap() when the build did not succeed."""

    def __init__(self, failure: "BuildFailure"):
        super().__init__(failure.describe())
        self.failure = failure


# -----------------------------
# Result variants
# -----------------------------

@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    ok = True


@dataclass(frozen=True)
class NullArgument:
    message: str

    ok = False


@dataclass(frozen=True)
class MalformedInput:
    index: int

    ok = False


@dataclass(frozen=True)
class InvalidState:
    message: str

    ok = False


@dataclass(frozen=True)
class BuildFailure:
    reason: BuildReason
    lengths: tuple = ()   # distinct lengths seen (INCONSISTENT_LENGTHS only)

    ok = False

    def describe(self) -> str:
        if self.reason is BuildReason.EMPTY:
            return "cannot build a corpus from zero tokens"
        return f"tokens have inconsistent lengths: {sorted(self.lengths)}"

    def unwrap(self):
        raise BuildError(self)


Result = Union[Success, NullArgument, MalformedInput, InvalidState, BuildFailure]


def attempt(fn: Callable[..., Any], *args, **kwargs) -> Result:
    """
    Call `fn` and turn engine errors into result variants.

    Exceptions outside the engine taxonomy propagate unchanged.
    """
    try:
        return Success(fn(*args, **kwargs))
    except NullArgumentError as e:
        return NullArgument(str(e))
    except MalformedInputError as e:
        return MalformedInput(e.index)
    except InvalidStateError as e:
        return InvalidState(str(e))
    except BuildError as e:
        return e.failure


def require(value, name: str):
    """Raise NullArgumentError if `value` is None, else return it."""
    if value is None:
        raise NullArgumentError(name)
    return value
