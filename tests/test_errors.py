from matchle.corpus import Builder, Corpus
from matchle.engine import (
    BuildFailure, BuildReason, InvalidState, MalformedInput, MalformedInputError,
    NullArgument, NullArgumentError, Success, Token, attempt,
)


def test_attempt_success():
    r = attempt(Token.from_string, "abc")
    assert isinstance(r, Success) and r.ok
    assert r.value == Token.from_string("abc")


def test_attempt_null_argument():
    r = attempt(Token.from_string, None)
    assert isinstance(r, NullArgument) and not r.ok


def test_attempt_malformed_input_carries_index():
    r = attempt(Token.from_chars, ["a", "b", None])
    assert r == MalformedInput(2)


def test_attempt_invalid_state():
    r = attempt(Corpus.empty().best_worst_case_guess)
    assert isinstance(r, InvalidState)
    assert "empty" in r.message


def test_attempt_build_failure():
    r = attempt(lambda: Builder.empty().build().unwrap())
    assert r == BuildFailure(BuildReason.EMPTY)


def test_errors_keep_builtin_bases():
    assert issubclass(NullArgumentError, TypeError)
    assert issubclass(MalformedInputError, ValueError)
    assert MalformedInputError(2).index == 2
