import pytest
from matchle.engine import Token, IndexedCharacter, MalformedInputError, NullArgumentError


def test_token_from_string():
    t = Token.from_string("hello")
    assert t.length() == 5 and len(t) == 5
    assert t.at(0) == "h" and t[4] == "o"
    assert str(t) == "hello"


def test_token_from_chars():
    t = Token.from_chars(["a", "b", "c"])
    assert len(t) == 3
    assert t.at(0) == "a"
    assert t == Token.from_string("abc")


def test_token_of_dispatches():
    t = Token.from_string("abc")
    assert Token.of(t) is t
    assert Token.of("abc") == t
    assert Token.of(("a", "b", "c")) == t


def test_token_equality_and_hash():
    n1, n2, n3 = Token.from_string("abc"), Token.from_string("abc"), Token.from_string("xyz")
    assert n1 == n2 and n1 != n3
    assert hash(n1) == hash(n2)
    assert len({n1, n2, n3}) == 2


def test_token_ordering_is_lexicographic():
    words = ["stare", "crane", "raise"]
    assert [str(t) for t in sorted(Token.from_string(w) for w in words)] == sorted(words)


def test_token_contains():
    t = Token.from_string("matchle")
    assert t.contains("m") and "e" in t
    assert not t.contains("z")


def test_token_matches_and_contains_elsewhere():
    t = Token.from_string("world")
    assert t.matches_at(IndexedCharacter(0, "w"))
    assert not t.matches_at(IndexedCharacter(1, "w"))
    assert t.contains_elsewhere(IndexedCharacter(1, "w"))
    assert not t.contains_elsewhere(IndexedCharacter(0, "w"))
    assert not t.contains_elsewhere(IndexedCharacter(1, "z"))
    assert not t.matches_at(IndexedCharacter(9, "w"))


def test_token_at_out_of_range():
    with pytest.raises(IndexError):
        Token.from_string("abc").at(3)
    with pytest.raises(IndexError):
        Token.from_string("abc").at(-1)


def test_token_iteration_is_restartable():
    t = Token.from_string("abc")
    first = list(t)
    assert first == [IndexedCharacter(0, "a"), IndexedCharacter(1, "b"), IndexedCharacter(2, "c")]
    assert [ic.character for ic in t] == ["a", "b", "c"]
    assert list(t) == first


def test_token_empty_is_legal():
    t = Token.from_string("")
    assert len(t) == 0 and list(t) == []
    assert Token.from_chars([]) == t


def test_token_none_input_raises():
    with pytest.raises(NullArgumentError):
        Token.from_string(None)
    with pytest.raises(NullArgumentError):
        Token.from_chars(None)


@pytest.mark.parametrize("chars,index", [
    (["a", None, "c"], 1),
    ([None], 0),
    (["a", "b", "cd"], 2),
])
def test_token_malformed_element_reports_index(chars, index):
    with pytest.raises(MalformedInputError) as exc:
        Token.from_chars(chars)
    assert exc.value.index == index
    assert str(index) in str(exc.value)


def test_token_is_immutable():
    t = Token.from_string("abc")
    with pytest.raises(AttributeError):
        t.chars = ("x",)


def test_token_constructor_validates_elements():
    with pytest.raises(MalformedInputError) as exc:
        Token(("a", None))
    assert exc.value.index == 1
    with pytest.raises(NullArgumentError):
        Token(None)
    assert Token(["a", "b"]) == Token.from_string("ab")


def test_token_from_string_rejects_non_str():
    with pytest.raises(TypeError):
        Token.from_string(["a", None])
    with pytest.raises(TypeError):
        Token.from_string(123)
