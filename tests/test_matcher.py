import pytest
from matchle.engine import Filter, Matcher, Token, NullArgumentError

T = Token.from_string


def test_exact_match_accepts_key_rejects_other():
    f = Matcher.of(T("hello"), T("hello")).match()
    assert f.test(T("hello"))
    assert not f.test(T("world"))


def test_partial_mismatch():
    f = Matcher.of(T("hello"), T("hella")).match()
    assert not f.test(T("world"))
    assert f.test(T("hello"))


def test_length_mismatch_rejects_everything():
    key, guess = T("hello"), T("hi")
    m = Matcher.of(key, guess)
    f = m.match()
    assert f is Filter.FALSE
    assert not f.test(key) and not f.test(guess)
    c = m.classify()
    assert c.comparable is False and c.absent == frozenset({0, 1}) and not c.solved


def test_zero_length_is_vacuous():
    f = Matcher.of(T(""), T("")).match()
    assert f.test(T(""))
    c = Matcher.of(T(""), T("")).classify()
    assert c.pattern == "" and c.solved


def test_duplicate_letters_consume_budget_greedily():
    # key has two a's and two b's; each guess letter is credited at most
    # as often as the key holds it
    c = Matcher.of(T("aabb"), T("abab")).classify()
    assert c.exact == frozenset({0, 3})
    assert c.misplaced == frozenset({1, 2})
    assert c.absent == frozenset()
    assert c.pattern == "GYYG"


def test_guess_repeats_letter_key_holds_once():
    key = T("abcde")
    m = Matcher.of(key, T("aaxyz"))
    c = m.classify()
    assert c.exact == frozenset({0})
    assert c.misplaced == frozenset()
    assert c.absent == frozenset({1, 2, 3, 4})
    f = m.match()
    # the second 'a' is gray, but must not rule out 'a' (already credited at 0)
    assert f.test(key)
    assert f.test(T("abbbb"))
    assert not f.test(T("bacde"))
    assert not f.test(T("axcde"))


def test_misplaced_budget_left_to_right():
    # key has one 'e'; only the first unclaimed 'e' in the guess is credited
    c = Matcher.of(T("xxxxe"), T("eexxy")).classify()
    assert c.exact == frozenset({2, 3})
    assert c.misplaced == frozenset({0})
    assert c.absent == frozenset({1, 4})


def test_key_repeats_unused_by_guess():
    key = T("llama")
    m = Matcher.of(key, T("xyzzy"))
    assert m.classify().pattern == "-----"
    f = m.match()
    assert f.test(key)
    assert f.test(T("aaaaa"))
    assert not f.test(T("lazzy"))


def test_misplaced_requires_containment():
    f = Matcher.of(T("crane"), T("react")).match()
    # r, e, a, c misplaced or exact; t absent
    assert f.test(T("crane"))
    assert not f.test(T("cranz"))
    assert not f.test(T("trace"))


@pytest.mark.parametrize("key", ["crane", "level", "aabbc", "scoop", "belle"])
@pytest.mark.parametrize("guess", ["crane", "level", "aabbc", "scoop", "belle", "xxxxx"])
def test_key_always_satisfies_its_own_filter(key, guess):
    assert Matcher.of(T(key), T(guess)).match().test(T(key))


def test_matcher_requires_arguments():
    with pytest.raises(NullArgumentError):
        Matcher.of(None, T("abc"))
    with pytest.raises(NullArgumentError):
        Matcher.of(T("abc"), None)


def test_long_token_matches_itself():
    t = T("ab" * 1000)
    f = Matcher.of(t, t).match()
    assert f.test(t)
    assert not f.test(T("ba" * 1000))
    assert Matcher.of(t, t).classify().solved


def test_long_mixed_guess_keeps_key():
    key = T("abcde" * 500)
    guess = T("edcba" * 500)
    assert Matcher.of(key, guess).match().test(key)
