import pytest
from matchle.corpus import Corpus
from matchle.engine import score, filter_candidates, filter_from_feedback, validate_guess, Matcher, Token

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("scoop","scoop","GGGGG"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","-GGGYY"),
    ("little","letter","G-GG-Y"),
    ("planet","palate","GYY-YY"),
    ("kitten","tinket","YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_normalizes_and_rejects_length_mismatch():
    assert score(" CRANE ", "crane") == "GGGGG"
    with pytest.raises(ValueError):
        score("crane", "cranes")

def _words(builder):
    return {str(t) for t in builder.tokens()}

def test_filter_candidates_n5_history():
    corpus = Corpus.from_words(["crane","raise","stare","trace","cared","racer","scoop"]).unwrap()
    history = [("raise","YY--G")]
    cand = _words(filter_candidates(corpus, history))
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand

def test_filter_candidates_n6_basic():
    corpus = Corpus.from_words(["letter","settle","little","tattle","better"]).unwrap()
    history = [("settle","-GGGYY")]
    cand = _words(filter_candidates(corpus, history))
    assert "letter" in cand and "better" not in cand

def test_filter_candidates_empty_history_keeps_everything():
    corpus = Corpus.from_words(["crane","raise"]).unwrap()
    assert _words(filter_candidates(corpus, [])) == {"crane", "raise"}

WORDS = ["crane","raise","stare","trace","cared","racer","scoop","aabbc","abcde","level","belle"]

@pytest.mark.parametrize("key", ["crane","scoop","level","aabbc"])
@pytest.mark.parametrize("guess", ["raise","cools","belle","abcde","aabbc"])
def test_feedback_filter_agrees_with_matcher(key, guess):
    corpus = Corpus.from_words(WORDS).unwrap()
    k, g = Token.from_string(key), Token.from_string(guess)
    via_matcher = {t for t in corpus if Matcher.of(k, g).match().test(t)}
    via_pattern = {t for t in corpus if filter_from_feedback(g, score(g, k)).test(t)}
    assert via_matcher == via_pattern
    assert k in via_pattern

def test_filter_from_feedback_rejects_bad_patterns():
    with pytest.raises(ValueError):
        filter_from_feedback("crane", "GG")
    with pytest.raises(ValueError):
        filter_from_feedback("crane", "GGXGG")

def test_validate_guess_n5():
    corpus = Corpus.from_words(["crane","raise","stare"]).unwrap()
    assert validate_guess("CRANE", corpus) is True
    assert validate_guess("cranes", corpus) is False
    assert validate_guess("???", corpus) is False
    assert validate_guess("trace", corpus) is False
    assert validate_guess(None, corpus) is False

def test_filter_candidates_long_history():
    corpus = Corpus.from_words(["crane","raise","stare"]).unwrap()
    history = [("raise","YY--G")] * 1200
    assert _words(filter_candidates(corpus, history)) == {"crane"}
