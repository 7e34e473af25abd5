import pytest
from wordle.engine import Classification, LengthMismatch, is_solved, score, to_pattern

C = Classification.CORRECT_SPOT
W = Classification.WRONG_SPOT
N = Classification.NOT_PRESENT


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("target,guess,expected", [
    ("image", "image", [C, C, C, C, C]),
    ("image", "souls", [N, N, N, N, N]),
    ("slate", "sound", [C, N, N, N, N]),
    ("slate", "stale", [C, W, C, W, C]),
    ("truth", "tails", [C, N, N, N, N]),
    ("truth", "title", [C, N, W, N, N]),
    ("truth", "tarry", [C, N, W, N, N]),
    ("fence", "eeece", [N, C, N, C, C]),
    ("fence", "efece", [W, W, N, C, C]),
])
def test_score_golden(target, guess, expected):
    scored = score(target, guess)
    assert [cls for _, cls in scored] == expected
    assert "".join(c for c, _ in scored) == guess


def test_score_is_immutable_tuple_of_pairs():
    scored = score("slate", "stale")
    assert isinstance(scored, tuple) and len(scored) == 5
    assert scored[1] == ("t", W)


@pytest.mark.parametrize("word", ["image", "level", "eerie", "crane"])
def test_score_identical_words_is_solved(word):
    scored = score(word, word)
    assert all(cls is C for _, cls in scored)
    assert is_solved(scored) is True


def test_score_disjoint_letters_all_not_present():
    assert to_pattern(score("crane", "humid")) == "-----"


@pytest.mark.parametrize("target,guess", [
    ("abide", "speed"),   # one 'e' in target, three in guess
    ("level", "eeeee"),
    ("fence", "eeece"),
    ("truth", "ttttt"),
])
def test_score_caps_claims_at_target_multiplicity(target, guess):
    scored = score(target, guess)
    for letter in set(guess):
        claims = sum(1 for c, cls in scored if c == letter and cls is not N)
        assert claims <= target.count(letter)
    greens = [i for i, (c, cls) in enumerate(scored) if cls is C]
    assert greens == [i for i in range(5) if target[i] == guess[i]]


def test_score_leftmost_duplicate_wins_yellow():
    # one 'o' available for yellow credit; the first unmatched 'o' takes it
    assert to_pattern(score("abort", "oozes")) == "Y----"


def test_score_is_case_insensitive():
    assert score("Slate", "STALE") == score("slate", "stale")


def test_score_is_deterministic():
    assert score("truth", "title") == score("truth", "title")


@pytest.mark.parametrize("target,guess", [
    ("slate", "slat"),
    ("slates", "stale"),
    ("", "stale"),
])
def test_score_rejects_wrong_length(target, guess):
    with pytest.raises(LengthMismatch):
        score(target, guess)


def test_length_mismatch_is_value_error():
    assert issubclass(LengthMismatch, ValueError)


def test_is_solved_false_on_any_other_classification():
    assert is_solved([("a", C)] * 4 + [("e", W)]) is False
    assert is_solved([("a", N)] + [("b", C)] * 4) is False
    assert is_solved([("a", C)] * 5) is True


def test_to_pattern_codes():
    assert to_pattern(score("slate", "stale")) == "GYGYG"
    assert to_pattern(score("fence", "efece")) == "YY-GG"


@pytest.mark.parametrize("target,guess", [
    ("image", "İMAGE"),   # "İ".lower() is two code points
    ("İMAGE", "image"),
])
def test_score_checks_length_after_lowercasing(target, guess):
    with pytest.raises(LengthMismatch):
        score(target, guess)


def test_is_solved_requires_full_result():
    assert is_solved(()) is False
    assert is_solved([("a", C)] * 4) is False
