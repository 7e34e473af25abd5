import random
from pathlib import Path

import pytest
from wordle.datasets import Dictionary, EmptyDictionary, load_default


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_default_dictionary_accepts_answers_and_allowed():
    d = load_default()
    assert d.is_valid_word("audio") is True    # answers list
    assert d.is_valid_word("abbes") is True    # allowed list only
    assert d.is_valid_word("xoxox") is False


def test_default_dictionary_is_loaded_once():
    assert load_default() is load_default()


def test_select_target_default_is_five_letters():
    d = load_default()
    w = d.select_target()
    assert len(w) == 5 and w in d.answers


def test_select_target_never_picks_allowed_only_words():
    d = Dictionary(["crane"], ["abbes", "adieu"])
    rng = random.Random(0)
    assert {d.select_target(rng) for _ in range(20)} == {"crane"}


def test_select_target_seeded_is_reproducible():
    d = Dictionary(["crane", "raise", "stare", "trace", "cared"])
    a = [d.select_target(random.Random(42)) for _ in range(3)]
    assert len(set(a)) == 1


def test_select_target_empty_raises():
    with pytest.raises(EmptyDictionary):
        Dictionary([], ["crane"]).select_target()


def test_words_are_normalized_and_malformed_entries_dropped():
    d = Dictionary(["  CRANE ", "toolong", "ab1de", "", "crane"], ["Raise"])
    assert d.answers == ("crane",)
    assert d.is_valid_word("raise") is True
    assert d.is_valid_word("RAISE") is True


@pytest.mark.parametrize("candidate", ["", "cran", "cranes", "cr4ne", "???", None, 12345, ["crane"]])
def test_is_valid_word_never_raises_on_malformed_input(candidate):
    d = Dictionary(["crane"])
    assert d.is_valid_word(candidate) is False


def test_from_files(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise"])
    _write(allw, ["adieu", ""])
    d = Dictionary.from_files(ans, allw)
    assert d.answers == ("crane", "raise")
    assert d.is_valid_word("adieu") is True
    assert len(d) == 3


def test_from_files_missing_path_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        Dictionary.from_files(tmp_path / "nope.txt", tmp_path / "nope2.txt")


def test_from_files_normalizes_raw_lines(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["  CRANE ", "", "Raise", "crane", "cranes"])
    _write(allw, ["ADIEU"])
    d = Dictionary.from_files(ans, allw)
    assert d.answers == ("crane", "raise")
    assert d.is_valid_word("adieu") is True
