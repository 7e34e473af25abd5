"""
Dictionary service: the word lists a game is played with.

Two lists are involved:
  - answers : words that may be chosen as the hidden target
  - allowed : extra words accepted as guesses but never chosen as targets

A guess is valid if it appears in either list. Both lists are read once
into an immutable Dictionary and shared by reference afterwards, so any
number of games can read it without locking.

Typical use:
    from wordle.datasets import load_default
    d = load_default()
    target = d.select_target()
    d.is_valid_word("crane")
"""

from __future__ import annotations

import random
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple

from wordle.engine.validation import coerce_word
from .io import read_lines

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_ANSWERS = DATA_DIR / "answers_5.txt"
DEFAULT_ALLOWED = DATA_DIR / "allowed_5.txt"


class EmptyDictionary(ValueError):
    """No answer words are available to pick a target from."""


def _clean(words: Iterable[str]) -> Tuple[str, ...]:
    """Keep well-formed words only, lowercased, first occurrence wins."""
    seen = set()
    out = []
    for w in words:
        cw = coerce_word(w)
        if cw is None or cw in seen:
            continue
        seen.add(cw)
        out.append(cw)
    return tuple(out)


class Dictionary:
    """Read-only view over the answers and allowed word lists."""

    __slots__ = ("_answers", "_answer_set", "_allowed_set")

    def __init__(self, answers: Iterable[str], allowed: Iterable[str] = ()):
        # tuple keeps a stable order for seeded selection; sets are for lookup
        self._answers: Tuple[str, ...] = _clean(answers)
        self._answer_set: FrozenSet[str] = frozenset(self._answers)
        self._allowed_set: FrozenSet[str] = frozenset(_clean(allowed))

    @classmethod
    def from_files(cls, answers_path: Path | str, allowed_path: Path | str) -> "Dictionary":
        """
        Load both lists from newline-delimited files.
        Raises FileNotFoundError if either path doesn't exist.
        """
        return cls(read_lines(answers_path), read_lines(allowed_path))

    @property
    def answers(self) -> Tuple[str, ...]:
        return self._answers

    def __len__(self) -> int:
        return len(self._answer_set | self._allowed_set)

    def select_target(self, rng: Optional[random.Random] = None) -> str:
        """
        Pick a uniformly random word from the answers list.

        Pass a seeded random.Random for reproducible picks.
        Raises EmptyDictionary if there are no answers.
        """
        if not self._answers:
            raise EmptyDictionary("answers list contains no valid words")
        r = rng if rng is not None else random
        return self._answers[r.randrange(len(self._answers))]

    def is_valid_word(self, candidate: object) -> bool:
        """True if `candidate` is in the answers or the allowed list. Never raises."""
        w = coerce_word(candidate)
        if w is None:
            return False
        return w in self._answer_set or w in self._allowed_set


@lru_cache(maxsize=None)
def load_default() -> Dictionary:
    """The bundled word lists, loaded once per process."""
    return Dictionary.from_files(DEFAULT_ANSWERS, DEFAULT_ALLOWED)
