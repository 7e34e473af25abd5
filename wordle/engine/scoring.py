"""
Guess scoring (feedback) for a single (target, guess) pair.

Each guess letter gets one of three classifications:
  - CORRECT_SPOT : same letter as the target at this position       ('G')
  - WRONG_SPOT   : letter is in the target, but elsewhere            ('Y')
  - NOT_PRESENT  : letter is absent, or every occurrence of it in
                   the target is already claimed by other positions  ('-')

Algorithm (two explicit passes over the five positions):
  1) Mark every exact match CORRECT_SPOT; everything else starts NOT_PRESENT.
  2) Left to right, for each non-green position count how many times its
     letter occurs in the target and how many positions in the running
     result already claim that letter (green or yellow). If occurrences
     exceed claims, the position becomes WRONG_SPOT.

Because pass 1 finishes before pass 2 starts, greens always win over yellows
for a repeated letter, and among yellows the leftmost position wins.

Examples:
  score("slate", "stale") -> s:G t:Y a:G l:Y e:G
  score("fence", "eeece") -> e:- e:G e:- c:G e:G
"""

from enum import Enum
from typing import List, Sequence, Tuple

from .validation import WORD_LENGTH


class LengthMismatch(ValueError):
    """Target or guess is not exactly WORD_LENGTH characters long."""


class Classification(Enum):
    CORRECT_SPOT = "G"
    WRONG_SPOT = "Y"
    NOT_PRESENT = "-"

    @property
    def code(self) -> str:
        """Single pattern character used in reports ('G', 'Y' or '-')."""
        return self.value


# Immutable, position-aligned with the guess.
ScoredLetter = Tuple[str, Classification]
ScoredGuess = Tuple[ScoredLetter, ...]

_CLAIMING = (Classification.CORRECT_SPOT, Classification.WRONG_SPOT)


def _check_length(word: str, role: str) -> None:
    if len(word) != WORD_LENGTH:
        raise LengthMismatch(
            f"{role} must be {WORD_LENGTH} letters long; got {len(word)} ({word!r})"
        )


def score(target: str, guess: str) -> ScoredGuess:
    """
    Classify every letter of `guess` against `target`.

    Preconditions:
      - len(target) == len(guess) == 5, otherwise LengthMismatch is raised.
        Nothing is padded or truncated.

    Returns:
      tuple of five (letter, Classification) pairs, in guess order.
    """
    # lower() can change length (e.g. "İ"), so check the canonical form
    target = target.lower()
    guess = guess.lower()
    _check_length(target, "target")
    _check_length(guess, "guess")

    # Pass 1: exact matches. Everything else is provisionally not present.
    result: List[List] = []
    for t, g in zip(target, guess):
        cls = Classification.CORRECT_SPOT if g == t else Classification.NOT_PRESENT
        result.append([g, cls])

    # Pass 2: partial matches, consulting the running result so each
    # resolved position counts against the ones after it.
    for i, g in enumerate(guess):
        if result[i][1] is Classification.CORRECT_SPOT:
            continue
        if g not in target:
            continue

        occurrences = target.count(g)
        claimed = sum(1 for c, cls in result if c == g and cls in _CLAIMING)
        if occurrences > claimed:
            result[i][1] = Classification.WRONG_SPOT

    return tuple((c, cls) for c, cls in result)


def is_solved(scored: Sequence[ScoredLetter]) -> bool:
    """True iff `scored` is a full five-letter result and every position is CORRECT_SPOT."""
    if len(scored) != WORD_LENGTH:
        return False
    for _, cls in scored:
        if cls is not Classification.CORRECT_SPOT:
            return False
    return True


def to_pattern(scored: Sequence[ScoredLetter]) -> str:
    """
    Render a scored guess as a pattern string.

    Example:
      to_pattern(score("slate", "stale")) -> "GYGYG"
    """
    return "".join(cls.code for _, cls in scored)
