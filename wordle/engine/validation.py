"""
Word shape checks shared by the engine and the dictionary.

A well-formed word here is:
  - a string
  - alphabetic a–z only (after lowercasing)
  - exactly WORD_LENGTH characters long

Membership in a word list is the dictionary's job, not this module's.
"""

from typing import Optional

# Every target, guess and stored word has this length.
WORD_LENGTH = 5


def normalize(word: str) -> str:
    """Canonical form of a word: surrounding whitespace removed, lowercase."""
    return word.strip().lower()


def is_well_formed(word: object, N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` is a clean N-letter alphabetic token.

    Never raises; anything that isn't a string is simply not a word.
    """
    if not isinstance(word, str):
        return False
    w = normalize(word)
    return len(w) == N and w.isascii() and w.isalpha()


def coerce_word(word: object, N: int = WORD_LENGTH) -> Optional[str]:
    """Normalized word if `word` is well formed, else None."""
    if not is_well_formed(word, N):
        return None
    return normalize(word)  # type: ignore[arg-type]
