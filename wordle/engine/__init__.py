from .scoring import Classification, LengthMismatch, ScoredGuess, is_solved, score, to_pattern
from .validation import WORD_LENGTH, is_well_formed, normalize

__all__ = [
    "Classification",
    "LengthMismatch",
    "ScoredGuess",
    "WORD_LENGTH",
    "is_solved",
    "is_well_formed",
    "normalize",
    "score",
    "to_pattern",
]
