from .dictionary import Dictionary, EmptyDictionary, load_default, DEFAULT_ANSWERS, DEFAULT_ALLOWED
from .validator import validate_wordlists, pretty_summary
from .io import read_lines

__all__ = [
    "Dictionary",
    "EmptyDictionary",
    "load_default",
    "DEFAULT_ANSWERS",
    "DEFAULT_ALLOWED",
    "validate_wordlists",
    "pretty_summary",
    "read_lines",
]
