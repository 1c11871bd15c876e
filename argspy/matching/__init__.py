"""Fuzzy matching of unknown flags against the registered ones."""

from argspy.matching.edit_distance import levenshtein, similarity
from argspy.matching.suggestion import suggest, unknown_flag_error

__all__ = [
    "levenshtein",
    "similarity",
    "suggest",
    "unknown_flag_error",
]
