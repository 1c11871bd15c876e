"""Levenshtein edit distance and normalized similarity."""

import functools


@functools.lru_cache(maxsize=1024)
def levenshtein(a: str, b: str) -> int:
    """Classic edit distance with unit cost insertions, deletions and substitutions.

    Uses the two-row dynamic programming formulation, so memory stays linear
    in the length of the shorter string.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            insertion = current[j - 1] + 1
            deletion = previous[j] + 1
            substitution = previous[j - 1] + (char_a != char_b)
            current.append(min(insertion, deletion, substitution))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1], 1.0 meaning identical.

    Computed as ``1 - levenshtein(a, b) / max(len(a), len(b))``. Two empty
    strings count as identical.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest
