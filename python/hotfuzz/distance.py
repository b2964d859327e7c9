"""Edit distance algorithms.

Every function follows the same empty-input convention: when either string is
empty the distance is the length of the other one (0 when both are empty).
``None`` is not accepted and raises ``TypeError``.
"""

from typing import List

from hotfuzz.exceptions import LengthMismatchError
from hotfuzz.preprocess import to_ngrams

__all__ = [
    "hamming",
    "levenshtein",
    "damerau_levenshtein",
    "optimal_string_alignment",
    "jaccard_coefficient",
    "partial_token_alignment",
    "ratcliff_obershelp",
]


def hamming(source: str, target: str) -> int:
    """Number of positions at which two equal-length strings differ.

    Raises:
        LengthMismatchError: If both strings are non-empty and their lengths differ.

    Example:
        >>> hamming("karolin", "kathrin")
        3
    """
    if not source or not target:
        return max(len(source), len(target))

    if len(source) != len(target):
        raise LengthMismatchError(
            f"Strings must be equal length, got {len(source)} and {len(target)}"
        )

    return sum(1 for a, b in zip(source, target) if a != b)


def levenshtein(source: str, target: str) -> int:
    """Levenshtein edit distance (insertions, deletions, substitutions).

    Uses two rolling rows sized to the shorter string, so memory is
    O(min(n, m)) while time stays O(n * m).

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    if not source or not target:
        return max(len(source), len(target))

    if len(source) < len(target):
        source, target = target, source

    previous = list(range(len(target) + 1))
    current = [0] * (len(target) + 1)

    for i, source_char in enumerate(source, start=1):
        current[0] = i
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous, current = current, previous

    return previous[len(target)]


def damerau_levenshtein(source: str, target: str, transpositions: bool = False) -> int:
    """Damerau-Levenshtein distance, restricted to optimal string alignment.

    With ``transpositions`` the swap of two adjacent characters costs one edit,
    but no substring is edited more than once (so ``"ca" -> "abc"`` is 3, not 2).
    Without it this is plain Levenshtein and uses the rolling-row version.

    Builds the full (n + 1) x (m + 1) matrix.
    """
    if not source or not target:
        return max(len(source), len(target))

    if not transpositions:
        return levenshtein(source, target)

    rows = len(source) + 1
    cols = len(target) + 1
    matrix: List[List[int]] = [[0] * cols for _ in range(rows)]
    for x in range(rows):
        matrix[x][0] = x
    for y in range(cols):
        matrix[0][y] = y

    for x in range(1, rows):
        for y in range(1, cols):
            cost = 0 if source[x - 1] == target[y - 1] else 1
            best = min(
                matrix[x - 1][y] + 1,  # deletion
                matrix[x][y - 1] + 1,  # insertion
                matrix[x - 1][y - 1] + cost,  # substitution
            )
            if (
                x > 1
                and y > 1
                and source[x - 1] == target[y - 2]
                and source[x - 2] == target[y - 1]
            ):
                best = min(best, matrix[x - 2][y - 2] + cost)  # transposition
            matrix[x][y] = best

    return matrix[rows - 1][cols - 1]


def optimal_string_alignment(source: str, target: str) -> int:
    """Restricted Damerau-Levenshtein (OSA) distance."""
    return damerau_levenshtein(source, target, transpositions=True)


def jaccard_coefficient(source: str, target: str) -> int:
    """Jaccard index of the two strings' bigram sets, as a rounded percentage.

    This is a similarity (100 means identical bigram sets), not a distance.
    Halves round to even, as Python's ``round`` does, so 12.5 becomes 12.

    Example:
        >>> jaccard_coefficient("night", "nacht")
        14
    """
    a = set(to_ngrams(source))
    b = set(to_ngrams(target))
    union = a | b
    if not union:
        return 0
    return round(len(a & b) / len(union) * 100)


def partial_token_alignment(source: str, target: str) -> int:
    """Best Hamming distance of the shorter string over every offset of the longer one.

    Characters of the longer string outside the aligned window cost nothing,
    so a token that "fits" inside another scores 0.

    Example:
        >>> partial_token_alignment("flower", "sunflower")
        0
    """
    if not source or not target:
        return max(len(source), len(target))

    small, big = (source, target) if len(source) <= len(target) else (target, source)
    window = len(small)

    return min(
        hamming(big[offset : offset + window], small)
        for offset in range(len(big) - window + 1)
    )


def ratcliff_obershelp(source: str, target: str) -> float:
    """Character-set approximation of gestalt pattern matching.

    ``2 * |distinct characters in common| / (len(source) + len(target))``, in
    the range 0.0 to 1.0. Two empty strings score 0.0.
    """
    total = len(source) + len(target)
    if total == 0:
        return 0.0
    return 2 * len(set(source) & set(target)) / total
