"""Batch operations API for hotfuzz.

List-based conveniences over ``ratio``/``smart_ratio`` and
``search``/``smart_search``. Passing ``method=None`` (the default) uses the
smart variant.

Example usage:
    >>> import hotfuzz.batch as batch

    # Find the best commands for a typed query
    >>> matches = batch.best_matches(
    ...     ["access", "alarms & clock", "word"], "acess", method="partial", limit=1
    ... )
    >>> [(m.target, m.ratio) for m in matches]
    [('access', 90.0)]

    # Pairwise comparison between aligned lists
    >>> [r.metric for r in batch.pairwise(["kitten", "flaw"], ["sitting", "lawn"], "levenshtein")]
    [3, 2]
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from hotfuzz._utils import validate_min_ratio
from hotfuzz.compare import ratio, smart_ratio
from hotfuzz.exceptions import ValidationError
from hotfuzz.search import search, smart_search

if TYPE_CHECKING:
    from hotfuzz.enums import RatioMethod, SearchMethod
    from hotfuzz.result import FuzzyResult

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "search_many",
]


def _compare(query: str, choice: str, method: str | RatioMethod | None) -> FuzzyResult:
    if method is None:
        return smart_ratio(query, choice)
    return ratio(query, choice, method)


def similarity(
    strings: list[str],
    query: str,
    method: str | RatioMethod | None = None,
) -> list[FuzzyResult]:
    """Compare a query against every string.

    Results are returned in the same order as the input strings, with the
    query as ``source`` of each result.

    Args:
        strings: Strings to compare against the query.
        query: The query string.
        method: Comparison method, or None for ``smart_ratio``.

    Returns:
        One FuzzyResult per input string.
    """
    return [_compare(query, s, method) for s in strings]


def best_matches(
    strings: list[str],
    query: str,
    method: str | RatioMethod | None = None,
    limit: int = 5,
    min_ratio: float = 0.0,
) -> list[FuzzyResult]:
    """Find the strings most similar to a query.

    Args:
        strings: Candidate strings.
        query: The query string.
        method: Comparison method, or None for ``smart_ratio``.
        limit: Maximum number of results.
        min_ratio: Minimum ratio (0 to 100) a candidate needs to be returned.

    Returns:
        Results sorted by descending ratio; ties keep input order. Each result's
        ``target`` is the candidate as given, not as preprocessed.

    Raises:
        ValidationError: If ``limit`` is below 1 or ``min_ratio`` is outside 0-100.
    """
    if limit < 1:
        raise ValidationError(f"limit must be at least 1, got {limit}")
    min_ratio = validate_min_ratio(min_ratio)

    scored = []
    for s in strings:
        result = _compare(query, s, method)
        if result.is_no_result or result.ratio < min_ratio:
            continue
        scored.append(replace(result, target=s))

    scored.sort(key=lambda r: r.ratio, reverse=True)
    return scored[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    method: str | RatioMethod | None = None,
) -> list[FuzzyResult]:
    """Compare aligned pairs of strings.

    Raises:
        ValidationError: If the lists have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"Lists must have equal length, got {len(left)} and {len(right)}"
        )
    return [_compare(a, b, method) for a, b in zip(left, right)]


def search_many(
    texts: list[str],
    pattern: str,
    method: str | SearchMethod | None = None,
) -> list[FuzzyResult]:
    """Search for a pattern in every text.

    Args:
        texts: Texts to search in.
        pattern: The pattern to find.
        method: Search method, or None for ``smart_search``.

    Returns:
        One FuzzyResult per text, in input order. Never raises for bad input.
    """
    if method is None:
        return [smart_search(pattern, text) for text in texts]
    return [search(pattern, text, method) for text in texts]
