"""Enums for hotfuzz API."""

from enum import Enum
from typing import Union


class RatioMethod(str, Enum):
    """Comparison strategies accepted by ``hotfuzz.ratio``.

    String values are accepted wherever a member is, so
    ``ratio(a, b, "token_sort")`` and ``ratio(a, b, RatioMethod.TOKEN_SORT)``
    are equivalent.

    Example:
        >>> from hotfuzz import RatioMethod, ratio
        >>> ratio("this is a test", "this is a tset", RatioMethod.OSA).metric
        1
    """

    HAMMING = "hamming"
    PARTIAL = "partial"
    LEVENSHTEIN = "levenshtein"
    OSA = "osa"
    JACCARD = "jaccard"
    TOKEN_SORT = "token_sort"
    TOKEN_SET = "token_set"
    PARTIAL_TOKEN_SORT = "partial_token_sort"
    PARTIAL_TOKEN_SET = "partial_token_set"


class SearchMethod(str, Enum):
    """Search strategies accepted by ``hotfuzz.search``.

    Bitap is not compatible with CJK text; use PARTIAL_CJK_SEARCH or
    ``smart_search`` for logographic input.
    """

    BITAP = "bitap"
    TOKEN_SEARCH = "token_search"
    SLIDING_SEARCH = "sliding_search"
    PARTIAL_SEARCH = "partial_search"
    PARTIAL_CJK_SEARCH = "partial_cjk_search"


RATIO_DESCRIPTIONS = {
    RatioMethod.HAMMING: "Hamming distance considers substitutions but not additions or deletions",
    RatioMethod.PARTIAL: (
        "Partial Hamming distance considers substitutions but not additions or deletions "
        "on the best matching substring"
    ),
    RatioMethod.LEVENSHTEIN: (
        "Levenshtein distance considers edit distance as additions, deletions, and substitutions"
    ),
    RatioMethod.OSA: (
        "OSA, or restricted Damerau-Levenshtein, considers edit distance as additions, "
        "deletions, substitutions and adjacent transpositions"
    ),
    RatioMethod.JACCARD: "Jaccard considers the general set similarity of string bigrams",
    RatioMethod.TOKEN_SORT: (
        "Token sort ratio sorts the tokens and applies the Levenshtein algorithm"
    ),
    RatioMethod.TOKEN_SET: (
        "Token set ratio removes repeated tokens and applies the Levenshtein algorithm"
    ),
    RatioMethod.PARTIAL_TOKEN_SORT: (
        "Partial token sort ratio sorts the tokens and applies the sliding Hamming algorithm"
    ),
    RatioMethod.PARTIAL_TOKEN_SET: (
        "Partial token set ratio removes repeated tokens and applies the sliding Hamming algorithm"
    ),
}

SEARCH_DESCRIPTIONS = {
    SearchMethod.BITAP: "Fast fuzzy best guess substring search",
    SearchMethod.TOKEN_SEARCH: (
        "Searches individual tokens along the target string and returns the smallest "
        "target substring"
    ),
    SearchMethod.SLIDING_SEARCH: (
        "Searches individual tokens with the sliding Hamming alignment of each token pair"
    ),
    SearchMethod.PARTIAL_SEARCH: "Slides the pattern along the target with the partial ratio",
    SearchMethod.PARTIAL_CJK_SEARCH: (
        "Partial search over decomposed CJK character blocks, reported in original indices"
    ),
}


def describe(method: Union[RatioMethod, SearchMethod]) -> str:
    """Return the human-readable description of a comparison or search method."""
    if isinstance(method, RatioMethod):
        return RATIO_DESCRIPTIONS[method]
    if isinstance(method, SearchMethod):
        return SEARCH_DESCRIPTIONS[method]
    raise TypeError(
        f"method must be RatioMethod or SearchMethod, got {type(method).__name__}"
    )


__all__ = [
    "RatioMethod",
    "SearchMethod",
    "RATIO_DESCRIPTIONS",
    "SEARCH_DESCRIPTIONS",
    "describe",
]
