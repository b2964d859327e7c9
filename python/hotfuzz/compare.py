"""Whole-string comparison: ``ratio`` with an explicit method, ``smart_ratio`` with a heuristic one.

Example:
    >>> from hotfuzz import RatioMethod, ratio, smart_ratio
    >>> ratio("this is a test", "is this is a not really thing this is a test!",
    ...       RatioMethod.PARTIAL).ratio
    100.0
    >>> smart_ratio("update windos", "open the window update settings").ratio > 90
    True
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from hotfuzz._utils import normalize_ratio_method
from hotfuzz.decomposition import DEFAULT_DECOMPOSER, Decomposer
from hotfuzz.distance import (
    hamming,
    jaccard_coefficient,
    levenshtein,
    optimal_string_alignment,
)
from hotfuzz.enums import RatioMethod
from hotfuzz.preprocess import clean, is_cjk, tokenize
from hotfuzz.result import MAX_METRIC, FuzzyResult
from hotfuzz.scoring import simple_score, sliding_score

__all__ = [
    "ratio",
    "smart_ratio",
    "hamming_ratio",
    "partial_ratio",
    "levenshtein_ratio",
    "osa_ratio",
    "jaccard_ratio",
    "token_sort_ratio",
    "token_set_ratio",
    "partial_token_sort_ratio",
    "partial_token_set_ratio",
    "SMART_LENGTH_RATIO",
]

logger = logging.getLogger(__name__)

# Length ratio above which smart_ratio switches to sliding comparison
SMART_LENGTH_RATIO = 1.5


def _whole_string_result(name: str, source: str, target: str, distance: int) -> FuzzyResult:
    return FuzzyResult(
        distance_function=name,
        ratio=simple_score(source, target, distance),
        metric=distance,
        start=0,
        end=len(target),
        source=source,
        target=target,
    )


def hamming_ratio(source: str, target: str) -> FuzzyResult:
    """Hamming distance over the whole strings.

    Raises:
        LengthMismatchError: If the strings have different lengths.
    """
    if not source or not target:
        return FuzzyResult.no_result()
    return _whole_string_result(hamming.__name__, source, target, hamming(source, target))


def levenshtein_ratio(source: str, target: str) -> FuzzyResult:
    if not source or not target:
        return FuzzyResult.no_result()
    return _whole_string_result(
        levenshtein.__name__, source, target, levenshtein(source, target)
    )


def osa_ratio(source: str, target: str) -> FuzzyResult:
    """Restricted Damerau-Levenshtein (optimal string alignment) over the whole strings."""
    if not source or not target:
        return FuzzyResult.no_result()
    return _whole_string_result(
        optimal_string_alignment.__name__,
        source,
        target,
        optimal_string_alignment(source, target),
    )


def jaccard_ratio(source: str, target: str) -> FuzzyResult:
    """Bigram Jaccard similarity.

    The ratio is the coefficient itself and the metric is its distance to 100.
    """
    if not source or not target:
        return FuzzyResult.no_result()
    coefficient = jaccard_coefficient(source, target)
    return FuzzyResult(
        distance_function=jaccard_coefficient.__name__,
        ratio=float(coefficient),
        metric=100 - coefficient,
        start=0,
        end=len(target),
        source=source,
        target=target,
    )


def partial_ratio(source: str, target: str) -> FuzzyResult:
    """Slide the shorter string along the longer one and keep the best Hamming window.

    When the source is the shorter string the span is the best window inside
    the target; otherwise it covers the whole target.
    """
    if not source or not target:
        return FuzzyResult.no_result()

    source_is_small = len(source) <= len(target)
    small, big = (source, target) if source_is_small else (target, source)
    window = len(small)

    lowest = MAX_METRIC
    best_offset = 0
    for offset in range(len(big) - window + 1):
        distance = hamming(small, big[offset : offset + window])
        if distance < lowest:
            lowest = distance
            best_offset = offset

    if source_is_small:
        start, end = best_offset, best_offset + window
    else:
        start, end = 0, len(target)

    return FuzzyResult(
        distance_function=hamming.__name__,
        ratio=sliding_score(small, big, lowest),
        metric=lowest,
        start=start,
        end=end,
        source=source,
        target=target,
    )


def _sorted_tokens(text: str) -> str:
    return " ".join(sorted(tokenize(text.lower())))


def _token_set(text: str) -> str:
    # first-seen order keeps the result deterministic
    return " ".join(dict.fromkeys(tokenize(text.lower())))


def token_sort_ratio(source: str, target: str) -> FuzzyResult:
    """Lowercase, tokenize, sort the tokens, rejoin, then compare with Levenshtein."""
    return levenshtein_ratio(_sorted_tokens(source), _sorted_tokens(target))


def token_set_ratio(source: str, target: str) -> FuzzyResult:
    """Lowercase, tokenize, drop repeated tokens, rejoin, then compare with Levenshtein."""
    return levenshtein_ratio(_token_set(source), _token_set(target))


def partial_token_sort_ratio(source: str, target: str) -> FuzzyResult:
    """Token sort followed by the sliding partial comparison."""
    return partial_ratio(_sorted_tokens(source), _sorted_tokens(target))


def partial_token_set_ratio(source: str, target: str) -> FuzzyResult:
    """Token set followed by the sliding partial comparison."""
    return partial_ratio(_token_set(source), _token_set(target))


_RATIO_FUNCTIONS: Dict[RatioMethod, Callable[[str, str], FuzzyResult]] = {
    RatioMethod.HAMMING: hamming_ratio,
    RatioMethod.PARTIAL: partial_ratio,
    RatioMethod.LEVENSHTEIN: levenshtein_ratio,
    RatioMethod.OSA: osa_ratio,
    RatioMethod.JACCARD: jaccard_ratio,
    RatioMethod.TOKEN_SORT: token_sort_ratio,
    RatioMethod.TOKEN_SET: token_set_ratio,
    RatioMethod.PARTIAL_TOKEN_SORT: partial_token_sort_ratio,
    RatioMethod.PARTIAL_TOKEN_SET: partial_token_set_ratio,
}


def ratio(
    source: str,
    target: str,
    method: Union[str, RatioMethod] = RatioMethod.LEVENSHTEIN,
    preprocess: bool = True,
    decomposer: Optional[Decomposer] = None,
) -> FuzzyResult:
    """
    Compare two strings with a specific method.

    Args:
        source: The string to match
        target: The string to match against
        method: Comparison method (RatioMethod or its string value). Unknown
            names fall back to Levenshtein.
        preprocess: Clean punctuation and whitespace first, and decompose both
            strings when either contains CJK characters
        decomposer: CJK decomposer used when preprocessing (defaults to
            ``UnicodeDecomposer``)

    Returns:
        FuzzyResult. Empty input (after preprocessing) gives
        ``FuzzyResult.no_result()``.

    Raises:
        LengthMismatchError: For RatioMethod.HAMMING on strings of different lengths.
        TypeError: If method is neither a string nor a RatioMethod.

    Example:
        >>> ratio("this is a test", "this is a Test").metric
        1
    """
    method = normalize_ratio_method(method)

    if preprocess:
        source = clean(source)
        target = clean(target)

        if is_cjk(source) or is_cjk(target):
            decomposer = decomposer or DEFAULT_DECOMPOSER
            source = decomposer.decompose(source)
            target = decomposer.decompose(target)

    if not source or not target:
        return FuzzyResult.no_result()

    return _RATIO_FUNCTIONS[method](source, target)


def _choose_method(
    source: str, target: str, source_tokens: List[str], target_tokens: List[str]
) -> RatioMethod:
    length_ratio = max(len(source), len(target)) / min(len(source), len(target))

    if source_tokens == target_tokens:
        if len(source) == len(target):
            return RatioMethod.HAMMING
        if length_ratio < SMART_LENGTH_RATIO:
            return RatioMethod.LEVENSHTEIN
        return RatioMethod.PARTIAL

    if length_ratio < SMART_LENGTH_RATIO:
        return RatioMethod.TOKEN_SORT
    return RatioMethod.PARTIAL_TOKEN_SORT


def smart_ratio(source: str, target: str, preprocess: bool = True) -> FuzzyResult:
    """
    Compare two strings with a method chosen from their shape.

    Identical token sequences use Hamming (equal lengths), Levenshtein (length
    ratio below 1.5) or the partial ratio. Differing token sequences use token
    sort, or partial token sort when one string is 1.5 times longer.
    Tokens are compared lowercased, so strings that differ only in case count
    as identical token sequences and are then scored on the case-sensitive text.

    Never raises: any failure gives ``FuzzyResult.no_result()``.

    Example:
        >>> smart_ratio("activate better battery mode please", "better battery").ratio
        100.0
    """
    try:
        if not source or not target:
            return FuzzyResult.no_result()

        if preprocess:
            source = clean(source)
            target = clean(target)

        source_tokens = tokenize(source.lower())
        target_tokens = tokenize(target.lower())
        if not source_tokens or not target_tokens:
            return FuzzyResult.no_result()

        method = _choose_method(source, target, source_tokens, target_tokens)
        logger.debug("smart_ratio selected %s for %r vs %r", method.value, source, target)
        return _RATIO_FUNCTIONS[method](source, target)
    except Exception:
        logger.debug("smart_ratio failed for %r vs %r", source, target, exc_info=True)
        return FuzzyResult.no_result()
