"""Approximate substring search: find where a short pattern best matches inside a longer text.

``search`` runs one explicit method; ``smart_search`` picks Bitap, token
search, partial search or CJK search from the shape of the input. Both
convert any failure into ``FuzzyResult.no_result()``. The individual search
functions are importable for callers that want precondition errors raised.

Example:
    >>> from hotfuzz import SearchMethod, search, smart_search
    >>> result = search("laso", "lazolaso", SearchMethod.BITAP)
    >>> (result.start, result.metric)
    (4, 0)
    >>> smart_search("better battery", "activate better battery mode please").matched
    'better battery'
"""

import logging
from itertools import chain
from operator import attrgetter
from typing import Callable, Iterable, List, Optional, Union

from hotfuzz._utils import normalize_search_method
from hotfuzz.bitap import BITAP_MAX_PATTERN_LENGTH, bitap
from hotfuzz.compare import ratio
from hotfuzz.decomposition import DEFAULT_DECOMPOSER, Decomposer
from hotfuzz.distance import levenshtein, partial_token_alignment
from hotfuzz.enums import RatioMethod, SearchMethod
from hotfuzz.preprocess import clean, is_cjk, token_spans, tokenize
from hotfuzz.result import FuzzyResult, TokenPair
from hotfuzz.scoring import simple_score, sliding_score

__all__ = [
    "search",
    "smart_search",
    "bitap_search",
    "token_search",
    "sliding_token_search",
    "partial_search",
    "cjk_search",
    "measure_token_distance",
    "CJK_PAD_CHAR",
    "SOURCE_LARGER_THAN_TARGET",
]

logger = logging.getLogger(__name__)

CJK_PAD_CHAR = "#"
SOURCE_LARGER_THAN_TARGET = "Source larger than target"

DistanceFunction = Callable[[str, str], int]
ScoringFunction = Callable[[str, str, int], float]


def bitap_search(source: str, target: str) -> FuzzyResult:
    """Bit-parallel search for ``source`` inside ``target``.

    The score uses the sliding formula against the best distance found.

    Raises:
        PatternTooLongError: If ``source`` is longer than 31 characters.
    """
    if not source or not target:
        return FuzzyResult.no_result()

    start, best = bitap(source, target)
    if start < 0:
        return FuzzyResult.no_result()

    return FuzzyResult(
        distance_function=SearchMethod.BITAP.value,
        ratio=sliding_score(source, target, best),
        metric=best,
        start=start,
        end=start + len(source),
        source=source,
        target=target,
    )


def measure_token_distance(
    source_tokens: Iterable[str],
    target_tokens: Iterable[str],
    distance_function: DistanceFunction,
) -> List[TokenPair]:
    """Greedily pair source tokens with target tokens by ascending distance.

    All pairs are measured and sorted (stable, so ties keep source order);
    a pair is accepted unless its source or target token was already used.
    This is a greedy approximation, not an optimal bipartite assignment.
    """
    target_tokens = list(target_tokens)
    pairs = [
        TokenPair(source=s, target=t, distance=distance_function(s, t))
        for s in source_tokens
        for t in target_tokens
    ]
    pairs.sort(key=attrgetter("distance"))

    best_pairs: List[TokenPair] = []
    used_sources = set()
    used_targets = set()
    for pair in pairs:
        if pair.source in used_sources or pair.target in used_targets:
            continue
        best_pairs.append(pair)
        used_sources.add(pair.source)
        used_targets.add(pair.target)

    return best_pairs


def _evaluate_token_pairs(
    source: str,
    target: str,
    pairs: List[TokenPair],
    scorer: ScoringFunction,
    distance_function: str,
) -> FuzzyResult:
    if not pairs:
        return FuzzyResult.no_result()

    # Offsets come from the original target; lowercasing can change its length.
    # Repeated tokens widen the span to their first and last occurrence.
    first_start = {}
    last_end = {}
    for token, token_start, token_end in token_spans(target):
        key = token.lower()
        first_start.setdefault(key, token_start)
        last_end[key] = token_end
    start = min(first_start[p.target] for p in pairs)
    end = max(last_end[p.target] for p in pairs)
    distance = sum(p.distance for p in pairs)

    source_tokens_used = " ".join(p.source for p in pairs)
    target_tokens_used = " ".join(p.target for p in pairs)

    return FuzzyResult(
        distance_function=distance_function,
        ratio=scorer(source_tokens_used, target_tokens_used, distance),
        metric=distance,
        start=start,
        end=end,
        source=source,
        target=target,
    )


def token_search(source: str, target: str, use_set: bool = True) -> FuzzyResult:
    """Match source tokens to target tokens with Levenshtein distance.

    Args:
        source: Pattern whose tokens are searched for
        target: Text to search in
        use_set: Drop repeated tokens on both sides first

    Returns:
        FuzzyResult spanning the matched target tokens. A source longer than
        the target gives ``FuzzyResult.no_result()``.
    """
    if not source or not target or len(source) > len(target):
        return FuzzyResult.no_result()

    source_tokens = tokenize(source.lower())
    target_tokens = tokenize(target.lower())
    if use_set:
        source_tokens = list(dict.fromkeys(source_tokens))
        target_tokens = list(dict.fromkeys(target_tokens))

    pairs = measure_token_distance(source_tokens, target_tokens, levenshtein)
    return _evaluate_token_pairs(source, target, pairs, simple_score, levenshtein.__name__)


def sliding_token_search(source: str, target: str) -> FuzzyResult:
    """Match source tokens to target tokens with the sliding partial alignment distance."""
    if not source or not target:
        return FuzzyResult.no_result()

    pairs = measure_token_distance(
        tokenize(source.lower()), tokenize(target.lower()), partial_token_alignment
    )
    return _evaluate_token_pairs(
        source, target, pairs, sliding_score, partial_token_alignment.__name__
    )


def partial_search(source: str, target: str) -> FuzzyResult:
    """The partial ratio read as a search: the best window of the target is the match."""
    return ratio(source, target, RatioMethod.PARTIAL, preprocess=False)


def cjk_search(
    source: str, target: str, decomposer: Optional[Decomposer] = None
) -> FuzzyResult:
    """Partial search over decomposed CJK blocks, reported in original character indices.

    Every block is padded to the widest block of either string so that each
    original character occupies the same number of units; the partial match
    offsets are then divided by that width (floor for start, ceiling for end).
    """
    if not source or not target:
        return FuzzyResult.no_result()

    decomposer = decomposer or DEFAULT_DECOMPOSER
    source_blocks = decomposer.decompose_to_blocks(source)
    target_blocks = decomposer.decompose_to_blocks(target)
    width = max((len(block) for block in chain(source_blocks, target_blocks)), default=0)
    if width < 1:
        return FuzzyResult.no_result()

    padded_source = "".join(block.ljust(width, CJK_PAD_CHAR) for block in source_blocks)
    padded_target = "".join(block.ljust(width, CJK_PAD_CHAR) for block in target_blocks)

    result = partial_search(padded_source, padded_target)
    if result.is_no_result:
        return result

    return FuzzyResult(
        distance_function=result.distance_function,
        ratio=result.ratio,
        metric=result.metric,
        start=result.start // width,
        end=-(-result.end // width),
        source=source,
        target=target,
    )


def search(
    source: str,
    target: str,
    method: Union[str, SearchMethod] = SearchMethod.BITAP,
    preprocess: bool = True,
    decomposer: Optional[Decomposer] = None,
) -> FuzzyResult:
    """
    Search for ``source`` inside ``target`` with a specific method.

    Args:
        source: The pattern to find
        target: The text to search in
        method: Search method (SearchMethod or its string value). Unknown
            names fall back to Bitap.
        preprocess: Clean punctuation and whitespace from both strings first
        decomposer: CJK decomposer for SearchMethod.PARTIAL_CJK_SEARCH

    Returns:
        FuzzyResult with the match span in ``target``. Never raises; errors such
        as a Bitap pattern over 31 characters give ``FuzzyResult.no_result()``.
    """
    try:
        method = normalize_search_method(method)

        if preprocess:
            source = clean(source)
            target = clean(target)

        if method is SearchMethod.TOKEN_SEARCH:
            return token_search(source, target, use_set=True)
        if method is SearchMethod.SLIDING_SEARCH:
            return sliding_token_search(source, target)
        if method is SearchMethod.PARTIAL_SEARCH:
            return partial_search(source, target)
        if method is SearchMethod.PARTIAL_CJK_SEARCH:
            return cjk_search(source, target, decomposer)
        return bitap_search(source, target)
    except Exception:
        logger.debug("search with %s failed for %r in %r", method, source, target, exc_info=True)
        return FuzzyResult.no_result()


def smart_search(
    source: str,
    target: str,
    preprocess: bool = True,
    decomposer: Optional[Decomposer] = None,
) -> FuzzyResult:
    """
    Search for ``source`` inside ``target`` with a method chosen from the input.

    - CJK on either side: CJK search (CJK text is never tokenized)
    - more than one source token: token set search
    - a single token of up to 31 characters: Bitap
    - longer single tokens: partial search

    Never raises. A source longer than the target gives a no-result labelled
    ``SOURCE_LARGER_THAN_TARGET``.

    Example:
        >>> smart_search("alarm and clock", "alarm  clock").distance_function
        'Source larger than target'
    """
    try:
        if not source or not target:
            return FuzzyResult.no_result()
        if len(source) > len(target):
            return FuzzyResult.no_result(SOURCE_LARGER_THAN_TARGET)

        cjk = is_cjk(source) or is_cjk(target)

        if preprocess:
            source = clean(source)
            target = clean(target)

        if cjk:
            logger.debug("smart_search using CJK search for %r", source)
            return cjk_search(source, target, decomposer)

        if len(tokenize(source)) > 1:
            logger.debug("smart_search using token search for %r", source)
            return token_search(source, target, use_set=True)

        if len(source) <= BITAP_MAX_PATTERN_LENGTH:
            logger.debug("smart_search using Bitap for %r", source)
            return bitap_search(source, target)

        logger.debug("smart_search using partial search for %r", source)
        return partial_search(source, target)
    except Exception:
        logger.debug("smart_search failed for %r in %r", source, target, exc_info=True)
        return FuzzyResult.no_result()
