"""
hotfuzz - Fuzzy string comparison and approximate substring search

A pure-Python library for comparing strings and finding approximate
occurrences of a short pattern inside a longer text, designed for search
boxes, command disambiguation and deduplication.

Example usage:
    >>> import hotfuzz as hf

    # Compare with an explicit method
    >>> hf.ratio("this is a test", "this is a tset", hf.RatioMethod.OSA).metric
    1

    # Let the library pick the method
    >>> hf.smart_ratio("update windos", "open the window update settings").ratio > 90
    True

    # Find where a pattern best matches
    >>> result = hf.smart_search("laso", "lazolaso")
    >>> (result.start, result.end, result.metric)
    (4, 8, 0)
"""

import logging
from importlib.metadata import version as _get_version

from hotfuzz import batch
from hotfuzz.bitap import BITAP_MAX_PATTERN_LENGTH, PatternMask, bitap
from hotfuzz.compare import (
    hamming_ratio,
    jaccard_ratio,
    levenshtein_ratio,
    osa_ratio,
    partial_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    ratio,
    smart_ratio,
    token_set_ratio,
    token_sort_ratio,
)
from hotfuzz.decomposition import DEFAULT_DECOMPOSER, Decomposer, UnicodeDecomposer
from hotfuzz.distance import (
    damerau_levenshtein,
    hamming,
    jaccard_coefficient,
    levenshtein,
    optimal_string_alignment,
    partial_token_alignment,
    ratcliff_obershelp,
)
from hotfuzz.enums import RATIO_DESCRIPTIONS, SEARCH_DESCRIPTIONS, RatioMethod, SearchMethod, describe
from hotfuzz.exceptions import (
    HotFuzzError,
    LengthMismatchError,
    PatternTooLongError,
    ValidationError,
)
from hotfuzz.preprocess import clean, is_cjk, shingle_filter, to_ngrams, to_token_ngrams, tokenize
from hotfuzz.result import MAX_METRIC, FuzzyResult, TokenPair
from hotfuzz.scoring import partial_score, simple_score, sliding_score
from hotfuzz.search import (
    SOURCE_LARGER_THAN_TARGET,
    bitap_search,
    cjk_search,
    partial_search,
    search,
    sliding_token_search,
    smart_search,
    token_search,
)

# Register the .fuzzy expression namespace
import hotfuzz.expr  # noqa: E402,F401

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("hotfuzz")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "HotFuzzError",
    "ValidationError",
    "LengthMismatchError",
    "PatternTooLongError",
    # Result types
    "FuzzyResult",
    "TokenPair",
    "MAX_METRIC",
    # Enums
    "RatioMethod",
    "SearchMethod",
    "RATIO_DESCRIPTIONS",
    "SEARCH_DESCRIPTIONS",
    "describe",
    # Preprocessing
    "clean",
    "tokenize",
    "to_ngrams",
    "to_token_ngrams",
    "shingle_filter",
    "is_cjk",
    # Distance functions
    "hamming",
    "levenshtein",
    "damerau_levenshtein",
    "optimal_string_alignment",
    "jaccard_coefficient",
    "partial_token_alignment",
    "ratcliff_obershelp",
    # Scoring
    "simple_score",
    "sliding_score",
    "partial_score",
    # Comparison
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
    # Search
    "search",
    "smart_search",
    "bitap",
    "bitap_search",
    "token_search",
    "sliding_token_search",
    "partial_search",
    "cjk_search",
    "PatternMask",
    "BITAP_MAX_PATTERN_LENGTH",
    "SOURCE_LARGER_THAN_TARGET",
    # CJK decomposition
    "Decomposer",
    "UnicodeDecomposer",
    "DEFAULT_DECOMPOSER",
    # Batch processing
    "batch",
]


# Convenience aliases
edit_distance = levenshtein
osa = optimal_string_alignment
