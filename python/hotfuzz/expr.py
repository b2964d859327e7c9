"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling chainable fuzzy comparison and search directly in Polars
expression contexts. Values are processed row by row with map_elements;
null values are treated as empty strings.

Example:
    >>> import polars as pl
    >>> import hotfuzz  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"app": ["alarms & clock", "access", "word"]})
    >>> df.with_columns(
    ...     score=pl.col("app").fuzzy.ratio("acess", method="partial")
    ... )
"""

from typing import Optional, Union

import polars as pl

from hotfuzz import batch
from hotfuzz.compare import ratio, smart_ratio
from hotfuzz.enums import RatioMethod, SearchMethod
from hotfuzz.preprocess import clean, is_cjk
from hotfuzz.result import FuzzyResult
from hotfuzz.search import search, smart_search

_SEARCH_DTYPE = pl.Struct(
    {"ratio": pl.Float64, "metric": pl.Int64, "start": pl.Int64, "end": pl.Int64}
)


def _as_text(value) -> str:
    return str(value) if value is not None else ""


def _search_fields(result: FuzzyResult) -> dict:
    return {
        "ratio": result.ratio,
        "metric": result.metric,
        "start": result.start,
        "end": result.end,
    }


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for comparison and search directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: func(_as_text(s), other),
                return_dtype=return_dtype,
            )

        # Compare against another column
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_as_text(row["_left"]), _as_text(row["_right"])),
            return_dtype=return_dtype,
        )

    def ratio(
        self,
        other: Union[str, pl.Expr],
        method: Union[str, RatioMethod] = RatioMethod.LEVENSHTEIN,
        preprocess: bool = True,
    ) -> pl.Expr:
        """
        Compare this column (as source) with a literal or another column.

        Args:
            other: String literal or column expression to compare against
            method: Comparison method (string or RatioMethod enum)
            preprocess: Clean punctuation and whitespace first

        Returns:
            Expression producing ratios (0 to 100)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.ratio("John", method="osa")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.ratio(pl.col("name2"))
            ... )
        """
        return self._pairwise(
            other,
            lambda a, b: ratio(a, b, method, preprocess).ratio,
            pl.Float64,
        )

    def smart_ratio(self, other: Union[str, pl.Expr], preprocess: bool = True) -> pl.Expr:
        """
        Compare this column with a literal or another column using ``smart_ratio``.

        Returns:
            Expression producing ratios (0 to 100); failures score 0
        """
        return self._pairwise(
            other,
            lambda a, b: smart_ratio(a, b, preprocess).ratio,
            pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_ratio: float = 80.0,
        method: Optional[Union[str, RatioMethod]] = None,
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_ratio: Minimum ratio to return True (0 to 100)
            method: Comparison method, or None for ``smart_ratio``

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("app").fuzzy.is_similar("acess", min_ratio=85))
        """
        if method is None:
            return self.smart_ratio(other) >= min_ratio
        return self.ratio(other, method=method) >= min_ratio

    def best_match(
        self,
        choices: list,
        method: Optional[Union[str, RatioMethod]] = None,
        min_ratio: float = 0.0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            method: Comparison method, or None for ``smart_ratio``
            min_ratio: Minimum ratio to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> commands = ["open settings", "battery saver", "bluetooth"]
            >>> df.with_columns(
            ...     command=pl.col("utterance").fuzzy.best_match(commands)
            ... )
        """

        def find_best(value):
            if value is None:
                return None
            results = batch.best_matches(
                choices, str(value), method=method, limit=1, min_ratio=min_ratio
            )
            return results[0].target if results else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def search(
        self,
        pattern: str,
        method: Optional[Union[str, SearchMethod]] = None,
        preprocess: bool = True,
    ) -> pl.Expr:
        """
        Search for a pattern in each value of this column.

        Args:
            pattern: The pattern to find
            method: Search method, or None for ``smart_search``
            preprocess: Clean punctuation and whitespace first

        Returns:
            Struct expression with fields 'ratio', 'metric', 'start' and 'end'.
            Offsets index the preprocessed text.

        Example:
            >>> df.with_columns(
            ...     hit=pl.col("title").fuzzy.search("battery")
            ... ).select(pl.col("hit").struct.field("ratio"))
        """

        def find(value):
            text = _as_text(value)
            if method is None:
                return _search_fields(smart_search(pattern, text, preprocess))
            return _search_fields(search(pattern, text, method, preprocess))

        return self._expr.map_elements(find, return_dtype=_SEARCH_DTYPE)

    def clean(self) -> pl.Expr:
        """
        Collapse punctuation and whitespace runs into single spaces.

        Example:
            >>> df.with_columns(cleaned=pl.col("name").fuzzy.clean())
        """
        return self._expr.map_elements(
            lambda value: clean(value) if value is not None else None,
            return_dtype=pl.Utf8,
        )

    def is_cjk(self) -> pl.Expr:
        """True for values containing Chinese/Japanese/Korean characters."""
        return self._expr.map_elements(is_cjk, return_dtype=pl.Boolean)
