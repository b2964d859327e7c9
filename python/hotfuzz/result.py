"""Result types shared by the compare and search engines."""

import sys
from dataclasses import dataclass
from typing import Optional

# Largest representable distance; marks "no comparison could be made"
MAX_METRIC = sys.maxsize


@dataclass(frozen=True)
class FuzzyResult:
    """
    Outcome of a comparison or search.

    Attributes:
        distance_function: Name of the distance algorithm that produced the result
            (diagnostics only), or the failure label for a no-result.
        ratio: Similarity score, 0 to 100 for well-formed input. Scores are not
            clamped, so pathological distances can fall outside that range.
        metric: The edit distance or similarity metric. ``MAX_METRIC`` when no
            comparison could be made.
        start: Lowest index of the match in the target string.
        end: End of the match in the target string (exclusive).
        source: The source string as processed.
        target: The target string as processed.
    """

    distance_function: str
    ratio: float
    metric: int
    start: int = 0
    end: int = 0
    source: Optional[str] = None
    target: Optional[str] = None

    @classmethod
    def no_result(cls, message: str = "Failure") -> "FuzzyResult":
        """Build the sentinel returned when no comparison could be made."""
        return cls(distance_function=message, ratio=0.0, metric=MAX_METRIC, start=0, end=0)

    @property
    def is_no_result(self) -> bool:
        return self.metric == MAX_METRIC and self.ratio == 0

    @property
    def matched(self) -> str:
        """The matched span of the target, or an empty string."""
        if self.target is None or self.is_no_result:
            return ""
        return self.target[self.start : self.end]


@dataclass(frozen=True)
class TokenPair:
    """A source token, a target token and the distance between them."""

    source: str
    target: str
    distance: int


__all__ = ["FuzzyResult", "TokenPair", "MAX_METRIC"]
