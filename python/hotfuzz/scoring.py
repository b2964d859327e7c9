"""Score normalization: turn a raw distance and two input lengths into a 0-100 ratio.

None of the formulas clamp their output. A distance larger than the length
budget (or a negative one) produces a score outside [0, 100]; callers that
need a bounded value should clamp it themselves.
"""

__all__ = ["simple_score", "sliding_score", "partial_score"]


def simple_score(a: str, b: str, distance: int) -> float:
    """Whole-string score: ``(len(a) + len(b) - distance) / (len(a) + len(b)) * 100``."""
    total = len(a) + len(b)
    if total <= 0:
        return 0.0
    return ((total - distance) / total) * 100


def sliding_score(small: str, big: str, distance: int) -> float:
    """Score for a sliding match, normalized against twice the shorter string.

    Only the content of the shorter string can be mismatched, so ``big`` does
    not enter the formula.
    """
    total = len(small) * 2
    if total <= 0:
        return 0.0
    return ((total - distance) / total) * 100


def partial_score(a: str, b: str, distance: int) -> float:
    """Whole-string score with the absolute length difference added back.

    A partial match ignores the excess length of the longer string, so the
    delta is forgiven before normalizing.
    """
    total = len(a) + len(b)
    if total <= 0:
        return 0.0
    delta = abs(len(a) - len(b))
    return ((total - distance + delta) / total) * 100
