"""Exception hierarchy for hotfuzz.

Direct distance and search calls raise these errors when a precondition is
violated. The heuristic entry points (``smart_ratio``, ``search`` and
``smart_search``) never let them escape; they return
``FuzzyResult.no_result()`` instead.
"""


class HotFuzzError(Exception):
    """Base exception for all hotfuzz errors."""


class ValidationError(HotFuzzError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class LengthMismatchError(ValidationError):
    """Raised when an equal-length algorithm (Hamming) receives strings of different lengths."""


class PatternTooLongError(ValidationError):
    """Raised when a Bitap pattern does not fit in the automaton's machine word."""


__all__ = [
    "HotFuzzError",
    "ValidationError",
    "LengthMismatchError",
    "PatternTooLongError",
]
