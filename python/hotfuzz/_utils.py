"""Internal utilities for hotfuzz."""

import logging
import math
from typing import Type, TypeVar, Union

from hotfuzz.enums import RatioMethod, SearchMethod
from hotfuzz.exceptions import ValidationError

logger = logging.getLogger(__name__)

_M = TypeVar("_M", RatioMethod, SearchMethod)


def _normalize_method(method: Union[str, _M], enum_cls: Type[_M], default: _M) -> _M:
    if isinstance(method, enum_cls):
        return method

    if isinstance(method, str):
        key = method.strip().lower().replace("-", "_")
        try:
            return enum_cls(key)
        except ValueError:
            pass
        # Also accept member names ("TokenSort", "PARTIAL_TOKEN_SET")
        for member in enum_cls:
            if member.name.replace("_", "") == key.replace("_", "").upper():
                return member
        logger.warning(
            "Unknown %s %r, falling back to %s. Valid options: %s",
            enum_cls.__name__,
            method,
            default.value,
            sorted(m.value for m in enum_cls),
        )
        return default

    raise TypeError(
        f"method must be str or {enum_cls.__name__} enum, got {type(method).__name__}"
    )


def normalize_ratio_method(method: Union[str, RatioMethod]) -> RatioMethod:
    """Convert a method name to a RatioMethod, defaulting unknown names to Levenshtein.

    Args:
        method: Either a RatioMethod value or a method name (value or member name,
            case-insensitive).

    Returns:
        The matching RatioMethod member.

    Raises:
        TypeError: If method is not a string or RatioMethod.

    Example:
        >>> normalize_ratio_method("token_sort")
        <RatioMethod.TOKEN_SORT: 'token_sort'>
        >>> normalize_ratio_method("TokenSort")
        <RatioMethod.TOKEN_SORT: 'token_sort'>
    """
    return _normalize_method(method, RatioMethod, RatioMethod.LEVENSHTEIN)


def normalize_search_method(method: Union[str, SearchMethod]) -> SearchMethod:
    """Convert a method name to a SearchMethod, defaulting unknown names to Bitap."""
    return _normalize_method(method, SearchMethod, SearchMethod.BITAP)


def validate_min_ratio(min_ratio: float) -> float:
    """Check that a score threshold is a finite number in [0, 100]."""
    if isinstance(min_ratio, bool) or not isinstance(min_ratio, (int, float)):
        raise TypeError(f"min_ratio must be a number, got {type(min_ratio).__name__}")
    if math.isnan(min_ratio) or not 0.0 <= min_ratio <= 100.0:
        raise ValidationError(f"min_ratio must be between 0 and 100, got {min_ratio}")
    return float(min_ratio)


__all__ = ["normalize_ratio_method", "normalize_search_method", "validate_min_ratio"]
