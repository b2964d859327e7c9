"""Text preprocessing: cleaning, tokenizing, n-grams, shingles and CJK detection.

All helpers are pure functions and can be used on their own:

    >>> from hotfuzz.preprocess import clean, shingle_filter
    >>> clean("one, two, three")
    'one two three'
    >>> shingle_filter("This is a test", 2, 2)
    ['This is', 'is a', 'a test']
"""

from typing import List, Optional, Tuple

import regex

from hotfuzz.exceptions import ValidationError

__all__ = [
    "clean",
    "tokenize",
    "token_spans",
    "to_ngrams",
    "to_token_ngrams",
    "shingle_filter",
    "is_cjk",
    "CJK_RANGES",
]

_PUNCT_OR_SPACE = regex.compile(r"[\s\p{P}]+")
# Space and hyphen only; CJK text is not segmented
_TOKEN_DELIMITERS = regex.compile(r"[ \-]+")
_TOKEN = regex.compile(r"[^ \-]+")

# See https://en.wikipedia.org/wiki/CJK_Unified_Ideographs
CJK_RANGES = (
    (0x2E80, 0xFAFF),  # CJK radicals supplement through CJK compatibility ideographs
    (0xFE30, 0xFE4F),  # CJK compatibility forms
    (0xFF00, 0xFFEF),  # halfwidth and fullwidth forms
    (0x20000, 0x2FA1F),  # CJK extensions and supplements
)


def clean(text: str) -> str:
    """Collapse runs of whitespace and punctuation into single spaces and trim the ends.

    Casing is left untouched.

    Example:
        >>> clean("test(s)")
        'test s'
    """
    return _PUNCT_OR_SPACE.sub(" ", text).strip()


def tokenize(text: str) -> List[str]:
    """Split on spaces and hyphens, dropping empty tokens."""
    return [token for token in _TOKEN_DELIMITERS.split(text) if token]


def token_spans(text: str) -> List[Tuple[str, int, int]]:
    """Tokens of ``text`` with their ``(start, end)`` offsets, split like ``tokenize``."""
    return [(match.group(), match.start(), match.end()) for match in _TOKEN.finditer(text)]


def to_ngrams(text: str, n: int = 2) -> List[str]:
    """Overlapping character n-grams of ``text``.

    Each window is stripped of surrounding whitespace. If ``n`` is not smaller
    than the string, the whole string is the only n-gram.

    Raises:
        ValidationError: If ``n`` is smaller than 1.
    """
    if n < 1:
        raise ValidationError(f"ngram size must be at least 1, got {n}")
    if n >= len(text):
        return [text]
    return [text[offset : offset + n].strip() for offset in range(len(text) - n + 1)]


def to_token_ngrams(text: str, n: int = 2) -> List[str]:
    """Token n-grams of the cleaned text, joined by single spaces.

    If ``n`` is not smaller than the number of tokens, the cleaned text is the
    only n-gram.

    Example:
        >>> to_token_ngrams("Hello, how are you?", 3)
        ['Hello how are', 'how are you']
    """
    if n < 1:
        raise ValidationError(f"ngram size must be at least 1, got {n}")
    cleaned = clean(text)
    tokens = tokenize(cleaned)
    if n >= len(tokens):
        return [cleaned]
    return [" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]


def shingle_filter(text: str, min_size: int = 1, max_size: int = 0) -> List[str]:
    """Token n-grams for every size between ``min_size`` and ``max_size``.

    Size bounds:
        - ``max_size <= 0`` is relative to the token count: 0 means all tokens,
          -1 means all tokens but one, and so on.
        - ``min_size <= 0`` is raised to 1.
        - A resolved ``max_size`` below ``min_size`` is raised to ``min_size``.

    Example:
        >>> shingle_filter("This is a test", 1, 1)
        ['This', 'is', 'a', 'test']
    """
    cleaned = clean(text.strip())
    token_count = len(tokenize(cleaned))

    if max_size <= 0:
        max_size = token_count + max_size
    if min_size <= 0:
        min_size = 1
    if max_size < min_size:
        max_size = min_size

    shingles: List[str] = []
    for n in range(min_size, max_size + 1):
        shingles.extend(to_token_ngrams(cleaned, n))
    return shingles


def is_cjk(text: Optional[str]) -> bool:
    """True if any character belongs to a Chinese/Japanese/Korean Unicode block."""
    if text is None:
        return False
    for char in text:
        code_point = ord(char)
        for low, high in CJK_RANGES:
            if low <= code_point <= high:
                return True
    return False
