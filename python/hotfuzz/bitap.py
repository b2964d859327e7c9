"""Bit-parallel approximate substring search (Bitap / Shift-Or).

The automaton tracks, for every error count ``d`` from 0 to the pattern
length, which prefixes of the pattern end at the current text position with
at most ``d`` substitutions. Each state is a 32-bit word, so patterns are
limited to ``BITAP_MAX_PATTERN_LENGTH`` characters (one bit is reserved for
the match flag). The limit is checked when the pattern mask is built.
"""

from typing import Dict, List, Tuple

from hotfuzz.exceptions import PatternTooLongError

__all__ = ["PatternMask", "bitap", "BITAP_MAX_PATTERN_LENGTH", "WORD_BITS"]

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
BITAP_MAX_PATTERN_LENGTH = WORD_BITS - 1


class PatternMask:
    """Per-character bit masks of a Bitap pattern.

    Bit ``i`` of a character's mask is cleared when the pattern has that
    character at position ``i``; characters absent from the pattern map to an
    all-ones word.

    Raises:
        PatternTooLongError: If the pattern exceeds ``BITAP_MAX_PATTERN_LENGTH``.
    """

    __slots__ = ("pattern", "_masks")

    capacity = BITAP_MAX_PATTERN_LENGTH

    def __init__(self, pattern: str):
        if len(pattern) > self.capacity:
            raise PatternTooLongError(
                f"Pattern of length {len(pattern)} exceeds the Bitap limit of "
                f"{self.capacity} characters, try another method"
            )
        self.pattern = pattern
        self._masks: Dict[str, int] = {}
        for i, char in enumerate(pattern):
            self._masks[char] = self._masks.get(char, WORD_MASK) & ~(1 << i) & WORD_MASK

    def __len__(self) -> int:
        return len(self.pattern)

    def __getitem__(self, char: str) -> int:
        return self._masks.get(char, WORD_MASK)


def bitap(pattern: str, text: str) -> Tuple[int, int]:
    """Find the best approximate occurrence of ``pattern`` in ``text``.

    Scans ``text`` once. Whenever the match bit clears at some error level that
    is no worse than the best seen so far, that position becomes the candidate;
    later candidates win ties. A candidate one error away that is actually an
    exact occurrence is corrected to distance 0.

    Returns:
        ``(start, distance)`` of the best match, or ``(-1, len(pattern))`` when
        the text is too short to contain any candidate.

    Raises:
        PatternTooLongError: If the pattern exceeds ``BITAP_MAX_PATTERN_LENGTH``.
    """
    masks = PatternMask(pattern)
    length = len(masks)
    match_bit = 1 << length

    # bit 0 cleared: the empty prefix always matches
    states: List[int] = [~1 & WORD_MASK] * (length + 1)

    best = length
    start = -1

    for i, char in enumerate(text):
        char_mask = masks[char]

        previous = states[0]
        states[0] = ((states[0] | char_mask) << 1) & WORD_MASK

        for d in range(1, length + 1):
            current = states[d]
            states[d] = ((previous & (current | char_mask)) << 1) & WORD_MASK
            previous = current

            if (states[d] & match_bit) == 0 and d <= best:
                best = d
                start = i - length + 1
                if best == 1 and start >= 0 and text[start : start + length] == pattern:
                    best = 0

    return start, best
