"""Decomposition of logographic text into finer-grained component blocks.

Edit distances over CJK text work better when each character is broken into
smaller units. Any object with ``decompose`` and ``decompose_to_blocks``
methods can be passed as ``decomposer=`` to the compare and search engines.
The only requirements are determinism and one block per input character,
since CJK search uses the blocks to map offsets back to the original string.

The default ``UnicodeDecomposer`` uses Unicode compatibility decomposition
(NFKD): Hangul syllables split into jamo, kana lose their voicing marks into
separate combining characters and fullwidth forms fold to their plain
equivalents. Han ideographs have no decomposition and stay single-unit
blocks.
"""

import unicodedata
from typing import List, Protocol, runtime_checkable

__all__ = ["Decomposer", "UnicodeDecomposer", "DEFAULT_DECOMPOSER"]


@runtime_checkable
class Decomposer(Protocol):
    """Interface of a CJK decomposition collaborator."""

    def decompose(self, text: str) -> str:
        """Return ``text`` with logographic characters replaced by their components."""
        ...

    def decompose_to_blocks(self, text: str) -> List[str]:
        """Return one block of components per character of ``text``."""
        ...


class UnicodeDecomposer:
    """Decomposer backed by Unicode NFKD normalization.

    Stateless, so a single instance is safe to share across threads.

    Example:
        >>> [len(block) for block in UnicodeDecomposer().decompose_to_blocks("한국어")]
        [3, 3, 2]
    """

    form = "NFKD"

    def decompose(self, text: str) -> str:
        return "".join(self.decompose_to_blocks(text))

    def decompose_to_blocks(self, text: str) -> List[str]:
        return [unicodedata.normalize(self.form, char) or char for char in text]


DEFAULT_DECOMPOSER = UnicodeDecomposer()
