"""
Case-insensitive line search for the ``S`` command.
"""

import string
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.buffer import LineStore
    from ..core.ranges import Range

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_case(text: str) -> str:
    """Lowercase ASCII letters only, leaving every other byte as is."""

    return text.translate(_ASCII_LOWER)


def find_caseless(haystack: str, needle: str) -> int:
    """
    Find ``needle`` in ``haystack`` ignoring ASCII case.

    Returns:
        int: Index of the first match, 0 for an empty needle, -1 if absent
    """

    if not needle:
        return 0

    return fold_case(haystack).find(fold_case(needle))


class SearchResult:
    """A matching line and where the pattern starts in it."""

    def __init__(self, index: int, position: int, text: str):
        self.index = index
        self.position = position
        self.text = text

    def __repr__(self) -> str:
        return f"SearchResult(index={self.index}, position={self.position}, text={self.text!r})"


class SearchEngine:
    """Scans a range of the line store for a pattern."""

    def __init__(self, store: 'LineStore') -> None:
        self.store = store

    def find_all(self, pattern: str, rng: 'Range') -> List[SearchResult]:
        """
        Find every line in ``rng`` containing ``pattern``.

        Args:
            pattern: Text to look for, compared without ASCII case
            rng: Clamped 1-based range to scan

        Returns:
            List[SearchResult]: One result per matching line, in order
        """

        results = []

        for idx in rng.indices():
            if idx >= self.store.line_count:
                break

            line = self.store.get_line(idx)
            position = find_caseless(line, pattern)
            if position >= 0:
                results.append(SearchResult(idx, position, line))

        return results
