"""
Line store module: the bounded, ordered collection of document lines.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import EditorConfig
from .errors import AllocationFailure, CapacityExceeded, IOFailure

logger = logging.getLogger(__name__)


def chomp(text: str) -> str:
    """Strip one trailing newline or carriage return, then one more ``\\r``."""

    if text and text[-1] in '\r\n':
        text = text[:-1]

    if text and text[-1] == '\r':
        text = text[:-1]

    return text


class LineStore:
    """Bounded list of lines with gap primitives for insert and delete."""

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()
        self._lines: List[str] = []

    @property
    def max_lines(self) -> int:
        return self.config.max_lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    def lines(self) -> Tuple[str, ...]:
        """Snapshot of the current document."""

        return tuple(self._lines)

    def fit(self, text: str) -> str:
        """Truncate text to the longest line the store accepts."""

        if '\n' in text:
            raise ValueError("Line text must not contain a newline")

        return text[:self.config.max_line_length]

    def get_line(self, idx: int) -> str:
        """Return the line at 0-based index ``idx``."""

        if not 0 <= idx < len(self._lines):
            raise IndexError(f"Line index {idx} out of range (0..{len(self._lines) - 1})")

        return self._lines[idx]

    def set_line(self, idx: int, text: str) -> None:
        """Replace slot ``idx`` with a new line."""

        if not 0 <= idx < len(self._lines):
            raise IndexError(f"Line index {idx} out of range (0..{len(self._lines) - 1})")

        self._lines[idx] = self.fit(text)

    def insert_gap(self, pos: int, count: int = 1) -> None:
        """
        Open ``count`` empty slots at ``pos``, shifting later lines forward.

        Args:
            pos: 0-based index of the first new slot, ``0..line_count``
            count: Number of slots to open

        Raises:
            CapacityExceeded: The store would grow beyond ``max_lines``.
                Nothing is shifted in that case.
        """

        if count <= 0:
            return

        if not 0 <= pos <= len(self._lines):
            raise IndexError(f"Gap position {pos} out of range (0..{len(self._lines)})")

        if len(self._lines) + count > self.max_lines:
            raise CapacityExceeded()

        self._lines[pos:pos] = [''] * count

    def close_gap(self, pos: int, count: int = 1) -> None:
        """Remove ``count`` lines starting at ``pos``, shifting later lines back."""

        if count <= 0:
            return

        if not 0 <= pos < len(self._lines):
            raise IndexError(f"Gap position {pos} out of range (0..{len(self._lines) - 1})")

        del self._lines[pos:pos + count]

    def insert_line(self, pos: int, text: str = '') -> None:
        """Insert a single line at ``pos``."""

        text = self.fit(text)
        self.insert_gap(pos, 1)
        self._lines[pos] = text

    def append(self, text: str = '') -> None:
        """Add a line after the last one."""

        self.insert_line(len(self._lines), text)

    def load(self, text_lines: Iterable[str]) -> None:
        """
        Replace the whole document with ``text_lines``.

        The new document is built before the old one is discarded, so a
        capacity error leaves the store as it was. Running out of memory
        leaves it empty.
        """

        new_lines: List[str] = []
        try:
            for text in text_lines:
                if len(new_lines) >= self.max_lines:
                    raise CapacityExceeded(f"file exceeds {self.max_lines} lines")

                new_lines.append(self.fit(chomp(text)))
        except MemoryError as e:
            self._lines = []
            raise AllocationFailure("alloc failed while loading; document cleared") from e

        self._lines = new_lines

    def load_file(self, filename: str) -> int:
        """
        Load a newline-delimited text file.

        Args:
            filename: Path of the file to read

        Returns:
            int: Number of lines loaded

        Raises:
            IOFailure: The file could not be read
        """

        try:
            with open(filename, 'r', encoding=self.config.encoding, errors='replace', newline='') as f:
                content = f.read()
        except OSError as e:
            raise IOFailure(f"open failed: {e.strerror or e}") from e

        pieces = content.split('\n')
        if pieces and pieces[-1] == '':
            pieces.pop()

        self.load(pieces)
        logger.info("Loaded %d line(s) from %s", len(self._lines), filename)

        return len(self._lines)

    def save_file(self, filename: str) -> int:
        """
        Write every line followed by a single ``\\n``.

        Returns:
            int: Number of lines written

        Raises:
            IOFailure: The file could not be written
        """

        try:
            with open(filename, 'w', encoding=self.config.encoding, errors='replace', newline='') as f:
                for line in self._lines:
                    f.write(line)
                    f.write('\n')
        except OSError as e:
            raise IOFailure(f"write failed: {e.strerror or e}") from e

        logger.info("Wrote %d line(s) to %s", len(self._lines), filename)

        return len(self._lines)
