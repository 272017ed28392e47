"""
Editing session shared by the REPL and the visual editor.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .buffer import LineStore
from .config import EditorConfig


@dataclass
class Cursor:
    """Visual-mode cursor and viewport."""

    row: int = 0
    col: int = 0
    top_line: int = 0

    def reset(self) -> None:
        self.row = 0
        self.col = 0
        self.top_line = 0


@dataclass
class EditingSession:
    """Document, cursor, viewport, last range and current filename."""

    config: EditorConfig = field(default_factory=EditorConfig)
    store: LineStore = field(init=False)
    filename: Optional[str] = None
    cursor: Cursor = field(default_factory=Cursor)
    last_a: int = 1
    last_b: int = 0

    def __post_init__(self) -> None:
        self.store = LineStore(self.config)

    @property
    def line_count(self) -> int:
        return self.store.line_count

    @property
    def last_range(self) -> Tuple[int, int]:
        """Range used by the most recent ranged command; ``b == 0`` means unset."""

        return self.last_a, self.last_b

    def remember_range(self, a: int, b: int) -> None:
        self.last_a = a
        self.last_b = b

    def display_name(self) -> str:
        return self.filename or "(none)"

    def status_line(self) -> str:
        return f"Lines: {self.line_count}  File: {self.display_name()}"

    def open(self, filename: str) -> int:
        """Load ``filename`` into the store and make it the current file."""

        count = self.store.load_file(filename)
        self.filename = filename
        self.remember_range(1, count)
        return count

    def write(self, filename: Optional[str] = None) -> Tuple[str, int]:
        """
        Save the store to ``filename`` or the current file.

        Returns:
            Tuple[str, int]: The name written and the number of lines
        """

        target = filename or self.filename
        if not target:
            raise ValueError("No filename specified")

        count = self.store.save_file(target)
        self.filename = target
        return target, count
