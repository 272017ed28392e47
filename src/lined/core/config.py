"""
Editor configuration: storage bounds, screen geometry and file encoding.
"""

import codecs
from dataclasses import dataclass


@dataclass(frozen=True)
class EditorConfig:
    """Bounds and settings shared by the line store and both front-ends."""

    max_lines: int = 1200
    line_len: int = 256
    screen_rows: int = 24
    screen_cols: int = 80
    tab_width: int = 8
    replace_limit: int = 1024
    encoding: str = "latin-1"

    def __post_init__(self) -> None:
        if self.max_lines < 1:
            raise ValueError(f"max_lines must be at least 1, got {self.max_lines}")

        if self.line_len < 2:
            raise ValueError(f"line_len must be at least 2, got {self.line_len}")

        if self.screen_rows < 2 or self.screen_cols < 1:
            raise ValueError(
                f"Screen too small. Minimum size: 1x2, Current size: {self.screen_cols}x{self.screen_rows}"
            )

        if self.tab_width < 0:
            raise ValueError(f"tab_width must not be negative, got {self.tab_width}")

        if self.replace_limit < 1:
            raise ValueError(f"replace_limit must be at least 1, got {self.replace_limit}")

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e

    @property
    def max_line_length(self) -> int:
        """Longest line the store will hold (one slot is the terminator)."""

        return self.line_len - 1

    @property
    def text_rows(self) -> int:
        """Rows available for document text; the last row is the status bar."""

        return self.screen_rows - 1
