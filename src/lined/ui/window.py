"""
Screen rendering for the visual editor.
"""

from enum import Enum, auto
from typing import Callable, Dict, List, Optional

from ..core.session import EditingSession
from ..utils.filetype import describe_file_type
from .terminal import Attr, Surface

HELP_LINES: List[str] = [
    "=================================================================",
    "             LINED - FULLSCREEN EDITOR - HELP                    ",
    "=================================================================",
    "",
    "  NAVIGATION:",
    "    Arrow Keys    - Move cursor",
    "    Home          - Beginning of line",
    "    End           - End of line",
    "    PgUp/PgDn     - Scroll page up/down",
    "",
    "  EDITING:",
    "    Type          - Insert characters",
    "    Tab           - Insert spaces",
    "    Enter         - Insert new line",
    "    Backspace     - Delete previous character",
    "    Delete        - Delete current character",
    "",
    "  FILE OPERATIONS:",
    "    F2            - Save file",
    "    F10 / Esc     - Exit to line mode",
    "",
    "=================================================================",
    "",
    "  Press any key to continue...",
]


class Redraw(Enum):
    """How much of the screen a key press needs repainted."""

    NONE = auto()
    CURSOR = auto()  # cursor placement only
    CELL = auto()    # from the cell left of the cursor to line end, then the status bar
    LINE = auto()    # the cursor line, then the status bar
    STATUS = auto()  # the status bar only
    FULL = auto()    # every visible line and the status bar


class ScreenRenderer:
    """Paints the document, status bar and help overlay onto a surface."""

    def __init__(self, session: EditingSession, surface: Surface) -> None:
        self.session = session
        self.surface = surface
        self.status_message: Optional[str] = None
        self.painters: Dict[Redraw, Callable[[], None]] = {
            Redraw.NONE: lambda: None,
            Redraw.CURSOR: self.place_cursor,
            Redraw.CELL: self._cell_and_status,
            Redraw.LINE: self._line_and_status,
            Redraw.STATUS: self.update_status_line,
            Redraw.FULL: self.draw_screen,
        }

    @property
    def width(self) -> int:
        return self.session.config.screen_cols

    @property
    def text_rows(self) -> int:
        return self.session.config.text_rows

    def apply(self, redraw: Redraw) -> None:
        """Repaint the part of the screen named by ``redraw``."""

        self.painters[redraw]()

    def screen_row(self) -> int:
        cursor = self.session.cursor
        return cursor.row - cursor.top_line

    def place_cursor(self) -> None:
        cursor = self.session.cursor
        self.surface.move_cursor(self.screen_row(), min(cursor.col, self.width - 1))

    def draw_screen(self) -> None:
        """Repaint every visible line, the status bar and the cursor."""

        store = self.session.store
        top_line = self.session.cursor.top_line

        self.surface.clear()
        self.surface.set_attribute(Attr.NORMAL)

        for row in range(self.text_rows):
            idx = top_line + row
            if idx < store.line_count:
                self.surface.write(row, 0, store.get_line(idx)[:self.width])
            else:
                self.surface.write(row, 0, "~")

        self._write_status()
        self.place_cursor()

    def draw_current_line(self) -> None:
        """Repaint the cursor line, padded to the screen width."""

        store = self.session.store
        cursor = self.session.cursor

        if cursor.row >= store.line_count:
            return

        text = store.get_line(cursor.row)[:self.width]
        self.surface.set_attribute(Attr.NORMAL)
        self.surface.write(self.screen_row(), 0, text.ljust(self.width))
        self.place_cursor()

    def write_char_at_cursor(self) -> None:
        """Paint the character just inserted left of the cursor and the cells it shifted."""

        store = self.session.store
        cursor = self.session.cursor

        if cursor.col < 1 or cursor.col > self.width:
            self.place_cursor()
            return

        start = cursor.col - 1
        line = store.get_line(cursor.row)
        self.surface.set_attribute(Attr.NORMAL)
        self.surface.write(self.screen_row(), start, line[start:self.width])
        self.place_cursor()

    def update_status_line(self) -> None:
        """Repaint the status bar and put the cursor back."""

        self._write_status()
        self.place_cursor()

    def draw_help(self) -> None:
        self.surface.clear()
        self.surface.set_attribute(Attr.NORMAL)

        for row, text in enumerate(HELP_LINES[:self.session.config.screen_rows]):
            self.surface.write(row, 0, text)

    def clear(self) -> None:
        self.surface.clear()
        self.surface.move_cursor(0, 0)

    def status_text(self) -> str:
        """Build the status bar contents, padded to the screen width."""

        session = self.session
        cursor = session.cursor

        status = (
            f" F1=Help F2=Save ESC=Exit | Line {cursor.row + 1}/{session.line_count} "
            f"Col {cursor.col + 1} | {self.status_message or session.display_name()}"
        )

        file_type = describe_file_type(session.filename)
        if file_type and self.width - len(file_type) > len(status):
            status = status.ljust(self.width - len(file_type)) + file_type

        return status[:self.width].ljust(self.width)

    def _write_status(self) -> None:
        self.surface.set_attribute(Attr.REVERSE)
        self.surface.write(self.session.config.screen_rows - 1, 0, self.status_text())
        self.surface.set_attribute(Attr.NORMAL)

    def _cell_and_status(self) -> None:
        self.write_char_at_cursor()
        self.update_status_line()

    def _line_and_status(self) -> None:
        self.draw_current_line()
        self.update_status_line()
