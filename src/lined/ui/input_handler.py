"""
Visual editor: cursor-driven editing of the shared line store.

Each key press is a state transition that returns the redraw granularity it
needs, so single-character edits never repaint the whole screen.
"""

import curses
import logging
import os
from enum import Enum, auto
from typing import Callable, Dict, Optional

from ..core.errors import CapacityExceeded, IOFailure
from ..core.buffer import LineStore
from ..core.session import Cursor, EditingSession
from .keys import Key, KeyEvent, decode_key
from .terminal import CursesSurface, Surface
from .window import Redraw, ScreenRenderer

logger = logging.getLogger(__name__)


class EditorState(Enum):
    NORMAL = auto()
    HELP = auto()
    EXITING = auto()


class VisualEditor:
    """Fullscreen editor state machine over an editing session."""

    def __init__(self, session: EditingSession, surface: Surface,
                 renderer: Optional[ScreenRenderer] = None) -> None:
        self.session = session
        self.surface = surface
        self.renderer = renderer or ScreenRenderer(session, surface)
        self.state = EditorState.NORMAL
        self.key_handlers: Dict[Key, Callable[[], Redraw]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[Key, Callable[[], Redraw]]:
        """Set up the key handlers."""

        return {
            Key.UP: self._move_up,
            Key.DOWN: self._move_down,
            Key.LEFT: self._move_left,
            Key.RIGHT: self._move_right,
            Key.HOME: self._move_line_start,
            Key.END: self._move_line_end,
            Key.PAGE_UP: self._page_up,
            Key.PAGE_DOWN: self._page_down,

            Key.TAB: self._handle_tab,
            Key.ENTER: self._handle_enter,
            Key.BACKSPACE: self._backspace,
            Key.DELETE: self._delete_char,

            Key.HELP: self._show_help,
            Key.SAVE: self._save,
            Key.EXIT: self._exit,
        }

    @property
    def store(self) -> LineStore:
        return self.session.store

    @property
    def cursor(self) -> Cursor:
        return self.session.cursor

    @property
    def max_line_length(self) -> int:
        return self.session.config.max_line_length

    @property
    def running(self) -> bool:
        return self.state != EditorState.EXITING

    def enter(self) -> None:
        """Reset the cursor and make sure there is a line to stand on."""

        if self.store.line_count == 0:
            self.store.append('')

        self.cursor.reset()
        self.state = EditorState.NORMAL
        self.renderer.status_message = None

    def run(self) -> None:
        """Read and handle keys until the exit key is pressed."""

        self.enter()
        self.renderer.draw_screen()
        self.surface.refresh()

        while self.running:
            self.process(decode_key(self.surface.read_key()))

        self.renderer.clear()
        self.surface.refresh()

    def process(self, event: KeyEvent) -> Redraw:
        """Handle one key event and repaint what it changed."""

        redraw = self.handle_key(event)
        if self.running:
            self.renderer.apply(redraw)
        self.surface.refresh()
        return redraw

    def handle_key(self, event: KeyEvent) -> Redraw:
        """Apply a key event to the session; returns the redraw it needs."""

        if self.state == EditorState.HELP:
            self.state = EditorState.NORMAL
            return Redraw.FULL

        if event.key != Key.SAVE:
            self.renderer.status_message = None

        if event.key == Key.CHAR:
            return Redraw.CELL if self._insert_char(event.char) else Redraw.NONE

        handler = self.key_handlers.get(event.key)
        if handler is None:
            return Redraw.NONE

        return handler()

    def _line(self, row: Optional[int] = None) -> str:
        return self.store.get_line(self.cursor.row if row is None else row)

    def _clamp_col(self) -> None:
        self.cursor.col = min(self.cursor.col, len(self._line()))

    def _scroll_to_cursor(self) -> bool:
        """Bring the cursor row into the viewport; True if it scrolled."""

        cursor = self.cursor
        text_rows = self.session.config.text_rows

        if cursor.row < cursor.top_line:
            cursor.top_line = cursor.row
            return True

        if cursor.row >= cursor.top_line + text_rows:
            cursor.top_line = cursor.row - text_rows + 1
            return True

        return False

    def _after_move(self) -> Redraw:
        return Redraw.FULL if self._scroll_to_cursor() else Redraw.CURSOR

    def _move_up(self) -> Redraw:
        if self.cursor.row == 0:
            return Redraw.NONE

        self.cursor.row -= 1
        self._clamp_col()
        return self._after_move()

    def _move_down(self) -> Redraw:
        if self.cursor.row >= self.store.line_count - 1:
            return Redraw.NONE

        self.cursor.row += 1
        self._clamp_col()
        return self._after_move()

    def _move_left(self) -> Redraw:
        if self.cursor.col > 0:
            self.cursor.col -= 1
            return Redraw.CURSOR

        if self.cursor.row == 0:
            return Redraw.NONE

        self.cursor.row -= 1
        self.cursor.col = len(self._line())
        return self._after_move()

    def _move_right(self) -> Redraw:
        if self.cursor.col < len(self._line()):
            self.cursor.col += 1
            return Redraw.CURSOR

        if self.cursor.row >= self.store.line_count - 1:
            return Redraw.NONE

        self.cursor.row += 1
        self.cursor.col = 0
        return self._after_move()

    def _move_line_start(self) -> Redraw:
        self.cursor.col = 0
        return Redraw.CURSOR

    def _move_line_end(self) -> Redraw:
        self.cursor.col = len(self._line())
        return Redraw.CURSOR

    def _page_up(self) -> Redraw:
        cursor = self.cursor
        cursor.row = max(0, cursor.row - self.session.config.text_rows)
        cursor.top_line = cursor.row
        self._clamp_col()
        return Redraw.FULL

    def _page_down(self) -> Redraw:
        cursor = self.cursor
        cursor.row = max(0, min(self.store.line_count - 1, cursor.row + self.session.config.text_rows))
        cursor.top_line = cursor.row
        self._clamp_col()
        return Redraw.FULL

    def _insert_char(self, char: str) -> bool:
        """Insert one character at the cursor; False if the line is full."""

        line = self._line()
        self._clamp_col()

        if len(line) >= self.max_line_length:
            return False

        col = self.cursor.col
        self.store.set_line(self.cursor.row, line[:col] + char + line[col:])
        self.cursor.col += 1
        return True

    def _handle_tab(self) -> Redraw:
        inserted = 0
        for _ in range(self.session.config.tab_width):
            if self._insert_char(' '):
                inserted += 1

        return Redraw.LINE if inserted else Redraw.NONE

    def _handle_enter(self) -> Redraw:
        """Split the cursor line at the cursor."""

        self._clamp_col()
        line = self._line()
        row = self.cursor.row
        col = self.cursor.col

        try:
            self.store.insert_line(row + 1, line[col:])
        except CapacityExceeded:
            logger.debug("Line split ignored: store full")
            return Redraw.NONE

        self.store.set_line(row, line[:col])
        self.cursor.row = row + 1
        self.cursor.col = 0
        self._scroll_to_cursor()
        return Redraw.FULL

    def _join_with_next(self, row: int) -> bool:
        """Append line ``row + 1`` to line ``row``; False if too long."""

        head = self._line(row)
        tail = self._line(row + 1)
        if len(head) + len(tail) > self.max_line_length:
            return False

        self.store.set_line(row, head + tail)
        self.store.close_gap(row + 1, 1)
        return True

    def _backspace(self) -> Redraw:
        self._clamp_col()
        cursor = self.cursor

        if cursor.col > 0:
            line = self._line()
            self.store.set_line(cursor.row, line[:cursor.col - 1] + line[cursor.col:])
            cursor.col -= 1
            return Redraw.LINE

        if cursor.row == 0:
            return Redraw.NONE

        join_col = len(self._line(cursor.row - 1))
        if not self._join_with_next(cursor.row - 1):
            return Redraw.NONE

        cursor.row -= 1
        cursor.col = join_col
        self._scroll_to_cursor()
        return Redraw.FULL

    def _delete_char(self) -> Redraw:
        self._clamp_col()
        cursor = self.cursor
        line = self._line()

        if cursor.col < len(line):
            self.store.set_line(cursor.row, line[:cursor.col] + line[cursor.col + 1:])
            return Redraw.LINE

        if cursor.row + 1 >= self.store.line_count:
            return Redraw.NONE

        return Redraw.FULL if self._join_with_next(cursor.row) else Redraw.NONE

    def _show_help(self) -> Redraw:
        self.state = EditorState.HELP
        self.renderer.draw_help()
        return Redraw.NONE

    def _save(self) -> Redraw:
        """Write the document to the current file, if there is one."""

        if not self.session.filename:
            self.renderer.status_message = "No filename (use W name in line mode)"
            return Redraw.STATUS

        try:
            target, count = self.session.write()
        except IOFailure as e:
            logger.warning("Visual save failed: %s", e)
            self.renderer.status_message = f"Error: {e}"
            return Redraw.STATUS

        self.renderer.status_message = f"Saved {count} line(s) to {target}"
        return Redraw.STATUS

    def _exit(self) -> Redraw:
        self.state = EditorState.EXITING
        return Redraw.NONE


def run_visual(session: EditingSession) -> None:
    """Run the visual editor on the real terminal until it exits."""

    os.environ.setdefault('ESCDELAY', '25')

    def _main(stdscr: 'curses.window') -> None:
        VisualEditor(session, CursesSurface(stdscr)).run()

    curses.wrapper(_main)
