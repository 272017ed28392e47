"""
Terminal surface abstraction for the visual editor.

The renderer only needs to clear the screen, write a run of cells, move the
cursor and switch between normal and reverse video. ``CursesSurface``
provides those on top of a curses window.
"""

import curses
from abc import ABC, abstractmethod
from enum import Enum


class Attr(Enum):
    """Cell attributes used by the renderer."""

    NORMAL = 0
    REVERSE = 1


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y < 0 or x < 0 or y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


class Surface(ABC):
    """Minimal screen interface driven by the renderer."""

    @abstractmethod
    def clear(self) -> None:
        """Blank the whole screen."""

    @abstractmethod
    def write(self, row: int, col: int, text: str) -> None:
        """Write ``text`` starting at ``(row, col)`` with the current attribute."""

    @abstractmethod
    def move_cursor(self, row: int, col: int) -> None:
        """Place the hardware cursor."""

    @abstractmethod
    def set_attribute(self, attr: Attr) -> None:
        """Select the attribute used by following writes."""

    @abstractmethod
    def refresh(self) -> None:
        """Push pending output to the terminal."""

    @abstractmethod
    def read_key(self) -> int:
        """Block until a key is pressed and return its code."""


class CursesSurface(Surface):
    """Surface backed by a curses window."""

    ATTRIBUTES = {
        Attr.NORMAL: curses.A_NORMAL,
        Attr.REVERSE: curses.A_REVERSE,
    }

    def __init__(self, stdscr: 'curses.window') -> None:
        self.stdscr = stdscr
        self.attr = curses.A_NORMAL
        self.stdscr.keypad(True)

    def clear(self) -> None:
        self.stdscr.erase()

    def write(self, row: int, col: int, text: str) -> None:
        safe_addstr(self.stdscr, row, col, text, self.attr)

    def move_cursor(self, row: int, col: int) -> None:
        height, width = self.stdscr.getmaxyx()
        try:
            self.stdscr.move(min(row, height - 1), min(col, width - 1))
        except curses.error:
            pass

    def set_attribute(self, attr: Attr) -> None:
        self.attr = self.ATTRIBUTES[attr]

    def refresh(self) -> None:
        self.stdscr.refresh()

    def read_key(self) -> int:
        return self.stdscr.getch()
