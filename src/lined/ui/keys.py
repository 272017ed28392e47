"""
Key decoding: curses key codes to editor key events.
"""

import curses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Final


class Key(Enum):
    """Keys the visual editor reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    TAB = auto()
    ENTER = auto()
    BACKSPACE = auto()
    DELETE = auto()
    HELP = auto()
    SAVE = auto()
    EXIT = auto()
    CHAR = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press; ``char`` is set for printable bytes only."""

    key: Key
    char: str = ''


KEY_BINDINGS: Final[Dict[int, Key]] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_PPAGE: Key.PAGE_UP,
    curses.KEY_NPAGE: Key.PAGE_DOWN,

    ord('\t'): Key.TAB,
    ord('\n'): Key.ENTER,
    ord('\r'): Key.ENTER,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    8: Key.BACKSPACE,  # Ctrl + H
    127: Key.BACKSPACE,
    curses.KEY_DC: Key.DELETE,

    curses.KEY_F1: Key.HELP,
    curses.KEY_F2: Key.SAVE,
    curses.KEY_F10: Key.EXIT,
    27: Key.EXIT,  # Escape
}


def is_printable(ch: int) -> bool:
    return 32 <= ch < 127


def decode_key(ch: int) -> KeyEvent:
    """Classify a key code returned by ``getch``."""

    if ch in KEY_BINDINGS:
        return KeyEvent(KEY_BINDINGS[ch])

    if is_printable(ch):
        return KeyEvent(Key.CHAR, chr(ch))

    return KeyEvent(Key.UNKNOWN)
