"""Shared fixtures: sessions with small bounds and a recording surface."""

import io
from typing import Iterable, List, Optional, Tuple

import pytest

from lined.core.commands import LineCommands
from lined.core.config import EditorConfig
from lined.core.session import EditingSession
from lined.ui.input_handler import VisualEditor
from lined.ui.terminal import Attr, Surface


class RecordingSurface(Surface):
    """Surface that keeps a character grid and a log of every call."""

    def __init__(self, rows: int = 24, cols: int = 80, keys: Optional[Iterable[int]] = None):
        self.rows = rows
        self.cols = cols
        self.grid = [[' '] * cols for _ in range(rows)]
        self.calls: List[Tuple] = []
        self.cursor = (0, 0)
        self.attr = Attr.NORMAL
        self.keys = list(keys or [])

    def clear(self) -> None:
        self.calls.append(('clear',))
        self.grid = [[' '] * self.cols for _ in range(self.rows)]

    def write(self, row: int, col: int, text: str) -> None:
        self.calls.append(('write', row, col, text, self.attr))
        if not 0 <= row < self.rows:
            return
        for offset, char in enumerate(text):
            if 0 <= col + offset < self.cols:
                self.grid[row][col + offset] = char

    def move_cursor(self, row: int, col: int) -> None:
        self.calls.append(('move', row, col))
        self.cursor = (row, col)

    def set_attribute(self, attr: Attr) -> None:
        self.calls.append(('attr', attr))
        self.attr = attr

    def refresh(self) -> None:
        self.calls.append(('refresh',))

    def read_key(self) -> int:
        return self.keys.pop(0)

    def row_text(self, row: int) -> str:
        return ''.join(self.grid[row]).rstrip()

    def writes(self) -> List[Tuple]:
        return [call for call in self.calls if call[0] == 'write']

    def cleared(self) -> bool:
        return ('clear',) in self.calls

    def reset_calls(self) -> None:
        self.calls = []


def _new_session(lines: Iterable[str] = (), **config) -> EditingSession:
    session = EditingSession(EditorConfig(**config))
    session.store.load(lines)
    return session


@pytest.fixture
def make_session():
    """Build a session holding ``lines`` with config overrides."""

    return _new_session


@pytest.fixture
def make_commands():
    """Build LineCommands over in-memory streams; returns (commands, session, out)."""

    def factory(lines: Iterable[str] = (), input_text: str = '', **config):
        session = _new_session(lines, **config)
        out = io.StringIO()
        return LineCommands(session, io.StringIO(input_text), out), session, out

    return factory


@pytest.fixture
def make_editor():
    """Build a VisualEditor on a RecordingSurface sized like the config."""

    def factory(lines: Iterable[str] = ('',), **config):
        session = _new_session(lines, **config)
        surface = RecordingSurface(session.config.screen_rows, session.config.screen_cols)
        editor = VisualEditor(session, surface)
        editor.enter()
        return editor, session, surface

    return factory
