"""
UI package for the line editor front-ends.

This package implements the two command surfaces over the shared editing
session: the line-numbered Repl and the fullscreen VisualEditor, together with
the ScreenRenderer and the terminal Surface it paints on.
"""

from .keys import Key, KeyEvent, decode_key
from .terminal import Attr, CursesSurface, Surface
from .window import Redraw, ScreenRenderer
from .input_handler import EditorState, VisualEditor, run_visual
from .repl import Repl

__all__ = [
    'Key',
    'KeyEvent',
    'decode_key',
    'Attr',
    'CursesSurface',
    'Surface',
    'Redraw',
    'ScreenRenderer',
    'EditorState',
    'VisualEditor',
    'run_visual',
    'Repl',
]
