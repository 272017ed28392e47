"""
Core package for the line editor.

This package implements the document engine shared by both front-ends: the
bounded LineStore, the range resolver, the substitution engine, the editing
session and the line commands that compose them.
"""

from .config import EditorConfig
from .errors import (
    AllocationFailure,
    CapacityExceeded,
    IOFailure,
    LinedError,
    MalformedRange,
    MalformedSubstitution,
    OutOfRangeLine,
)
from .buffer import LineStore
from .ranges import Range, parse_range, to_range_defaults
from .substitute import Substitution, parse_substitution, replace_in_line
from .session import Cursor, EditingSession
from .commands import LineCommands

__all__ = [
    'EditorConfig',
    'LinedError',
    'CapacityExceeded',
    'AllocationFailure',
    'MalformedRange',
    'MalformedSubstitution',
    'OutOfRangeLine',
    'IOFailure',
    'LineStore',
    'Range',
    'parse_range',
    'to_range_defaults',
    'Substitution',
    'parse_substitution',
    'replace_in_line',
    'Cursor',
    'EditingSession',
    'LineCommands',
]
