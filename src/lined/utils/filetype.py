"""
File type labels for the visual editor status bar, backed by Pygments.
"""

import os
from typing import Dict, Final, Optional

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

LEGACY_FILE_TYPES: Final[Dict[str, str]] = {
    'for': 'FORTRAN source file',
    'ftn': 'FORTRAN source file',
    'f77': 'FORTRAN source file',
    'f': 'FORTRAN source file',
    'f90': 'FORTRAN source file',
    'f95': 'FORTRAN source file',
    'asm': 'ASSEMBLER source file',
    's': 'ASSEMBLER source file',
    'sub': 'SUBROUTINE source file',
    'sbr': 'SUBROUTINE source file',
    'c': 'C source file',
    'h': 'C header file',
    'cpp': 'C++ source file',
    'cxx': 'C++ source file',
    'cc': 'C++ source file',
    'hpp': 'C++ header file',
    'hxx': 'C++ header file',
    'pas': 'PASCAL source file',
    'bas': 'BASIC source file',
    'cob': 'COBOL source file',
    'cbl': 'COBOL source file',
    'pli': 'PL/I source file',
    'pl1': 'PL/I source file',
    'plm': 'PL/M source file',
    'alg': 'ALGOL source file',
    'algol': 'ALGOL source file',
    'bat': 'DOS batch file',
    'cmd': 'Command script',
    'txt': 'Text file',
    'doc': 'Document file',
    'md': 'Markdown file',
    'dat': 'Data file',
    'ini': 'Configuration file',
    'cfg': 'Configuration file',
    'hex': 'Intel HEX file',
    'bin': 'Binary file',
    'com': 'DOS executable',
    'exe': 'DOS executable',
    'obj': 'Object file',
    'lib': 'Library file',
    'mak': 'Makefile',
}


def _extension(filename: str) -> Optional[str]:
    _, ext = os.path.splitext(filename)
    if not ext or ext == '.':
        return None

    return ext[1:].lower()


def describe_file_type(filename: Optional[str]) -> str:
    """
    Describe a file by its name.

    Args:
        filename: The name of the file, may be None for an unnamed document

    Returns:
        A short label such as ``"C source file"``, or an empty string
    """

    if not filename:
        return ""

    ext = _extension(filename)
    if ext is not None and ext in LEGACY_FILE_TYPES:
        return LEGACY_FILE_TYPES[ext]

    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        return ""

    return f"{lexer.name} source file"
