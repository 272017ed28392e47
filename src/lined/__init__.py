"""
LINED: an EDLIN-style line editor with a fullscreen visual mode.
"""

__version__ = "0.1.0"
