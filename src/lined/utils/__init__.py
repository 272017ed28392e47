"""
Utility package for line editor support functions.
"""

from .filetype import describe_file_type
from .logging_config import setup_logging
from .search import SearchEngine, SearchResult, find_caseless, fold_case

__all__ = [
    'describe_file_type',
    'setup_logging',
    'SearchEngine',
    'SearchResult',
    'find_caseless',
    'fold_case',
]
