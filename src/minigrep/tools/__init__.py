"""
Search tools for minigrep.

This module contains the line scanners and the runner that loads a file,
dispatches to a scanner and writes matching lines.
"""

from .searcher import (
    LineSearcher,
    SearchError,
    SourceNotFoundError,
    InvalidEncodingError,
    iter_lines,
    read_contents,
    search,
    search_case_insensitive,
    run
)

__all__ = [
    'LineSearcher',
    'SearchError',
    'SourceNotFoundError',
    'InvalidEncodingError',
    'iter_lines',
    'read_contents',
    'search',
    'search_case_insensitive',
    'run'
]
