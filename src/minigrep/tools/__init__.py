"""
Search tools for minigrep.

This module contains the line search engine and the file-reading collaborator
that feeds it.
"""

from .line_search import (
    iter_lines,
    iter_search,
    iter_search_case_insensitive,
    search,
    search_case_insensitive,
)
from .source_reader import FileReadError, read_source

__all__ = [
    'iter_lines',
    'iter_search',
    'iter_search_case_insensitive',
    'search',
    'search_case_insensitive',
    'FileReadError',
    'read_source',
]
