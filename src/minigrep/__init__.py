"""
minigrep - Core Package

A small command-line search tool that prints every line of a file
containing a literal query string, in the order the lines appear.
"""

from .models.config import Config, ConfigError, MissingQuery, MissingFilePath
from .tools.line_search import search, search_case_insensitive

__version__ = "0.1.0"
__author__ = "minigrep Team"

__all__ = [
    'Config',
    'ConfigError',
    'MissingQuery',
    'MissingFilePath',
    'search',
    'search_case_insensitive',
]
