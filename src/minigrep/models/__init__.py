"""
Data models for minigrep.

This module contains the core data structures used throughout the tool.
"""

from .config import Config, ConfigError, MissingQuery, MissingFilePath
from .search_request import SearchRequest, SearchResult

__all__ = [
    'Config',
    'ConfigError',
    'MissingQuery',
    'MissingFilePath',
    'SearchRequest',
    'SearchResult',
]
