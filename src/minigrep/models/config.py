"""
Configuration data model for minigrep.

This module defines the immutable configuration resolved from command-line
arguments, together with the errors raised when required arguments are absent.
"""

from typing import Iterable, Optional
from pydantic import BaseModel, ConfigDict, Field


class ConfigError(Exception):
    """Raised when a configuration cannot be resolved from the given arguments."""
    pass


class MissingQuery(ConfigError):
    """Raised when no query string follows the program name."""

    def __init__(self, message: str = "Didn't get a query string"):
        super().__init__(message)


class MissingFilePath(ConfigError):
    """Raised when no file path follows the query string."""

    def __init__(self, message: str = "Didn't get a file path"):
        super().__init__(message)


class Config(BaseModel):
    """
    Resolved search configuration.

    Built once from raw external input and never mutated afterwards.
    No validation beyond presence is performed; in particular the file path
    is not checked for existence here.

    Attributes:
        query: Literal text to look for in each line
        file_path: Path of the file whose lines are searched
        ignore_case: Whether to use case-insensitive matching
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., description="Literal query string")
    file_path: str = Field(..., description="Path of the file to search")
    ignore_case: bool = Field(False, description="Use case-insensitive matching")

    @classmethod
    def build(cls, args: Iterable[str], ignore_case: bool = False) -> 'Config':
        """
        Resolve a configuration from a positional argument sequence.

        The first element is the invoking program name and is skipped. The
        second becomes the query and the third the file path; anything after
        that is ignored.

        Args:
            args: Ordered argument strings, program name first
            ignore_case: Whether the resulting configuration matches case-insensitively

        Returns:
            The resolved Config

        Raises:
            MissingQuery: If there is no second element
            MissingFilePath: If there is no third element
        """
        remaining = iter(args)
        next(remaining, None)

        query: Optional[str] = next(remaining, None)
        if query is None:
            raise MissingQuery()

        file_path: Optional[str] = next(remaining, None)
        if file_path is None:
            raise MissingFilePath()

        return cls(query=query, file_path=file_path, ignore_case=ignore_case)

    def __str__(self) -> str:
        """String representation of the configuration."""
        mode = "case-insensitive" if self.ignore_case else "case-sensitive"
        return f"Query: '{self.query}' | File: {self.file_path} | Mode: {mode}"
