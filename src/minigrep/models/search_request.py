"""
Search request and result data models for minigrep.

A SearchRequest pairs a query with the text to search; executing it produces
a SearchResult holding the matching lines in source order.
"""

from typing import Iterator, List
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..tools.line_search import (
    iter_lines,
    iter_search,
    iter_search_case_insensitive,
)


class SearchResult(BaseModel):
    """
    Ordered lines of a source text that contain a query.

    Lines are copies of the source slices, so the result does not depend on
    the request or its text staying alive.

    Attributes:
        query: The query the lines were matched against
        lines: Matching lines, in the order they appear in the source
        ignore_case: Whether matching ignored case
        total_lines: Number of lines in the searched text
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., description="Query the lines were matched against")
    lines: List[str] = Field(default_factory=list, description="Matching lines in source order")
    ignore_case: bool = Field(False, description="Whether matching ignored case")
    total_lines: int = Field(0, ge=0, description="Number of lines in the searched text")

    @model_validator(mode='after')
    def validate_lines(self):
        """Every line must contain the query and there cannot be more matches than lines."""
        if len(self.lines) > self.total_lines:
            raise ValueError("Result has more lines than the searched text")

        if self.ignore_case:
            needle = self.query.casefold()
            misses = [line for line in self.lines if needle not in line.casefold()]
        else:
            misses = [line for line in self.lines if self.query not in line]

        if misses:
            raise ValueError(f"Line does not contain query '{self.query}': {misses[0]!r}")

        return self

    def __len__(self) -> int:
        return len(self.lines)

    def is_empty(self) -> bool:
        """Check if no line matched."""
        return not self.lines

    def __str__(self) -> str:
        return f"Query: '{self.query}' | Matches: {len(self.lines)} of {self.total_lines} lines"


class SearchRequest(BaseModel):
    """
    A query together with the full text it is run against.

    Attributes:
        query: Literal text to look for; an empty query matches every line
        source_text: Complete text to search
        ignore_case: Whether to match case-insensitively
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., description="Literal query string")
    source_text: str = Field(..., description="Complete text to search")
    ignore_case: bool = Field(False, description="Use case-insensitive matching")

    def iter_matches(self) -> Iterator[str]:
        """Return a fresh lazy iterator over the matching lines."""
        if self.ignore_case:
            return iter_search_case_insensitive(self.query, self.source_text)
        return iter_search(self.query, self.source_text)

    def execute(self) -> SearchResult:
        """Run the search and collect the matches into a SearchResult."""
        total_lines = sum(1 for _ in iter_lines(self.source_text))
        return SearchResult(
            query=self.query,
            lines=list(self.iter_matches()),
            ignore_case=self.ignore_case,
            total_lines=total_lines,
        )
