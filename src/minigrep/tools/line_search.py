"""
Line search engine for minigrep.

This module filters the lines of already-loaded text, keeping every line that
contains a query as a literal substring. It performs no I/O and holds no state,
so each call is independent of every other call.

Line splitting: a line ends at ``\\n``, and a ``\\r`` directly before that
``\\n`` is dropped as well. A bare ``\\r`` is ordinary text. The last line is
included even without a terminator, and a trailing terminator does not add an
empty line.
"""

from typing import Iterator, List


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yield the lines of ``contents`` with their terminators removed.

    Args:
        contents: Full text to split

    Yields:
        Each line in source order
    """
    start = 0
    length = len(contents)

    while start < length:
        end = contents.find("\n", start)
        if end == -1:
            yield contents[start:]
            return

        line = contents[start:end]
        if line.endswith("\r"):
            line = line[:-1]
        yield line
        start = end + 1


def iter_search(query: str, contents: str) -> Iterator[str]:
    """Lazily yield the lines of ``contents`` that contain ``query``."""
    for line in iter_lines(contents):
        if query in line:
            yield line


def search(query: str, contents: str) -> List[str]:
    """
    Return every line of ``contents`` containing ``query``, in source order.

    Matching is case-sensitive and code-point exact. An empty query matches
    every line; empty contents produce an empty list.

    Args:
        query: Literal text to look for
        contents: Full text to search

    Returns:
        Matching lines in the order they appear
    """
    return list(iter_search(query, contents))


def iter_search_case_insensitive(query: str, contents: str) -> Iterator[str]:
    """Lazily yield lines containing ``query`` after casefolding both sides."""
    folded_query = query.casefold()
    for line in iter_lines(contents):
        if folded_query in line.casefold():
            yield line


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Return every line of ``contents`` containing ``query``, ignoring case.

    Both sides are compared with ``str.casefold``; the returned lines keep
    their original casing.

    Args:
        query: Text to look for
        contents: Full text to search

    Returns:
        Matching lines in the order they appear
    """
    return list(iter_search_case_insensitive(query, contents))
