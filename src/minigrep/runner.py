"""
Search orchestration for minigrep.

Ties a resolved Config to the file reader, the search engine and an output
sink. The reader and sink are injectable so callers and tests can swap the
filesystem and the console for their own collaborators.
"""

import logging
from typing import Callable, Optional

import click

from .models.config import Config
from .models.search_request import SearchRequest, SearchResult
from .tools.source_reader import read_source


logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Sink = Callable[[str], None]


def run(config: Config, reader: Reader = read_source, sink: Optional[Sink] = None) -> SearchResult:
    """
    Search the file named by ``config`` and emit each matching line.

    Args:
        config: Resolved query and file path
        reader: Returns the complete text of a file path
        sink: Receives each matching line in order; defaults to stdout

    Returns:
        The SearchResult that was emitted

    Raises:
        FileReadError: Propagated unchanged from the default reader
    """
    if sink is None:
        sink = click.echo

    logger.debug(f"Running search: {config}")
    contents = reader(config.file_path)

    request = SearchRequest(
        query=config.query,
        source_text=contents,
        ignore_case=config.ignore_case,
    )
    result = request.execute()

    for line in result.lines:
        sink(line)

    logger.info(f"Search complete for {config.file_path}: {result}")
    return result
