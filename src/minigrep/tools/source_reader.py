"""
Source file reader for minigrep.

Loads the complete text of the file named in a Config so the search engine
can work on already-materialized text.
"""

import logging
from pathlib import Path
from typing import Union


logger = logging.getLogger(__name__)


class FileReadError(Exception):
    """
    Raised when a source file cannot be opened, read or decoded.

    Attributes:
        path: The file that failed to load
        reason: Human-readable description of the failure
    """

    def __init__(self, path: Path, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason


def read_source(file_path: Union[str, Path], encoding: str = 'utf-8') -> str:
    """
    Read the full text of a file.

    Newlines are not translated, so ``\\r\\n`` and bare ``\\r`` reach the
    search engine exactly as stored on disk.

    Args:
        file_path: Path to the file to read
        encoding: Text encoding of the file

    Returns:
        The complete file contents

    Raises:
        FileReadError: If the file cannot be read or is not valid text in ``encoding``
    """
    path = Path(file_path)

    try:
        with open(path, 'r', encoding=encoding, newline='') as f:
            contents = f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(path, f"{path} is not valid {encoding} text: {e.reason}") from e
    except OSError as e:
        raise FileReadError(path, str(e)) from e

    logger.debug(f"Read {len(contents)} characters from {path}")
    return contents
