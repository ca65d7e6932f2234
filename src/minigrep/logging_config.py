"""Logging configuration for minigrep."""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure application-wide logging.

    Level is DEBUG when verbose is True, otherwise WARNING.
    Output goes to stderr so stdout carries only matched lines.
    Any handlers already on the root logger are replaced.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
