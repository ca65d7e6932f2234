"""
Command-line interface for minigrep.

Usage:
    $ minigrep <query> <file_path>
    $ minigrep --ignore-case <query> <file_path>
    $ minigrep -- <query> <file_path>

Matching lines are printed to stdout in file order. Options are only
recognised before the query; use ``--`` to search for text that looks like an
option, e.g. ``minigrep -- -v notes.txt``. Exit status is 1 when the
arguments cannot be resolved or the file cannot be read.
"""

from typing import Tuple

import click

from .logging_config import setup_logging
from .models.config import Config, ConfigError
from .runner import run
from .tools.source_reader import FileReadError


@click.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.option("-i", "--ignore-case", is_flag=True, help="Match the query regardless of case")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, ignore_case: bool, verbose: bool, args: Tuple[str, ...]) -> None:
    """Print the lines of FILE_PATH that contain QUERY.

    ARGS are QUERY followed by FILE_PATH.
    """
    setup_logging(verbose)

    try:
        config = Config.build([ctx.info_name or "minigrep", *args], ignore_case=ignore_case)
    except ConfigError as e:
        click.echo(f"Problem parsing arguments: {e}", err=True)
        ctx.exit(1)

    try:
        run(config)
    except FileReadError as e:
        click.echo(f"Application error: {e}", err=True)
        ctx.exit(1)
