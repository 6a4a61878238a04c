"""
Command line interface for dirsize.

This module provides the CLI entry point that reports the size of the
given files and directories.
"""

import logging

import click

from commands.size import SizeOptions, report_sizes

__version__ = "0.1.0"


@click.command(context_settings={"auto_envvar_prefix": "DIRSIZE"})
@click.option(
    "--human",
    "-H",
    is_flag=True,
    help="Display sizes in human-readable format (e.g., 1.0 KB, 234.5 MB, 2.0 GB)",
)
@click.option(
    "--recursive",
    "-r",
    is_flag=True,
    help="Recursively include the sizes of subdirectories",
)
@click.option("--verbose", "-v", is_flag=True, help="Log traversal details to stderr")
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.version_option(version=__version__, prog_name="dirsize")
def cli(human, recursive, verbose, paths):
    """Report the size of files and directories.

    Prints the size of each PATH followed by the total of all of them.
    By default only the files directly inside a directory are counted;
    use --recursive to include its subdirectories.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = SizeOptions(human_readable=human, recursive=recursive)
    report_sizes(paths, options)
