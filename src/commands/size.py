"""Size reporting for the dirsize CLI."""

import logging
from dataclasses import dataclass
from typing import Iterable

import click

from utils.filesystem import get_dir_size
from utils.formatting import format_size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SizeOptions:
    """Settings shared by every measurement in a single run."""

    human_readable: bool = False
    recursive: bool = False


def report_sizes(paths: Iterable[str], options: SizeOptions) -> int:
    """Print the size of each path followed by the cumulative total.

    Paths that fail to measure are reported on stderr and contribute
    nothing to the total.

    Returns:
        int: The cumulative size in bytes.
    """
    cumulative_size = 0

    for path in paths:
        try:
            size = get_dir_size(path, recursive=options.recursive)
        except OSError as e:
            click.echo(f"Error processing directory {path}: {e}", err=True)
            continue

        cumulative_size += size
        click.echo(f"{path}: {format_size(size, options.human_readable)}")

    logger.debug("Measured cumulative size of %d bytes", cumulative_size)
    click.echo(f"Total: {format_size(cumulative_size, options.human_readable)}")
    return cumulative_size
