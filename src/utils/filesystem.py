"""Filesystem traversal used to measure apparent sizes."""

import logging
import os
import stat
from typing import Iterator, Tuple

logger = logging.getLogger(__name__)


def _raise(error: OSError):
    raise error


def iter_entries(
    path: str, recursive: bool = False
) -> Iterator[Tuple[str, os.stat_result]]:
    """Yield ``(entry_path, stat_result)`` for every entry under ``path``.

    The root comes first. Entries are stat'ed with ``os.lstat`` so symlinks
    are reported as themselves and never followed. Subdirectories of the root
    are yielded but only descended into when ``recursive`` is set.

    Raises:
        OSError: As soon as any entry cannot be listed or stat'ed.
    """
    root_stat = os.lstat(path)
    yield path, root_stat
    if not stat.S_ISDIR(root_stat.st_mode):
        return

    for dirpath, dirnames, filenames in os.walk(path, topdown=True, onerror=_raise):
        for name in dirnames + filenames:
            entry_path = os.path.join(dirpath, name)
            yield entry_path, os.lstat(entry_path)

        if not recursive:
            if dirnames:
                logger.debug(
                    "Not descending into %d subdirectories of %s", len(dirnames), dirpath
                )
            dirnames[:] = []


def get_dir_size(path: str, recursive: bool = False) -> int:
    """Calculate the total apparent size of a file or directory.

    Args:
        path: File or directory to measure.
        recursive: Descend into subdirectories instead of only counting the
            files directly inside ``path``.

    Returns:
        int: Total size in bytes. Directories themselves contribute nothing.

    Raises:
        OSError: If any entry could not be read; no partial total is returned.
    """
    total_size = 0
    try:
        for _, info in iter_entries(path, recursive):
            if not stat.S_ISDIR(info.st_mode):
                total_size += info.st_size
    except OSError as e:
        logger.debug("Measuring %s failed: %s", path, e)
        raise
    return total_size
