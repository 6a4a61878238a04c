"""Command modules for the dirsize CLI."""

from . import size

__all__ = [
    'size',
]
