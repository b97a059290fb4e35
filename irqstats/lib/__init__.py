"""Shared utility library for irqstats."""

from irqstats.lib.filesystem import FileError, check_readable, read_file

__all__ = [
    "FileError",
    "check_readable",
    "read_file",
]
