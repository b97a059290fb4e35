"""Filesystem utilities."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from irqstats.core.context import Context


class FileError(Exception):
    """Error accessing a file."""

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.reason = reason


def _reason(e: OSError) -> str:
    return e.strerror or str(e)


def read_file(
    path: str,
    context: "Context | None" = None,
) -> str:
    """
    Read file contents.

    Args:
        path: Path to file
        context: Execution context (for testing)

    Returns:
        File contents

    Raises:
        FileError: If file can't be read
    """
    if context is None:
        from irqstats.core.context import Context
        context = Context()

    try:
        return context.read_file(path)
    except OSError as e:
        raise FileError(f"Unable to read {path}: {_reason(e)}", reason=_reason(e)) from e


def check_readable(
    path: str,
    context: "Context | None" = None,
) -> str | None:
    """
    Check whether a file can be opened for reading.

    Args:
        path: Path to check
        context: Execution context (for testing)

    Returns:
        None if readable, otherwise the reason it isn't
    """
    if context is None:
        from irqstats.core.context import Context
        context = Context()

    try:
        context.check_readable(path)
    except OSError as e:
        return _reason(e)
    return None
