"""Execution context for testability."""

import os
import platform
from pathlib import Path


class Context:
    """
    Wraps file and platform access for testability.

    In production: reads the real files
    In tests: can be replaced with MockContext
    """

    def read_file(self, path: str) -> str:
        """Read file contents, replacing bytes that aren't valid UTF-8."""
        return Path(path).read_text(errors="replace")

    def file_exists(self, path: str) -> bool:
        """Check if file exists."""
        return Path(path).exists()

    def check_readable(self, path: str) -> None:
        """
        Open a file for reading without consuming it.

        Raises:
            OSError: If the file cannot be opened
        """
        with open(path):
            pass

    def get_env(self, key: str, default: str | None = None) -> str | None:
        """Get environment variable."""
        return os.environ.get(key, default)

    def machine(self) -> str:
        """Get the machine architecture name (e.g. x86_64, sparc64)."""
        return platform.machine()
