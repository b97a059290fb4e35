"""Collected plugin output."""

import sys


class Output:
    """Helper for plugin output: stdout lines plus stderr diagnostics."""

    def __init__(self):
        self.lines: list[str] = []
        self.errors: list[str] = []
        self._summary: str | None = None
        self._printed: bool = False

    def line(self, text: str = "") -> None:
        """Append a line for stdout."""
        self.lines.append(text)

    def error(self, message: str) -> None:
        """Record an error message."""
        self.errors.append(message)

    def set_summary(self, summary: str) -> None:
        """Set a one-line summary."""
        self._summary = summary

    @property
    def summary(self) -> str:
        """Get summary or generate from errors."""
        if self._summary:
            return self._summary
        if self.errors:
            return f"Error: {self.errors[0]}"
        return "ok"

    def to_plain(self) -> str:
        """Return stdout lines as text."""
        return "".join(f"{line}\n" for line in self.lines)

    def render(self) -> None:
        """Print lines to stdout and errors to stderr, once."""
        if self._printed:
            return
        self._printed = True

        sys.stdout.write(self.to_plain())
        for message in self.errors:
            print(message, file=sys.stderr)
