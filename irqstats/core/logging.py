"""JSONL logging for plugin runs."""

import json
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any


PLUGIN_NAME = "irqstats"


def get_log_path(base_path: Path, plugin_name: str = PLUGIN_NAME) -> Path:
    """
    Get the log file path for a plugin.

    Args:
        base_path: Base directory for logs
        plugin_name: Name of the plugin

    Returns:
        Path to the log file: {base}/{date}/{plugin}.jsonl
    """
    today = date.today().isoformat()
    return base_path / today / f"{plugin_name}.jsonl"


class PluginLogger:
    """
    JSONL logger for plugin runs.

    Writes structured log entries to a JSONL file. With no log path every
    call is a no-op.
    """

    def __init__(self, log_path: Path | None = None, plugin_name: str = PLUGIN_NAME):
        """
        Initialize logger.

        Args:
            log_path: Path to log file (None disables logging)
            plugin_name: Name recorded in each entry
        """
        self.plugin_name = plugin_name
        self.log_path = log_path
        self._file = None

    @classmethod
    def for_dir(cls, log_dir: Path | None, plugin_name: str = PLUGIN_NAME) -> "PluginLogger":
        """Create a logger writing under log_dir, or a disabled one."""
        if log_dir is None:
            return cls(None, plugin_name)
        return cls(get_log_path(log_dir, plugin_name), plugin_name)

    @property
    def enabled(self) -> bool:
        return self.log_path is not None

    def open(self) -> None:
        """
        Open the log file if logging is enabled.

        Raises:
            OSError: If the log directory or file can't be created
        """
        if self.enabled and self._file is None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.log_path, "a")

    def _log(self, level: str, message: str, **extra: Any) -> None:
        """Write a log entry."""
        if not self.enabled:
            return
        self.open()
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "plugin": self.plugin_name,
            "message": message,
            **extra,
        }
        self._file.write(json.dumps(entry) + "\n")
        self._file.flush()

    def debug(self, message: str, **extra: Any) -> None:
        """Log debug message."""
        self._log("debug", message, **extra)

    def info(self, message: str, **extra: Any) -> None:
        """Log info message."""
        self._log("info", message, **extra)

    def warning(self, message: str, **extra: Any) -> None:
        """Log warning message."""
        self._log("warning", message, **extra)

    def error(self, message: str, **extra: Any) -> None:
        """Log error message."""
        self._log("error", message, **extra)

    def close(self) -> None:
        """Close the log file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "PluginLogger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
