"""Tests for logging module."""

import json
from datetime import date

import pytest

from irqstats.core.logging import PluginLogger, get_log_path


class TestGetLogPath:
    """Tests for get_log_path function."""

    def test_returns_path_with_date_and_plugin(self, tmp_path):
        """Returns path in format {base}/{date}/{plugin}.jsonl."""
        path = get_log_path(tmp_path)

        today = date.today().isoformat()
        assert path == tmp_path / today / "irqstats.jsonl"

    def test_custom_plugin_name(self, tmp_path):
        """Accepts a custom plugin name."""
        path = get_log_path(tmp_path, "irqstats_test")

        assert path.name == "irqstats_test.jsonl"


class TestPluginLogger:
    """Tests for PluginLogger class."""

    def test_logs_to_file(self, tmp_path):
        """Writes log entries to JSONL file."""
        log_path = tmp_path / "test.jsonl"
        logger = PluginLogger(log_path)

        logger.info("Test message")
        logger.close()

        entry = json.loads(log_path.read_text().strip())
        assert entry["level"] == "info"
        assert entry["message"] == "Test message"
        assert entry["plugin"] == "irqstats"

    def test_logs_multiple_levels(self, tmp_path):
        """Logs debug, info, warning, error levels."""
        log_path = tmp_path / "test.jsonl"
        logger = PluginLogger(log_path)

        logger.debug("Debug msg")
        logger.info("Info msg")
        logger.warning("Warning msg")
        logger.error("Error msg")
        logger.close()

        lines = log_path.read_text().strip().split("\n")
        levels = [json.loads(line)["level"] for line in lines]
        assert levels == ["debug", "info", "warning", "error"]

    def test_logs_include_timestamp(self, tmp_path):
        """Log entries include timestamp."""
        log_path = tmp_path / "test.jsonl"
        logger = PluginLogger(log_path)

        logger.info("Test")
        logger.close()

        entry = json.loads(log_path.read_text().strip())
        assert "T" in entry["timestamp"]  # ISO format

    def test_logs_extra_data(self, tmp_path):
        """Log entries can include extra data."""
        log_path = tmp_path / "test.jsonl"

        with PluginLogger(log_path) as logger:
            logger.error("parse failed", mode="config", error="NoCounters")

        entry = json.loads(log_path.read_text().strip())
        assert entry["mode"] == "config"
        assert entry["error"] == "NoCounters"

    def test_for_dir_creates_dated_file(self, tmp_path):
        """for_dir() logs under {dir}/{date}/."""
        with PluginLogger.for_dir(tmp_path) as logger:
            logger.info("fetch", interrupts=3)

        assert get_log_path(tmp_path).exists()

    def test_open_raises_for_unwritable_dir(self, tmp_path):
        """open() reports a log directory that can't be created."""
        blocker = tmp_path / "file"
        blocker.write_text("")
        logger = PluginLogger.for_dir(blocker / "logs")

        with pytest.raises(OSError):
            logger.open()

    def test_disabled_without_path(self, tmp_path, monkeypatch):
        """No log directory means nothing is written."""
        monkeypatch.chdir(tmp_path)

        with PluginLogger.for_dir(None) as logger:
            logger.info("ignored")

        assert logger.enabled is False
        assert list(tmp_path.iterdir()) == []
