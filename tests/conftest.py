"""Shared test fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path for package imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class MockContext:
    """Mock Context for testing without real system access."""

    def __init__(
        self,
        file_contents: dict[str, str] | None = None,
        read_errors: dict[str, OSError] | None = None,
        env: dict[str, str] | None = None,
        machine: str = "x86_64",
    ):
        self.file_contents = file_contents or {}
        self.read_errors = read_errors or {}
        self.env = env or {}
        self._machine = machine
        self.files_read: list[str] = []

    def read_file(self, path: str) -> str:
        """Return mocked file content."""
        self.files_read.append(path)
        if path in self.read_errors:
            raise self.read_errors[path]
        if path not in self.file_contents:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.file_contents[path]

    def file_exists(self, path: str) -> bool:
        """Check if path is in mocked files."""
        return path in self.file_contents or path in self.read_errors

    def check_readable(self, path: str) -> None:
        """Raise the mocked error if the file isn't readable."""
        if path in self.read_errors:
            raise self.read_errors[path]
        if path not in self.file_contents:
            raise FileNotFoundError(2, "No such file or directory", path)

    def get_env(self, key: str, default: str | None = None) -> str | None:
        """Return mocked environment variable."""
        return self.env.get(key, default)

    def machine(self) -> str:
        """Return mocked machine name."""
        return self._machine


@pytest.fixture
def mock_context():
    """Factory fixture for creating MockContext instances."""
    def _create(**kwargs) -> MockContext:
        return MockContext(**kwargs)
    return _create


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return FIXTURES_DIR


def load_fixture(category: str, name: str) -> str:
    """Load a fixture file by category and name."""
    fixture_path = FIXTURES_DIR / category / name
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    return fixture_path.read_text()
