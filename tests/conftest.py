"""Shared test fixtures."""

import subprocess
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

FSTAT = "/usr/bin/fstat"


class MockContext:
    """Mock Context for testing without real system access."""

    def __init__(
        self,
        executables: list[str] | None = None,
        command_outputs: dict[tuple, str | Exception | subprocess.CompletedProcess] | None = None,
        file_contents: dict[str, str] | None = None,
        directories: list[str] | None = None,
    ):
        self.executables = set(executables or [])
        self.command_outputs = command_outputs or {}
        self.file_contents = file_contents or {}
        self.directories = set(directories or [])
        self.commands_run: list[list[str]] = []
        self.timeouts: list[float | None] = []

    def run(
        self,
        cmd: list[str],
        check: bool = False,
        timeout: float | None = 60,
        **kwargs,
    ) -> subprocess.CompletedProcess:
        """Return mocked command output."""
        self.commands_run.append(cmd)
        self.timeouts.append(timeout)
        key = tuple(cmd)
        if key not in self.command_outputs:
            raise KeyError(f"No mock output for command: {cmd}")

        output = self.command_outputs[key]
        if isinstance(output, Exception):
            raise output

        # Allow passing CompletedProcess directly for non-zero returncodes
        if isinstance(output, subprocess.CompletedProcess):
            return output

        return subprocess.CompletedProcess(
            cmd,
            returncode=0,
            stdout=output,
            stderr="",
        )

    def file_exists(self, path: str) -> bool:
        """Check if path is a mocked file, executable or directory."""
        return (
            path in self.file_contents
            or path in self.executables
            or path in self.directories
        )

    def is_regular_file(self, path: str) -> bool:
        """Mocked directories are the only non-regular paths."""
        return self.file_exists(path) and path not in self.directories

    def is_executable(self, path: str) -> bool:
        """Check if path is in the mocked executables."""
        return path in self.executables or path in self.directories


@pytest.fixture
def mock_context():
    """Factory fixture for creating MockContext instances."""
    def _create(**kwargs) -> MockContext:
        return MockContext(**kwargs)
    return _create


@pytest.fixture
def fstat_context():
    """MockContext with an executable fstat printing the given text."""
    def _create(stdout: str | Exception | subprocess.CompletedProcess) -> MockContext:
        return MockContext(
            executables=[FSTAT],
            command_outputs={(FSTAT,): stdout},
        )
    return _create


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep real project and user config files out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture():
    """Load a fixture file by category and name."""
    def _load(category: str, name: str) -> str:
        fixture_path = FIXTURES_DIR / category / name
        if not fixture_path.exists():
            raise FileNotFoundError(f"Fixture not found: {fixture_path}")
        return fixture_path.read_text()
    return _load
