"""Execution context for testability."""

import os
import subprocess
from pathlib import Path


class Context:
    """
    Wraps external calls for testability.

    In production: executes real commands
    In tests: can be replaced with MockContext
    """

    def run(
        self,
        cmd: list[str],
        check: bool = False,
        timeout: float | None = 60,
        **kwargs,
    ) -> subprocess.CompletedProcess:
        """
        Run a command and return result.

        Args:
            cmd: Command and arguments as list
            check: Raise on non-zero exit code
            timeout: Timeout in seconds
            **kwargs: Additional subprocess.run arguments

        Returns:
            CompletedProcess with stdout, stderr, returncode

        Raises:
            subprocess.TimeoutExpired: If the command outlives the timeout
        """
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=check,
            timeout=timeout,
            **kwargs,
        )

    def file_exists(self, path: str) -> bool:
        """Check if file exists."""
        return Path(path).exists()

    def is_regular_file(self, path: str) -> bool:
        """Check if path is a regular file (symlinks are followed)."""
        return Path(path).is_file()

    def is_executable(self, path: str) -> bool:
        """Check if the current user may execute path."""
        return os.access(path, os.X_OK)
