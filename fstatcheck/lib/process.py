"""Run the snapshot command that lists open files."""

import subprocess
from typing import TYPE_CHECKING

from fstatcheck.core.errors import CheckError

if TYPE_CHECKING:
    from fstatcheck.core.context import Context

DEFAULT_COMMAND = "/usr/bin/fstat"
DEFAULT_TIMEOUT = 15


class SnapshotError(CheckError):
    """Error obtaining the open file listing."""

    pass


class SnapshotUnavailableError(SnapshotError):
    """Snapshot command is missing or cannot be executed."""

    pass


class SnapshotExecutionError(SnapshotError):
    """Snapshot command ran but failed or printed nothing."""

    pass


class SnapshotTimeoutError(SnapshotError):
    """Snapshot command did not finish in time."""

    pass


def check_executable(path: str, context: "Context | None" = None) -> None:
    """
    Verify path is an existing, regular, executable file.

    Args:
        path: Command path
        context: Execution context (for testing)

    Raises:
        SnapshotUnavailableError: If any of the checks fails
    """
    if context is None:
        from fstatcheck.core.context import Context
        context = Context()

    if not context.file_exists(path):
        raise SnapshotUnavailableError(f"{path} not found")
    if not context.is_regular_file(path):
        raise SnapshotUnavailableError(f"{path} is not a regular file")
    if not context.is_executable(path):
        raise SnapshotUnavailableError(f"{path} is not executable")


def take_snapshot(
    path: str = DEFAULT_COMMAND,
    context: "Context | None" = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Run the snapshot command and return its full output.

    Args:
        path: Command path
        context: Execution context (for testing)
        timeout: Seconds before the command is killed

    Returns:
        Command stdout

    Raises:
        SnapshotUnavailableError: If the command cannot be started
        SnapshotExecutionError: If it exits non-zero, prints nothing or prints undecodable bytes
        SnapshotTimeoutError: If it outlives timeout
    """
    if context is None:
        from fstatcheck.core.context import Context
        context = Context()

    check_executable(path, context)

    try:
        result = context.run([path], timeout=timeout)
    except subprocess.TimeoutExpired:
        raise SnapshotTimeoutError(f"Timeout: {path} did not finish within {timeout} seconds")
    except OSError as e:
        raise SnapshotUnavailableError(f"Cannot run {path}: {e}")
    except UnicodeDecodeError as e:
        raise SnapshotExecutionError(f"{path} printed undecodable output: {e.reason} at byte {e.start}")

    if result.returncode != 0:
        reason = (result.stderr or "").strip().splitlines()
        detail = f": {reason[0]}" if reason else ""
        raise SnapshotExecutionError(f"{path} exited with status {result.returncode}{detail}")

    if not (result.stdout or "").strip():
        raise SnapshotExecutionError(f"{path} returned no output")

    return result.stdout
