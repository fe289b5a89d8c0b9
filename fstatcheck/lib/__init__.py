"""Shared utility library for check_fstat."""

from fstatcheck.lib.process import (
    SnapshotError,
    SnapshotExecutionError,
    SnapshotTimeoutError,
    SnapshotUnavailableError,
    check_executable,
    take_snapshot,
)

__all__ = [
    "SnapshotError",
    "SnapshotExecutionError",
    "SnapshotTimeoutError",
    "SnapshotUnavailableError",
    "check_executable",
    "take_snapshot",
]
