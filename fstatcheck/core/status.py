"""Plugin status codes."""

from enum import IntEnum


class Status(IntEnum):
    """Monitoring plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3
