"""Error taxonomy for check runs.

Every error raised while evaluating a run derives from CheckError and is
reported to the monitoring system as UNKNOWN.
"""


class CheckError(Exception):
    """Base class for errors that end a run with UNKNOWN status."""

    pass


class UsageError(CheckError):
    """Invalid or missing command-line options."""

    pass
