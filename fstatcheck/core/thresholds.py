"""Threshold ranges in monitoring-plugins notation and status classification.

The general format is "[@][start:][end]". "start:" may be omitted if
start is 0, "~:" means start is negative infinity, and an omitted end is
positive infinity. A value alerts when it falls outside start..end
(inclusive); a leading "@" makes it alert when the value falls inside.

    10      alert if value < 0 or > 10
    10:     alert if value < 10
    ~:10    alert if value > 10
    10:20   alert if value < 10 or > 20
    @10:20  alert if 10 <= value <= 20
"""

import math
from dataclasses import dataclass

from fstatcheck.core.errors import CheckError
from fstatcheck.core.status import Status


class ThresholdError(CheckError):
    """Malformed threshold range."""

    pass


@dataclass(frozen=True)
class Range:
    """A parsed threshold range."""

    start: float
    end: float
    invert: bool = False
    text: str = ""

    def contains(self, value: float) -> bool:
        """True if value lies within start..end, bounds inclusive."""
        return self.start <= value <= self.end

    def alerts(self, value: float) -> bool:
        """True if value should raise an alert for this range."""
        inside = self.contains(value)
        return inside if self.invert else not inside

    def __str__(self) -> str:
        return self.text


def _parse_bound(atom: str, default: float, text: str) -> float:
    if atom == "":
        return default
    try:
        number = int(atom)
    except ValueError:
        try:
            number = float(atom)
        except ValueError:
            raise ThresholdError(f"Invalid threshold range '{text}': '{atom}' is not a number")
    if not math.isfinite(number):
        raise ThresholdError(f"Invalid threshold range '{text}': '{atom}' is not a finite number")
    return number


def parse_range(text: str) -> Range:
    """
    Parse a range expression.

    Args:
        text: Range in "[@][start:][end]" notation

    Returns:
        Range keeping text as written

    Raises:
        ThresholdError: If text is not a valid range
    """
    if text is None:
        raise ThresholdError("Threshold range is required")

    spec = text.strip()
    invert = spec.startswith("@")
    if invert:
        spec = spec[1:]

    if spec.count(":") > 1:
        raise ThresholdError(f"Invalid threshold range '{text}': too many ':'")

    if ":" in spec:
        start_str, end_str = spec.split(":")
    else:
        start_str, end_str = "", spec

    if not start_str and not end_str:
        raise ThresholdError(f"Invalid threshold range '{text}': no bounds given")

    if start_str == "~":
        start = float("-inf")
    else:
        start = _parse_bound(start_str, 0, text)
    end = _parse_bound(end_str, float("inf"), text)

    if start > end:
        raise ThresholdError(
            f"Invalid threshold range '{text}': start {start_str} is greater than end {end_str}"
        )

    return Range(start=start, end=end, invert=invert, text=text.strip())


@dataclass(frozen=True)
class Thresholds:
    """Warning and critical ranges for one metric."""

    warning: Range
    critical: Range

    @classmethod
    def parse(cls, warning: str, critical: str) -> "Thresholds":
        """Build thresholds from range text, failing fast on bad input."""
        return cls(warning=parse_range(warning), critical=parse_range(critical))


def classify(value: float, thresholds: Thresholds) -> Status:
    """Classify value; critical takes precedence over warning."""
    if thresholds.critical.alerts(value):
        return Status.CRITICAL
    if thresholds.warning.alerts(value):
        return Status.WARNING
    return Status.OK
