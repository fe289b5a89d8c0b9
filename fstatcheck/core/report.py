"""Compose the final status result of a check run."""

from dataclasses import dataclass, field
from typing import Any

from fstatcheck.core.filters import FilterExpression
from fstatcheck.core.status import Status
from fstatcheck.core.thresholds import Thresholds, classify

PLUGIN_NAME = "FSTAT"
METRIC_LABEL = "open_files"
METRIC_UNIT = ""


@dataclass
class StatusResult:
    """Outcome of one run: status, message and performance data."""

    status: Status
    message: str
    value: int | None = None
    label: str = METRIC_LABEL
    unit: str = METRIC_UNIT
    warning: str = ""
    critical: str = ""
    details: list[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return int(self.status)

    def perfdata(self) -> str:
        """Performance data token: label=value<unit>;warning;critical."""
        if self.value is None:
            return ""
        return f"{self.label}={self.value}{self.unit};{self.warning};{self.critical}"

    def status_line(self) -> str:
        """First output line as read by the monitoring daemon."""
        line = f"{PLUGIN_NAME} {self.status.name} - {self.message}"
        perfdata = self.perfdata()
        if perfdata:
            line += f" | {perfdata}"
        return line

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.name,
            "exit_code": self.exit_code,
            "message": self.message,
            "value": self.value,
            "label": self.label,
            "unit": self.unit,
            "warning": self.warning,
            "critical": self.critical,
            "perfdata": self.perfdata(),
            "details": list(self.details),
        }


def describe_count(value: int, expression: FilterExpression | None = None) -> str:
    """Message such as "2 open files" or "2 open files with user root"."""
    message = f"{value} open files"
    if expression is not None:
        message += f" with {expression.describe()}"
    return message


def build_report(
    value: int,
    thresholds: Thresholds,
    expression: FilterExpression | None = None,
    label: str = METRIC_LABEL,
) -> StatusResult:
    """
    Classify a match count and build its StatusResult.

    Args:
        value: Number of matching open files
        thresholds: Warning and critical ranges
        expression: Filter that produced the count, if any
        label: Performance data label

    Returns:
        StatusResult carrying status, message and performance data
    """
    return StatusResult(
        status=classify(value, thresholds),
        message=describe_count(value, expression),
        value=value,
        label=label,
        warning=str(thresholds.warning),
        critical=str(thresholds.critical),
    )


def unknown_result(message: str) -> StatusResult:
    """UNKNOWN result for a run that could not be evaluated."""
    return StatusResult(status=Status.UNKNOWN, message=message)
