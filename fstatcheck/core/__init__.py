"""Core check_fstat functionality."""

from fstatcheck.core.context import Context
from fstatcheck.core.errors import CheckError, UsageError
from fstatcheck.core.filters import (
    FilterExpression,
    InvalidFilterValueError,
    MalformedFilterError,
    UnknownFilterKeyError,
    count_matches,
    validate_filter,
)
from fstatcheck.core.output import Output
from fstatcheck.core.registry import FSTAT_FIELDS, FieldSpec, FilterRegistry
from fstatcheck.core.report import StatusResult, build_report, unknown_result
from fstatcheck.core.status import Status
from fstatcheck.core.table import EmptySnapshotError, NoUsableDataError, parse_table
from fstatcheck.core.thresholds import Range, ThresholdError, Thresholds, classify, parse_range

__all__ = [
    "CheckError",
    "Context",
    "EmptySnapshotError",
    "FSTAT_FIELDS",
    "FieldSpec",
    "FilterExpression",
    "FilterRegistry",
    "InvalidFilterValueError",
    "MalformedFilterError",
    "NoUsableDataError",
    "Output",
    "Range",
    "Status",
    "StatusResult",
    "ThresholdError",
    "Thresholds",
    "UnknownFilterKeyError",
    "UsageError",
    "build_report",
    "classify",
    "count_matches",
    "parse_range",
    "parse_table",
    "unknown_result",
    "validate_filter",
]
