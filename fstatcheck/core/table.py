"""Parse whitespace-delimited tabular command output into records."""

from types import MappingProxyType
from typing import Mapping

from fstatcheck.core.errors import CheckError

OpenFileRecord = Mapping[str, str]


class TableError(CheckError):
    """Error turning command output into records."""

    pass


class EmptySnapshotError(TableError):
    """The command produced no output at all."""

    pass


class NoUsableDataError(TableError):
    """The output had a header but no data rows."""

    pass


def split_header(line: str) -> list[str]:
    """Split a header line into column labels."""
    return line.split()


def build_record(labels: list[str], line: str) -> OpenFileRecord:
    """
    Map one data line onto the header labels.

    Short rows pad the missing trailing columns with "", values beyond the
    last label are dropped.
    """
    values = line.split()
    record = {}
    for i, label in enumerate(labels):
        record[label] = values[i] if i < len(values) else ""
    return MappingProxyType(record)


def parse_table(raw_text: str) -> list[OpenFileRecord]:
    """
    Parse a header line plus data lines into records.

    Args:
        raw_text: Command output, header first

    Returns:
        One read-only record per non-blank data line, in input order

    Raises:
        EmptySnapshotError: If raw_text is empty or only whitespace
        NoUsableDataError: If there is a header but no data lines
    """
    lines = [line for line in raw_text.splitlines() if line.strip()]
    if not lines:
        raise EmptySnapshotError("No output received from snapshot command")

    labels = split_header(lines[0])
    records = [build_record(labels, line) for line in lines[1:]]

    if not records:
        raise NoUsableDataError("No usable data: snapshot contained a header but no open files")

    return records
