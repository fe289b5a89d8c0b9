"""Filter expression validation and record counting."""

from dataclasses import dataclass
from typing import Iterable

from fstatcheck.core.errors import CheckError
from fstatcheck.core.registry import FieldSpec, FilterRegistry
from fstatcheck.core.table import OpenFileRecord

SEPARATOR = ":"


class FilterError(CheckError):
    """Error validating a filter expression."""

    pass


class MalformedFilterError(FilterError):
    """Filter text is not of the form key:value."""

    pass


class UnknownFilterKeyError(FilterError):
    """Filter key is not a known field."""

    def __init__(self, key: str, available: str):
        self.key = key
        self.available = available
        super().__init__(f"Unknown filter '{key}', available filters: {available}")


class InvalidFilterValueError(FilterError):
    """Filter value is not accepted for its field."""

    def __init__(self, field: FieldSpec, value: str):
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid value '{value}' for filter '{field.name}', "
            f"accepted values: {field.describe_values()}"
        )


@dataclass(frozen=True)
class FilterExpression:
    """A validated key:value predicate."""

    key: str
    value: str
    field: FieldSpec

    def matches(self, record: OpenFileRecord) -> bool:
        """Exact, case-sensitive comparison against the field's column."""
        return record.get(self.field.source_label, "") == self.value

    def describe(self) -> str:
        """Human readable form used in status messages."""
        return f"{self.key} {self.value}"


def validate_filter(text: str | None, registry: FilterRegistry) -> FilterExpression | None:
    """
    Validate raw filter text against the registry.

    Args:
        text: User input of the form key:value, or None for no filter
        registry: Known filter fields

    Returns:
        FilterExpression, or None when no filter was given

    Raises:
        MalformedFilterError: If text is not exactly one non-empty key and value
        UnknownFilterKeyError: If the key is not in the registry
        InvalidFilterValueError: If the field restricts values and value is not one
    """
    if text is None:
        return None

    parts = text.split(SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedFilterError(f"Malformed filter '{text}', expected key:value")
    key, value = parts

    field = registry.lookup(key)
    if field is None:
        raise UnknownFilterKeyError(key, registry.describe_available())

    if not field.accepts(value):
        raise InvalidFilterValueError(field, value)

    return FilterExpression(key=key, value=value, field=field)


def count_matches(
    records: Iterable[OpenFileRecord],
    expression: FilterExpression | None = None,
) -> int:
    """Count records matching expression, or all records without one."""
    if expression is None:
        return sum(1 for _ in records)
    return sum(1 for record in records if expression.matches(record))


def matching_records(
    records: Iterable[OpenFileRecord],
    expression: FilterExpression | None = None,
) -> list[OpenFileRecord]:
    """Records counted by count_matches, in input order."""
    if expression is None:
        return list(records)
    return [record for record in records if expression.matches(record)]
