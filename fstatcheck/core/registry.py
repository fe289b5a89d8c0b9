"""Catalog of fields an fstat listing can be filtered on."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclass(frozen=True)
class FieldSpec:
    """One filterable column of the fstat listing."""

    name: str
    source_label: str
    accepted_values: Mapping[str, str] | None = None

    def accepts(self, value: str) -> bool:
        """True if value is legal for this field."""
        if self.accepted_values is None:
            return True
        return value in self.accepted_values

    def describe_values(self) -> str:
        """Accepted value keys, sorted and comma separated."""
        if not self.accepted_values:
            return ""
        return ", ".join(sorted(self.accepted_values))


class FilterRegistry:
    """
    Read-only mapping of field name to FieldSpec.

    The registry is fixed once built; lookups never mutate it.
    """

    def __init__(self, fields: list[FieldSpec]):
        specs: dict[str, FieldSpec] = {}
        for spec in fields:
            if spec.name in specs:
                raise ValueError(f"Duplicate filter field: {spec.name}")
            specs[spec.name] = spec
        self._fields = MappingProxyType(specs)

    def lookup(self, name: str) -> FieldSpec | None:
        """Return the FieldSpec for name, or None if unknown."""
        return self._fields.get(name)

    def names(self) -> list[str]:
        """Field names in sorted order."""
        return sorted(self._fields)

    def describe_available(self) -> str:
        """
        Describe every field for help and error messages.

        Fields with accepted values list them in parentheses, e.g.
        "descriptor, mode (r, rw, w), mount, process, user".
        """
        parts = []
        for name in self.names():
            spec = self._fields[name]
            if spec.accepted_values:
                parts.append(f"{name} ({spec.describe_values()})")
            else:
                parts.append(name)
        return ", ".join(parts)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._fields)


# Columns of BSD fstat(1): USER CMD PID FD MOUNT INUM MODE SZ|DV R/W
FSTAT_FIELDS = FilterRegistry([
    FieldSpec("user", "USER"),
    FieldSpec("process", "CMD"),
    FieldSpec("descriptor", "FD"),
    FieldSpec("mount", "MOUNT"),
    FieldSpec(
        "mode",
        "R/W",
        MappingProxyType({
            "r": "open for reading",
            "w": "open for writing",
            "rw": "open for reading and writing",
        }),
    ),
])
