"""Immutable value types for groups, fields and entries."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Field:
    """One named text column of a group schema."""

    field_id: str
    name: str

    @classmethod
    def create(cls, name: str) -> "Field":
        return cls(field_id=new_id(), name=name.strip())


class Entry(Mapping[str, str]):
    """Read-only mapping of field name to value."""

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Mapping[str, str] = MappingProxyType(dict(values or {}))

    @classmethod
    def for_fields(cls, fields: Iterable[Field], values: Optional[Mapping[str, str]] = None) -> "Entry":
        """Build an entry holding exactly one value per field name; blanks default to ``""``."""
        source = values or {}
        return cls({item.name: str(source.get(item.name) or "") for item in fields})

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(tuple(self._values.items()))

    def __repr__(self) -> str:
        return f"Entry({dict(self._values)!r})"

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)


@dataclass(frozen=True)
class Group:
    """A named collection of entries sharing one field schema.

    Groups are values: the store swaps in a new ``Group`` on every mutation and
    keeps ``group_id`` and ``fields`` unchanged.
    """

    group_id: str
    name: str
    fields: Tuple[Field, ...]
    entries: Tuple[Entry, ...] = ()

    @classmethod
    def create(cls, name: str, fields: Iterable[Field]) -> "Group":
        return cls(group_id=new_id(), name=name.strip(), fields=tuple(fields))

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(item.name for item in self.fields)

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def with_entries(self, entries: Iterable[Entry]) -> "Group":
        return replace(self, entries=tuple(entries))


__all__ = ["Field", "Entry", "Group", "new_id"]
