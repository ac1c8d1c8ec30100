"""In-memory store that owns every group and its entries."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .errors import EntryIndexError, NotFoundError, ValidationError
from .models import Entry, Field, Group

LOGGER = logging.getLogger(__name__)


def validate_group_definition(
    name: str,
    fields: Sequence[Field],
    *,
    unique_field_names: bool = True,
) -> None:
    """Raise ``ValidationError`` unless ``name`` and ``fields`` describe a valid group."""
    if not name or not name.strip():
        raise ValidationError("Group name must not be empty")
    if not fields:
        raise ValidationError("A group needs at least one field")
    seen: set[str] = set()
    seen_ids: set[str] = set()
    for item in fields:
        field_name = item.name.strip()
        if not field_name:
            raise ValidationError("Field names must not be empty")
        if item.field_id in seen_ids:
            raise ValidationError(f"Duplicate field id: {item.field_id}")
        if unique_field_names and field_name in seen:
            raise ValidationError(f"Duplicate field name: {field_name}")
        seen.add(field_name)
        seen_ids.add(item.field_id)


class GroupStore:
    """Authoritative, insertion-ordered collection of groups.

    Every operation runs under a single re-entrant lock so each call is one
    atomic step for its caller. Groups are replaced, never mutated in place.
    """

    def __init__(self, *, unique_field_names: bool = True) -> None:
        self._lock = RLock()
        self._groups: Dict[str, Group] = {}
        self._unique_field_names = unique_field_names

    @property
    def unique_field_names(self) -> bool:
        return self._unique_field_names

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_groups(self) -> Tuple[Group, ...]:
        with self._lock:
            return tuple(self._groups.values())

    def get_group(self, group_id: str) -> Group:
        with self._lock:
            try:
                return self._groups[group_id]
            except KeyError:
                raise NotFoundError(group_id) from None

    def __contains__(self, group_id: object) -> bool:
        with self._lock:
            return group_id in self._groups

    def __len__(self) -> int:
        with self._lock:
            return len(self._groups)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_group(self, name: str, fields: Iterable[Field]) -> Group:
        field_list: List[Field] = [Field(item.field_id, item.name.strip()) for item in fields]
        validate_group_definition(name, field_list, unique_field_names=self._unique_field_names)
        with self._lock:
            group = Group.create(name, field_list)
            while group.group_id in self._groups:  # pragma: no cover - uuid4 collision
                group = Group.create(name, field_list)
            self._groups[group.group_id] = group
        LOGGER.info("Created group %s (%s) with %d field(s)", group.name, group.group_id, len(group.fields))
        return group

    def append_entry(self, group_id: str, entry: Mapping[str, str]) -> Group:
        with self._lock:
            group = self.get_group(group_id)
            normalised = Entry.for_fields(group.fields, entry)
            updated = group.with_entries(group.entries + (normalised,))
            self._groups[group_id] = updated
        LOGGER.debug("Appended entry to group %s (%d entries)", group_id, updated.entry_count)
        return updated

    def remove_entry(self, group_id: str, index: int) -> Group:
        with self._lock:
            group = self.get_group(group_id)
            size = len(group.entries)
            if not 0 <= index < size:
                raise EntryIndexError(group_id, index, size)
            entries = group.entries[:index] + group.entries[index + 1:]
            updated = group.with_entries(entries)
            self._groups[group_id] = updated
        LOGGER.debug("Removed entry %d from group %s (%d entries)", index, group_id, updated.entry_count)
        return updated


__all__ = ["GroupStore", "validate_group_definition"]
