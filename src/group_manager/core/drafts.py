"""Scratch builders for groups and entries that have not been committed yet."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from .errors import ValidationError
from .group_store import GroupStore
from .models import Entry, Field, Group

LOGGER = logging.getLogger(__name__)


class GroupDraft:
    """Accumulate a group name and field definitions before creation."""

    def __init__(self, *, unique_field_names: bool = True) -> None:
        self._unique_field_names = unique_field_names
        self.name: str = ""
        self.pending_field_name: str = ""
        self._fields: List[Field] = []

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(item.name for item in self._fields)

    @property
    def can_commit(self) -> bool:
        """True when the create action should be enabled."""
        return bool(self.name.strip()) and bool(self._fields)

    def add_field(self, name: Optional[str] = None) -> Optional[Field]:
        """Append a field named ``name`` (or the pending name) and clear the pending name.

        Returns ``None`` without changing anything when the name is blank or,
        with unique names enforced, already present in the draft.
        """
        candidate = (self.pending_field_name if name is None else name).strip()
        if not candidate:
            return None
        if self._unique_field_names and candidate in self.field_names:
            LOGGER.debug("Ignoring duplicate field name %r", candidate)
            return None
        new_field = Field.create(candidate)
        self._fields.append(new_field)
        self.pending_field_name = ""
        return new_field

    def remove_field(self, field_id: str) -> None:
        self._fields = [item for item in self._fields if item.field_id != field_id]

    def commit(self, store: GroupStore) -> Group:
        """Create the group in ``store`` and reset the draft.

        Raises ``ValidationError`` and leaves the draft untouched when the draft
        is not committable.
        """
        if not self.name.strip():
            raise ValidationError("Group name must not be empty")
        if not self._fields:
            raise ValidationError("A group needs at least one field")
        group = store.create_group(self.name, self._fields)
        self.reset()
        return group

    def reset(self) -> None:
        self.name = ""
        self.pending_field_name = ""
        self._fields = []


class EntryDraft:
    """Accumulate field values for one new entry of a fixed group schema."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def values(self) -> Mapping[str, str]:
        return dict(self._values)

    def begin(self, group: Group) -> None:
        self._values = {name: "" for name in group.field_names}
        self._active = True

    def set_value(self, field_name: str, value: str) -> None:
        self._values[field_name] = value

    def build_entry(self, group: Group) -> Entry:
        return Entry.for_fields(group.fields, self._values)

    def commit(self, store: GroupStore, group: Group) -> Group:
        """Append the drafted entry to ``group`` and return the post-commit group.

        The draft is only cleared once the store accepted the entry.
        """
        updated = store.append_entry(group.group_id, self.build_entry(group))
        self.cancel()
        return updated

    def cancel(self) -> None:
        self._values = {}
        self._active = False


__all__ = ["GroupDraft", "EntryDraft"]
