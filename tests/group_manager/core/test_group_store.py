from __future__ import annotations

import pytest

from src.group_manager.core.errors import EntryIndexError, NotFoundError, ValidationError
from src.group_manager.core.group_store import GroupStore
from src.group_manager.core.models import Entry, Field


def _fields(*names: str) -> list[Field]:
    return [Field.create(name) for name in names]


@pytest.fixture
def store() -> GroupStore:
    return GroupStore()


def test_create_group_lists_in_creation_order(store: GroupStore) -> None:
    contacts = store.create_group("Contacts", _fields("Email", "Phone"))
    books = store.create_group("  Books ", _fields("Title"))

    assert [group.group_id for group in store.list_groups()] == [contacts.group_id, books.group_id]
    assert contacts.field_names == ("Email", "Phone")
    assert contacts.entries == ()
    assert books.name == "Books"
    assert contacts.group_id != books.group_id


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_create_group_rejects_blank_name(store: GroupStore, name: str) -> None:
    with pytest.raises(ValidationError):
        store.create_group(name, _fields("Email"))
    assert store.list_groups() == ()


def test_create_group_rejects_missing_fields(store: GroupStore) -> None:
    with pytest.raises(ValidationError):
        store.create_group("Contacts", [])
    assert len(store) == 0


def test_create_group_rejects_duplicate_field_names(store: GroupStore) -> None:
    with pytest.raises(ValidationError, match="Duplicate field name"):
        store.create_group("Contacts", _fields("Email", "Email "))


def test_duplicate_field_names_allowed_when_not_enforced() -> None:
    store = GroupStore(unique_field_names=False)
    group = store.create_group("Contacts", _fields("Email", "Email"))
    assert group.field_names == ("Email", "Email")


def test_repeated_field_names_share_one_entry_value() -> None:
    store = GroupStore(unique_field_names=False)
    group = store.create_group("Contacts", _fields("Email", "Email", "Phone"))

    updated = store.append_entry(group.group_id, {"Email": "a@b.com"})

    entry = updated.entries[0]
    assert len(entry) == 2
    assert entry == {"Email": "a@b.com", "Phone": ""}


@pytest.mark.parametrize("unique_field_names", [True, False])
def test_create_group_rejects_repeated_field_ids(unique_field_names: bool) -> None:
    store = GroupStore(unique_field_names=unique_field_names)

    with pytest.raises(ValidationError, match="Duplicate field id: same"):
        store.create_group("X", [Field("same", "A"), Field("same", "B")])

    assert len(store) == 0


def test_append_entry_normalises_to_schema(store: GroupStore) -> None:
    group = store.create_group("Contacts", _fields("Email", "Phone"))

    updated = store.append_entry(group.group_id, {"Email": "a@b.com", "Nickname": "ignored"})

    assert updated.entry_count == 1
    assert updated.entries[0] == {"Email": "a@b.com", "Phone": ""}
    assert store.get_group(group.group_id) is updated


def test_append_entry_keeps_id_and_fields(store: GroupStore) -> None:
    group = store.create_group("Contacts", _fields("Email", "Phone"))

    updated = store.append_entry(group.group_id, Entry({"Email": "x"}))

    assert updated.group_id == group.group_id
    assert updated.fields == group.fields
    assert group.entries == ()


def test_append_entry_unknown_group(store: GroupStore) -> None:
    with pytest.raises(NotFoundError):
        store.append_entry("missing", {"Email": "x"})


def test_remove_entry_shifts_later_entries(store: GroupStore) -> None:
    group = store.create_group("Numbers", _fields("Value"))
    for value in ("E0", "E1", "E2"):
        group = store.append_entry(group.group_id, {"Value": value})

    updated = store.remove_entry(group.group_id, 1)

    assert [entry["Value"] for entry in updated.entries] == ["E0", "E2"]
    assert updated.group_id == group.group_id
    assert updated.fields == group.fields


@pytest.mark.parametrize("index", [5, 2, -1])
def test_remove_entry_out_of_bounds_leaves_entries(store: GroupStore, index: int) -> None:
    group = store.create_group("Numbers", _fields("Value"))
    group = store.append_entry(group.group_id, {"Value": "a"})
    group = store.append_entry(group.group_id, {"Value": "b"})

    with pytest.raises(EntryIndexError) as excinfo:
        store.remove_entry(group.group_id, index)

    assert isinstance(excinfo.value, IndexError)
    assert store.get_group(group.group_id).entries == group.entries


def test_remove_entry_unknown_group(store: GroupStore) -> None:
    with pytest.raises(NotFoundError):
        store.remove_entry("missing", 0)


def test_mutating_one_group_leaves_others_alone(store: GroupStore) -> None:
    first = store.create_group("First", _fields("A"))
    second = store.create_group("Second", _fields("B"))

    store.append_entry(first.group_id, {"A": "1"})

    assert store.get_group(second.group_id) == second
    assert [group.name for group in store.list_groups()] == ["First", "Second"]
