"""Tests for the session that applies user events and publishes snapshots."""

from __future__ import annotations

import logging
from typing import List

import pytest

from src.group_manager.core.feature_flags import FeatureFlags
from src.group_manager.core.navigation import View
from src.group_manager.core.session import GroupManagerSession, SessionSnapshot


@pytest.fixture
def session() -> GroupManagerSession:
    return GroupManagerSession()


@pytest.fixture
def snapshots(session: GroupManagerSession) -> List[SessionSnapshot]:
    captured: List[SessionSnapshot] = []
    session.state_changed.connect(captured.append)
    return captured


def _create_contacts(session: GroupManagerSession) -> str:
    session.open_create_dialog()
    session.set_group_name("Contacts")
    session.set_pending_field_name("Email")
    session.add_draft_field()
    session.add_draft_field("Phone")
    assert session.create_group()
    return session.snapshot().groups[-1].group_id


def test_initial_snapshot(session: GroupManagerSession) -> None:
    snapshot = session.snapshot()

    assert snapshot.view is View.HOME
    assert snapshot.groups == ()
    assert snapshot.selected_group is None
    assert snapshot.can_create_group is False
    assert snapshot.create_dialog_open is False


def test_create_group_scenario(session: GroupManagerSession, snapshots: List[SessionSnapshot]) -> None:
    group_id = _create_contacts(session)

    snapshot = session.snapshot()
    assert snapshots[-1] == snapshot
    assert [group.group_id for group in snapshot.groups] == [group_id]
    group = snapshot.groups[0]
    assert group.name == "Contacts"
    assert group.field_names == ("Email", "Phone")
    assert group.entries == ()
    assert snapshot.create_dialog_open is False
    assert snapshot.group_draft.fields == ()


def test_create_flag_follows_draft(session: GroupManagerSession) -> None:
    session.open_create_dialog()
    session.set_group_name("Contacts")
    assert session.snapshot().can_create_group is False

    session.add_draft_field("Email")
    assert session.snapshot().can_create_group is True

    field_id = session.snapshot().group_draft.fields[0].field_id
    assert session.remove_draft_field(field_id)
    assert session.snapshot().can_create_group is False


def test_create_group_with_blank_name_is_refused(
    session: GroupManagerSession, caplog: pytest.LogCaptureFixture
) -> None:
    refused: list[tuple[str, str]] = []
    session.action_refused.connect(lambda action, message: refused.append((action, message)))
    session.open_create_dialog()
    session.set_group_name("")
    session.add_draft_field("Email")

    with caplog.at_level(logging.DEBUG, logger="src.group_manager.core.session"):
        assert session.create_group() is False

    snapshot = session.snapshot()
    assert snapshot.groups == ()
    assert snapshot.create_dialog_open is True
    assert [item.name for item in snapshot.group_draft.fields] == ["Email"]
    assert refused and refused[0][0] == "create_group"
    assert "create_group refused" in caplog.text


def test_close_create_dialog_resets_draft(session: GroupManagerSession) -> None:
    session.open_create_dialog()
    session.set_group_name("Half done")
    session.add_draft_field("Email")

    session.close_create_dialog()

    draft = session.snapshot().group_draft
    assert (draft.name, draft.fields, draft.pending_field_name) == ("", (), "")
    assert session.snapshot().create_dialog_open is False


def test_entry_creation_scenario(session: GroupManagerSession) -> None:
    group_id = _create_contacts(session)

    assert session.open_group(group_id)
    assert session.open_entry_form()
    assert session.snapshot().entry_values == {"Email": "", "Phone": ""}
    assert session.set_entry_value("Email", "a@b.com")
    assert session.save_entry()

    snapshot = session.snapshot()
    assert snapshot.view is View.GROUP_DETAIL
    assert snapshot.selected_group.entry_count == 1
    assert snapshot.selected_group.entries[0] == {"Email": "a@b.com", "Phone": ""}
    assert snapshot.groups[0] == snapshot.selected_group
    assert snapshot.entry_values == {}


def test_cancel_entry_scenario(session: GroupManagerSession) -> None:
    group_id = _create_contacts(session)
    session.open_group(group_id)
    session.open_entry_form()
    session.set_entry_value("Email", "never saved")

    assert session.cancel_entry()

    snapshot = session.snapshot()
    assert snapshot.view is View.GROUP_DETAIL
    assert snapshot.selected_group.entries == ()
    assert snapshot.entry_values == {}


def test_delete_entry_updates_detail_view(session: GroupManagerSession) -> None:
    group_id = _create_contacts(session)
    session.open_group(group_id)
    for email in ("e0", "e1", "e2"):
        session.open_entry_form()
        session.set_entry_value("Email", email)
        session.save_entry()

    assert session.delete_entry(1)

    entries = session.snapshot().selected_group.entries
    assert [entry["Email"] for entry in entries] == ["e0", "e2"]


def test_out_of_bounds_delete_is_logged_no_op(
    session: GroupManagerSession, caplog: pytest.LogCaptureFixture
) -> None:
    group_id = _create_contacts(session)
    session.open_group(group_id)
    session.open_entry_form()
    session.save_entry()
    before = session.snapshot()

    with caplog.at_level(logging.WARNING, logger="src.group_manager.core.session"):
        assert session.delete_entry(5) is False

    after = session.snapshot()
    assert after.view is View.GROUP_DETAIL
    assert after.selected_group == before.selected_group
    assert "delete_entry failed" in caplog.text


def test_unknown_group_is_refused(session: GroupManagerSession) -> None:
    assert session.open_group("missing") is False
    assert session.snapshot().view is View.HOME


def test_removed_group_falls_back_home(session: GroupManagerSession) -> None:
    group_id = _create_contacts(session)
    session.open_group(group_id)
    session.store._groups.pop(group_id)

    assert session.open_entry_form() is False

    snapshot = session.snapshot()
    assert snapshot.view is View.HOME
    assert snapshot.selected_group is None


def test_entry_value_outside_entry_form_is_refused(session: GroupManagerSession) -> None:
    assert session.set_entry_value("Email", "x") is False
    assert session.snapshot().entry_values == {}


def test_create_dialog_only_from_home(session: GroupManagerSession) -> None:
    group_id = _create_contacts(session)
    session.open_group(group_id)

    assert session.open_create_dialog() is False
    assert session.snapshot().create_dialog_open is False


def test_go_home(session: GroupManagerSession) -> None:
    group_id = _create_contacts(session)
    session.open_group(group_id)

    assert session.go_home()
    assert session.snapshot().view is View.HOME
    assert session.go_home() is False


def test_duplicate_fields_follow_feature_flag() -> None:
    strict = GroupManagerSession()
    strict.open_create_dialog()
    strict.add_draft_field("Email")
    assert strict.add_draft_field("Email") is False

    relaxed = GroupManagerSession(feature_flags=FeatureFlags(enforce_unique_field_names=False))
    relaxed.open_create_dialog()
    relaxed.set_group_name("Aliases")
    relaxed.add_draft_field("Email")
    assert relaxed.add_draft_field("Email") is True
    assert relaxed.create_group()
    assert relaxed.snapshot().groups[0].field_names == ("Email", "Email")


def test_group_drafts_never_touch_store(session: GroupManagerSession) -> None:
    session.open_create_dialog()
    session.set_group_name("Contacts")
    session.add_draft_field("Email")
    session.set_pending_field_name("Phone")

    assert len(session.store) == 0


def test_reopening_create_dialog_keeps_draft(session: GroupManagerSession) -> None:
    session.open_create_dialog()
    session.set_group_name("Contacts")
    session.add_draft_field("Email")

    assert session.open_create_dialog()

    draft = session.snapshot().group_draft
    assert draft.name == "Contacts"
    assert [item.name for item in draft.fields] == ["Email"]


def test_create_group_requires_open_dialog(session: GroupManagerSession) -> None:
    session.set_group_name("Contacts")
    session.add_draft_field("Email")

    assert session.create_group() is False
    assert session.snapshot().groups == ()
    assert session.snapshot().group_draft.name == "Contacts"


def test_create_group_refused_outside_home(session: GroupManagerSession) -> None:
    group_id = _create_contacts(session)
    session.open_group(group_id)
    session.set_group_name("Books")
    session.add_draft_field("Title")

    assert session.create_group() is False
    assert [group.name for group in session.snapshot().groups] == ["Contacts"]
