"""Session object owning the store, drafts and navigation for one running app."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from .drafts import EntryDraft, GroupDraft
from .errors import GroupManagerError, ValidationError
from .feature_flags import FeatureFlags
from .group_store import GroupStore
from .models import Field, Group
from .navigation import NavigationController, View

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupDraftSnapshot:
    name: str = ""
    fields: Tuple[Field, ...] = ()
    pending_field_name: str = ""


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the rendering layer needs after one event."""

    view: View
    groups: Tuple[Group, ...]
    selected_group: Optional[Group]
    entry_values: Mapping[str, str] = field(default_factory=dict)
    group_draft: GroupDraftSnapshot = field(default_factory=GroupDraftSnapshot)
    create_dialog_open: bool = False
    can_create_group: bool = False


class GroupManagerSession(QObject):
    """Apply user events one at a time and publish a snapshot after each.

    Errors raised by the store, drafts or navigation are recovered here: the
    event is refused (``False`` is returned), the state stays as it was and
    the error is logged.
    """

    state_changed = Signal(object)  # SessionSnapshot
    action_refused = Signal(str, str)  # action name, message

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        feature_flags: FeatureFlags | None = None,
        store: GroupStore | None = None,
    ) -> None:
        super().__init__(parent)
        self._feature_flags = feature_flags or FeatureFlags()
        unique = self._feature_flags.enforce_unique_field_names
        self._store = store if store is not None else GroupStore(unique_field_names=unique)
        self._group_draft = GroupDraft(unique_field_names=unique)
        self._entry_draft = EntryDraft()
        self._navigation = NavigationController(self._store, self._entry_draft)
        self._create_dialog_open = False
        self._snapshot = self._build_snapshot()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def feature_flags(self) -> FeatureFlags:
        return self._feature_flags

    @property
    def store(self) -> GroupStore:
        return self._store

    @property
    def navigation(self) -> NavigationController:
        return self._navigation

    @property
    def group_draft(self) -> GroupDraft:
        return self._group_draft

    @property
    def entry_draft(self) -> EntryDraft:
        return self._entry_draft

    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    # ------------------------------------------------------------------
    # Group creation events
    # ------------------------------------------------------------------
    def open_create_dialog(self) -> bool:
        """Start a fresh group draft; an already open dialog keeps its draft."""
        if self._navigation.view is not View.HOME:
            return self._refuse("open_create_dialog", "Groups can only be created from the home view")
        if not self._create_dialog_open:
            self._group_draft.reset()
            self._create_dialog_open = True
        self._publish()
        return True

    def close_create_dialog(self) -> bool:
        self._group_draft.reset()
        self._create_dialog_open = False
        self._publish()
        return True

    def set_group_name(self, name: str) -> bool:
        self._group_draft.name = name
        self._publish()
        return True

    def set_pending_field_name(self, name: str) -> bool:
        self._group_draft.pending_field_name = name
        self._publish()
        return True

    def add_draft_field(self, name: Optional[str] = None) -> bool:
        added = self._group_draft.add_field(name)
        self._publish()
        return added is not None

    def remove_draft_field(self, field_id: str) -> bool:
        before = len(self._group_draft.fields)
        self._group_draft.remove_field(field_id)
        self._publish()
        return len(self._group_draft.fields) != before

    def create_group(self) -> bool:
        if self._navigation.view is not View.HOME or not self._create_dialog_open:
            return self._refuse("create_group", "Open the create group dialog from the home view first")

        def _commit() -> None:
            self._group_draft.commit(self._store)
            self._create_dialog_open = False

        return self._apply("create_group", _commit)

    # ------------------------------------------------------------------
    # Navigation events
    # ------------------------------------------------------------------
    def open_group(self, group_id: str) -> bool:
        return self._apply("open_group", lambda: self._navigation.open_group(group_id))

    def open_entry_form(self) -> bool:
        return self._apply("open_entry_form", self._navigation.open_entry_form)

    def set_entry_value(self, field_name: str, value: str) -> bool:
        if self._navigation.view is not View.ENTRY_FORM:
            return self._refuse("set_entry_value", "No entry form is open")
        self._entry_draft.set_value(field_name, value)
        self._publish()
        return True

    def save_entry(self) -> bool:
        return self._apply("save_entry", self._navigation.save_entry)

    def cancel_entry(self) -> bool:
        return self._apply("cancel_entry", self._navigation.cancel_entry)

    def delete_entry(self, index: int) -> bool:
        return self._apply("delete_entry", lambda: self._navigation.delete_entry(index))

    def go_home(self) -> bool:
        return self._apply("go_home", self._navigation.go_home)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _apply(self, action: str, operation: Callable[[], Any]) -> bool:
        try:
            operation()
        except ValidationError as exc:
            LOGGER.debug("%s refused: %s", action, exc)
            self._refuse(action, str(exc), publish=False)
            return False
        except GroupManagerError as exc:
            LOGGER.warning("%s failed: %s", action, exc)
            self._refuse(action, str(exc), publish=False)
            return False
        finally:
            self._publish()
        return True

    def _refuse(self, action: str, message: str, *, publish: bool = True) -> bool:
        self.action_refused.emit(action, message)
        if publish:
            self._publish()
        return False

    def _build_snapshot(self) -> SessionSnapshot:
        draft = self._group_draft
        # Resolving the selection may fall back to HOME, so read it before the view.
        selected = self._navigation.selected_group
        entry_values: Dict[str, str] = dict(self._entry_draft.values)
        return SessionSnapshot(
            view=self._navigation.view,
            groups=self._store.list_groups(),
            selected_group=selected,
            entry_values=entry_values,
            group_draft=GroupDraftSnapshot(
                name=draft.name,
                fields=draft.fields,
                pending_field_name=draft.pending_field_name,
            ),
            create_dialog_open=self._create_dialog_open,
            can_create_group=draft.can_commit,
        )

    def _publish(self) -> None:
        self._snapshot = self._build_snapshot()
        self.state_changed.emit(self._snapshot)


__all__ = ["GroupManagerSession", "SessionSnapshot", "GroupDraftSnapshot"]
