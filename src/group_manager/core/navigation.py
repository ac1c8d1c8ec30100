"""View state machine for the home, group detail and entry form views."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .drafts import EntryDraft
from .errors import NavigationError, NotFoundError
from .group_store import GroupStore
from .models import Group

LOGGER = logging.getLogger(__name__)


class View(str, Enum):
    HOME = "home"
    GROUP_DETAIL = "group"
    ENTRY_FORM = "entry"


@dataclass(frozen=True)
class NavigationState:
    """Active view plus the id of the selected group, if any."""

    view: View = View.HOME
    group_id: Optional[str] = None


HOME_STATE = NavigationState()


class NavigationController:
    """Drive view transitions against a ``GroupStore``.

    Only the selected group's id is kept; :attr:`selected_group` resolves it
    against the store on every read so callers always see the store's current
    value of that group.
    """

    def __init__(self, store: GroupStore, entry_draft: EntryDraft) -> None:
        self._store = store
        self._entry_draft = entry_draft
        self._state = HOME_STATE

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------
    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def view(self) -> View:
        return self._state.view

    @property
    def selected_group(self) -> Optional[Group]:
        if self._state.group_id is None:
            return None
        try:
            return self._resolve(self._state.group_id)
        except NotFoundError:
            return None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def open_group(self, group_id: str) -> Group:
        self._require(View.HOME, "open a group")
        group = self._resolve(group_id)
        self._set_state(NavigationState(View.GROUP_DETAIL, group.group_id))
        return group

    def open_entry_form(self) -> Group:
        self._require(View.GROUP_DETAIL, "open the entry form")
        group = self._resolve(self._state.group_id)
        self._entry_draft.begin(group)
        self._set_state(NavigationState(View.ENTRY_FORM, group.group_id))
        return group

    def save_entry(self) -> Group:
        self._require(View.ENTRY_FORM, "save an entry")
        group = self._resolve(self._state.group_id)
        try:
            updated = self._entry_draft.commit(self._store, group)
        except NotFoundError:
            self._fall_back_home()
            raise
        self._set_state(NavigationState(View.GROUP_DETAIL, updated.group_id))
        return updated

    def cancel_entry(self) -> Group:
        self._require(View.ENTRY_FORM, "cancel an entry")
        self._entry_draft.cancel()
        group = self._resolve(self._state.group_id)
        self._set_state(NavigationState(View.GROUP_DETAIL, group.group_id))
        return group

    def delete_entry(self, index: int) -> Group:
        self._require(View.GROUP_DETAIL, "delete an entry")
        group_id = self._state.group_id
        try:
            return self._store.remove_entry(group_id, index)
        except NotFoundError:
            self._fall_back_home()
            raise

    def go_home(self) -> None:
        self._require(View.GROUP_DETAIL, "return home")
        self._set_state(HOME_STATE)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _require(self, view: View, action: str) -> None:
        if self._state.view is not view:
            raise NavigationError(f"Cannot {action} from the {self._state.view.value} view")

    def _resolve(self, group_id: Optional[str]) -> Group:
        try:
            if group_id is None:
                raise NotFoundError("<none>")
            return self._store.get_group(group_id)
        except NotFoundError:
            self._fall_back_home()
            raise

    def _fall_back_home(self) -> None:
        if self._state != HOME_STATE:
            LOGGER.warning("Selected group %s is missing; returning home", self._state.group_id)
        self._entry_draft.cancel()
        self._state = HOME_STATE

    def _set_state(self, state: NavigationState) -> None:
        LOGGER.debug("Navigation %s -> %s", self._state.view.value, state.view.value)
        self._state = state


__all__ = ["View", "NavigationState", "NavigationController", "HOME_STATE"]
