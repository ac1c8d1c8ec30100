"""Dialog for creating groups."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from src.group_manager.core.models import Field
from src.group_manager.core.session import GroupManagerSession, SessionSnapshot

LOGGER = logging.getLogger(__name__)


class CreateGroupDialog(QDialog):
    """Collect a group name and its custom fields.

    Every edit is forwarded to the session's group draft; the dialog only
    renders what the session publishes.
    """

    def __init__(self, session: GroupManagerSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session = session
        self.remove_buttons: Dict[str, QPushButton] = {}
        self.setWindowTitle("Create New Group")
        self.setModal(True)
        self._build_ui()
        self._session.state_changed.connect(self._render)
        self._session.open_create_dialog()
        self._render(self._session.snapshot())

    # ------------------------------------------------------------------
    # UI assembly
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Enter group name...")
        self.name_edit.textEdited.connect(self._session.set_group_name)
        form.addRow("Group Name", self.name_edit)

        self.field_edit = QLineEdit()
        self.field_edit.setPlaceholderText("Field name (e.g., Email, Phone)")
        self.field_edit.textEdited.connect(self._session.set_pending_field_name)
        self.field_edit.returnPressed.connect(self._add_field)
        self.add_field_button = QPushButton("+")
        self.add_field_button.setToolTip("Add field")
        self.add_field_button.setAutoDefault(False)
        self.add_field_button.clicked.connect(self._add_field)
        form.addRow("Custom Fields", self._wrap_with_button(self.field_edit, self.add_field_button))

        self._chips_host = QWidget()
        self._chips_layout = QHBoxLayout(self._chips_host)
        self._chips_layout.setContentsMargins(0, 0, 0, 0)
        self._chips_layout.setSpacing(6)
        form.addRow("", self._chips_host)

        layout.addLayout(form)

        self.create_button = QPushButton("Create Group")
        self.create_button.setMinimumHeight(40)
        self.create_button.setAutoDefault(False)
        self.create_button.clicked.connect(self._handle_create)
        layout.addWidget(self.create_button)

    def _wrap_with_button(self, line_edit: QLineEdit, button: QPushButton) -> QWidget:
        widget = QWidget()
        h_layout = QHBoxLayout(widget)
        h_layout.setContentsMargins(0, 0, 0, 0)
        h_layout.addWidget(line_edit)
        h_layout.addWidget(button)
        return widget

    def _build_chip(self, item: Field) -> QWidget:
        chip = QWidget()
        chip.setStyleSheet("background: #eef2f7; border-radius: 8px;")
        h_layout = QHBoxLayout(chip)
        h_layout.setContentsMargins(8, 2, 4, 2)
        h_layout.addWidget(QLabel(item.name))
        remove = QPushButton("×")
        remove.setFlat(True)
        remove.setAutoDefault(False)
        remove.setFixedWidth(20)
        remove.clicked.connect(lambda _=False, fid=item.field_id: self._session.remove_draft_field(fid))
        h_layout.addWidget(remove)
        self.remove_buttons[item.field_id] = remove
        return chip

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _add_field(self) -> None:
        self._session.add_draft_field()

    def _handle_create(self) -> None:
        if self._session.create_group():
            self.accept()

    def _render(self, snapshot: SessionSnapshot) -> None:
        draft = snapshot.group_draft
        if self.name_edit.text() != draft.name:
            self.name_edit.setText(draft.name)
        if self.field_edit.text() != draft.pending_field_name:
            self.field_edit.setText(draft.pending_field_name)

        current = tuple(self.remove_buttons)
        wanted = tuple(item.field_id for item in draft.fields)
        if current != wanted:
            while self._chips_layout.count():
                child = self._chips_layout.takeAt(0)
                widget = child.widget()
                if widget:
                    widget.deleteLater()
            self.remove_buttons = {}
            for item in draft.fields:
                self._chips_layout.addWidget(self._build_chip(item))
            self._chips_layout.addStretch()
        self._chips_host.setVisible(bool(draft.fields))
        self.create_button.setEnabled(snapshot.can_create_group)

    def done(self, result: int) -> None:  # noqa: D401 - Qt override
        try:
            self._session.state_changed.disconnect(self._render)
        except (TypeError, RuntimeError):  # Already disconnected
            pass
        if result != QDialog.Accepted:
            self._session.close_create_dialog()
        super().done(result)


__all__ = ["CreateGroupDialog"]
