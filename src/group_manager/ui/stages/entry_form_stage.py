"""Entry form stage collecting one value per field."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from src.group_manager.core.models import Group
from src.group_manager.core.presentation import field_placeholder
from src.group_manager.core.session import SessionSnapshot


class EntryFormStage(QWidget):
    """Form for adding an entry to the selected group."""

    value_changed = Signal(str, str)  # field name, value
    save_requested = Signal()
    cancel_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.inputs: Dict[str, QLineEdit] = {}
        self._schema: Optional[Tuple[str, Tuple[str, ...]]] = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(16)

        self.title_label = QLabel("Add Entry")
        font = QFont(self.title_label.font())
        font.setPointSize(20)
        font.setBold(True)
        self.title_label.setFont(font)
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel()
        self.subtitle_label.setStyleSheet("color: #666;")
        layout.addWidget(self.subtitle_label)

        self._form_host = QWidget()
        self._form = QFormLayout(self._form_host)
        layout.addWidget(self._form_host)

        buttons = QHBoxLayout()
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setMinimumHeight(36)
        self.cancel_button.clicked.connect(self.cancel_requested.emit)
        buttons.addWidget(self.cancel_button)
        self.save_button = QPushButton("Save Entry")
        self.save_button.setMinimumHeight(36)
        self.save_button.setDefault(True)
        self.save_button.clicked.connect(self.save_requested.emit)
        buttons.addWidget(self.save_button)
        layout.addLayout(buttons)
        layout.addStretch()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, snapshot: SessionSnapshot) -> None:
        group = snapshot.selected_group
        if group is None:
            self._rebuild_inputs(None)
            return
        schema = (group.group_id, group.field_names)
        if schema != self._schema:
            self._rebuild_inputs(group)
        self.subtitle_label.setText(f"to {group.name}")
        for name, line_edit in self.inputs.items():
            value = snapshot.entry_values.get(name, "")
            if line_edit.text() != value:
                line_edit.setText(value)

    def _rebuild_inputs(self, group: Optional[Group]) -> None:
        while self._form.rowCount():
            self._form.removeRow(0)
        self.inputs = {}
        self._schema = None
        if group is None:
            self.subtitle_label.clear()
            return
        for item in group.fields:
            line_edit = QLineEdit()
            line_edit.setObjectName(f"entry-field-{item.field_id}")
            line_edit.setPlaceholderText(field_placeholder(item.name))
            line_edit.setMinimumHeight(32)
            line_edit.textEdited.connect(lambda text, name=item.name: self.value_changed.emit(name, text))
            line_edit.returnPressed.connect(self.save_requested.emit)
            self._form.addRow(item.name, line_edit)
            self.inputs[item.name] = line_edit
        self._schema = (group.group_id, group.field_names)


__all__ = ["EntryFormStage"]
