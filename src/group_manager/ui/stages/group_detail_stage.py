"""Group detail stage listing a group's entries."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from src.group_manager.core.models import Group
from src.group_manager.core.presentation import entry_count_label, entry_rows
from src.group_manager.core.session import SessionSnapshot


class GroupDetailStage(QWidget):
    """Show one group's entries with add and delete actions."""

    home_requested = Signal()
    add_entry_requested = Signal()
    delete_entry_requested = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.delete_buttons: List[QPushButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        top_bar = QHBoxLayout()
        top_bar.setContentsMargins(0, 0, 0, 0)
        top_bar.setSpacing(8)

        self.back_button = QPushButton("← Back")
        self.back_button.setCursor(Qt.PointingHandCursor)
        self.back_button.setFlat(True)
        self.back_button.clicked.connect(self.home_requested.emit)
        top_bar.addWidget(self.back_button)

        title_column = QVBoxLayout()
        self.title_label = QLabel()
        font = QFont(self.title_label.font())
        font.setPointSize(20)
        font.setBold(True)
        self.title_label.setFont(font)
        title_column.addWidget(self.title_label)
        self.count_label = QLabel()
        self.count_label.setStyleSheet("color: #666;")
        title_column.addWidget(self.count_label)
        top_bar.addLayout(title_column)
        top_bar.addStretch()

        self.add_button = QPushButton("+ Add Entry")
        self.add_button.setMinimumHeight(36)
        self.add_button.clicked.connect(self.add_entry_requested.emit)
        top_bar.addWidget(self.add_button)
        layout.addLayout(top_bar)

        self.empty_label = QLabel("No entries yet\n\nAdd your first entry to this group")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("color: #666; padding: 20px;")
        layout.addWidget(self.empty_label)

        self.table = QTableWidget(0, 0)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.NoSelection)
        layout.addWidget(self.table, 1)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, snapshot: SessionSnapshot) -> None:
        self._populate(snapshot.selected_group)

    def _populate(self, group: Optional[Group]) -> None:
        self.delete_buttons = []
        self.table.clearContents()
        if group is None:
            self.title_label.clear()
            self.count_label.clear()
            self.table.setRowCount(0)
            self.table.setColumnCount(0)
            return

        self.title_label.setText(group.name)
        self.count_label.setText(entry_count_label(group.entry_count))

        rows = entry_rows(group)
        self.empty_label.setVisible(not rows)
        self.table.setVisible(bool(rows))

        headers = list(group.field_names) + ["Actions"]
        self.table.setColumnCount(len(headers))
        self.table.setHorizontalHeaderLabels(headers)
        header = self.table.horizontalHeader()
        for column in range(len(group.fields)):
            header.setSectionResizeMode(column, QHeaderView.Stretch)
        header.setSectionResizeMode(len(group.fields), QHeaderView.ResizeToContents)

        self.table.setRowCount(len(rows))
        for row, cells in rows:
            for column, (_field, text) in enumerate(cells):
                self.table.setItem(row, column, QTableWidgetItem(text))
            delete_button = QPushButton("Delete")
            delete_button.setStyleSheet("QPushButton { color: #d32f2f; }")
            delete_button.clicked.connect(lambda _=False, index=row: self.delete_entry_requested.emit(index))
            self.table.setCellWidget(row, len(cells), delete_button)
            self.delete_buttons.append(delete_button)


__all__ = ["GroupDetailStage"]
