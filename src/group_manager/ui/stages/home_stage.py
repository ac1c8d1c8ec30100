"""Home stage listing groups and offering group creation."""

from __future__ import annotations

import logging
from typing import Dict, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from src.group_manager.core.models import Group
from src.group_manager.core.presentation import entry_count_label, field_badges
from src.group_manager.core.session import SessionSnapshot

LOGGER = logging.getLogger(__name__)

CARD_COLUMNS = 3


class HomeStage(QWidget):
    """Landing view that shows every group as a card."""

    create_group_requested = Signal()
    group_opened = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.open_buttons: Dict[str, QPushButton] = {}
        self._build_ui()

    # ------------------------------------------------------------------
    # UI assembly
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(20)

        layout.addWidget(self._build_header())

        action_row = QHBoxLayout()
        self.heading_label = QLabel("Your Groups")
        heading_font = QFont(self.heading_label.font())
        heading_font.setPointSize(16)
        heading_font.setBold(True)
        self.heading_label.setFont(heading_font)
        action_row.addWidget(self.heading_label)
        action_row.addStretch()

        self.create_button = QPushButton("+ Create Group")
        self.create_button.setMinimumHeight(40)
        self.create_button.setStyleSheet(
            "QPushButton { background-color: #2196f3; color: white; font-weight: bold; border-radius: 4px; padding: 0 16px; }"
            "QPushButton:hover { background-color: #1976d2; }"
        )
        self.create_button.clicked.connect(self.create_group_requested.emit)
        action_row.addWidget(self.create_button)
        layout.addLayout(action_row)

        self.empty_label = QLabel(
            "No groups yet\n\nCreate your first group to start organizing your data with custom fields"
        )
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("color: #999; padding: 40px;")
        layout.addWidget(self.empty_label)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        layout.addWidget(self._scroll, 1)

    def _build_header(self) -> QWidget:
        header = QWidget()
        h_layout = QVBoxLayout(header)
        title = QLabel("Group Manager")
        font = QFont(title.font())
        font.setPointSize(24)
        font.setBold(True)
        title.setFont(font)
        title.setAlignment(Qt.AlignCenter)

        subtitle = QLabel("Organize and manage your custom data groups")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet("color: #666; font-size: 14px;")

        h_layout.addWidget(title)
        h_layout.addWidget(subtitle)
        return header

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, snapshot: SessionSnapshot) -> None:
        self._populate_groups(snapshot.groups)

    def _populate_groups(self, groups: Sequence[Group]) -> None:
        self.open_buttons = {}
        has_groups = bool(groups)
        self.empty_label.setVisible(not has_groups)
        self.heading_label.setVisible(has_groups)
        self._scroll.setVisible(has_groups)

        container = QWidget()
        grid = QGridLayout(container)
        grid.setSpacing(12)
        for index, group in enumerate(groups):
            row, col = divmod(index, CARD_COLUMNS)
            grid.addWidget(self._build_group_card(group), row, col)
        grid.setRowStretch(grid.rowCount(), 1)

        old = self._scroll.takeWidget()
        if old is not None:
            old.deleteLater()
        self._scroll.setWidget(container)

    def _build_group_card(self, group: Group) -> QWidget:
        card = QFrame()
        card.setFrameShape(QFrame.Box)
        card.setStyleSheet(
            "QFrame { border: 1px solid #ddd; border-radius: 8px; background: white; padding: 16px; }"
            "QFrame:hover { border-color: #2196f3; background: #f5f5f5; }"
        )
        card.setCursor(Qt.PointingHandCursor)

        layout = QVBoxLayout(card)
        layout.setSpacing(8)
        name = QLabel(group.name)
        font = QFont(name.font())
        font.setBold(True)
        font.setPointSize(12)
        name.setFont(font)
        layout.addWidget(name)

        badge_row = QHBoxLayout()
        badge_row.setSpacing(4)
        for badge in field_badges(group):
            label = QLabel(badge)
            label.setStyleSheet("border: 1px solid #ccc; border-radius: 6px; padding: 2px 6px; font-size: 10px;")
            badge_row.addWidget(label)
        badge_row.addStretch()
        layout.addLayout(badge_row)

        count_label = QLabel(entry_count_label(group.entry_count))
        count_label.setStyleSheet("color: #555; font-size: 11px;")
        layout.addWidget(count_label)

        open_button = QPushButton("Open")
        open_button.setMinimumHeight(28)
        open_button.clicked.connect(lambda _=False, gid=group.group_id: self.group_opened.emit(gid))
        layout.addWidget(open_button)
        self.open_buttons[group.group_id] = open_button

        def _open(_event, gid: str = group.group_id) -> None:
            self.group_opened.emit(gid)

        card.mousePressEvent = _open  # type: ignore[assignment]
        return card


__all__ = ["HomeStage"]
