"""Main window hosting the home, group detail and entry form stages."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from dotenv import load_dotenv
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QMainWindow,
    QMessageBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from src.config.logging_config import setup_logging
from src.config.startup_config import clean_startup
from src.group_manager.core import FeatureFlags, GroupManagerSession, SessionSnapshot, View
from src.group_manager.core.exception_handler import GlobalExceptionHandler
from src.group_manager.ui.dialogs import CreateGroupDialog
from src.group_manager.ui.stages import EntryFormStage, GroupDetailStage, HomeStage


class MainWindow(QMainWindow):
    """Switch between stages according to the session's navigation state."""

    def __init__(self, session: GroupManagerSession | None = None) -> None:
        super().__init__()
        self.logger = logging.getLogger(__name__)

        self.session = session or GroupManagerSession(self, feature_flags=FeatureFlags.from_settings())
        self.session.state_changed.connect(self._render)
        self.session.action_refused.connect(self._on_action_refused)

        self.setWindowTitle("Group Manager")
        self.resize(1200, 800)

        self._create_menu_bar()
        self._create_central_stack()
        self.statusBar().showMessage("Ready")
        self._render(self.session.snapshot())

    # ------------------------------------------------------------------
    # UI construction helpers
    # ------------------------------------------------------------------
    def _create_menu_bar(self) -> None:
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")
        file_menu.addAction("New Group", self._open_create_dialog)
        file_menu.addSeparator()
        file_menu.addAction("Exit", self.close)

        help_menu = menubar.addMenu("Help")
        help_menu.addAction("About", self._show_about)

    def _create_central_stack(self) -> None:
        central_widget = QWidget(self)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._stack = QStackedWidget()
        self._stack.setObjectName("groupManagerStack")
        layout.addWidget(self._stack)

        self.home_stage = HomeStage()
        self.home_stage.create_group_requested.connect(self._open_create_dialog)
        self.home_stage.group_opened.connect(self.session.open_group)

        self.detail_stage = GroupDetailStage()
        self.detail_stage.home_requested.connect(self.session.go_home)
        self.detail_stage.add_entry_requested.connect(self.session.open_entry_form)
        self.detail_stage.delete_entry_requested.connect(self._delete_entry)

        self.entry_stage = EntryFormStage()
        self.entry_stage.value_changed.connect(self.session.set_entry_value)
        self.entry_stage.save_requested.connect(self.session.save_entry)
        self.entry_stage.cancel_requested.connect(self.session.cancel_entry)

        self._stages = {
            View.HOME: self.home_stage,
            View.GROUP_DETAIL: self.detail_stage,
            View.ENTRY_FORM: self.entry_stage,
        }
        for stage in self._stages.values():
            self._stack.addWidget(stage)

        self.setCentralWidget(central_widget)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def current_stage(self) -> QWidget:
        return self._stack.currentWidget()

    def _render(self, snapshot: SessionSnapshot) -> None:
        stage = self._stages[snapshot.view]
        stage.render(snapshot)
        if self._stack.currentWidget() is not stage:
            self.logger.debug("Showing %s stage", snapshot.view.value)
            self._stack.setCurrentWidget(stage)
        self._update_window_title(snapshot)

    def _update_window_title(self, snapshot: SessionSnapshot) -> None:
        if snapshot.selected_group is not None:
            self.setWindowTitle(f"Group Manager - {snapshot.selected_group.name}")
        else:
            self.setWindowTitle("Group Manager")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def _open_create_dialog(self) -> None:
        if self.session.navigation.view is not View.HOME:
            self.statusBar().showMessage("Return home to create a group", 3000)
            return
        dialog = CreateGroupDialog(self.session, self)
        if dialog.exec() == QDialog.Accepted:
            groups = self.session.snapshot().groups
            if groups:
                self.statusBar().showMessage(f"Group created: {groups[-1].name}", 5000)

    def _delete_entry(self, index: int) -> None:
        if self.session.feature_flags.confirm_entry_deletion:
            reply = QMessageBox.question(
                self,
                "Delete Entry",
                "Delete this entry?",
                QMessageBox.Yes | QMessageBox.No,
                QMessageBox.No,
            )
            if reply != QMessageBox.Yes:
                return
        self.session.delete_entry(index)

    def _on_action_refused(self, action: str, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Group Manager",
            "<h3>Group Manager</h3>"
            "<p>Define groups with custom fields and keep their entries in one place.</p>"
            "<p>Data lives in memory for the current session only.</p>",
        )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Group Manager")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args, _unknown = parser.parse_known_args(list(argv))
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the group manager UI."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    load_dotenv()
    feature_flags = FeatureFlags.from_settings()

    clean_startup()
    setup_logging(debug=args.debug or feature_flags.debug_logging)
    logger = logging.getLogger(__name__)
    logger.info("Starting Group Manager")

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Group Manager")
    app.setApplicationDisplayName("Group Manager")

    exception_handler = GlobalExceptionHandler()
    exception_handler.install()

    session = GroupManagerSession(feature_flags=feature_flags)
    window = MainWindow(session)
    window.show()
    try:
        return app.exec()
    finally:
        exception_handler.uninstall()


if __name__ == "__main__":
    sys.exit(main())
