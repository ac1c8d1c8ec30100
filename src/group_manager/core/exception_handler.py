"""
Global exception handler for the group manager.
Logs uncaught exceptions and asks the UI to report them.
"""

import logging
import sys

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication, QMessageBox


class GlobalExceptionHandler(QObject):
    """Route uncaught exceptions to the log and a user-facing dialog."""

    show_error_dialog = Signal(str, str)  # exc_type, exc_value

    def __init__(self):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self._original_hook = sys.excepthook

    def handle_exception(self, exc_type, exc_value, exc_traceback):
        """Handle uncaught exceptions globally."""
        if issubclass(exc_type, KeyboardInterrupt):
            self._original_hook(exc_type, exc_value, exc_traceback)
            return

        self.logger.critical(
            "Uncaught exception occurred",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

        # Dialog is shown on the main thread via the signal
        if QApplication.instance():
            self.show_error_dialog.emit(exc_type.__name__, str(exc_value))

    def show_error_dialog_on_main_thread(self, exc_type_name: str, exc_value: str):
        QMessageBox.critical(
            None,
            "Application Error",
            f"An unexpected error occurred:\n\n"
            f"{exc_type_name}: {exc_value}\n\n"
            "Details have been written to the application log."
        )

    def install(self):
        """Install the global exception handler."""
        sys.excepthook = self.handle_exception
        self.show_error_dialog.connect(self.show_error_dialog_on_main_thread)
        self.logger.info("Global exception handler installed")

    def uninstall(self):
        """Restore original exception handler."""
        sys.excepthook = self._original_hook
