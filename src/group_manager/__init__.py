"""Top-level package for the group manager application."""

from .core.feature_flags import FeatureFlags
from .core.group_store import GroupStore
from .core.session import GroupManagerSession, SessionSnapshot
from .main_window import MainWindow, main as run

__all__ = [
    "FeatureFlags",
    "GroupStore",
    "GroupManagerSession",
    "SessionSnapshot",
    "MainWindow",
    "run",
]
