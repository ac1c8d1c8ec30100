"""
App paths for Group Manager.

The application keeps no user data on disk; only logs are written, under
~/.group_manager (override with GROUP_MANAGER_HOME).
"""

from __future__ import annotations

import os
from pathlib import Path


APP_FOLDER_NAME = ".group_manager"
HOME_ENV_VAR = "GROUP_MANAGER_HOME"


def app_user_root() -> Path:
    override = os.getenv(HOME_ENV_VAR)
    root = Path(override).expanduser() if override else Path.home() / APP_FOLDER_NAME
    root.mkdir(parents=True, exist_ok=True)
    return root


def app_logs_dir() -> Path:
    p = app_user_root() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p


__all__ = [
    "APP_FOLDER_NAME",
    "HOME_ENV_VAR",
    "app_user_root",
    "app_logs_dir",
]
