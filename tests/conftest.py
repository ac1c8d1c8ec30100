"""Shared pytest configuration for group manager tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.group_manager.core.feature_flags import FeatureFlags  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_app_home(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests from writing logs into the user's real home directory."""

    app_home = tmp_path / "group_manager_home"
    app_home.mkdir()
    monkeypatch.setenv("GROUP_MANAGER_HOME", str(app_home))
    for env_name in FeatureFlags.ENV_MAPPING.values():
        monkeypatch.delenv(env_name, raising=False)
    yield
