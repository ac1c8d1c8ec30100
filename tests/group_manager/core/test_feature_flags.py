"""Tests for group manager feature flags."""

from __future__ import annotations

import pytest

from src.group_manager.core.feature_flags import FeatureFlags


def test_defaults_without_settings() -> None:
    flags = FeatureFlags.from_settings(None)

    assert flags.enforce_unique_field_names is True
    assert flags.confirm_entry_deletion is False
    assert flags.debug_logging is False


def test_settings_override() -> None:
    settings = {
        "feature_flags": {
            "enforce_unique_field_names": "no",
            "confirm_entry_deletion": True,
            "unknown_flag": True,
        }
    }

    flags = FeatureFlags.from_settings(settings)

    assert flags.enforce_unique_field_names is False
    assert flags.confirm_entry_deletion is True
    assert "unknown_flag" not in flags.as_dict()


def test_environment_has_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GROUP_MANAGER_ENFORCE_UNIQUE_FIELDS", "off")
    monkeypatch.setenv("GROUP_MANAGER_DEBUG", "1")

    flags = FeatureFlags.from_settings({"feature_flags": {"enforce_unique_field_names": True}})

    assert flags.enforce_unique_field_names is False
    assert flags.debug_logging is True


def test_unparseable_environment_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GROUP_MANAGER_CONFIRM_DELETE", "maybe")

    assert FeatureFlags.from_settings().confirm_entry_deletion is False


def test_malformed_settings_section_is_ignored() -> None:
    flags = FeatureFlags.from_settings({"feature_flags": ["confirm_entry_deletion"]})

    assert flags == FeatureFlags()
    assert set(flags.as_dict()) == set(FeatureFlags.ENV_MAPPING)
