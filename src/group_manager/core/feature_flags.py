"""Feature flags for the group manager.

Flags start from their defaults, are overridden by an optional in-memory
settings mapping and finally by ``GROUP_MANAGER_*`` environment variables
(``.env`` is loaded before flags are read at startup).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Tuple

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _coerce_flag(value: Any, current: bool) -> bool:
    """Read a flag from a settings value or environment string, keeping ``current`` if unclear."""
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return current


@dataclass(frozen=True)
class FeatureFlags:
    enforce_unique_field_names: bool = True
    confirm_entry_deletion: bool = False
    debug_logging: bool = False

    ENV_MAPPING: ClassVar[Mapping[str, str]] = {
        "enforce_unique_field_names": "GROUP_MANAGER_ENFORCE_UNIQUE_FIELDS",
        "confirm_entry_deletion": "GROUP_MANAGER_CONFIRM_DELETE",
        "debug_logging": "GROUP_MANAGER_DEBUG",
    }

    SETTINGS_KEY: ClassVar[str] = "feature_flags"

    @classmethod
    def flag_names(cls) -> Tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None = None) -> "FeatureFlags":
        """Build flags from ``settings[SETTINGS_KEY]`` and the environment, environment last."""
        values = cls().as_dict()

        overrides = (settings or {}).get(cls.SETTINGS_KEY)
        if isinstance(overrides, Mapping):
            for name in values.keys() & overrides.keys():
                values[name] = _coerce_flag(overrides[name], values[name])

        for name, env_name in cls.ENV_MAPPING.items():
            if env_name in os.environ:
                values[name] = _coerce_flag(os.environ[env_name], values[name])

        return cls(**values)

    def as_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name in self.flag_names()}


__all__ = ["FeatureFlags"]
