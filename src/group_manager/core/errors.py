"""Exceptions raised by the group store, drafts and navigation."""

from __future__ import annotations


class GroupManagerError(Exception):
    """Base class for recoverable group manager errors."""


class ValidationError(GroupManagerError):
    """Raised when a group or draft fails validation."""


class NotFoundError(GroupManagerError):
    """Raised when an operation references a group id that is not in the store."""

    def __init__(self, group_id: str) -> None:
        super().__init__(f"Group {group_id!r} not found")
        self.group_id = group_id


class EntryIndexError(GroupManagerError, IndexError):
    """Raised when an entry index falls outside the group's entry sequence."""

    def __init__(self, group_id: str, index: int, size: int) -> None:
        super().__init__(f"Entry index {index} out of range for group {group_id!r} ({size} entries)")
        self.group_id = group_id
        self.index = index
        self.size = size


class NavigationError(GroupManagerError):
    """Raised when a transition is not allowed from the current view."""


__all__ = [
    "GroupManagerError",
    "ValidationError",
    "NotFoundError",
    "EntryIndexError",
    "NavigationError",
]
