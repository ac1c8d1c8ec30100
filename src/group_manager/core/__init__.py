"""
Core state for the group manager: store, drafts, navigation and session.
"""

from .errors import (
    EntryIndexError,
    GroupManagerError,
    NavigationError,
    NotFoundError,
    ValidationError,
)
from .models import Entry, Field, Group
from .group_store import GroupStore
from .drafts import EntryDraft, GroupDraft
from .navigation import NavigationController, NavigationState, View
from .feature_flags import FeatureFlags
from .session import GroupDraftSnapshot, GroupManagerSession, SessionSnapshot

__all__ = [
    'EntryIndexError',
    'GroupManagerError',
    'NavigationError',
    'NotFoundError',
    'ValidationError',
    'Entry',
    'Field',
    'Group',
    'GroupStore',
    'EntryDraft',
    'GroupDraft',
    'NavigationController',
    'NavigationState',
    'View',
    'FeatureFlags',
    'GroupDraftSnapshot',
    'GroupManagerSession',
    'SessionSnapshot',
]
