"""
Dialogs for the group manager UI.
"""

from .create_group_dialog import CreateGroupDialog

__all__ = [
    'CreateGroupDialog',
]
