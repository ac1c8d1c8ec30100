"""
Stages shown by the main window, one per navigation view.
"""

from .home_stage import HomeStage
from .group_detail_stage import GroupDetailStage
from .entry_form_stage import EntryFormStage

__all__ = [
    'HomeStage',
    'GroupDetailStage',
    'EntryFormStage',
]
