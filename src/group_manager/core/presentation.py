"""Display derivations shared by the views."""

from __future__ import annotations

from typing import List, Tuple

from .models import Field, Group

EMPTY_VALUE = "-"
DEFAULT_BADGE_LIMIT = 3


def entry_count_label(count: int) -> str:
    return f"{count} {'entry' if count == 1 else 'entries'}"


def field_badges(group: Group, limit: int = DEFAULT_BADGE_LIMIT) -> List[str]:
    """Return up to ``limit`` field names plus a ``+N more`` badge for the rest."""
    names = list(group.field_names)
    badges = names[:limit]
    hidden = len(names) - len(badges)
    if hidden > 0:
        badges.append(f"+{hidden} more")
    return badges


def display_value(value: str | None) -> str:
    """Return ``value`` unchanged, or ``EMPTY_VALUE`` when it is empty or missing."""
    return value or EMPTY_VALUE


def field_placeholder(field_name: str) -> str:
    return f"Enter {field_name.lower()}..."


def entry_rows(group: Group) -> List[Tuple[int, List[Tuple[Field, str]]]]:
    """Rows for the detail view, in the order deletion indexes refer to."""
    rows: List[Tuple[int, List[Tuple[Field, str]]]] = []
    for index, entry in enumerate(group.entries):
        cells = [(item, display_value(entry.get(item.name))) for item in group.fields]
        rows.append((index, cells))
    return rows


__all__ = [
    "EMPTY_VALUE",
    "entry_count_label",
    "field_badges",
    "display_value",
    "field_placeholder",
    "entry_rows",
]
