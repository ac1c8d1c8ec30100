"""Qt widgets for the group manager."""
