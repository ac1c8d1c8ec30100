#!/usr/bin/env python3
"""Entry point for the Group Manager UI."""


def main() -> int:
    """Launch the Group Manager UI."""
    from src.group_manager import run

    print("Starting Group Manager...")
    return run()


if __name__ == "__main__":
    raise SystemExit(main())
