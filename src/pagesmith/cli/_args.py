"""Common CLI argument registration utilities.

Reusable argument registration functions shared by commands.
"""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_project_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --project-root flag for project root override."""
    parser.add_argument(
        "--project-root",
        type=str,
        help="Project root (default: nearest directory with pagesmith.yaml, else cwd)",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag for an explicit config file."""
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a config file (default: <project-root>/pagesmith.yaml)",
    )


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def add_max_depth_flag(parser: argparse.ArgumentParser) -> None:
    """Add --max-depth flag overriding the include pass cap."""
    parser.add_argument(
        "--max-depth",
        type=non_negative_int,
        default=None,
        help="Maximum include expansion passes",
    )


__all__ = [
    "add_json_flag",
    "add_project_root_flag",
    "add_config_flag",
    "add_max_depth_flag",
    "non_negative_int",
]
