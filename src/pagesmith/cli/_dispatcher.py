"""
Auto-discovery CLI dispatcher for pagesmith.

Scans the commands/ subfolder and registers every command module found.
Adding a new command = just add a .py file to commands/.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

from pagesmith.core.stdlib_logging import configure_stdlib_logging


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """
    Discover top-level commands under cli/commands.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"pagesmith.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="pagesmith",
        description="pagesmith - static HTML site builder with component includes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write logs to this file instead of stderr",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_commands().items()):
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        # Let module register its own arguments
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        # Set the main function as default handler
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    """Get pagesmith version string."""
    from pagesmith import __version__

    return __version__


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the pagesmith CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command or not getattr(args, "_func", None):
        parser.print_help()
        return 0

    configure_stdlib_logging(
        level="DEBUG" if args.verbose else "INFO",
        log_path=Path(args.log_file) if args.log_file else None,
    )

    try:
        return int(args._func(args) or 0)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


__all__ = ["build_parser", "discover_commands", "main", "run"]
