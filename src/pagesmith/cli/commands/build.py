"""
pagesmith build command.

SUMMARY: Build the site into the output directory
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pagesmith.cli import (
    OutputFormatter,
    add_config_flag,
    add_json_flag,
    add_project_root_flag,
    load_build_config,
)
from pagesmith.core.build.site import SiteBuilder
from pagesmith.core.exceptions import PagesmithError
from pagesmith.core.stdlib_logging import configure_stdlib_logging

SUMMARY = "Build the site into the output directory"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_WARNINGS = 2


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when any page has warnings (missing includes, depth cap, stripped placeholders)",
    )
    add_json_flag(parser)
    add_project_root_flag(parser)
    add_config_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Build the site - delegates to SiteBuilder."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = load_build_config(args)
        if not getattr(args, "verbose", False):
            log_file = getattr(args, "log_file", None)
            configure_stdlib_logging(level=config.log_level, log_path=Path(log_file) if log_file else None)

        report = SiteBuilder(config).build()
    except PagesmithError as e:
        logging.getLogger(__name__).error("Build failed: %s", e)
        formatter.error(e, error_code=e.__class__.__name__)
        return EXIT_FAILED

    formatter.success(report.to_dict(), report.summary())

    if report.has_errors:
        return EXIT_FAILED
    if getattr(args, "strict", False) and report.warning_count:
        return EXIT_WARNINGS
    return EXIT_OK
