"""
pagesmith render command.

SUMMARY: Expand includes in a single page and print the result
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pagesmith.cli import (
    OutputFormatter,
    add_config_flag,
    add_json_flag,
    add_max_depth_flag,
    add_project_root_flag,
    load_build_config,
)
from pagesmith.core.composition.engine import TemplateEngine
from pagesmith.core.exceptions import PagesmithError

SUMMARY = "Expand includes in a single page and print the result"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "page",
        type=str,
        help="Page file to render",
    )
    parser.add_argument(
        "--components",
        type=str,
        default=None,
        help="Component root (default: paths.components_dir from config)",
    )
    add_max_depth_flag(parser)
    add_json_flag(parser)
    add_project_root_flag(parser)
    add_config_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    page = Path(args.page)

    try:
        config = load_build_config(args)
        component_root = Path(args.components) if args.components else config.components_dir
        max_depth = args.max_depth if args.max_depth is not None else config.max_depth

        content = page.read_text(encoding="utf-8")
    except (PagesmithError, OSError, UnicodeDecodeError) as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    engine = TemplateEngine(
        component_root=component_root,
        max_depth=max_depth,
        placeholder_policy=config.placeholder_policy,
    )
    html, report = engine.process(content, page_name=page.name, source_path=page)

    if formatter.json_mode:
        formatter.json_output({"content": html, "report": report.to_dict()})
    else:
        formatter.text(html)
    return 0
