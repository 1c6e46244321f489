"""
pagesmith config command.

SUMMARY: Show the merged, validated configuration
"""

from __future__ import annotations

import argparse

import yaml

from pagesmith.cli import OutputFormatter, add_config_flag, add_json_flag, add_project_root_flag
from pagesmith.cli._utils import get_config_path, get_project_root
from pagesmith.core.config.manager import ConfigManager
from pagesmith.core.exceptions import ConfigError

SUMMARY = "Show the merged, validated configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_json_flag(parser)
    add_project_root_flag(parser)
    add_config_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        manager = ConfigManager(project_root=get_project_root(args), config_path=get_config_path(args))
        cfg = manager.load_config(validate=True)
    except ConfigError as e:
        formatter.error(e, error_code="ConfigError")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            {
                "project_root": str(manager.project_root),
                "config_file": str(manager.config_path) if manager.config_path else None,
                "config": cfg,
            }
        )
    else:
        formatter.text(f"# project root: {manager.project_root}")
        formatter.text(f"# config file: {manager.config_path or '(bundled defaults only)'}")
        formatter.text(yaml.safe_dump(cfg, sort_keys=False).rstrip())
    return 0
