"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from pagesmith.core.config.build_config import BuildConfig
from pagesmith.core.config.manager import find_project_root


def get_project_root(args: argparse.Namespace) -> Path:
    """Project root from ``--project-root`` or auto-detection."""
    explicit = getattr(args, "project_root", None)
    if explicit:
        return Path(explicit).expanduser().resolve()
    return find_project_root()


def get_config_path(args: argparse.Namespace) -> Optional[Path]:
    explicit = getattr(args, "config", None)
    return Path(explicit).expanduser() if explicit else None


def load_build_config(args: argparse.Namespace) -> BuildConfig:
    """Load the BuildConfig selected by the command-line flags.

    Raises:
        ConfigError: When configuration is unreadable or invalid
    """
    return BuildConfig.load(project_root=get_project_root(args), config_path=get_config_path(args))


__all__ = ["get_project_root", "get_config_path", "load_build_config"]
