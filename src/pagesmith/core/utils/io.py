"""Filesystem helpers shared by the config layer and the site builder."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) unless it already exists as a directory.

    Raises:
        NotADirectoryError: If ``path`` exists but is a file
    """
    path = Path(path)
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_yaml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Parse a YAML file.

    An empty document yields ``default``. A missing or malformed file also
    yields ``default`` unless ``raise_on_error`` is set, in which case the
    ``FileNotFoundError``/``OSError``/``yaml.YAMLError`` propagates.

    Example:
        >>> cfg = read_yaml(Path("pagesmith.yaml"), default={})
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default
    return default if data is None else data


__all__ = ["ensure_directory", "read_yaml"]
