"""Static asset copying."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_directory(source: Path, destination: Path) -> bool:
    """Copy ``source`` recursively into ``destination``.

    Returns:
        False (with a warning logged) when ``source`` does not exist, True otherwise
    """
    if not source.is_dir():
        logger.warning("Asset source directory %s does not exist. Skipping.", source)
        return False
    shutil.copytree(source, destination, dirs_exist_ok=True)
    return True


def clean_directory(path: Path) -> bool:
    """Remove ``path`` recursively if it exists; returns whether anything was removed."""
    if not path.exists():
        return False
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    return True


__all__ = ["copy_directory", "clean_directory"]
