from __future__ import annotations

import logging
import sys
from pathlib import Path

from pagesmith.core.utils.io import ensure_directory

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_PAGESMITH_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, level: str = "INFO", log_path: Path | None = None) -> None:
    """Install the pagesmith handler on the root logger.

    Logs go to stderr, or to ``log_path`` when given, so stdout stays free for
    rendered pages and ``--json`` payloads.

    Idempotent per-process: if already configured for the same target, only the
    level is updated.
    """
    global _PAGESMITH_HANDLER, _CONFIGURED_TARGET

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _PAGESMITH_HANDLER is not None:
        _PAGESMITH_HANDLER.setLevel(_level_from_name(level))
        return

    # Replace the previously installed handler when switching targets.
    if _PAGESMITH_HANDLER is not None:
        root.removeHandler(_PAGESMITH_HANDLER)
        _PAGESMITH_HANDLER.close()
        _PAGESMITH_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        ensure_directory(Path(target).parent)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _PAGESMITH_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the pagesmith handler."""
    global _PAGESMITH_HANDLER, _CONFIGURED_TARGET
    if _PAGESMITH_HANDLER is not None:
        logging.getLogger().removeHandler(_PAGESMITH_HANDLER)
        _PAGESMITH_HANDLER.close()
    _PAGESMITH_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["LOG_FORMAT", "configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
