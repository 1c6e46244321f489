"""Output formatting shared by the pagesmith commands.

stdout carries command results only (rendered HTML, summaries, JSON
payloads). Errors and logs go to stderr.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, TextIO


def format_json(data: Any, indent: int = 2) -> str:
    """Serialize ``data``; paths and datetimes fall back to ``str``."""
    return json.dumps(data, indent=indent, default=str)


class OutputFormatter:
    """Print command results as text or, with ``--json``, as JSON documents."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def _emit(self, payload: Any, stream: Optional[TextIO] = None) -> None:
        print(format_json(payload, indent=self.indent), file=stream or sys.stdout)

    def success(self, data: Dict[str, Any], message: str, *, status: str = "success") -> None:
        """Print ``message`` in text mode, or ``data`` tagged with ``status`` in JSON mode."""
        if self.json_mode:
            self._emit({"status": status, **data})
        else:
            print(message)

    def error(self, error: Exception, message: Optional[str] = None, *, error_code: str = "error") -> None:
        """Report ``error`` on stderr.

        In JSON mode the payload carries ``error_code`` and, for pagesmith
        exceptions, their ``context``.
        """
        msg = message or str(error)
        if not self.json_mode:
            print(f"Error: {msg}", file=sys.stderr)
            return

        payload: Dict[str, Any] = {"error": error_code, "message": msg}
        to_json_error = getattr(error, "to_json_error", None)
        if callable(to_json_error):
            payload["context"] = to_json_error().get("context", {})
        self._emit(payload, sys.stderr)

    def json_output(self, data: Any) -> None:
        self._emit(data)

    def text(self, message: str) -> None:
        print(message)


__all__ = ["OutputFormatter", "format_json"]
