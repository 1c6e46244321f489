from __future__ import annotations

from typing import Any, Dict, Mapping


class PagesmithError(Exception):
    """Base exception for pagesmith."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(PagesmithError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        PagesmithError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class BuildError(PagesmithError, RuntimeError):
    """Raised for fatal site build failures (missing pages dir, unsafe output dir, CSS step)."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        PagesmithError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class IncludeResolutionError(PagesmithError):
    """Raised by fail-closed include resolution when a diagnostic marker is emitted."""


__all__ = [
    "PagesmithError",
    "ConfigError",
    "BuildError",
    "IncludeResolutionError",
]
