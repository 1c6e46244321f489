"""Deep merge used to layer configuration sources.

Bundled defaults sit at the bottom, the project's ``pagesmith.yaml`` goes on
top. Mappings merge key by key; lists replace unless the override list opens
with a marker:

- ``"+"``: append the remaining items to the base list
- ``"="``: replace with the remaining items (same as no marker)
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

APPEND_MARKER = "+"
REPLACE_MARKER = "="


def deep_merge(base: Dict[str, Any], override: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a new mapping with ``override`` layered over ``base``.

    Neither argument is modified.

    Example:
        >>> deep_merge({"paths": {"src_dir": "src", "output_dir": "dist"}},
        ...            {"paths": {"output_dir": "public"}})
        {'paths': {'src_dir': 'src', 'output_dir': 'public'}}
    """
    merged: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = merge_arrays(current, value)
        else:
            merged[key] = value
    return merged


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Combine two lists per the marker in ``override[0]``.

    Example:
        >>> merge_arrays(["css", "js"], ["+", "fonts"])
        ['css', 'js', 'fonts']
        >>> merge_arrays(["css", "js"], ["images"])
        ['images']
        >>> merge_arrays(["css", "js"], [])
        []
    """
    if override and override[0] == APPEND_MARKER:
        return [*base, *override[1:]]
    if override and override[0] == REPLACE_MARKER:
        return list(override[1:])
    return list(override)


__all__ = ["APPEND_MARKER", "REPLACE_MARKER", "deep_merge", "merge_arrays"]
