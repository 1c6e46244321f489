"""Shared utilities (I/O, merging, subprocess)."""
from .io import ensure_directory, read_yaml
from .merge import deep_merge, merge_arrays

__all__ = [
    "ensure_directory",
    "read_yaml",
    "deep_merge",
    "merge_arrays",
]
