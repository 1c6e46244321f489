"""
pagesmith CLI package.

Commands are auto-discovered from the ``commands/`` subfolder: each module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json
from ._args import (
    add_config_flag,
    add_json_flag,
    add_max_depth_flag,
    add_project_root_flag,
)
from ._utils import get_config_path, get_project_root, load_build_config

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    # Argument helpers
    "add_config_flag",
    "add_json_flag",
    "add_max_depth_flag",
    "add_project_root_flag",
    # Utilities
    "get_config_path",
    "get_project_root",
    "load_build_config",
]
