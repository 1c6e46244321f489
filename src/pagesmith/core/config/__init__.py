"""Configuration loading: bundled defaults, project YAML, environment overrides."""
from .build_config import BuildConfig
from .manager import ENV_PREFIX, PROJECT_CONFIG_NAMES, ConfigManager, find_project_root

__all__ = [
    "BuildConfig",
    "ConfigManager",
    "ENV_PREFIX",
    "PROJECT_CONFIG_NAMES",
    "find_project_root",
]
