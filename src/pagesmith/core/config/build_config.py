"""Typed view over the merged configuration used by the site builder."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .manager import ConfigManager


def _resolve(project_root: Path, value: str) -> Path:
    p = Path(value)
    return p if p.is_absolute() else (project_root / p)


@dataclass(frozen=True)
class BuildConfig:
    """Resolved build settings; every path is absolute."""

    project_root: Path
    src_dir: Path
    pages_dir: Path
    components_dir: Path
    assets_dir: Path
    output_dir: Path
    asset_folders: Tuple[str, ...] = ("css", "js", "images")
    max_depth: int = 10
    placeholder_policy: str = "keep"
    css_command: Optional[Union[str, Sequence[str]]] = None
    css_timeout: float = 120.0
    log_level: str = "INFO"
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any], project_root: Path) -> "BuildConfig":
        """Build from a merged, validated config dict."""
        root = Path(project_root).resolve()
        paths = cfg["paths"]
        css = cfg.get("css") or {}
        command = css.get("command")
        return cls(
            project_root=root,
            src_dir=_resolve(root, paths["src_dir"]),
            pages_dir=_resolve(root, paths["pages_dir"]),
            components_dir=_resolve(root, paths["components_dir"]),
            assets_dir=_resolve(root, paths["assets_dir"]),
            output_dir=_resolve(root, paths["output_dir"]),
            asset_folders=tuple(cfg["assets"]["folders"]),
            max_depth=int(cfg["includes"]["max_depth"]),
            placeholder_policy=str(cfg["placeholders"]["policy"]),
            css_command=tuple(command) if isinstance(command, list) else command,
            css_timeout=float(css.get("timeout", 120)),
            log_level=str((cfg.get("logging") or {}).get("level", "INFO")),
            raw=cfg,
        )

    @classmethod
    def load(cls, project_root: Optional[Path] = None, config_path: Optional[Path] = None) -> "BuildConfig":
        """Load, merge, and validate configuration for ``project_root``.

        Raises:
            ConfigError: When configuration is unreadable or invalid
        """
        manager = ConfigManager(project_root=project_root, config_path=config_path)
        return cls.from_dict(manager.load_config(validate=True), manager.project_root)


__all__ = ["BuildConfig"]
