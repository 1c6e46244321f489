"""
pagesmith configuration management (YAML + environment overrides).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import jsonschema
import yaml

from pagesmith.core.exceptions import ConfigError
from pagesmith.core.utils.io import read_yaml
from pagesmith.core.utils.merge import deep_merge as _deep_merge
from pagesmith.data import get_data_path, read_yaml as read_bundled_yaml

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAMES = ("pagesmith.yaml", "pagesmith.yml")
ENV_PREFIX = "PAGESMITH_"


def find_project_root(start: Optional[Path] = None) -> Path:
    """Walk up from ``start`` to the nearest directory holding a pagesmith config file.

    Falls back to ``start`` (or the current directory) when none is found.
    """
    origin = Path(start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if any((candidate / name).is_file() for name in PROJECT_CONFIG_NAMES):
            return candidate
    return origin


class ConfigManager:
    """Load, merge, and validate pagesmith configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: PAGESMITH_<section>__<key>
    2. Project config: explicit ``config_path`` or <project-root>/pagesmith.yaml
    3. Bundled defaults: pagesmith.data/config/defaults.yaml
    """

    def __init__(self, project_root: Optional[Path] = None, config_path: Optional[Path] = None) -> None:
        self.project_root = Path(project_root).resolve() if project_root else find_project_root()
        self.config_path = Path(config_path) if config_path else self._find_project_config()
        self.schema_path = get_data_path("schemas", "config.schema.yaml")

    def _find_project_config(self) -> Optional[Path]:
        for name in PROJECT_CONFIG_NAMES:
            candidate = self.project_root / name
            if candidate.is_file():
                return candidate
        return None

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge dictionaries. Delegates to shared implementation."""
        return _deep_merge(base, override)

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file must be a YAML mapping: {path}",
                context={"path": str(path), "type": type(data).__name__},
            )
        return data

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        if value.strip().lower() in {"null", "none"}:
            return None
        return value.strip()

    def _parse_env_key(self, raw: str) -> List[str]:
        segs = raw.split("__")
        if any(seg == "" for seg in segs):
            raise ConfigError(f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.")
        return [seg.lower() for seg in segs]

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw:
                continue
            yield self._parse_env_key(raw), self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur: Union[Dict[str, Any], Any] = root
        for part in path[:-1]:
            if not isinstance(cur, dict):
                raise ConfigError(f"Environment override path traverses a non-mapping: {'.'.join(path)}")
            cur = cur.setdefault(part, {})
        if not isinstance(cur, dict):
            raise ConfigError(f"Environment override path traverses a non-mapping: {'.'.join(path)}")
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            logger.debug("Config override from environment: %s=%r", ".".join(path), typed_value)
            self._set_nested(cfg, path, typed_value)

    # ========== Loading ==========

    def validate(self, cfg: Dict[str, Any]) -> None:
        schema = read_yaml(self.schema_path, default=None, raise_on_error=True)
        try:
            jsonschema.validate(instance=cfg, schema=schema)
        except jsonschema.ValidationError as exc:
            location = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(
                f"Invalid configuration at {location}: {exc.message}",
                context={"path": location},
            ) from exc

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration.

        Args:
            validate: Validate the merged result against the bundled JSON Schema

        Returns:
            Merged configuration dict

        Raises:
            ConfigError: Unreadable/invalid YAML, malformed env override, or schema violation
        """
        cfg = copy.deepcopy(read_bundled_yaml("config", "defaults.yaml"))

        if self.config_path is not None:
            logger.debug("Loading project config %s", self.config_path)
            cfg = self.deep_merge(cfg, self.load_yaml(self.config_path))

        self.apply_env_overrides(cfg)

        level = (cfg.get("logging") or {}).get("level")
        if isinstance(level, str):
            cfg["logging"]["level"] = level.upper()

        if validate:
            self.validate(cfg)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX", "PROJECT_CONFIG_NAMES", "find_project_root"]
