"""Prover settings loaded from YAML.

Values may reference environment variables as ``${NAME}`` or ``${NAME:default}``,
anywhere inside a string; the placeholder is replaced by the variable's value,
or the default when the variable is unset.
"""

import logging
import os
import re
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional

_PLACEHOLDER = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}")


def _substitute(value: Any) -> Any:
    if isinstance(value, str):
        return _PLACEHOLDER.sub(lambda m: os.environ.get(m.group("name"), m.group("default") or ""), value)
    elif isinstance(value, dict):
        return {k: _substitute(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_substitute(v) for v in value]
    return value


def search_paths() -> List[Path]:
    """Candidate config files, highest priority first."""
    return [
        Path.cwd() / "configs" / "default.yaml",
        Path(__file__).parent.parent / "configs" / "default.yaml",
        Path.home() / ".propatlas" / "config.yaml",
    ]


class Config:
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_config_file()
        with open(self.config_path, 'r') as f:
            self.config = _substitute(yaml.safe_load(f) or {})

    def _find_config_file(self) -> str:
        for path in search_paths():
            if path.exists():
                return str(path)
        raise FileNotFoundError("No configuration file found")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key, e.g. ``resolution.strategy``."""
        value = self.config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def log_level(self) -> int:
        """
        Numeric level for ``logging.level``.

        Raises:
            ValueError: If the configured name is not a logging level
        """
        level = self.get("logging.level", "WARNING")
        if isinstance(level, int):
            return level
        number = logging.getLevelName(str(level).strip().upper())
        if not isinstance(number, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        return number

    def update(self, updates: Dict[str, Any]):
        """Deep-merge new values into the configuration."""
        def deep_update(d, u):
            for k, v in u.items():
                if isinstance(v, dict):
                    d[k] = deep_update(d.get(k, {}), v)
                else:
                    d[k] = v
            return d

        self.config = deep_update(self.config, updates)


# Global config instance
_config = None


def get_config(config_path: Optional[str] = None) -> Config:
    """Get the global configuration, reloading it when a path is given."""
    global _config
    if _config is None or config_path is not None:
        _config = Config(config_path)
    return _config


def reset_config():
    """Forget the global configuration so the next get_config() reloads it."""
    global _config
    _config = None
