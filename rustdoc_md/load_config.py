"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from rustdoc_md.deep_merge import deep_merge
from rustdoc_md.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "manifest_path": "Cargo.toml",
    "output_path": "docs/api",
    "toolchain": "nightly",
    "packages": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Configuration file not found: {p}"
            raise ConfigError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in {p}: {e}"
            raise ConfigError(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Configuration in {p} must be a mapping"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    return config
