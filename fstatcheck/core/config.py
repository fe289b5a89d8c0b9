"""Configuration loading with layered overrides."""

from pathlib import Path
from typing import Any

import yaml

PROJECT_CONFIG = Path(".fstatcheck.yaml")

# Keys read from config files; anything else is ignored
CONFIG_KEYS = ("warning", "critical", "timeout", "command", "log_dir")


def user_config_path() -> Path:
    """Per-user config file location."""
    return Path.home() / ".config" / "fstatcheck" / "config.yaml"


def load_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML config file if it exists."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def get_config_value(key: str) -> Any:
    """Get config value with project -> user -> None precedence."""
    for path in (PROJECT_CONFIG, user_config_path()):
        data = load_config_file(path)
        if key in data:
            return data[key]
    return None


def load_config() -> dict[str, Any]:
    """Collect every known key from the config layers."""
    config = {}
    for key in CONFIG_KEYS:
        value = get_config_value(key)
        if value is not None:
            config[key] = value
    return config
