"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml


def get_global_config_dir() -> Path:
    """Return the global ~/.jsaudit config directory."""
    return Path.home() / ".jsaudit"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.jsaudit/config.yml."""
    config_path = get_global_config_dir() / "config.yml"
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Global config {config_path} must be a mapping.")
        return data
    return {}


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .jsaudit/.env."""
    from jsaudit.config.project_setup import get_project_env_path

    env_path = get_project_env_path(project_dir or Path.cwd())
    return load_env_file(env_path)
