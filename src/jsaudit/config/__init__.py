"""
Configuration management for jsaudit.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.jsaudit/.env)
3. Global config file (~/.jsaudit/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_dir,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    get_api_key,
    get_chunk_overlap,
    get_chunk_size,
    get_config,
    get_http_timeout,
    get_llm_base_url,
    get_llm_model,
    get_llm_provider,
    get_workers,
    load_scan_settings,
    provider_key_var,
)
from .project_setup import (
    create_global_config,
    create_project_config_template,
    get_project_config_dir,
    get_project_env_path,
)
from .settings import ScanSettings, default_overlap_for

__all__ = [
    # env_loader
    "get_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "get_api_key",
    "get_chunk_overlap",
    "get_chunk_size",
    "get_config",
    "get_http_timeout",
    "get_llm_base_url",
    "get_llm_model",
    "get_llm_provider",
    "get_workers",
    "load_scan_settings",
    "provider_key_var",
    # project_setup
    "create_global_config",
    "create_project_config_template",
    "get_project_config_dir",
    "get_project_env_path",
    # settings
    "ScanSettings",
    "default_overlap_for",
]
