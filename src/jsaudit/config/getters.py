"""Typed lookups over the layered jsaudit configuration."""

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from .env_loader import load_global_config, load_project_config
from .settings import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_WORKERS,
    ScanSettings,
)

T = TypeVar("T", int, float)

# Keys the vendor SDKs export, consulted when JSAUDIT_LLM_API_KEY is unset.
PROVIDER_KEY_VARS = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """Return ``key`` from the first layer that sets it.

    Layers, highest priority first: environment variable, project
    ``.jsaudit/.env``, global ``~/.jsaudit/config.yml``, then ``default``.
    Empty strings count as unset.
    """
    value = os.environ.get(key)
    if value:
        return value

    value = load_project_config(project_dir).get(key)
    if value:
        return value

    value = load_global_config().get(key)
    if value not in (None, ""):
        return value

    return default


def _get_number(key: str, project_dir: Path | None, cast: Callable[[Any], T]) -> T | None:
    raw = get_config(key, project_dir)
    if raw is None:
        return None
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value for {key}: {raw!r}") from None


def provider_key_var(provider: str) -> str:
    """Vendor environment variable holding the API key for ``provider``."""
    return PROVIDER_KEY_VARS.get(provider, f"{provider.upper()}_API_KEY")


def get_api_key(provider: str = "anthropic", project_dir: Path | None = None) -> str | None:
    """API key for ``provider``: JSAUDIT_LLM_API_KEY first, then the vendor variable."""
    return get_config("JSAUDIT_LLM_API_KEY", project_dir) or get_config(
        provider_key_var(provider), project_dir
    )


def get_llm_provider(project_dir: Path | None = None) -> str:
    """Get LLM provider (default: anthropic)."""
    return get_config("JSAUDIT_LLM_PROVIDER", project_dir, default="anthropic")


def get_llm_model(project_dir: Path | None = None) -> str | None:
    return get_config("JSAUDIT_LLM_MODEL", project_dir)


def get_llm_base_url(project_dir: Path | None = None) -> str | None:
    return get_config("JSAUDIT_LLM_BASE_URL", project_dir)


def get_chunk_size(project_dir: Path | None = None) -> int:
    """Maximum characters per analyzer request."""
    value = _get_number("JSAUDIT_CHUNK_SIZE", project_dir, int)
    return DEFAULT_CHUNK_SIZE if value is None else value


def get_chunk_overlap(project_dir: Path | None = None) -> int | None:
    """Configured chunk overlap, or None so it is derived from the chunk size."""
    return _get_number("JSAUDIT_CHUNK_OVERLAP", project_dir, int)


def get_http_timeout(project_dir: Path | None = None) -> float:
    value = _get_number("JSAUDIT_HTTP_TIMEOUT", project_dir, float)
    return DEFAULT_HTTP_TIMEOUT if value is None else value


def get_workers(project_dir: Path | None = None) -> int:
    """Assets analyzed concurrently (default 1, strictly sequential)."""
    value = _get_number("JSAUDIT_WORKERS", project_dir, int)
    return DEFAULT_WORKERS if value is None else value


def load_scan_settings(
    project_dir: Path | None = None,
    *,
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
    http_timeout: float | None = None,
    workers: int | None = None,
) -> ScanSettings:
    """Build ScanSettings from configuration.

    Keyword arguments (command-line flags) win over every configuration
    layer. When no layer sets an overlap it is derived from the final chunk
    size. Raises ValueError for unparsable or inconsistent values.
    """
    return ScanSettings(
        chunk_size=chunk_size if chunk_size is not None else get_chunk_size(project_dir),
        chunk_overlap=(
            chunk_overlap if chunk_overlap is not None else get_chunk_overlap(project_dir)
        ),
        http_timeout=http_timeout if http_timeout is not None else get_http_timeout(project_dir),
        workers=workers if workers is not None else get_workers(project_dir),
    )
