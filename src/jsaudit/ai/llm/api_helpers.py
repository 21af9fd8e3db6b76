"""API key fallback logic and error formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsaudit.config import get_api_key, get_project_env_path, provider_key_var

if TYPE_CHECKING:
    from .client import LLMClient


def get_api_key_with_fallback(client: LLMClient) -> str:
    """Get API key from multiple sources with helpful error messages."""
    api_key = get_api_key(client.provider, client.project_dir)
    if api_key:
        return api_key

    env_var = provider_key_var(client.provider)

    env_path = (
        get_project_env_path(client.project_dir) if client.project_dir else ".jsaudit/.env"
    )

    error_msg = f"""API key not found for provider: {client.provider}

To set your API key, choose one of these methods:

1. Environment variable (quick):
   export JSAUDIT_LLM_API_KEY=your-api-key
   export JSAUDIT_LLM_PROVIDER={client.provider}
   # or: export {env_var}=your-api-key

2. Project .env file:
   echo "JSAUDIT_LLM_PROVIDER={client.provider}" >> {env_path}
   echo "JSAUDIT_LLM_API_KEY=your-api-key" >> {env_path}

3. Global config file:
   echo "JSAUDIT_LLM_API_KEY: your-api-key" >> ~/.jsaudit/config.yml
"""
    raise ValueError(error_msg)
