"""Core LLM client class."""

from __future__ import annotations

from pathlib import Path

import httpx

from jsaudit.config import get_llm_base_url, get_llm_model, get_llm_provider

from .anthropic_impl import chat_anthropic
from .openai_impl import chat_openai

DEFAULT_MODELS = {
    "anthropic": "claude-3-5-sonnet-20241022",
    "openai": "gpt-4o",
    "openrouter": "openai/gpt-4o-mini",
}


class LLMClient:
    """Client for interacting with LLM APIs (Claude, GPT-4, etc.)."""

    def __init__(
        self,
        provider: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        project_dir: Path | None = None,
        timeout: float = 120.0,
    ):
        self.provider = (provider or get_llm_provider(project_dir)).lower()
        self.project_dir = project_dir

        if api_key:
            self.api_key = api_key
        else:
            from .api_helpers import get_api_key_with_fallback

            self.api_key = get_api_key_with_fallback(self)

        self.model = (
            model
            or get_llm_model(project_dir)
            or DEFAULT_MODELS.get(self.provider, DEFAULT_MODELS["anthropic"])
        )
        self.base_url = get_llm_base_url(project_dir)
        self.client: httpx.Client | None = httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying HTTP client and release the connection pool."""
        client = getattr(self, "client", None)
        if client is not None:
            client.close()
            self.client = None

    def __enter__(self) -> LLMClient:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def chat(
        self, message: str, system_prompt: str | None = None, *, max_tokens: int = 4096
    ) -> str:
        """Send a chat message and get a response."""
        if self.provider == "anthropic":
            return chat_anthropic(self, message, system_prompt, max_tokens=max_tokens)
        elif self.provider in ("openai", "openrouter"):
            return chat_openai(self, message, system_prompt, max_tokens=max_tokens)
        else:
            raise ValueError(f"Unknown provider: {self.provider}")
