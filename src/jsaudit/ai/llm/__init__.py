"""LLM client for jsaudit AI integration."""

from __future__ import annotations

from .client import DEFAULT_MODELS, LLMClient

__all__ = [
    "DEFAULT_MODELS",
    "LLMClient",
]
