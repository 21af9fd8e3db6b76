"""OpenAI/OpenRouter provider implementation for LLM client."""

import json


def chat_openai(
    client, message: str, system_prompt: str | None = None, *, max_tokens: int = 4096
) -> str:
    """Chat with OpenAI-compatible chat completions API."""
    if getattr(client, "client", None) is None:
        raise RuntimeError("LLM client is closed; cannot call chat_openai.")
    if client.provider == "openrouter":
        base = client.base_url or "https://openrouter.ai/api/v1"
    else:
        base = client.base_url or "https://api.openai.com/v1"

    url = f"{base.rstrip('/')}/chat/completions"

    headers = {
        "Authorization": f"Bearer {client.api_key}",
        "Content-Type": "application/json",
    }

    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": message})

    payload = {
        "model": client.model,
        "messages": messages,
        "max_tokens": max_tokens,
    }

    response = client.client.post(url, headers=headers, json=payload)
    raw_text = response.text

    if response.status_code >= 400:
        response.raise_for_status()

    try:
        data = response.json()
    except json.JSONDecodeError as e:
        raise ValueError(
            f"OpenAI/OpenRouter API returned invalid JSON (status {response.status_code}): {e}. "
            f"Raw response: {raw_text[:500]!r}"
        ) from e

    if not isinstance(data, dict):
        raise ValueError(
            f"OpenAI/OpenRouter API response is not a dict (got {type(data).__name__}). "
            f"Raw response: {raw_text[:500]!r}"
        )
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise ValueError(
            f"OpenAI/OpenRouter API response missing or empty 'choices'. "
            f"Raw response: {raw_text[:500]!r}"
        )
    first = choices[0]
    message_obj = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message_obj, dict) or "content" not in message_obj:
        raise ValueError(
            f"OpenAI/OpenRouter API response choices[0] missing 'message' with 'content'. "
            f"Raw response: {raw_text[:500]!r}"
        )
    return message_obj["content"] or ""
