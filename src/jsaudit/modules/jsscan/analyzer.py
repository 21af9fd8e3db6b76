"""Analyzer boundary: turn one chunk of JavaScript into structured findings."""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any

import httpx

from .errors import AnalysisError
from .models import FindingsSet

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert application security engineer specializing in advanced JavaScript static analysis. Your task is to perform a deep security scan on the provided JavaScript code, focusing on how user input can lead to client-side attacks.

Your analysis should cover these categories:

1.  **Hardcoded Secrets**: Find any exposed API keys, access tokens, passwords, or other sensitive credentials.

2.  **API Endpoints & URLs**: Extract all URLs, subdomains, and API endpoints to map the application's attack surface.

3.  **Code Vulnerabilities (Deep Analysis)**: Go beyond simple pattern matching. Trace how data, especially from sources like 'location.search', 'document.cookie', 'window.name', or form inputs, is handled. Specifically look for:
    *   **Cross-Site Scripting (XSS)**: Identify where untrusted user input is passed to dangerous sinks like `innerHTML`, `outerHTML`, `document.write()`, or direct HTML element creation without proper sanitization.
    *   **Prototype Pollution**: Look for unsafe recursive merge functions or property assignments (e.g., using square bracket notation `a[b]`) that could allow an attacker to modify `Object.prototype`.
    *   **Client-Side Injections**: Detect cases where user input is used to construct code for `eval()`, `setTimeout()`, or to build URLs for API requests, which could lead to injection attacks.
    *   **Open Redirects**: Find instances where user-supplied URLs are used for navigation without validation.

For each vulnerability, provide a clear title, a detailed description of the risk and how it can be exploited, and the exact code snippet. If no issues are found in a category, return an empty array for it.

Respond with a single JSON object and nothing else, using exactly this shape:
{"secrets": [{"type": "API Key", "snippet": "<line of code>"}],
 "endpoints": ["<url or path>"],
 "vulnerabilities": [{"title": "<title>", "description": "<risk and exploitation>", "snippet": "<exact code>"}]}"""

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)


class Analyzer(ABC):
    """Contract for content analyzers.

    Implementations must raise AnalysisError rather than return an empty
    FindingsSet when no usable output was produced, so "no issues found"
    stays distinguishable from "analysis failed".
    """

    @abstractmethod
    async def analyze(self, code: str) -> FindingsSet:
        """Analyze one chunk of JavaScript source."""


def parse_findings(text: str) -> FindingsSet:
    """Parse a model response into findings, tolerating fences and chatter."""
    if not text or not text.strip():
        raise AnalysisError(
            "The AI model returned an empty analysis. This could be due to a "
            "content safety filter or an internal error."
        )

    candidates = [text.strip()]
    fenced = _FENCED_JSON_RE.search(text)
    if fenced:
        candidates.append(fenced.group(1))
    first, last = text.find("{"), text.rfind("}")
    if 0 <= first < last:
        candidates.append(text[first : last + 1])

    data: dict[str, Any] | None = None
    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            data = parsed
            break
    if data is None:
        raise AnalysisError(
            f"The AI model returned an invalid analysis (not a JSON object): {text[:200]!r}"
        )

    try:
        return FindingsSet.from_dict(data)
    except ValueError as exc:
        raise AnalysisError(f"The AI model returned a malformed analysis: {exc}") from exc


class LLMAnalyzer(Analyzer):
    """Analyzer backed by a chat LLM (see jsaudit.ai.llm.LLMClient)."""

    def __init__(self, llm: Any, max_tokens: int = 4096):
        self.llm = llm
        self.max_tokens = max_tokens

    async def analyze(self, code: str) -> FindingsSet:
        message = f"Code to analyze:\n```\n{code}\n```"
        try:
            raw = await asyncio.to_thread(
                self.llm.chat, message, SYSTEM_PROMPT, max_tokens=self.max_tokens
            )
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise AnalysisError(
                f"Analysis request failed with status {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise AnalysisError(f"Analysis request failed: {exc}") from exc
        except ValueError as exc:
            raise AnalysisError(str(exc)) from exc

        findings = parse_findings(raw if isinstance(raw, str) else "")
        logger.debug(
            "Chunk analysis: %d secrets, %d endpoints, %d vulnerabilities",
            len(findings.secrets),
            len(findings.endpoints),
            len(findings.vulnerabilities),
        )
        return findings
