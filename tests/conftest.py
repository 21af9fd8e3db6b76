"""Test configuration and fixtures for jsaudit."""

import asyncio
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from jsaudit.modules.jsscan import Analyzer, FindingsSet
from jsaudit.tools.http import HTTPResponse

CONFIG_ENV_KEYS = (
    "JSAUDIT_LLM_PROVIDER",
    "JSAUDIT_LLM_API_KEY",
    "JSAUDIT_LLM_MODEL",
    "JSAUDIT_LLM_BASE_URL",
    "JSAUDIT_CHUNK_SIZE",
    "JSAUDIT_CHUNK_OVERLAP",
    "JSAUDIT_HTTP_TIMEOUT",
    "JSAUDIT_WORKERS",
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
    "OPENROUTER_API_KEY",
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Run in an empty project dir with a fake home and no jsaudit env vars."""
    home = temp_dir / "home"
    home.mkdir()
    project = temp_dir / "project"
    project.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(project)
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return project


def make_response(url: str, body: str = "", status_code: int = 200) -> HTTPResponse:
    return HTTPResponse(
        url=url,
        status_code=status_code,
        headers={},
        body=body,
        response_time=0.01,
    )


class FakeFetcher:
    """Serve canned responses or raise canned errors per URL."""

    def __init__(self, routes: dict[str, HTTPResponse | Exception]):
        self.routes = routes
        self.calls: list[str] = []

    async def fetch(self, url: str) -> HTTPResponse:
        self.calls.append(url)
        outcome = self.routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeAnalyzer(Analyzer):
    """Analyzer that delegates to a callable and records every chunk it sees."""

    def __init__(self, handler: Callable[[str], FindingsSet] | None = None, delay: float = 0.0):
        self.handler = handler or (lambda code: FindingsSet())
        self.delay = delay
        self.calls: list[str] = []
        self.active = 0
        self.max_active = 0

    async def analyze(self, code: str) -> FindingsSet:
        self.calls.append(code)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delay)
            return self.handler(code)
        finally:
            self.active -= 1
