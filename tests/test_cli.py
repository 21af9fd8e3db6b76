"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import jsaudit.cli as cli
from jsaudit.cli import app
from jsaudit.modules.jsscan import (
    AssetError,
    AssetReport,
    Domain,
    Endpoint,
    ErrorKind,
    FindingsSet,
    ScanResult,
    TargetUnreachableError,
    UrlList,
)

runner = CliRunner()


class FakeLLM:
    """Stands in for LLMClient; records whether it was closed."""

    instances: list["FakeLLM"] = []

    def __init__(self, project_dir: Path | None = None, **kwargs):
        self.project_dir = project_dir
        self.closed = False
        FakeLLM.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


@pytest.fixture
def fake_scan(monkeypatch: pytest.MonkeyPatch, isolated_env: Path) -> dict:
    """Replace the LLM client and scan runner on the CLI facade."""
    captured: dict = {}
    FakeLLM.instances = []

    async def run_scan(target, analyzer, settings=None, progress=None):
        captured["target"] = target
        captured["settings"] = settings
        if progress:
            progress("● resolved 2 script(s)")
        return ScanResult(
            target="example.com",
            reports=[
                AssetReport(
                    asset_url="https://example.com/app.js",
                    findings=FindingsSet(endpoints=[Endpoint("/api/v1/users")]),
                ),
                AssetReport(
                    asset_url="https://example.com/blocked.js",
                    error=AssetError(ErrorKind.ACCESS_DENIED, "Access denied (403)."),
                ),
            ],
        )

    monkeypatch.setattr(cli, "LLMClient", FakeLLM)
    monkeypatch.setattr(cli, "run_scan", run_scan)
    return captured


class TestScanCommand:
    """Tests for the scan command."""

    def test_scan_urls(self, fake_scan: dict) -> None:
        result = runner.invoke(app, ["scan", "https://example.com/app.js"])

        assert result.exit_code == 0, result.output
        assert fake_scan["target"] == UrlList(("https://example.com/app.js",))
        assert "/api/v1/users" in result.output
        assert "resolved 2 script(s)" in result.output
        assert FakeLLM.instances[0].closed

    def test_scan_domain_with_overrides(self, fake_scan: dict) -> None:
        result = runner.invoke(
            app,
            [
                "scan",
                "--domain",
                "example.com",
                "--workers",
                "3",
                "--chunk-size",
                "1000",
            ],
        )

        assert result.exit_code == 0, result.output
        assert fake_scan["target"] == Domain("example.com")
        assert fake_scan["settings"].workers == 3
        assert fake_scan["settings"].chunk_size == 1000
        assert fake_scan["settings"].chunk_overlap == 10

    def test_scan_urls_file(self, fake_scan: dict, isolated_env: Path) -> None:
        urls_file = isolated_env / "urls.txt"
        urls_file.write_text("https://a.com/1.js\n\n  https://a.com/2.js  \n")

        result = runner.invoke(app, ["scan", "--urls-file", str(urls_file)])

        assert result.exit_code == 0, result.output
        assert fake_scan["target"] == UrlList(("https://a.com/1.js", "https://a.com/2.js"))

    def test_scan_writes_json(self, fake_scan: dict, isolated_env: Path) -> None:
        out = isolated_env / "out" / "report.json"

        result = runner.invoke(app, ["scan", "https://example.com/app.js", "--json", str(out)])

        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text())
        assert [a["asset_url"] for a in data["assets"]] == [
            "https://example.com/app.js",
            "https://example.com/blocked.js",
        ]
        assert data["assets"][0]["findings"]["endpoints"] == ["/api/v1/users"]
        assert data["assets"][1]["error"]["kind"] == "access_denied"

    def test_domain_and_urls_conflict(self, fake_scan: dict) -> None:
        result = runner.invoke(app, ["scan", "https://a.com/x.js", "--domain", "a.com"])

        assert result.exit_code == 1
        assert "not both" in result.output
        assert "target" not in fake_scan

    def test_invalid_overlap(self, fake_scan: dict) -> None:
        result = runner.invoke(
            app, ["scan", "https://a.com/x.js", "--chunk-size", "10", "--overlap", "10"]
        )

        assert result.exit_code == 1
        assert "chunk_overlap" in result.output

    def test_missing_api_key(self, isolated_env: Path) -> None:
        result = runner.invoke(app, ["scan", "https://a.com/x.js"])

        assert result.exit_code == 1
        assert "API key not found" in result.output

    def test_scan_failure_exits_nonzero(
        self, fake_scan: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def failing_scan(target, analyzer, settings=None, progress=None):
            error = AssetError(ErrorKind.ACCESS_DENIED, "denied")
            raise TargetUnreachableError("Could not retrieve https://example.com", error)

        monkeypatch.setattr(cli, "run_scan", failing_scan)

        result = runner.invoke(app, ["scan", "--domain", "example.com"])

        assert result.exit_code == 1
        assert "Scan failed" in result.output

    def test_blank_domain_rejected_before_llm_setup(self, fake_scan: dict) -> None:
        result = runner.invoke(app, ["scan", "--domain", " "])

        assert result.exit_code == 1
        assert "Domain cannot be empty." in result.output
        assert FakeLLM.instances == []
        assert "target" not in fake_scan

    def test_empty_target_reported_before_missing_key(self, isolated_env: Path) -> None:
        result = runner.invoke(app, ["scan"])

        assert result.exit_code == 1
        assert "URL list cannot be empty." in result.output
        assert "API key not found" not in result.output


class TestConfigCommand:
    """Tests for the config command."""

    def test_show_without_project_config(self, isolated_env: Path) -> None:
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "No project config found" in result.output

    def test_init_then_show_masks_keys(self, isolated_env: Path) -> None:
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert (isolated_env / ".jsaudit" / ".env").exists()

        env_path = isolated_env / ".jsaudit" / ".env"
        env_path.write_text("JSAUDIT_LLM_API_KEY=sk-ant-0123456789abcdef\nJSAUDIT_WORKERS=2\n")
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "JSAUDIT_WORKERS=2" in result.output
        assert "0123456789abcdef" not in result.output

    def test_init_global(self, isolated_env: Path) -> None:
        result = runner.invoke(app, ["config", "init", "--global"])
        assert result.exit_code == 0
        assert (Path.home() / ".jsaudit" / "config.yml").exists()

    def test_unknown_action(self, isolated_env: Path) -> None:
        result = runner.invoke(app, ["config", "wipe"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert result.output.startswith("jsaudit ")
