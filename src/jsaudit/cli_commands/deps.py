"""Scan collaborators resolved through the ``jsaudit.cli`` facade at call time.

Looking names up on the facade when a command runs, rather than at import,
lets tests monkeypatch ``jsaudit.cli.LLMClient`` or ``jsaudit.cli.run_scan``.
"""

from importlib import import_module
from pathlib import Path
from types import ModuleType

from jsaudit.config import ScanSettings


def cli_module() -> ModuleType:
    """Return the public CLI facade module."""
    return import_module("jsaudit.cli")


def scan_settings(project_dir: Path, **overrides: int | float | None) -> ScanSettings:
    """Layered scan settings with command-line flags applied on top.

    Raises ValueError for unparsable or inconsistent values.
    """
    return cli_module().load_scan_settings(project_dir, **overrides)


def open_llm(project_dir: Path):
    """Create the LLM client for a scan; raises ValueError when no API key is set."""
    return cli_module().LLMClient(project_dir=project_dir)
