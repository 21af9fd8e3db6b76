"""jsaudit CLI - JavaScript asset discovery and AI-assisted security review."""

from jsaudit.ai.llm import LLMClient
from jsaudit.cli_commands import config_command, scan_command, version_command  # noqa: F401
from jsaudit.cli_commands.shared import app, console
from jsaudit.config import (
    create_global_config,
    create_project_config_template,
    get_project_env_path,
    load_global_config,
    load_project_config,
    load_scan_settings,
)
from jsaudit.modules.jsscan import (
    LLMAnalyzer,
    print_scan_summary,
    run_scan,
    write_json_report,
)

__all__ = [
    "LLMAnalyzer",
    "LLMClient",
    "app",
    "console",
    "create_global_config",
    "create_project_config_template",
    "get_project_env_path",
    "load_global_config",
    "load_project_config",
    "load_scan_settings",
    "main",
    "print_scan_summary",
    "run_scan",
    "write_json_report",
]


def main() -> None:
    """Entry point for the jsaudit console script."""
    app()


if __name__ == "__main__":
    main()
