"""Project config directory and template setup."""

import logging
from pathlib import Path

from .env_loader import get_global_config_dir

logger = logging.getLogger(__name__)

PROJECT_ENV_TEMPLATE = """# jsaudit project configuration
# Values here override ~/.jsaudit/config.yml; environment variables override both.

# JSAUDIT_LLM_PROVIDER=anthropic
# JSAUDIT_LLM_API_KEY=
# JSAUDIT_LLM_MODEL=
# JSAUDIT_LLM_BASE_URL=

# JSAUDIT_CHUNK_SIZE=500000
# JSAUDIT_CHUNK_OVERLAP=5000
# JSAUDIT_HTTP_TIMEOUT=30
# JSAUDIT_WORKERS=1
"""

GLOBAL_CONFIG_TEMPLATE = """# jsaudit global configuration
# JSAUDIT_LLM_PROVIDER: anthropic
# JSAUDIT_LLM_API_KEY: your-api-key
# JSAUDIT_LLM_MODEL: claude-3-5-sonnet-20241022
"""


def get_project_config_dir(project_dir: Path) -> Path:
    """Return the per-project .jsaudit directory."""
    return project_dir / ".jsaudit"


def get_project_env_path(project_dir: Path) -> Path:
    """Get the project .env path."""
    return get_project_config_dir(project_dir) / ".env"


def create_project_config_template(project_dir: Path) -> Path:
    """Create .jsaudit/.env with commented defaults unless it already exists."""
    env_path = get_project_env_path(project_dir)
    if env_path.exists():
        return env_path
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text(PROJECT_ENV_TEMPLATE)
    logger.debug("Created project config template at %s", env_path)
    return env_path


def create_global_config() -> Path:
    """Create ~/.jsaudit/config.yml unless it already exists."""
    config_path = get_global_config_dir() / "config.yml"
    if config_path.exists():
        return config_path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(GLOBAL_CONFIG_TEMPLATE)
    return config_path
