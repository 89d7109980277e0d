"""Path management for artinit.

Handles the ~/.artinit home directory (server configuration) and the
per-project .jfrog/projects directory that init writes into.
"""

from __future__ import annotations

import os
from pathlib import Path

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".artinit"

# Environment variable to override home directory
ARTINIT_HOME_ENV = "ARTINIT_HOME"

SERVERS_FILE_NAME = "servers.yml"

# Project-local config layout
PROJECT_CONFIG_DIR = ".jfrog"
PROJECTS_SUBDIR = "projects"
BUILD_CONFIG_FILE_NAME = "build.yaml"


def get_artinit_home() -> Path:
    """Get the artinit home directory path.

    Resolution order:
    1. ARTINIT_HOME environment variable (if set)
    2. ~/.artinit (default)

    Returns:
        Path to the artinit home directory.
    """
    env_home = os.environ.get(ARTINIT_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME


def get_servers_file(home: Path | None = None) -> Path:
    """Path of the servers configuration file."""
    if home is None:
        home = get_artinit_home()
    return home / "config" / SERVERS_FILE_NAME


def get_projects_dir(project_path: Path) -> Path:
    """Directory holding the project's build and deployment configs."""
    return Path(project_path) / PROJECT_CONFIG_DIR / PROJECTS_SUBDIR


def get_build_name(project_path: str | Path) -> str:
    """Build name recorded in build.yaml.

    This is the name of the directory containing the project directory.
    Trailing separators are ignored, so "/tmp/p/myapp/" yields "p".
    Relative paths are made absolute first.
    """
    normalized = os.path.abspath(str(project_path))
    return os.path.basename(os.path.dirname(normalized))
