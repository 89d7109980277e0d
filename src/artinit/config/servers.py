"""Server configuration store.

Servers are kept in ~/.artinit/config/servers.yml:

    default: local-server
    servers:
      local-server:
        url: https://example.jfrog.io/artifactory
        accessToken: ${ARTIFACTORY_TOKEN}

String values support ${VAR} and ${VAR:-default} environment expansion
when read. The file is rewritten verbatim (unexpanded) on modification.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from artinit.config.validation import validate_servers_config
from artinit.core.errors import ConfigurationError
from artinit.core.logging import get_logger
from artinit.core.paths import get_servers_file

LOGGER = get_logger(__name__)

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


@dataclass
class ServerDetails:
    """Connection details of one configured server."""

    server_id: str
    url: str
    access_token: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the servers.yml entry (without the id)."""
        data: Dict[str, Any] = {"url": self.url}
        if self.access_token:
            data["accessToken"] = self.access_token
        if self.user:
            data["user"] = self.user
        if self.password:
            data["password"] = self.password
        return data

    @classmethod
    def from_dict(cls, server_id: str, data: Dict[str, Any]) -> "ServerDetails":
        """Create from a servers.yml entry."""
        return cls(
            server_id=server_id,
            url=str(data.get("url") or "").rstrip("/"),
            access_token=data.get("accessToken") or None,
            user=data.get("user") or None,
            password=data.get("password") or None,
        )


class ServerConfigStore:
    """Reads and updates the configured servers.

    The store holds no state besides its file path; every call reads the
    file again so concurrent edits by other processes are picked up.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path if path is not None else get_servers_file()

    def list_servers(self) -> List[ServerDetails]:
        """Return all configured servers, in file order."""
        servers = self._load().get("servers") or {}
        return [
            ServerDetails.from_dict(str(server_id), expand_env_vars(entry))
            for server_id, entry in servers.items()
            if isinstance(entry, dict)
        ]

    def get_server(self, server_id: str) -> ServerDetails:
        """Return the details of a configured server.

        Raises:
            ConfigurationError: If no server with this id is configured.
        """
        for server in self.list_servers():
            if server.server_id == server_id:
                return server
        raise ConfigurationError(f"Server '{server_id}' is not configured")

    def get_default_server_id(self) -> str:
        """Return the id of the default server.

        Raises:
            ConfigurationError: If no default server is configured.
        """
        default = self._load().get("default")
        if not default:
            raise ConfigurationError(
                "No default server configured. "
                "Run 'artinit config add' or pass --server-id."
            )
        return str(default)

    def add_server(
        self,
        server: ServerDetails,
        make_default: bool = False,
        overwrite: bool = False,
    ) -> None:
        """Add a server to the configuration.

        The first server added becomes the default automatically.

        Raises:
            ConfigurationError: If the id exists and overwrite is False.
        """
        data = self._load()
        servers = data.get("servers") or {}
        data["servers"] = servers
        if server.server_id in servers and not overwrite:
            raise ConfigurationError(
                f"Server '{server.server_id}' already exists. Use --overwrite to replace it."
            )
        servers[server.server_id] = server.to_dict()
        if make_default or not data.get("default"):
            data["default"] = server.server_id
        self._save(data)
        LOGGER.info(f"Saved server '{server.server_id}' to {self.path}")

    def set_default(self, server_id: str) -> None:
        """Make an existing server the default."""
        data = self._load()
        if server_id not in (data.get("servers") or {}):
            raise ConfigurationError(f"Server '{server_id}' is not configured")
        data["default"] = server_id
        self._save(data)

    def remove_server(self, server_id: str) -> None:
        """Remove a server. Removing the default clears the default."""
        data = self._load()
        servers = data.get("servers") or {}
        if server_id not in servers:
            raise ConfigurationError(f"Server '{server_id}' is not configured")
        del servers[server_id]
        if data.get("default") == server_id:
            data.pop("default")
        self._save(data)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            LOGGER.debug(f"No servers file at {self.path}")
            return {}
        data = load_yaml_file(self.path)
        validate_servers_config(data, source=str(self.path))
        servers = data.get("servers")
        if servers is not None and not isinstance(servers, dict):
            raise ConfigurationError(
                f"'servers' in {self.path} must be a mapping, got {type(servers).__name__}"
            )
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            content = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
            self.path.write_text(content, encoding="utf-8")
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to write {self.path}: {e}") from e


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed dictionary (empty for an empty file).

    Raises:
        ConfigurationError: If the file can't be read, isn't valid YAML, or
            isn't a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return data


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.

    Args:
        data: Config data (dict, list, or scalar).

    Returns:
        Data with environment variables expanded.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""
