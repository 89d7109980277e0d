"""Idempotent creation of default repositories."""

from __future__ import annotations

from typing import Any, Callable, Dict

from artinit.config.servers import ServerConfigStore, ServerDetails
from artinit.core.logging import get_logger
from artinit.core.models import RepositoryKind, Technology
from artinit.repositories.client import ArtifactoryClient
from artinit.repositories.naming import RepositoryNaming, get_repository_naming

LOGGER = get_logger(__name__)

# Kinds in creation order; the virtual repository aggregates the other two
DEFAULT_REPO_KINDS = (RepositoryKind.LOCAL, RepositoryKind.REMOTE, RepositoryKind.VIRTUAL)


class RepositoryProvisioner:
    """Ensures the default local, remote and virtual repositories exist.

    Every call first checks whether the repository is already there, so
    running init repeatedly never recreates or modifies repositories.
    """

    def __init__(
        self,
        server_store: ServerConfigStore,
        client_factory: Callable[[ServerDetails], ArtifactoryClient] = ArtifactoryClient,
    ) -> None:
        self.server_store = server_store
        self.client_factory = client_factory
        self._clients: Dict[str, ArtifactoryClient] = {}

    def ensure_default_repo(
        self,
        kind: RepositoryKind,
        technology: Technology,
        server_id: str,
    ) -> bool:
        """Create the default repository of a kind for a technology if absent.

        Args:
            kind: local, remote or virtual.
            technology: Technology whose defaults to use.
            server_id: Configured server to provision on.

        Returns:
            True if the repository was created, False if it already existed.

        Raises:
            ConfigurationError: If the server isn't configured.
            ProvisioningError: If the server can't be reached or refuses.
        """
        kind = RepositoryKind(kind)
        naming = get_repository_naming(technology)
        key = naming.name_for(kind)
        client = self._client(server_id)

        if client.repository_exists(key):
            LOGGER.debug(f"Repository '{key}' already exists on '{server_id}'")
            return False

        client.create_repository(key, build_repository_params(kind, naming))
        LOGGER.info(f"Created {kind.value} repository '{key}' on '{server_id}'")
        return True

    def _client(self, server_id: str) -> ArtifactoryClient:
        if server_id not in self._clients:
            server = self.server_store.get_server(server_id)
            self._clients[server_id] = self.client_factory(server)
        return self._clients[server_id]


def build_repository_params(kind: RepositoryKind, naming: RepositoryNaming) -> Dict[str, Any]:
    """Repository configuration JSON for the Artifactory REST API."""
    params: Dict[str, Any] = {
        "key": naming.name_for(kind),
        "rclass": kind.value,
        "packageType": naming.package_type,
    }
    if kind == RepositoryKind.REMOTE:
        params["url"] = naming.remote_url
    elif kind == RepositoryKind.VIRTUAL:
        params["repositories"] = [naming.local, naming.remote]
        params["defaultDeploymentRepo"] = naming.local
    return params
