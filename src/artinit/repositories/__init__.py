"""Default repository provisioning.

Usage:
    from artinit.repositories import RepositoryProvisioner

    provisioner = RepositoryProvisioner(ServerConfigStore())
    provisioner.ensure_default_repo(RepositoryKind.LOCAL, Technology.NPM, "my-server")
"""

from artinit.repositories.client import ArtifactoryClient
from artinit.repositories.naming import REPOSITORY_NAMING, RepositoryNaming, get_repository_naming
from artinit.repositories.provisioner import RepositoryProvisioner

__all__ = [
    "ArtifactoryClient",
    "REPOSITORY_NAMING",
    "RepositoryNaming",
    "RepositoryProvisioner",
    "get_repository_naming",
]
