"""Project configuration file generator.

Writes the files init leaves in <project>/.jfrog/projects:
- build.yaml: identifies the project for build-info publishing
- <technology>.yaml: resolver and deployer repositories per technology
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from artinit.core.errors import ConfigWriteError, SerializationError
from artinit.core.logging import get_logger
from artinit.core.models import Technology
from artinit.core.paths import BUILD_CONFIG_FILE_NAME, get_build_name, get_projects_dir
from artinit.repositories.naming import get_repository_naming

LOGGER = get_logger(__name__)

BUILD_CONFIG_VERSION = 1
DEPLOYMENT_CONFIG_VERSION = 1


@dataclass
class RepositoryRef:
    """Where a build resolves from or deploys to."""

    server_id: str
    repo: Optional[str] = None
    snapshot_repo: Optional[str] = None
    release_repo: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to YAML mapping, leaving out unset fields."""
        data: Dict[str, Any] = {}
        if self.repo:
            data["repo"] = self.repo
        data["serverId"] = self.server_id
        if self.snapshot_repo:
            data["snapshotRepo"] = self.snapshot_repo
        if self.release_repo:
            data["releaseRepo"] = self.release_repo
        return data


@dataclass
class BuildConfigRecord:
    name: str
    version: int = BUILD_CONFIG_VERSION
    config_type: str = "build"

    def to_dict(self) -> Dict[str, Any]:
        return {"version": self.version, "type": self.config_type, "name": self.name}


@dataclass
class DeploymentConfigRecord:
    config_type: str
    resolver: RepositoryRef
    deployer: RepositoryRef
    version: int = DEPLOYMENT_CONFIG_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "type": self.config_type,
            "resolver": self.resolver.to_dict(),
            "deployer": self.deployer.to_dict(),
        }


def build_repository_ref(technology: Technology, server_id: str) -> RepositoryRef:
    """Repository reference pointing at the technology's default virtual repo.

    Maven distinguishes release and snapshot repositories; both point at
    the same virtual repository. Other technologies use a single repo.
    """
    virtual = get_repository_naming(technology).virtual
    if technology == Technology.MAVEN:
        return RepositoryRef(server_id=server_id, release_repo=virtual, snapshot_repo=virtual)
    return RepositoryRef(server_id=server_id, repo=virtual)


def build_deployment_config(technology: Technology, server_id: str) -> DeploymentConfigRecord:
    """Deployment config record for a technology.

    Resolver and deployer share the server and repositories.
    """
    return DeploymentConfigRecord(
        config_type=technology.value,
        resolver=build_repository_ref(technology, server_id),
        deployer=build_repository_ref(technology, server_id),
    )


class ProjectConfigWriter:
    """Writes build and deployment configs for a project."""

    def __init__(self, project_path: Path) -> None:
        self.project_path = Path(project_path)

    @property
    def projects_dir(self) -> Path:
        """Directory the config files are written to."""
        return get_projects_dir(self.project_path)

    def write_build_config(self) -> Path:
        """Write build.yaml.

        Returns:
            Path to the written file.
        """
        record = BuildConfigRecord(name=get_build_name(self.project_path))
        return self._write(BUILD_CONFIG_FILE_NAME, record.to_dict())

    def write_deployment_config(self, technology: Technology, server_id: str) -> Path:
        """Write <technology>.yaml.

        Returns:
            Path to the written file.
        """
        record = build_deployment_config(technology, server_id)
        return self._write(f"{technology.value}.yaml", record.to_dict())

    def _write(self, file_name: str, data: Dict[str, Any]) -> Path:
        content = _to_yaml(data)
        output_path = self.projects_dir / file_name
        try:
            self.projects_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(f"Failed to write {output_path}: {e}") from e
        LOGGER.debug(f"Wrote {output_path}")
        return output_path


def _to_yaml(data: Dict[str, Any]) -> str:
    """Serialize with a fixed key order so reruns are byte-identical."""
    try:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise SerializationError(f"Failed to serialize config: {e}") from e
