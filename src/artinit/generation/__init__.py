"""Project configuration generation.

This module provides the writer for:
- build.yaml (build-info identification)
- <technology>.yaml (resolver and deployer repositories)
"""

from artinit.generation.config_generator import (
    BuildConfigRecord,
    DeploymentConfigRecord,
    ProjectConfigWriter,
    RepositoryRef,
    build_deployment_config,
)

__all__ = [
    "BuildConfigRecord",
    "DeploymentConfigRecord",
    "ProjectConfigWriter",
    "RepositoryRef",
    "build_deployment_config",
]
