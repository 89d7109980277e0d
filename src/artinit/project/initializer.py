"""Project initialization.

Sequences the init steps:
1. Resolve the server (explicit id or the configured default)
2. Detect technologies (project root first, then recursively)
3. Ensure default repositories and write a deployment config per technology
4. Write the build config
5. Print a summary

Initialization is not transactional: a failure leaves whatever was
already created in place, and rerunning repairs it since provisioning
checks for existing repositories and config files are overwritten.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, FrozenSet, List, Optional

from artinit.config.servers import ServerConfigStore
from artinit.core.logging import get_logger
from artinit.core.models import Technology, sorted_technologies
from artinit.detection import TechnologyDetector
from artinit.generation import ProjectConfigWriter
from artinit.project.summary import format_summary
from artinit.repositories import RepositoryProvisioner
from artinit.repositories.provisioner import DEFAULT_REPO_KINDS

LOGGER = get_logger(__name__)


@dataclass
class ProjectInitResult:
    """What an init run did."""

    server_id: str
    technologies: FrozenSet[Technology] = frozenset()
    written_files: List[Path] = field(default_factory=list)


class ProjectInitializer:
    """Initializes a project for a configured server.

    Collaborators default to the real implementations and can be replaced
    (tests pass fakes for the server store, detector and provisioner).
    """

    def __init__(
        self,
        project_path: Path,
        server_id: Optional[str] = None,
        *,
        server_store: Optional[ServerConfigStore] = None,
        detector: Optional[TechnologyDetector] = None,
        provisioner: Optional[RepositoryProvisioner] = None,
        writer: Optional[ProjectConfigWriter] = None,
        output: Optional[IO[str]] = None,
    ) -> None:
        self.project_path = Path(project_path)
        self.server_id = server_id
        self.server_store = server_store if server_store is not None else ServerConfigStore()
        self.detector = detector if detector is not None else TechnologyDetector()
        self.provisioner = (
            provisioner if provisioner is not None else RepositoryProvisioner(self.server_store)
        )
        self.writer = writer if writer is not None else ProjectConfigWriter(self.project_path)
        self.output = output

    def run(self) -> ProjectInitResult:
        """Run the initialization.

        Returns:
            ProjectInitResult describing the run.

        Raises:
            ArtinitError: Any failure before the summary, unchanged.
        """
        server_id = self._resolve_server_id()
        technologies = self.detect_technologies()
        result = ProjectInitResult(server_id=server_id, technologies=technologies)

        for tech in sorted_technologies(technologies):
            for kind in DEFAULT_REPO_KINDS:
                self.provisioner.ensure_default_repo(kind, tech, server_id)
            result.written_files.append(self.writer.write_deployment_config(tech, server_id))

        result.written_files.append(self.writer.write_build_config())

        self._print_summary(technologies)
        return result

    def detect_technologies(self) -> FrozenSet[Technology]:
        """Detect technologies, scanning recursively only if the root has none."""
        technologies = self.detector.detect(self.project_path, recursive=False)
        if not technologies:
            LOGGER.info("No technologies found in the project root, searching recursively")
            technologies = self.detector.detect(self.project_path, recursive=True)
        return frozenset(technologies)

    def _resolve_server_id(self) -> str:
        if self.server_id:
            return self.server_id
        server_id = self.server_store.get_default_server_id()
        LOGGER.info(f"Using default server '{server_id}'")
        return server_id

    def _print_summary(self, technologies: FrozenSet[Technology]) -> None:
        output = self.output if self.output is not None else sys.stdout
        output.write("\n")
        output.write(format_summary(technologies))
        output.write("\n\n")
