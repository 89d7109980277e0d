"""Build technology detection.

Detects build technologies from indicator files:
- A technology is detected when at least one file name ends with one of
  its indicators
- and no file name ends with one of its exclusions (for example a
  yarn.lock means the npm manifest belongs to a Yarn project).

A shallow scan only looks at files directly inside the project root.
A recursive scan walks the tree, skipping tool and vendored directories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable

from artinit.core.errors import DetectionError
from artinit.core.logging import get_logger
from artinit.core.models import Technology, sorted_technologies

LOGGER = get_logger(__name__)

# Directories to skip during recursive detection
SKIP_DIRS = {
    "node_modules",
    "__pycache__",
    "venv",
    "env",
    "dist",
    "build",
    "target",
    "vendor",
    "coverage",
    "htmlcov",
}


@dataclass(frozen=True)
class TechnologyIndicators:
    """File name suffixes that signal (or rule out) a technology."""

    indicators: tuple[str, ...]
    exclusions: tuple[str, ...] = field(default_factory=tuple)

    def matches(self, file_names: Iterable[str]) -> bool:
        names = list(file_names)
        if any(name.endswith(excluded) for name in names for excluded in self.exclusions):
            return False
        return any(name.endswith(indicator) for name in names for indicator in self.indicators)


TECHNOLOGY_INDICATORS: dict[Technology, TechnologyIndicators] = {
    Technology.MAVEN: TechnologyIndicators(("pom.xml",)),
    Technology.GRADLE: TechnologyIndicators((".gradle", ".gradle.kts")),
    Technology.NPM: TechnologyIndicators(
        ("package.json", "package-lock.json", "npm-shrinkwrap.json"),
        ("yarn.lock",),
    ),
    Technology.GO: TechnologyIndicators(("go.mod",)),
    Technology.PIP: TechnologyIndicators(
        ("setup.py", "requirements.txt"),
        ("Pipfile", "Pipfile.lock", "pyproject.toml"),
    ),
    Technology.PIPENV: TechnologyIndicators(("Pipfile", "Pipfile.lock")),
}


class TechnologyDetector:
    """Detects the build technologies used in a project directory."""

    def detect(self, project_path: Path, recursive: bool = False) -> FrozenSet[Technology]:
        """Detect technologies in a project.

        Args:
            project_path: Project directory.
            recursive: Also look at files in subdirectories.

        Returns:
            The set of detected technologies (possibly empty).

        Raises:
            DetectionError: If the project directory can't be read.
        """
        project_path = Path(project_path)
        if not project_path.is_dir():
            raise DetectionError(f"{project_path} is not a directory")

        try:
            if recursive:
                files = _walk_files(project_path)
            else:
                files = [item for item in project_path.iterdir() if item.is_file()]
        except OSError as e:
            raise DetectionError(f"Failed to scan {project_path}: {e}") from e

        file_names = [f.name for f in files]
        detected = frozenset(
            tech
            for tech, indicators in TECHNOLOGY_INDICATORS.items()
            if indicators.matches(file_names)
        )

        LOGGER.debug(
            f"Detected {[t.value for t in sorted_technologies(detected)]} in {project_path} "
            f"(recursive={recursive}, {len(file_names)} files)"
        )
        return detected


def _walk_files(root: Path, max_depth: int = 10) -> list[Path]:
    """Walk directory tree collecting files.

    Args:
        root: Root directory to walk.
        max_depth: Maximum recursion depth.

    Returns:
        List of file paths.
    """
    files = []

    def _walk(path: Path, depth: int) -> None:
        if depth > max_depth:
            return

        try:
            entries = list(path.iterdir())
        except PermissionError:
            # The project root itself must be readable
            if depth == 0:
                raise
            LOGGER.debug(f"Skipping unreadable directory {path}")
            return

        for item in entries:
            if item.is_dir():
                if item.name not in SKIP_DIRS and not item.name.startswith("."):
                    _walk(item, depth + 1)
            elif item.is_file():
                files.append(item)

    _walk(root, 0)
    return files
