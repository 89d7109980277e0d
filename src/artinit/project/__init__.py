"""Project initialization orchestration."""

from artinit.project.initializer import ProjectInitializer, ProjectInitResult

__all__ = [
    "ProjectInitializer",
    "ProjectInitResult",
]
